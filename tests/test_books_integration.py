"""
End-to-end Tests for the Books Endpoints

Requests go through the real SqlBookStore on an in-memory SQLite database.
"""

from fastapi import status


def test_create_then_get(sql_client):
    payload = {
        "isbn": "123456",
        "title": "Book 1",
        "author": "Author 1",
        "published_year": 2021,
        "genre": "Fiction",
    }

    created = sql_client.post("/books", json=payload)
    fetched = sql_client.get("/books/123456")

    assert created.status_code == status.HTTP_201_CREATED
    assert fetched.status_code == status.HTTP_200_OK
    book = fetched.json()["book"]
    assert book["title"] == "Book 1"
    assert book["available"] is True
    assert "created_at" not in book


def test_list_books(sql_client, sample_book):
    response = sql_client.get("/books")

    assert response.status_code == status.HTTP_200_OK
    assert [b["isbn"] for b in response.json()["books"]] == [sample_book.isbn]


def test_update_keeps_isbn(sql_client, sample_book):
    response = sql_client.put(
        f"/books/{sample_book.isbn}",
        json={"title": "Nineteen Eighty-Four", "available": False},
    )

    assert response.status_code == status.HTTP_200_OK
    book = response.json()["book"]
    assert book["isbn"] == "9780451524935"
    assert book["title"] == "Nineteen Eighty-Four"
    assert book["author"] == "George Orwell"
    assert book["available"] is False


def test_update_with_isbn_leaves_record_untouched(sql_client, sample_book):
    response = sql_client.put(
        f"/books/{sample_book.isbn}",
        json={"isbn": "000", "title": "Changed"},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert sql_client.get(f"/books/{sample_book.isbn}").json()["book"]["title"] == "1984"


def test_update_missing_book(sql_client):
    response = sql_client.put("/books/000000", json={"title": "Ghost"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_then_get(sql_client, sample_book):
    deleted = sql_client.delete(f"/books/{sample_book.isbn}")
    fetched = sql_client.get(f"/books/{sample_book.isbn}")

    assert deleted.status_code == status.HTTP_200_OK
    assert deleted.json() == {"message": "Book deleted"}
    assert fetched.status_code == status.HTTP_404_NOT_FOUND


def test_create_duplicate_isbn_is_store_error(sql_client, sample_book):
    response = sql_client.post(
        "/books",
        json={"isbn": sample_book.isbn, "title": "Copy", "author": "Someone"},
    )

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR


def test_update_null_available_rejected_before_store(sql_client, sample_book):
    response = sql_client.put(f"/books/{sample_book.isbn}", json={"available": None})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["field"] == "available"
    assert sql_client.get(f"/books/{sample_book.isbn}").json()["book"]["available"] is True
