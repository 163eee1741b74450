"""
Test Suite for the Book Records API

Test Organization:
- conftest.py: Shared fixtures (mocked store, SQLite database, clients)
- test_books.py: Endpoint behaviour against a mocked store
- test_books_integration.py: Endpoints through the real SQL store
- test_store.py: SqlBookStore
- test_config.py: Settings, error formatting, client IP detection

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
