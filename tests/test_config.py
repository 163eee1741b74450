"""
Tests for Settings and supporting helpers.
"""

import pytest
from pydantic import ValidationError
from starlette.requests import Request

from bookrecords.config import Settings
from bookrecords.errors import format_validation_errors
from bookrecords.services.rate_limiter import get_client_ip


class TestSettings:

    def test_log_level_is_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_invalid_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(environment="qa")

    def test_allowed_origins_list(self):
        settings = Settings(allowed_origins="http://a.test, http://b.test,")

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]

    def test_is_sqlite(self):
        assert Settings(database_url="sqlite://").is_sqlite
        assert not Settings(database_url="postgresql://u:p@db/books").is_sqlite


class TestFormatValidationErrors:

    def test_body_prefix_dropped(self):
        errors = format_validation_errors(
            [{"type": "missing", "loc": ("body", "isbn"), "msg": "Field required"}]
        )

        assert errors == [
            {"field": "isbn", "message": "Field required", "type": "missing"}
        ]

    def test_whole_body_error_has_no_field(self):
        errors = format_validation_errors(
            [{"type": "dict_type", "loc": ("body",), "msg": "Input should be a valid dictionary"}]
        )

        assert errors[0]["field"] is None


def _request(headers: dict) -> Request:
    return Request(
        {
            "type": "http",
            "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
            "client": ("10.0.0.1", 1234),
        }
    )


class TestClientIp:

    def test_forwarded_for_first_hop(self):
        assert get_client_ip(_request({"X-Forwarded-For": "1.2.3.4, 5.6.7.8"})) == "1.2.3.4"

    def test_real_ip(self):
        assert get_client_ip(_request({"X-Real-IP": "9.9.9.9"})) == "9.9.9.9"

    def test_direct_connection(self):
        assert get_client_ip(_request({})) == "10.0.0.1"
