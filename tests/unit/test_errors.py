"""Unit tests for the structured error catalog."""

import pytest
from documentstack.errors import (
    API_ERRORS, APIError, ConfigurationError, DocumentStackError, ErrorKind,
    NetworkError, RateLimitError, RequestTimeoutError, StatusCategory,
    ValidationError, is_authentication_status, is_forbidden_status,
    is_not_found_status, is_rate_limit_status, is_server_error_status,
    is_validation_status, status_category,
)

PREDICATES = [
    is_validation_status,
    is_authentication_status,
    is_forbidden_status,
    is_not_found_status,
    is_rate_limit_status,
    is_server_error_status,
]


class TestStatusPredicates:
    @pytest.mark.parametrize("status,expected", [
        (400, StatusCategory.VALIDATION),
        (401, StatusCategory.AUTHENTICATION),
        (403, StatusCategory.FORBIDDEN),
        (404, StatusCategory.NOT_FOUND),
        (429, StatusCategory.RATE_LIMIT),
        (500, StatusCategory.SERVER_ERROR),
        (503, StatusCategory.SERVER_ERROR),
        (409, None),
        (302, None),
    ])
    def test_status_category(self, status, expected):
        assert status_category(status) == expected

    def test_not_found_is_exclusive(self):
        hits = [p for p in PREDICATES if p(404)]
        assert hits == [is_not_found_status]

    def test_unnamed_status_matches_nothing(self):
        assert not any(p(418) for p in PREDICATES)


class TestErrorCatalog:
    def test_configuration_error(self):
        e = ConfigurationError("API key is required")
        assert e.kind == ErrorKind.CONFIGURATION
        assert str(e) == "API key is required"
        assert e.to_dict() == {"kind": "configuration", "message": "API key is required"}

    def test_validation_error(self):
        e = ValidationError("Template ID is required")
        assert e.kind == ErrorKind.VALIDATION
        assert e.details is None
        assert "details" not in e.to_dict()

    def test_validation_error_with_details(self):
        e = ValidationError("Invalid generate request", details=[{"loc": ["data"]}])
        assert e.to_dict()["details"] == [{"loc": ["data"]}]

    def test_network_error_wraps_cause(self):
        cause = ConnectionError("connection refused")
        e = NetworkError("request failed", cause)
        assert e.kind == ErrorKind.NETWORK
        assert e.cause is cause
        assert e.__cause__ is cause
        assert str(e) == "request failed: connection refused"

    def test_network_error_without_cause(self):
        assert str(NetworkError("request failed")) == "request failed"

    def test_timeout_error(self):
        e = RequestTimeoutError(30)
        assert e.kind == ErrorKind.TIMEOUT
        assert e.timeout == 30
        assert str(e) == "request timed out after 30 seconds"
        assert e.to_dict()["timeout"] == 30

    def test_api_error(self):
        e = APIError(404, "NotFound", "Template not found", details={"id": "t1"})
        assert e.kind == ErrorKind.API
        assert str(e) == "NotFound: Template not found"
        assert e.is_not_found_error
        assert not e.is_server_error
        assert e.category == StatusCategory.NOT_FOUND
        d = e.to_dict()
        assert d["status_code"] == 404
        assert d["details"] == {"id": "t1"}

    def test_server_error_predicate(self):
        e = APIError(502, "BadGateway", "upstream failed")
        assert e.is_server_error
        assert e.category == StatusCategory.SERVER_ERROR

    def test_plain_api_error_has_no_category(self):
        assert APIError(409, "Conflict", "busy").category is None

    def test_rate_limit_error(self):
        e = RateLimitError("RateLimited", "slow down", retry_after=5)
        assert e.kind == ErrorKind.RATE_LIMIT
        assert e.status_code == 429
        assert e.retry_after == 5
        assert e.is_rate_limit_error
        assert str(e) == "RateLimited: slow down"
        assert e.to_dict()["retry_after"] == 5

    def test_variants_are_siblings(self):
        """No variant extends another; all share only the base."""
        assert not issubclass(RateLimitError, APIError)
        assert not issubclass(APIError, RateLimitError)
        for cls in (ConfigurationError, ValidationError, NetworkError,
                    RequestTimeoutError, APIError, RateLimitError):
            assert issubclass(cls, DocumentStackError)
            assert issubclass(cls, Exception)

    def test_kinds_are_unique(self):
        kinds = [cls.kind for cls in (ConfigurationError, ValidationError, NetworkError,
                                      RequestTimeoutError, APIError, RateLimitError)]
        assert len(set(kinds)) == len(ErrorKind)

    def test_api_errors_tuple_catches_both(self):
        for exc in (APIError(500, "Oops", "boom"), RateLimitError("RateLimited", "wait")):
            with pytest.raises(API_ERRORS):
                raise exc
