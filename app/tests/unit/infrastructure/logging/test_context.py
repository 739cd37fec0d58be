"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_request_context() context manager
- get_correlation_id() and get_current_user()
- clear_request_context()
"""

import uuid

import pytest
import structlog

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
    get_current_user,
)


@pytest.mark.unit
class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_request_context(user_email="editor@example.com"):
            uuid.UUID(get_correlation_id())

    def test_uses_provided_correlation_id(self):
        with bind_request_context(correlation_id="req-123"):
            assert get_correlation_id() == "req-123"

    def test_binds_request_fields_and_extra_context(self):
        with bind_request_context(
            request_path="/api/v1/localization/overrides",
            request_method="PUT",
            language="sv",
        ):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["request_path"] == "/api/v1/localization/overrides"
            assert ctx["request_method"] == "PUT"
            assert ctx["language"] == "sv"

    def test_none_values_not_bound(self):
        with bind_request_context(user_email=None):
            assert "user_email" not in structlog.contextvars.get_contextvars()

    def test_context_removed_on_exit(self):
        with bind_request_context(correlation_id="req-1", user_email="a@example.com"):
            pass

        assert get_correlation_id() is None
        assert get_current_user() is None

    def test_context_removed_on_exception(self):
        with pytest.raises(RuntimeError):
            with bind_request_context(correlation_id="req-1"):
                raise RuntimeError("boom")

        assert get_correlation_id() is None


@pytest.mark.unit
class TestGetCurrentUser:
    """Test suite for get_current_user."""

    def test_prefers_email(self):
        with bind_request_context(user_email="a@example.com", user_id="u-1"):
            assert get_current_user() == "a@example.com"

    def test_falls_back_to_user_id(self):
        with bind_request_context(user_id="u-1"):
            assert get_current_user() == "u-1"

    def test_none_outside_request(self):
        assert get_current_user() is None


@pytest.mark.unit
class TestClearRequestContext:
    """Test suite for clear_request_context."""

    def test_clears_everything(self):
        structlog.contextvars.bind_contextvars(correlation_id="x", other="y")

        clear_request_context()

        assert structlog.contextvars.get_contextvars() == {}
