"""Unit tests for OperationResult."""

import pytest

from infrastructure.operations import OperationResult, OperationStatus


@pytest.mark.unit
class TestOperationResult:
    """Test suite for OperationResult constructors."""

    def test_success(self):
        result = OperationResult.success(data={"Item": {}})

        assert result.is_success
        assert result.status == OperationStatus.SUCCESS
        assert result.data == {"Item": {}}
        assert result.message == "ok"

    def test_transient_error(self):
        result = OperationResult.transient_error(
            "Rate exceeded", error_code="ThrottlingException", retry_after=2
        )

        assert not result.is_success
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "ThrottlingException"
        assert result.retry_after == 2

    def test_permanent_error(self):
        result = OperationResult.permanent_error("Bad key", error_code="ValidationException")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.data is None

    def test_error_with_status(self):
        result = OperationResult.error(OperationStatus.NOT_FOUND, "No table")

        assert result.status == OperationStatus.NOT_FOUND
        assert not result.is_success
