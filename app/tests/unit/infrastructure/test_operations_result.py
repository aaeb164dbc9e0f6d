"""Unit tests for OperationResult and OperationStatus in infrastructure."""

import pytest

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    def test_operation_status_success(self):
        assert OperationStatus.SUCCESS.value == "success"

    def test_operation_status_skipped(self):
        assert OperationStatus.SKIPPED.value == "skipped"


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()

        assert result.status == OperationStatus.SUCCESS
        assert result.message == "ok"
        assert result.data is None

    def test_success_factory_with_data(self):
        data = {"language": "fr", "file": "fr.json"}
        result = OperationResult.success(data=data, message="wrote fr.json")

        assert result.is_success
        assert not result.is_skipped
        assert result.data == data

    def test_skipped_factory(self):
        result = OperationResult.skipped(
            "fr.json is on the ignore-list", data={"language": "fr"}
        )

        assert result.status == OperationStatus.SKIPPED
        assert result.is_skipped
        assert not result.is_success
        assert result.data == {"language": "fr"}
