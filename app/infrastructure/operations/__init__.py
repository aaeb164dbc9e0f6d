"""Operation result types shared by write operations."""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = ["OperationResult", "OperationStatus"]
