"""Operation result dataclass.

Uniform result type returned from write operations, including status and
an optional payload.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- optional payload (can be dict, list, or object)
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == OperationStatus.SUCCESS

    @property
    def is_skipped(self) -> bool:
        return self.status == OperationStatus.SKIPPED

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data.

        Args:
            data: Optional payload to include with the result
            message: Human-friendly success message

        Returns:
            OperationResult with SUCCESS status
        """
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def skipped(
        cls, message: str, data: Optional[Any] = None
    ) -> "OperationResult":
        """Create a SKIPPED OperationResult.

        Use when an operation was deliberately not carried out, such as a
        write to a file on the ignore-list.

        Args:
            message: Why the operation was skipped
            data: Optional payload to include with the result

        Returns:
            OperationResult with SKIPPED status
        """
        return cls(status=OperationStatus.SKIPPED, message=message, data=data)
