"""Operation status enumeration.

Status codes for operation results, used to report the outcome of a write
to the caller.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed and changed state
        SKIPPED: Operation was a documented no-op (e.g. ignored file)
    """

    SUCCESS = "success"
    SKIPPED = "skipped"
