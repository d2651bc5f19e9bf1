"""Operation result dataclass.

Uniform result type returned from lookups, including status, data, and
error information.
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
        data: Optional[Any] -- optional payload
        error_code: Optional[str] -- optional machine error code
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data.

        Note that ``data`` may legitimately be None, e.g. a lookup that found
        the address but no subdivision for it.

        Args:
            data: Optional payload to include with the result
            message: Human-friendly success message

        Returns:
            OperationResult with SUCCESS status
        """
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            data: Optional payload to include with the error

        Returns:
            OperationResult with specified error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            data=data,
        )

    @classmethod
    def invalid_address(
        cls, message: str, error_code: Optional[str] = "INVALID_IP_FORMAT"
    ) -> "OperationResult":
        """Create an INVALID_ADDRESS result for unparseable input."""
        return cls.error(OperationStatus.INVALID_ADDRESS, message, error_code)

    @classmethod
    def not_found(
        cls, message: str, error_code: Optional[str] = "IP_NOT_FOUND"
    ) -> "OperationResult":
        """Create a NOT_FOUND result for addresses missing from the database."""
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)

    @classmethod
    def io_failure(
        cls, message: str, error_code: Optional[str] = "DB_READ_ERROR"
    ) -> "OperationResult":
        """Create an IO_FAILURE result.

        Use when the database handle can no longer be read, such as:
        - The reader was closed
        - The underlying file is corrupt or truncated

        Args:
            message: Human-friendly error message
            error_code: Optional machine error code

        Returns:
            OperationResult with IO_FAILURE status
        """
        return cls.error(OperationStatus.IO_FAILURE, message, error_code)
