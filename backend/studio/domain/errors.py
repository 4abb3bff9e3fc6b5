"""Domain error codes for the studio scheduling service."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    INVALID_FIRM_ID = "INVALID_FIRM_ID"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class StoreUnavailableError(DomainError):
    """Raised when the assignment store cannot be queried."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Assignment store is unavailable",
        )
        self.detail = detail


class InvalidFirmIdError(DomainError):
    """Raised when a query is issued without a firm scope."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FIRM_ID,
            message="A firm ID is required",
        )
