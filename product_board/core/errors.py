"""Error taxonomy shared by the products client and the board."""

from __future__ import annotations


class SyncError(Exception):
    """Base class for failures talking to the products API."""

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class TransportError(SyncError):
    """The request never produced an HTTP response (DNS, refused, timeout)."""


class ServerError(SyncError):
    """Non-2xx status or a response body that does not match the Product schema."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, operation=operation)
        self.status_code = status_code


class OperationInFlightError(SyncError):
    """A mutation for the same target is still awaiting its response."""

    def __init__(self, key: str, *, operation: str | None = None) -> None:
        super().__init__(f"operation already in flight for '{key}'", operation=operation)
        self.key = key


class ValidationError(ValueError):
    """Local draft validation failure, raised before any request is sent."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid draft field(s): {fields}")
