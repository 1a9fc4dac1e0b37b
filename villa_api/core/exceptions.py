"""
Domain exceptions for the villa API.

Raised by the service and repository layers. The API layer renders them as
failure envelopes carrying ``status_code`` and the message(s) below.
"""

from fastapi import status


class VillaAPIError(Exception):
    """Base class. Subclasses fix the HTTP status the error maps to."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, *, messages: list[str] | None = None):
        super().__init__(message)
        self.messages = messages or [message]


class ValidationError(VillaAPIError):
    """Bad or missing input, id mismatch, or a patch that cannot be applied."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(VillaAPIError):
    """No record matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(VillaAPIError):
    """A villa with the same name (case-insensitive) already exists.

    Reported as 400 with a field-level message.
    """

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class StoreError(VillaAPIError):
    """The underlying store failed. The status depends on the endpoint."""

    status_code = status.HTTP_400_BAD_REQUEST


def format_validation_error(err: dict) -> str:
    """Render one pydantic error as ``"<field path>: <message>"``."""
    location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
    return f"{location}: {err['msg']}" if location else err["msg"]
