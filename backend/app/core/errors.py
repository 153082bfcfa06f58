"""Domain errors raised by the customer services.

Each error is an HTTPException so routes can let them propagate and FastAPI
renders them as ``{"detail": ...}`` with a distinct status code.
"""

from fastapi import HTTPException


class CustomerError(HTTPException):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code, detail=detail)


class ValidationError(CustomerError):
    """A required field is missing or malformed."""

    status_code = 422


class NotFound(CustomerError):
    status_code = 404


class InvalidState(CustomerError):
    """The operation's precondition on the record's state does not hold."""

    status_code = 409


class Forbidden(CustomerError):
    status_code = 403
