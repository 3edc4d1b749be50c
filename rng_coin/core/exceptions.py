"""
Request errors surfaced to clients.

Every error carries a category name, an HTTP status code and a message, and
renders to the body ``{"error": {"name", "status", "message"}}``.
"""

from typing import Any, Dict


def error_body(name: str, status: int, message: str) -> Dict[str, Any]:
    return {"error": {"name": name, "status": status, "message": message}}


class RequestError(Exception):
    name = "RequestError"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return error_body(self.name, self.status_code, self.message)


class InputError(RequestError):
    """Parameter is not a number or not an integer."""

    name = "InputError"
    status_code = 422


class RangeError(RequestError):
    """Parameter is an integer outside the accepted bounds."""

    name = "RangeError"
    status_code = 422


class InternalError(RequestError):
    """Unanticipated failure. The message never carries internal details."""

    name = "InternalError"
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
