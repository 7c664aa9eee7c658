"""Errors surfaced to HTTP callers."""

from __future__ import annotations


class BadRequest(Exception):
    """A required field is missing from the request body."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InternalError(Exception):
    """Anything else that went wrong; details stay in the logs."""

    status_code = 500
    message = "Error processing request"
