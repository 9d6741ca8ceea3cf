"""
Errors raised by repositories and services.

`main.py` turns these into HTTP responses; feature code never builds
responses for failures itself.
"""

from __future__ import annotations


class ApiError(Exception):
    status_code = 500

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail


class BadRequestError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    status_code = 409


class InternalError(ApiError):
    """
    Store or filesystem failure. Details are logged, never sent to the client.
    """

    status_code = 500
