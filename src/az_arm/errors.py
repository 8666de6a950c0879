"""Errors raised by the ARM clients.

Credential and transport failures are not wrapped: they surface as the
``azure.core`` or ``requests`` exceptions raised by those collaborators.
"""

from __future__ import annotations

from typing import Any


class ArmError(Exception):
    """Base class for errors raised by az-arm."""


class HttpResponseError(ArmError):
    """The service answered with a status code the operation does not document."""

    def __init__(
        self,
        status_code: int,
        error_code: str | None = None,
        message: str | None = None,
        response: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.response = response
        text = f"HTTP {status_code}"
        if error_code:
            text += f" ({error_code})"
        if message:
            text += f": {message}"
        super().__init__(text)

    @classmethod
    def from_response(cls, response: Any) -> HttpResponseError:
        """Build the error from a transport response.

        The machine-readable code comes from the ``x-ms-error-code`` header
        when present, else from the ARM error body ``{"error": {"code": ...}}``.
        """
        error_code = response.headers.get("x-ms-error-code")
        message = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            detail = body.get("error", body)
            if isinstance(detail, dict):
                error_code = error_code or detail.get("code")
                message = detail.get("message")
        return cls(response.status_code, error_code, message, response)


class DeserializationError(ArmError):
    """The response body does not match the expected shape."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
