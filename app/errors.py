"""API exceptions rendered by the application's exception handlers."""

from typing import Any


class ApiError(Exception):
    """An error that maps to a JSON envelope.

    Rendered as { "statusCode", "message", "error", **extra }, where
    `error` is the underlying exception text (when exposed).
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error: Exception | str | None = None,
        *,
        include_status: bool = True,
        extra: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = str(error) if error is not None else None
        self.include_status = include_status
        self.extra = extra or {}

    def to_content(self, *, expose_details: bool) -> dict[str, Any]:
        content: dict[str, Any] = {}
        if self.include_status:
            content["statusCode"] = self.status_code
        content["message"] = self.message
        if self.error is not None:
            content["error"] = self.error if expose_details else None
        content.update(self.extra)
        return content
