"""Common schemas used across the API."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Bare message, used for 400s and bulk operations."""

    message: str


class StatusResponse(BaseModel):
    """Status envelope returned by single-document operations.

    Format: { "statusCode": int, "message": str }
    """

    status_code: int = Field(alias="statusCode")
    message: str

    model_config = {"populate_by_name": True}


class ErrorResponse(StatusResponse):
    """Error envelope for failed operations.

    Format: { "statusCode": int, "message": str, "error": str | null }
    """

    error: str | None = None
