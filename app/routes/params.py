"""Shared request parameter dependencies and OpenAPI error responses."""

from typing import Any

from bson import ObjectId
from fastapi import Path

from app.errors import ApiError
from app.schemas import ErrorResponse, MessageResponse
from app.services.documents import InvalidObjectIdError, parse_object_id

# Error envelopes documented on the routes that can return them
STORE_ERROR: dict[int | str, dict[str, Any]] = {
    500: {"model": ErrorResponse, "description": "Store operation failed"},
}
INVALID_ID: dict[int | str, dict[str, Any]] = {
    400: {"model": MessageResponse, "description": "Malformed document id"},
}
NOT_FOUND: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "No document with this id"},
}


def object_id_path(
    id: str = Path(description="24-character hex document id"),
) -> ObjectId:
    """Parse the `{id}` path segment, rejecting malformed ids with 400."""
    try:
        return parse_object_id(id)
    except InvalidObjectIdError as e:
        raise ApiError(400, "Invalid ID format", include_status=False) from e
