"""Pydantic schemas for API request/response validation."""

from app.schemas.common import ErrorResponse, MessageResponse, StatusResponse
from app.schemas.catalog import (
    CategoryIn,
    DeleteResponse,
    InsertResponse,
    ProductIn,
    ProductPage,
    ProductResponse,
    QuantityLine,
    UpdateQuantitiesRequest,
    UpdateQuantitiesResponse,
    UpdateResponse,
)

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "StatusResponse",
    "CategoryIn",
    "DeleteResponse",
    "InsertResponse",
    "ProductIn",
    "ProductPage",
    "ProductResponse",
    "QuantityLine",
    "UpdateQuantitiesRequest",
    "UpdateQuantitiesResponse",
    "UpdateResponse",
]
