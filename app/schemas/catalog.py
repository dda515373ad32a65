"""Schemas for the product, category and inventory endpoints.

Documents are open records: known fields are strictly typed (a wrong type is
rejected, never coerced), anything else passes through to the store
untouched.
"""

from typing import Any

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, model_validator

from app.schemas.common import StatusResponse


class _OpenDocument(BaseModel):
    """Client document payload with passthrough fields."""

    model_config = {"extra": "allow"}

    @model_validator(mode="before")
    @classmethod
    def _drop_identity(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if k != "_id"}
        return data

    def document_fields(self) -> dict[str, Any]:
        """Only the fields the client actually sent, extras included."""
        declared = {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name in self.model_fields_set
        }
        return {**declared, **(self.model_extra or {})}


class ProductIn(_OpenDocument):
    """Product create/update body."""

    title: StrictStr | None = None
    price: StrictInt | StrictFloat | None = None
    quantity: StrictInt | None = None


class CategoryIn(_OpenDocument):
    """Category create/update body."""

    name: StrictStr | None = None


class ProductPage(BaseModel):
    """One page of products plus the overall count."""

    result: list[dict[str, Any]]
    total_count: int = Field(alias="totalCount", ge=0)

    model_config = {"populate_by_name": True}


class ProductResponse(StatusResponse):
    product: dict[str, Any]


class InsertResponse(StatusResponse):
    inserted_id: str = Field(alias="insertedId")


class UpdateResponse(StatusResponse):
    matched_count: int = Field(alias="matchedCount", ge=0)
    modified_count: int = Field(alias="modifiedCount", ge=0)


class DeleteResponse(StatusResponse):
    deleted_count: int = Field(alias="deletedCount", ge=0)


class QuantityLine(BaseModel):
    """A single cart line to take out of stock."""

    product_id: str = Field(alias="productId")
    quantity: int

    model_config = {"populate_by_name": True}


class UpdateQuantitiesRequest(BaseModel):
    """Request body for PUT /update-quantities."""

    items: list[QuantityLine]


class UpdateQuantitiesResponse(BaseModel):
    message: str
    updated_count: int = Field(alias="updatedCount", ge=0)
    unmatched_product_ids: list[str] = Field(alias="unmatchedProductIds", default_factory=list)

    model_config = {"populate_by_name": True}
