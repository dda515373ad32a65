"""Category endpoints.

GET    /categories            - list all
POST   /addCategory           - create
PUT    /updateCategory/{id}   - partial update
DELETE /deleteCategory/{id}   - delete (never cascades to products)
"""

import logging
from typing import Any

from bson import ObjectId
from fastapi import APIRouter, Depends

from app.errors import ApiError
from app.routes.params import INVALID_ID, STORE_ERROR, object_id_path
from app.schemas import CategoryIn, DeleteResponse, InsertResponse, UpdateResponse
from app.services.categories import (
    create_category,
    delete_category,
    list_categories,
    update_category,
)

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.get("/categories", response_model=None, responses=STORE_ERROR)
async def get_categories() -> list[dict[str, Any]]:
    """List every category as a bare array."""
    try:
        return await list_categories()
    except Exception as e:
        logger.exception("Failed to retrieve categories")
        raise ApiError(500, "Failed to retrieve categories", e) from e


@router.post("/addCategory", response_model=InsertResponse, responses=STORE_ERROR)
async def add_category(payload: CategoryIn) -> InsertResponse:
    try:
        inserted_id = await create_category(payload.document_fields())
    except Exception as e:
        logger.exception("Failed to add category")
        raise ApiError(500, "Failed to add category", e) from e

    return InsertResponse(
        status_code=200,
        message="Category added successfully",
        inserted_id=inserted_id,
    )


@router.put(
    "/updateCategory/{id}",
    response_model=UpdateResponse,
    responses={**INVALID_ID, **STORE_ERROR},
)
async def edit_category(
    payload: CategoryIn,
    object_id: ObjectId = Depends(object_id_path),
) -> UpdateResponse:
    try:
        outcome = await update_category(object_id, payload.document_fields())
    except Exception as e:
        logger.exception("Failed to update category")
        raise ApiError(500, "Failed to update category", e) from e

    return UpdateResponse(
        status_code=200,
        message="Category updated successfully",
        matched_count=outcome.matched_count,
        modified_count=outcome.modified_count,
    )


@router.delete(
    "/deleteCategory/{id}",
    response_model=DeleteResponse,
    responses={**INVALID_ID, **STORE_ERROR},
)
async def remove_category(object_id: ObjectId = Depends(object_id_path)) -> DeleteResponse:
    try:
        deleted_count = await delete_category(object_id)
    except Exception as e:
        logger.exception("Failed to delete category")
        raise ApiError(500, "Failed to delete category", e) from e

    return DeleteResponse(
        status_code=200,
        message="Category deleted successfully",
        deleted_count=deleted_count,
    )
