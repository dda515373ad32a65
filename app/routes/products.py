"""Product endpoints.

GET    /products          - list (paginated when page + pageSize are given)
GET    /products/{id}     - fetch one
POST   /products          - create
PUT    /products/{id}     - partial update
DELETE /products/{id}     - delete
GET    /search?title=     - case-insensitive title search

Routers are thin: call services for store access.
"""

import logging
from typing import Any

from bson import ObjectId
from fastapi import APIRouter, Depends, Query

from app.errors import ApiError
from app.routes.params import INVALID_ID, NOT_FOUND, STORE_ERROR, object_id_path
from app.schemas import (
    DeleteResponse,
    InsertResponse,
    MessageResponse,
    ProductIn,
    ProductPage,
    ProductResponse,
    UpdateResponse,
)
from app.services.documents import parse_leading_int
from app.services.products import (
    DEFAULT_SORT_FIELD,
    create_product,
    delete_product,
    get_product,
    list_all_products,
    list_products_page,
    search_products,
    update_product,
)

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.get("/products", response_model=None, responses=STORE_ERROR)
async def list_products(
    page: str | None = Query(default=None, description="1-based page number"),
    page_size: str | None = Query(default=None, alias="pageSize", description="Products per page"),
    sort: str = Query(default=DEFAULT_SORT_FIELD, description="Field to sort by"),
    sort_order: str = Query(default="asc", alias="sortOrder", description="asc or desc"),
) -> ProductPage | list[dict[str, Any]]:
    """List products.

    Returns:
        ProductPage when both page and pageSize are positive integers,
        otherwise every product as a bare array.
    """
    page_num = parse_leading_int(page)
    size = parse_leading_int(page_size)

    try:
        if page_num and size and page_num > 0 and size > 0:
            products, total_count = await list_products_page(
                page=page_num,
                page_size=size,
                sort=sort,
                descending=sort_order == "desc",
            )
            return ProductPage(result=products, total_count=total_count)
        return await list_all_products()
    except Exception as e:
        logger.exception("Failed to retrieve products")
        raise ApiError(500, "Failed to retrieve products", e) from e


@router.get(
    "/products/{id}",
    response_model=ProductResponse,
    responses={**INVALID_ID, **NOT_FOUND, **STORE_ERROR},
)
async def get_product_by_id(object_id: ObjectId = Depends(object_id_path)) -> ProductResponse:
    """Fetch a single product."""
    try:
        product = await get_product(object_id)
    except Exception as e:
        logger.exception("Error fetching product")
        raise ApiError(500, "Failed to retrieve product", e) from e

    if product is None:
        raise ApiError(404, "Product not found")

    return ProductResponse(
        status_code=200,
        message="Product retrieved successfully",
        product=product,
    )


@router.post("/products", response_model=InsertResponse, responses=STORE_ERROR)
async def add_product(payload: ProductIn) -> InsertResponse:
    """Create a product from the request body, stored verbatim."""
    try:
        inserted_id = await create_product(payload.document_fields())
    except Exception as e:
        logger.exception("Failed to add product")
        raise ApiError(500, "Failed to add product", e) from e

    return InsertResponse(
        status_code=200,
        message="Product added successfully",
        inserted_id=inserted_id,
    )


@router.put(
    "/products/{id}",
    response_model=UpdateResponse,
    responses={**INVALID_ID, **STORE_ERROR},
)
async def edit_product(
    payload: ProductIn,
    object_id: ObjectId = Depends(object_id_path),
) -> UpdateResponse:
    """Overwrite only the fields present in the body.

    Updating an id that does not exist still succeeds (matchedCount 0).
    """
    try:
        outcome = await update_product(object_id, payload.document_fields())
    except Exception as e:
        logger.exception("Failed to update product")
        raise ApiError(500, "Failed to update product", e) from e

    return UpdateResponse(
        status_code=200,
        message="Product updated successfully",
        matched_count=outcome.matched_count,
        modified_count=outcome.modified_count,
    )


@router.delete(
    "/products/{id}",
    response_model=DeleteResponse,
    responses={**INVALID_ID, **STORE_ERROR},
)
async def remove_product(object_id: ObjectId = Depends(object_id_path)) -> DeleteResponse:
    try:
        deleted_count = await delete_product(object_id)
    except Exception as e:
        logger.exception("Failed to delete product")
        raise ApiError(500, "Failed to delete product", e) from e

    return DeleteResponse(
        status_code=200,
        message="Product deleted successfully",
        deleted_count=deleted_count,
    )


@router.get(
    "/search",
    response_model=None,
    responses={400: {"model": MessageResponse, "description": "Missing title"}},
)
async def search(
    title: str | None = Query(default=None, description="Substring to look for in titles"),
) -> list[dict[str, Any]]:
    """Search products by title (case-insensitive, no pagination)."""
    logger.info(f"Product search: title={title!r}")

    if not title:
        raise ApiError(400, "Title query parameter is required.", include_status=False)

    try:
        return await search_products(title)
    except Exception as e:
        logger.exception("Product search failed")
        raise ApiError(500, "Server error", e, include_status=False) from e
