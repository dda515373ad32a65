"""Product catalog service.

Listing semantics:
- Paginated: skip (page-1)*page_size, limit page_size, sorted by one field,
  plus the unfiltered document count for the client's pager
- Unpaginated: the whole collection, unsorted

Search is a case-insensitive literal substring match on `title` only.
"""

import re
from typing import Any

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from app.services.documents import (
    UpdateOutcome,
    delete_document,
    insert_document,
    serialize_document,
    update_document,
)
from app.stores.mongo import products_collection

DEFAULT_SORT_FIELD = "price"


async def list_all_products() -> list[dict[str, Any]]:
    """Get every product in natural order."""
    docs = await products_collection().find().to_list()
    return [serialize_document(doc) for doc in docs]


async def list_products_page(
    page: int,
    page_size: int,
    sort: str = DEFAULT_SORT_FIELD,
    descending: bool = False,
) -> tuple[list[dict[str, Any]], int]:
    """Get one page of products.

    Args:
        page: 1-based page number.
        page_size: Products per page.
        sort: Field to order by.
        descending: Sort direction.

    Returns:
        (products on the page, total product count).
    """
    collection = products_collection()
    total_count = await collection.count_documents({})

    cursor = (
        collection.find()
        .sort(sort or DEFAULT_SORT_FIELD, DESCENDING if descending else ASCENDING)
        .skip((page - 1) * page_size)
        .limit(page_size)
    )
    docs = await cursor.to_list()
    return [serialize_document(doc) for doc in docs], total_count


async def get_product(object_id: ObjectId) -> dict[str, Any] | None:
    """Get a product by id, or None if it does not exist."""
    doc = await products_collection().find_one({"_id": object_id})
    return serialize_document(doc) if doc is not None else None


async def create_product(fields: dict[str, Any]) -> str:
    """Insert a product and return its id."""
    return await insert_document(products_collection(), fields)


async def update_product(object_id: ObjectId, fields: dict[str, Any]) -> UpdateOutcome:
    """Overwrite the supplied fields of a product."""
    return await update_document(products_collection(), object_id, fields)


async def delete_product(object_id: ObjectId) -> int:
    return await delete_document(products_collection(), object_id)


async def search_products(title: str) -> list[dict[str, Any]]:
    """Find products whose title contains `title`, ignoring case."""
    query = {"title": {"$regex": re.escape(title), "$options": "i"}}
    docs = await products_collection().find(query).to_list()
    return [serialize_document(doc) for doc in docs]
