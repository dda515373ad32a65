"""Category service.

Categories are independent of products: deleting one never touches the
products that reference it.
"""

from typing import Any

from bson import ObjectId

from app.services.documents import (
    UpdateOutcome,
    delete_document,
    insert_document,
    serialize_document,
    update_document,
)
from app.stores.mongo import categories_collection


async def list_categories() -> list[dict[str, Any]]:
    docs = await categories_collection().find().to_list()
    return [serialize_document(doc) for doc in docs]


async def create_category(fields: dict[str, Any]) -> str:
    return await insert_document(categories_collection(), fields)


async def update_category(object_id: ObjectId, fields: dict[str, Any]) -> UpdateOutcome:
    return await update_document(categories_collection(), object_id, fields)


async def delete_category(object_id: ObjectId) -> int:
    return await delete_document(categories_collection(), object_id)
