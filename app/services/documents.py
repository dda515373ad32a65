"""Helpers shared by the catalog services.

- ObjectId parsing (format validation only, never existence)
- BSON document -> JSON-ready dict conversion
- Lenient integer parsing for query parameters
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any

from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection

# Leading integer of a query string value, e.g. "2", " 12", "3abc", "-1"
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class InvalidObjectIdError(ValueError):
    """Raised when a path or body identifier is not a valid ObjectId."""

    def __init__(self, value: object):
        super().__init__(f"{value!r} is not a valid 24-character hex ObjectId")
        self.value = value


def parse_object_id(value: str) -> ObjectId:
    """Parse a client-supplied identifier.

    Only 24-character hex strings are accepted. ObjectId.is_valid() also
    accepts 12-byte strings, which are never meant as ids in URLs.

    Raises:
        InvalidObjectIdError: If the value is not a 24-hex string.
    """
    if not isinstance(value, str) or len(value) != 24 or not ObjectId.is_valid(value):
        raise InvalidObjectIdError(value)
    return ObjectId(value)


def serialize_document(value: Any) -> Any:
    """Convert ObjectIds inside a document (at any depth) to hex strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: serialize_document(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize_document(v) for v in value]
    return value


@dataclass(frozen=True)
class UpdateOutcome:
    matched_count: int
    modified_count: int


def strip_identity(fields: dict[str, Any]) -> dict[str, Any]:
    """Drop a client-supplied `_id`; identity is store-owned."""
    return {k: v for k, v in fields.items() if k != "_id"}


async def insert_document(collection: AsyncCollection, fields: dict[str, Any]) -> str:
    """Insert a document verbatim and return its new id as a hex string."""
    result = await collection.insert_one(strip_identity(fields))
    return str(result.inserted_id)


async def update_document(
    collection: AsyncCollection,
    object_id: ObjectId,
    fields: dict[str, Any],
) -> UpdateOutcome:
    """Merge the given top-level fields into a document.

    Matching nothing is not an error. An empty field set only checks for
    the document, since MongoDB rejects an empty $set.
    """
    fields = strip_identity(fields)
    if not fields:
        matched = await collection.count_documents({"_id": object_id}, limit=1)
        return UpdateOutcome(matched_count=matched, modified_count=0)
    result = await collection.update_one({"_id": object_id}, {"$set": fields})
    return UpdateOutcome(
        matched_count=result.matched_count,
        modified_count=result.modified_count,
    )


async def delete_document(collection: AsyncCollection, object_id: ObjectId) -> int:
    """Delete a document by id, returning how many were removed (0 or 1)."""
    result = await collection.delete_one({"_id": object_id})
    return result.deleted_count


def parse_leading_int(raw: str | None) -> int | None:
    """Parse the leading integer of a query value.

    Returns None when the value is missing, has no leading digits, or
    parses to zero.

    Examples:
        "3" -> 3, "3abc" -> 3, "1.5" -> 1, "abc" -> None, "0" -> None
    """
    if raw is None:
        return None
    match = _LEADING_INT_RE.match(raw)
    if not match:
        return None
    return int(match.group(1)) or None
