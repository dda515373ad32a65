"""Shared fixtures: HTTP client and an in-memory stand-in for MongoDB.

FakeDatabase implements just the collection surface the services use
(find/sort/skip/limit/to_list, find_one, count_documents, insert_one,
update_one with $set/$inc, delete_one).
"""

import copy
import re
from types import SimpleNamespace
from typing import Any

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.errors import PyMongoError

from app.main import app
from app.stores import mongo as mongo_store


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    for key, cond in query.items():
        if isinstance(cond, dict) and "$regex" in cond:
            flags = re.IGNORECASE if "i" in cond.get("$options", "") else 0
            value = doc.get(key)
            if not isinstance(value, str) or not re.search(cond["$regex"], value, flags):
                return False
        elif doc.get(key) != cond:
            return False
    return True


class FakeCursor:
    def __init__(self, docs: list[dict[str, Any]]):
        self._docs = docs

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        present = [d for d in self._docs if d.get(key) is not None]
        missing = [d for d in self._docs if d.get(key) is None]
        present.sort(key=lambda d: d[key], reverse=direction < 0)
        # Missing values sort before everything ascending, after descending.
        self._docs = missing + present if direction > 0 else present + missing
        return self

    def skip(self, n: int) -> "FakeCursor":
        if n < 0:
            raise ValueError("skip must be non-negative")
        self._docs = self._docs[n:]
        return self

    def limit(self, n: int) -> "FakeCursor":
        if n:
            self._docs = self._docs[:n]
        return self

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        return [copy.deepcopy(d) for d in self._docs[:length]]


class FakeCollection:
    def __init__(self, name: str):
        self.name = name
        self.docs: list[dict[str, Any]] = []
        self.fail_with: Exception | None = None
        self.fail_on_ids: set[ObjectId] = set()
        self.calls = 0

    def seed(self, *docs: dict[str, Any]) -> list[ObjectId]:
        ids = []
        for doc in docs:
            doc = {"_id": ObjectId(), **doc}
            self.docs.append(doc)
            ids.append(doc["_id"])
        return ids

    def by_id(self, object_id: ObjectId) -> dict[str, Any] | None:
        return next((d for d in self.docs if d["_id"] == object_id), None)

    def _check(self) -> None:
        self.calls += 1
        if self.fail_with is not None:
            raise self.fail_with

    def find(self, query: dict[str, Any] | None = None) -> FakeCursor:
        self._check()
        return FakeCursor([d for d in self.docs if _matches(d, query or {})])

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        self._check()
        doc = next((d for d in self.docs if _matches(d, query)), None)
        return copy.deepcopy(doc) if doc is not None else None

    async def count_documents(self, query: dict[str, Any], limit: int = 0) -> int:
        self._check()
        count = sum(1 for d in self.docs if _matches(d, query))
        return min(count, limit) if limit else count

    async def insert_one(self, doc: dict[str, Any]) -> SimpleNamespace:
        self._check()
        stored = copy.deepcopy(doc)
        stored.setdefault("_id", ObjectId())
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def update_one(self, query: dict[str, Any], update: dict[str, Any]) -> SimpleNamespace:
        self._check()
        if query.get("_id") in self.fail_on_ids:
            raise PyMongoError(f"write failed for {query['_id']}")
        doc = next((d for d in self.docs if _matches(d, query)), None)
        if doc is None:
            return SimpleNamespace(matched_count=0, modified_count=0)
        before = copy.deepcopy(doc)
        for key, value in update.get("$set", {}).items():
            doc[key] = copy.deepcopy(value)
        for key, delta in update.get("$inc", {}).items():
            doc[key] = doc.get(key, 0) + delta
        return SimpleNamespace(matched_count=1, modified_count=int(doc != before))

    async def delete_one(self, query: dict[str, Any]) -> SimpleNamespace:
        self._check()
        doc = next((d for d in self.docs if _matches(d, query)), None)
        if doc is None:
            return SimpleNamespace(deleted_count=0)
        self.docs.remove(doc)
        return SimpleNamespace(deleted_count=1)


class FakeDatabase:
    def __init__(self):
        self._collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self._collections:
            self._collections[name] = FakeCollection(name)
        return self._collections[name]

    @property
    def products(self) -> FakeCollection:
        return self["products"]

    @property
    def categories(self) -> FakeCollection:
        return self["category"]


@pytest.fixture
def fake_db(monkeypatch: pytest.MonkeyPatch) -> FakeDatabase:
    """Install an in-memory database behind app.stores.mongo."""
    db = FakeDatabase()
    monkeypatch.setattr(mongo_store, "_database", db)
    return db


@pytest.fixture
async def client():
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
