"""
Blog API: Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_collection:      AsyncMock shaped like a pymongo async collection
    ├── posts_collection:     In-memory collection that behaves like MongoDB
    │                         for the calls PostService makes
    ├── sample_post_document: A stored post document
    └── test_client:          HTTPX AsyncClient wired to the app, with
                              get_posts_collection overridden
"""

import copy
import os
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import bson
import pytest
import pytest_asyncio
from bson import ObjectId
from bson.codec_options import CodecOptions
from httpx import AsyncClient, ASGITransport
from pymongo import DESCENDING, ReturnDocument

BSON_OPTIONS = CodecOptions(tz_aware=True)

# Override settings for testing BEFORE any app imports
os.environ["MONGO_URL"] = "mongodb://localhost:27017"
os.environ["MONGO_DATABASE"] = "blog_test"
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# In-Memory Posts Collection
# ══════════════════════════════════════════════════════════════════════════


def _matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for key, expected in query.items():
        actual = doc.get(key)
        if isinstance(actual, list) and not isinstance(expected, list):
            if expected not in actual:
                return False
        elif actual != expected:
            return False
    return True


class FakeCursor:
    """Supports the sort → skip → limit → to_list chain PostService uses."""

    def __init__(self, docs: List[Dict[str, Any]]):
        self._docs = docs
        self._skip = 0
        self._limit = 0

    def sort(self, key: str, direction: int) -> "FakeCursor":
        self._docs = sorted(self._docs, key=lambda d: d[key], reverse=direction == DESCENDING)
        return self

    def skip(self, count: int) -> "FakeCursor":
        self._skip = count
        return self

    def limit(self, count: int) -> "FakeCursor":
        self._limit = count
        return self

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        docs = self._docs[self._skip:]
        if self._limit:
            docs = docs[: self._limit]
        if length is not None:
            docs = docs[:length]
        return [copy.deepcopy(d) for d in docs]


class FakePostsCollection:
    """
    Dict-backed stand-in for the posts collection.

    Query support is limited to equality on top-level fields and
    "array contains" for list fields, which covers `_id` lookups and the
    `tags` filter.
    """

    def __init__(self):
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}

    async def insert_one(self, doc: Dict[str, Any]):
        doc.setdefault("_id", ObjectId())
        # Stored the way MongoDB would keep it (millisecond datetimes, UTC)
        self.documents[doc["_id"]] = bson.decode(bson.encode(doc), codec_options=BSON_OPTIONS)
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, query: Optional[Dict[str, Any]] = None) -> FakeCursor:
        query = query or {}
        return FakeCursor([d for d in self.documents.values() if _matches(d, query)])

    async def count_documents(self, query: Dict[str, Any]) -> int:
        return sum(1 for d in self.documents.values() if _matches(d, query))

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for doc in self.documents.values():
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def find_one_and_delete(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        doc = await self.find_one(query)
        if doc is not None:
            del self.documents[doc["_id"]]
        return doc

    async def find_one_and_update(
        self,
        query: Dict[str, Any],
        update: Dict[str, Any],
        return_document: ReturnDocument = ReturnDocument.BEFORE,
    ) -> Optional[Dict[str, Any]]:
        before = await self.find_one(query)
        if before is None:
            return None
        stored = self.documents[before["_id"]]
        stored.update(copy.deepcopy(update.get("$set", {})))
        if return_document == ReturnDocument.AFTER:
            return copy.deepcopy(stored)
        return before


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════


@pytest.fixture
def mock_collection():
    """
    Provides a mock pymongo async collection.

    `find` is synchronous in pymongo (it returns a cursor); the cursor's
    chain methods return the cursor itself and `to_list` is awaitable.

    Usage:
        mock_collection.find_one.return_value = sample_post_document
        result = await post_service.read(mock_collection, str(sample_post_document["_id"]))
    """
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[])

    collection = MagicMock()
    collection.find = MagicMock(return_value=cursor)
    collection.insert_one = AsyncMock()
    collection.count_documents = AsyncMock(return_value=0)
    collection.find_one = AsyncMock(return_value=None)
    collection.find_one_and_delete = AsyncMock(return_value=None)
    collection.find_one_and_update = AsyncMock(return_value=None)
    return collection


@pytest.fixture
def posts_collection():
    return FakePostsCollection()


@pytest.fixture
def sample_post_document():
    """A post as MongoDB stores it."""
    return {
        "_id": ObjectId(),
        "title": "First post",
        "body": "Hello from the blog.",
        "tags": ["intro", "meta"],
        "publishedDate": datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
    }


@pytest_asyncio.fixture
async def test_client(posts_collection):
    """
    Provides an async HTTP test client for endpoint testing.

    Requests go straight to the ASGI app; the posts collection is the
    in-memory fake, so no MongoDB server is needed.
    """
    from blog_api.database import get_posts_collection
    from blog_api.main import app

    app.dependency_overrides[get_posts_collection] = lambda: posts_collection
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
