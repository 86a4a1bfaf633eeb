"""Shared fixtures for the mood tracker tests."""

from datetime import datetime, timezone

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from moodtracker.db.mood_store import MoodStore, get_mood_store
from moodtracker.main import app
from moodtracker.routers import user_router
from moodtracker.routers.auth_dependency import get_current_user_id


def _matches(doc: dict, query: dict) -> bool:
    for field, cond in query.items():
        value = doc.get(field)
        if isinstance(cond, dict):
            if "$gte" in cond and not value >= cond["$gte"]:
                return False
            if "$lt" in cond and not value < cond["$lt"]:
                return False
        elif value != cond:
            return False
    return True


class _Cursor:
    def __init__(self, docs):
        self.docs = docs

    def sort(self, field, direction=1):
        return _Cursor(sorted(self.docs, key=lambda d: d[field], reverse=direction < 0))

    def __iter__(self):
        return iter(self.docs)


class _InsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class FakeCollection:
    """The small subset of pymongo's Collection the app uses."""

    def __init__(self):
        self.docs: list[dict] = []

    def insert_one(self, doc):
        doc = dict(doc)
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)
        return _InsertResult(doc["_id"])

    def find(self, query=None):
        return _Cursor([dict(d) for d in self.docs if _matches(d, query or {})])

    def find_one(self, query=None, sort=None):
        cursor = self.find(query)
        for field, direction in sort or []:
            cursor = cursor.sort(field, direction)
        return next(iter(cursor), None)

    def find_one_and_update(self, query, update, upsert=False, return_document=False):
        for doc in self.docs:
            if _matches(doc, query):
                doc.update(update.get("$set", {}))
                return dict(doc)
        if upsert:
            doc = dict(query)
            doc.update(update.get("$setOnInsert", {}))
            doc.update(update.get("$set", {}))
            self.insert_one(doc)
        return None


@pytest.fixture
def mood_collection():
    return FakeCollection()


@pytest.fixture
def store(mood_collection):
    return MoodStore(mood_collection)


@pytest.fixture
def users(monkeypatch):
    users = FakeCollection()
    users.insert_one({"_id": "user-123", "name": "Test", "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc)})
    monkeypatch.setattr(user_router, "get_user_collection", lambda: users)
    return users


@pytest.fixture
def client(store, users):
    """Test client acting as user-123 against in-memory collections."""
    app.dependency_overrides[get_current_user_id] = lambda: "user-123"
    app.dependency_overrides[get_mood_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
