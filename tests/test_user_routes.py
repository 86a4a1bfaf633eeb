"""Tests for /user routes and the X-User-ID dependency."""

import pytest
from fastapi import HTTPException

from moodtracker.routers import auth_dependency


def test_get_profile(client):
    res = client.get("/user/me")
    assert res.status_code == 200
    assert res.json()["_id"] == "user-123"
    assert res.json()["name"] == "Test"


def test_update_profile(client, users):
    res = client.put("/user/me", json={"name": "Renamed"})
    assert res.status_code == 200
    assert res.json()["name"] == "Renamed"
    assert users.find_one({"_id": "user-123"})["name"] == "Renamed"


def test_update_profile_empty(client):
    res = client.put("/user/me", json={})
    assert res.status_code == 400


def test_missing_user(client, users):
    users.docs.clear()
    res = client.get("/user/me")
    assert res.status_code == 404


class TestCurrentUserId:
    def test_creates_user_on_first_request(self, monkeypatch, users):
        monkeypatch.setattr(auth_dependency, "get_user_collection", lambda: users)
        assert auth_dependency.get_current_user_id("new-user") == "new-user"
        doc = users.find_one({"_id": "new-user"})
        assert doc["name"] is None
        assert doc["created_at"] is not None

    def test_existing_user_untouched(self, monkeypatch, users):
        monkeypatch.setattr(auth_dependency, "get_user_collection", lambda: users)
        auth_dependency.get_current_user_id("user-123")
        assert users.find_one({"_id": "user-123"})["name"] == "Test"
        assert len(users.docs) == 1

    def test_blank_header_rejected(self):
        with pytest.raises(HTTPException) as exc:
            auth_dependency.get_current_user_id("   ")
        assert exc.value.status_code == 401
