"""Tests for lazy MongoDB connection handling."""

from unittest.mock import MagicMock

import pytest
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from moodtracker.db import database


@pytest.fixture(autouse=True)
def reset_connection():
    database.close()
    yield
    database.close()


def test_connects_once(monkeypatch):
    client = MagicMock()
    factory = MagicMock(return_value=client)
    monkeypatch.setattr(database, "MongoClient", factory)

    db = database.get_database()
    assert database.get_database() is db
    factory.assert_called_once()
    assert factory.call_args.kwargs["tz_aware"] is True
    client.admin.command.assert_called_once_with("ping")


def test_collections(monkeypatch):
    client = MagicMock()
    monkeypatch.setattr(database, "MongoClient", MagicMock(return_value=client))
    database.get_mood_collection()
    client.__getitem__.return_value.__getitem__.assert_called_with("mood_entries")


def test_unreachable_server(monkeypatch):
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("no server")
    monkeypatch.setattr(database, "MongoClient", MagicMock(return_value=client))

    with pytest.raises(ConnectionFailure):
        database.get_database()
    # Next call retries instead of caching the failure
    client.admin.command.side_effect = None
    assert database.get_database() is not None
