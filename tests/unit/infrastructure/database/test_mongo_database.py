from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from garment_forecast.infrastructure.database.mongo_database import MongoDatabase


class _StubCollection:
    def __init__(self, documents: Optional[List[Dict[str, Any]]] = None) -> None:
        self.documents = documents or []
        self.queries: List[Dict[str, Any]] = []

    def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.queries.append(query)
        for document in self.documents:
            if all(document.get(key) == value for key, value in query.items()):
                return document
        return None


class _StubDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, _StubCollection] = {}

    def __getitem__(self, name: str) -> _StubCollection:
        return self.collections.setdefault(name, _StubCollection())


class _StubMongoClient:
    def __init__(self, uri: str, **kwargs: Any) -> None:
        self.uri = uri
        self.kwargs = kwargs
        self.databases: Dict[str, _StubDatabase] = {}
        self.closed = False

    def __getitem__(self, name: str) -> _StubDatabase:
        return self.databases.setdefault(name, _StubDatabase())

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def patch_mongo_client(monkeypatch) -> None:
    monkeypatch.setattr(
        "garment_forecast.infrastructure.database.mongo_database.MongoClient",
        _StubMongoClient,
    )


def test_client_receives_server_selection_timeout() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "forecast", 1500)

    assert database.client.uri == "mongodb://localhost:27017"
    assert database.client.kwargs == {"serverSelectionTimeoutMS": 1500}


@pytest.mark.asyncio
async def test_find_one_returns_matching_document() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "forecast")
    collection = database.get_collection("external_data")
    collection.documents.append({"id": "current", "exchangeRate": 330})

    document = await database.find_one("external_data", {"id": "current"})

    assert document == {"id": "current", "exchangeRate": 330}
    assert collection.queries == [{"id": "current"}]


@pytest.mark.asyncio
async def test_find_one_returns_none_when_missing() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "forecast")

    assert await database.find_one("external_data", {"id": "nope"}) is None


def test_close_closes_client() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "forecast")
    database.close()

    assert database.client.closed is True
