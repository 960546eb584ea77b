from __future__ import annotations

import asyncio

from fastapi.testclient import TestClient
from sqlalchemy import select, func

from app.core.config import settings
from app.core.db import SessionLocal
from app.db.models import UserEntity, Role
from app.db.repositories.user_repository import UserRepository
from app.domains.identity.stores import (
    DEFAULT_USERS, DatabaseUserStore, InMemoryUserStore, build_user_store
)
from app.main import create_app
from conftest import JACK, HANK, bearer


async def _count(model) -> int:
    async with SessionLocal() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar()


def test_in_memory_store_hashes_passwords():
    store = InMemoryUserStore.from_credentials([("jack", "asd", ["USER"])])
    user = asyncio.run(store.get_by_username("jack"))
    assert user.password_hash != "asd"
    assert user.authenticate("asd")
    assert not user.authenticate("zxc")
    assert asyncio.run(store.get_by_username("nobody")) is None


def test_in_memory_stores_are_independent():
    first = InMemoryUserStore.from_credentials([("jack", "asd", ["USER"])])
    second = InMemoryUserStore.from_credentials([])
    assert len(first) == 1
    assert len(second) == 0


def test_database_store_seeds_once(fresh_db):
    store = asyncio.run(build_user_store("database", SessionLocal))
    assert isinstance(store, DatabaseUserStore)
    assert asyncio.run(store.seed(DEFAULT_USERS)) == 0

    assert asyncio.run(_count(UserEntity)) == 3
    assert asyncio.run(_count(Role)) == 2

    hank = asyncio.run(store.get_by_username("hank"))
    assert hank.roles == {"NON-USER"}
    assert hank.authenticate("qwe")


def test_concurrent_seed_counts_as_already_seeded(fresh_db, monkeypatch):
    asyncio.run(build_user_store("database", SessionLocal))

    async def _empty(self):
        return 0

    # another worker inserted the users after this one saw an empty table
    monkeypatch.setattr(UserRepository, "count", _empty)
    assert asyncio.run(DatabaseUserStore(SessionLocal).seed(DEFAULT_USERS)) == 0

    monkeypatch.undo()
    assert asyncio.run(_count(UserEntity)) == 3
    assert asyncio.run(_count(Role)) == 2


def test_unknown_store_kind_is_rejected(fresh_db):
    try:
        asyncio.run(build_user_store("ldap", SessionLocal))
    except ValueError as e:
        assert "ldap" in str(e)
    else:
        raise AssertionError("expected ValueError")


def test_api_against_database_store(fresh_db, monkeypatch):
    monkeypatch.setattr(settings, "user_store", "database")

    with TestClient(create_app()) as client:
        assert isinstance(client.app.state.user_store, DatabaseUserStore)

        r = client.post("/messages", json={"title": "from db user"}, auth=JACK)
        assert r.status_code == 201
        assert client.get(r.headers["Location"], auth=JACK).json()["owner"] == "jack"

        assert client.get("/messages", auth=HANK).status_code == 403
        assert client.get("/messages", auth=("jack", "zxc")).status_code == 401

        token = client.post("/token", auth=JACK).json()["access_token"]
        assert client.get("/messages", headers=bearer(token)).status_code == 200
