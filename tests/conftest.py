"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path

# Settings are read at import time, so the environment must be ready first.
_DB_DIR = Path(tempfile.mkdtemp(prefix="message-api-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR / 'test.db'}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["USER_STORE"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from app.core.db import SessionLocal, drop_db, init_db
from app.db.models import Message as MessageModel
from app.main import create_app

# Same rows as the demo data set: ids 1-6 jack, 7-12 ann, 13 hank.
SEED_MESSAGES = (
    [(f"testData{i}", "jack") for i in range(1, 7)]
    + [(f"testData{i}", "ann") for i in range(7, 13)]
    + [("testData13", "hank")]
)

JACK = ("jack", "asd")
ANN = ("ann", "zxc")
HANK = ("hank", "qwe")


async def _insert_messages(rows):
    async with SessionLocal() as session:
        session.add_all([MessageModel(title=title, owner=owner) for title, owner in rows])
        await session.commit()


@pytest.fixture
def fresh_db():
    """Empty schema for every test."""
    asyncio.run(drop_db())
    asyncio.run(init_db())


@pytest.fixture
def client(fresh_db):
    """TestClient used as a context manager so the lifespan (store setup) runs."""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def seeded(client):
    asyncio.run(_insert_messages(SEED_MESSAGES))
    return client


@pytest.fixture
def token_for(client):
    """Obtain a bearer token through POST /token with Basic credentials."""
    def _token_for(credentials) -> str:
        response = client.post("/token", auth=credentials)
        assert response.status_code == 200, response.text
        return response.json()["access_token"]

    return _token_for


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
