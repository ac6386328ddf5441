"""
Shared fixtures for the planner tests.

Points the app at a throwaway SQLite database before anything imports db.py.
"""

import os
import tempfile
import uuid

_DB_DIR = tempfile.mkdtemp(prefix="planner-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'planner.db')}"
os.environ.pop("OPENAI_API_KEY", None)

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def credentials() -> dict:
    return {"email": f"user-{uuid.uuid4().hex[:8]}@preparedness.org", "password": "s3cret-pass"}


@pytest.fixture
def auth_headers(client, credentials) -> dict:
    resp = client.post("/auth/register", json=credentials)
    assert resp.status_code == 201, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def storage_answers() -> dict:
    return {
        "naturalDisasterRisk": "high",
        "economicStability": "stable",
        "livingSituation": "own-house",
        "storageSpace": "large",
        "incomeStability": "stable",
        "savingsLevel": "high",
        "primaryConcern": "natural-disasters",
    }


@pytest.fixture
def fund_answers() -> dict:
    return {
        "naturalDisasterRisk": "low",
        "economicStability": "unstable",
        "livingSituation": "apartment",
        "storageSpace": "limited",
        "incomeStability": "unstable",
        "savingsLevel": "none",
        "primaryConcern": "economic-crisis",
    }
