"""Pytest configuration for the trip planner API."""
from __future__ import annotations

import os
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List

# Keep the app on in-memory storage and without a real completion client under test.
os.environ["SUPABASE_URL"] = ""
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = ""
os.environ["HF_TOKEN"] = ""

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.dependencies import get_completion_client, get_trip_repo  # noqa: E402
from app.domain.repositories import InMemoryTripRepository  # noqa: E402
from app.main import app  # noqa: E402


class FakeCompletions:
    def __init__(self, content: str | None = "", error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeCompletionClient:
    """Mimics the ``client.chat.completions.create`` surface of AsyncOpenAI."""

    def __init__(self, content: str | None = "", error: Exception | None = None):
        self.completions = FakeCompletions(content, error)
        self.chat = SimpleNamespace(completions=self.completions)

    @property
    def calls(self) -> List[Dict[str, Any]]:
        return self.completions.calls


class RecordingRepository(InMemoryTripRepository):
    def __init__(self):
        super().__init__()
        self.add_calls = 0

    async def add(self, trip):
        self.add_calls += 1
        return await super().add(trip)


class FailingRepository(InMemoryTripRepository):
    async def add(self, trip):
        raise RuntimeError("insert failed")

    async def list_for_user(self, user_identifier, source, limit):
        raise RuntimeError("select failed")


class FakeQuery:
    """Chainable stand-in for a postgrest query builder; records every call."""

    def __init__(self, log, data):
        self.log = log
        self.data = data

    def __getattr__(self, name):
        def _record(*args, **kwargs):
            self.log.append((name, args, kwargs))
            return self

        return _record

    def execute(self):
        return SimpleNamespace(data=self.data)


class FakeSupabase:
    def __init__(self, data):
        self.log = []
        self.data = data

    def table(self, name):
        self.log.append(("table", (name,), {}))
        return FakeQuery(self.log, self.data)


@pytest.fixture
def repo() -> RecordingRepository:
    return RecordingRepository()


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient(content="<think>pondering</think>\n1. Goa - beaches\n- Day 1: surf\n- Day 2: rest")


@pytest.fixture
def client(repo, completion_client):
    app.dependency_overrides[get_trip_repo] = lambda: repo
    app.dependency_overrides[get_completion_client] = lambda: completion_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
