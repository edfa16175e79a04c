"""
Test configuration and fixtures for the Events API tests.
"""
import os
import tempfile

# Settings are read at import time, so they must be in place before the app loads
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-secret")
os.environ.setdefault("SUPABASE_JWT_ALGORITHM", "HS256")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="events-api-logs-"))

import copy
from itertools import count
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from jose import jwt
from postgrest.exceptions import APIError

from app.main import app
from app.core.clients import get_supabase_client


class FakeResponse:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    """Mimics the PostgREST query builder chain used by the repositories."""

    def __init__(self, store: "FakeSupabase", table: str):
        self.store = store
        self.table_name = table
        self.rows = store.tables.setdefault(table, [])
        self.action = "select"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.bounds = None
        self.max_rows = None
        self.count_mode = None
        self.single = False

    def select(self, columns="*", count=None):
        self.action = "select"
        self.count_mode = count
        return self

    def insert(self, data):
        self.action = "insert"
        self.payload = data
        return self

    def update(self, data):
        self.action = "update"
        self.payload = data
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def range(self, start, end):
        self.bounds = (start, end)
        return self

    def limit(self, size):
        self.max_rows = size
        return self

    def maybe_single(self):
        self.single = True
        return self

    def _matches(self, row):
        return all(str(row.get(column)) == str(value) for column, value in self.filters)

    def _check_filters(self):
        for column, value in self.filters:
            if column in self.store.unknown_columns:
                raise APIError({"code": "42703", "message": f"column events.{column} does not exist"})
            if self.table_name == "events" and column == "id" and not str(value).isdigit():
                raise APIError({"code": "22P02", "message": f"invalid input syntax for type bigint: \"{value}\""})

    def execute(self):
        self.store.calls.append((self.table_name, self.action, list(self.filters)))
        self._check_filters()

        if self.action == "insert":
            row = dict(self.payload)
            row.setdefault("id", next(self.store.ids))
            self.rows.append(row)
            return FakeResponse([copy.deepcopy(row)])

        matched = [row for row in self.rows if self._matches(row)]

        if self.action == "update":
            # PostgREST answers an empty SET with no rows
            if not self.payload:
                return FakeResponse([])
            for row in matched:
                row.update(self.payload)
            return FakeResponse(copy.deepcopy(matched))

        if self.action == "delete":
            for row in matched:
                self.rows.remove(row)
            return FakeResponse(copy.deepcopy(matched))

        if self.table_name in self.store.missing_results:
            return FakeResponse(None)
        if self.order_by:
            column, desc = self.order_by
            matched = sorted(matched, key=lambda row: row.get(column), reverse=desc)
        total = len(matched)
        if self.bounds:
            matched = matched[self.bounds[0]:self.bounds[1] + 1]
        if self.max_rows is not None:
            matched = matched[:self.max_rows]
        data = copy.deepcopy(matched)
        if self.single:
            data = data[0] if data else None
        return FakeResponse(data, count=total if self.count_mode else None)


class FakeBucket:
    def __init__(self, store: "FakeSupabase", name: str):
        self.store = store
        self.name = name

    def upload(self, path, file_bytes, file_options=None):
        self.store.uploads.append({
            "bucket": self.name,
            "path": path,
            "content": file_bytes,
            "options": file_options,
        })
        return {"path": path}


class FakeStorage:
    def __init__(self, store: "FakeSupabase"):
        self.store = store

    def from_(self, bucket):
        return FakeBucket(self.store, bucket)


class FakeSupabase:
    """In-memory stand-in for the Supabase client."""

    def __init__(self):
        self.tables = {}
        self.ids = count(1)
        self.calls = []
        self.uploads = []
        self.missing_results = set()
        self.unknown_columns = set()
        self.storage = FakeStorage(self)

    def table(self, name):
        return FakeQuery(self, name)


def make_token(user_id: str) -> str:
    return jwt.encode(
        {"sub": user_id, "aud": "authenticated"},
        os.environ["SUPABASE_JWT_SECRET"],
        algorithm=os.environ["SUPABASE_JWT_ALGORITHM"],
    )


@pytest.fixture
def supabase():
    """Fake record store seeded with two user profiles."""
    fake = FakeSupabase()
    fake.tables["profiles"] = [
        {"id": "user-1", "email": "one@example.com", "first_name": "One", "last_name": "User", "role": ["user"]},
        {"id": "user-2", "email": "two@example.com", "first_name": "Two", "last_name": "User", "role": ["user"]},
    ]
    return fake


@pytest.fixture
def user_one(supabase):
    return supabase.tables["profiles"][0]


@pytest.fixture
def user_two(supabase):
    return supabase.tables["profiles"][1]


@pytest_asyncio.fixture
async def client(supabase) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with the Supabase client overridden."""
    app.dependency_overrides[get_supabase_client] = lambda: supabase
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Build authorization headers for a user id."""
    def _headers(user_id: str) -> dict:
        return {"Authorization": f"Bearer {make_token(user_id)}"}
    return _headers
