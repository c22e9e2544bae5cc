"""Shared pytest fixtures: an in-memory table store and a TestClient wired to it."""

from collections import defaultdict
from datetime import datetime, timedelta, timezone
from enum import Enum
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from sffhub.auth import current_user
from sffhub.deps import get_store
from sffhub.errors import StorageError
from sffhub.main import app
from sffhub.models import AdminUser
from sffhub.services.buyer_requests import RequestManager
from sffhub.services.jobs import JobManager
from sffhub.services.templates import TemplateManager


def _norm(value):
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


class MemoryStore:
    """Same surface as SupabaseStore, backed by lists of dicts.

    ``fail_on`` holds ``(table, op)`` pairs that raise StorageError, to exercise
    partial failures.
    """

    def __init__(self):
        self.tables = defaultdict(list)
        self.fail_on = set()
        self.calls = []
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _check(self, table, op):
        self.calls.append((table, op))
        if (table, op) in self.fail_on:
            raise StorageError(f"{table} {op} error: injected failure")

    @staticmethod
    def _matches(row, filters):
        return all(row.get(k) == _norm(v) for k, v in (filters or {}).items())

    def select(self, table, filters=None, order=None, desc=False, limit=None):
        self._check(table, "select")
        rows = [dict(r) for r in self.tables[table] if self._matches(r, filters)]
        if order:
            rows.sort(key=lambda r: r[order], reverse=desc)
        if limit:
            rows = rows[:limit]
        return rows

    def select_one(self, table, filters):
        rows = self.select(table, filters=filters, limit=1)
        return rows[0] if rows else None

    def insert(self, table, row):
        self._check(table, "insert")
        new = {k: _norm(v) for k, v in row.items()}
        new.setdefault("id", str(uuid4()))
        if table != "job_checklist":
            self._clock += timedelta(seconds=1)
            new.setdefault("created_at", self._clock.isoformat())
        self.tables[table].append(new)
        return dict(new)

    def update(self, table, values, filters):
        self._check(table, "update")
        updated = []
        for row in self.tables[table]:
            if self._matches(row, filters):
                row.update({k: _norm(v) for k, v in values.items()})
                updated.append(dict(row))
        return updated

    def delete(self, table, filters):
        self._check(table, "delete")
        self.tables[table] = [r for r in self.tables[table] if not self._matches(r, filters)]


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def request_manager(store):
    return RequestManager(store)


@pytest.fixture
def job_manager(store):
    return JobManager(store)


@pytest.fixture
def template_manager(store):
    return TemplateManager(store)


@pytest.fixture
def intake_payload():
    return {
        "name": "Dana Reyes",
        "email": "dana@example.com",
        "company": "Reyes Fitness",
        "need_type": "Repurpose",
        "platforms": ["TikTok", "IG"],
        "volume_per_week": 8,
        "turnaround": "24-48h",
        "budget_range": "200-500",
        "footage_link": "https://drive.example.com/footage",
        "examples_link": "",
        "notes": "Podcast clips, need captions burned in",
    }


@pytest.fixture
def admin():
    return AdminUser(id="admin-1", email="ops@example.com")


@pytest.fixture
def client(store, admin):
    """Signed-in client; every manager runs on the in-memory store."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[current_user] = lambda: admin
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def anon_client(store):
    """No session override: the real session guard runs."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
