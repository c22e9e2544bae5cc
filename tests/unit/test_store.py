"""SupabaseStore against a mocked supabase client."""

from unittest.mock import MagicMock
from uuid import UUID

import httpx
import pytest
from postgrest.exceptions import APIError

from sffhub.errors import StorageError
from sffhub.models import JobStatus
from sffhub.store import SupabaseStore

JOB_ID = UUID("6f1c1c8e-7a53-4c1e-9f57-2d1a3c5b9e10")


def _chain(query):
    """Make every builder call on ``query`` return the same mock."""
    for name in ("eq", "order", "limit", "select", "insert", "update", "delete"):
        getattr(query, name).return_value = query
    return query


@pytest.fixture
def client():
    c = MagicMock()
    _chain(c.table.return_value)
    return c


@pytest.fixture
def query(client):
    return client.table.return_value


def test_select_builds_ordered_filtered_query(client, query):
    query.execute.return_value = MagicMock(data=[{"id": "1"}])
    store = SupabaseStore(client)

    rows = store.select("jobs", filters={"id": JOB_ID, "status": JobStatus.QA}, order="created_at", desc=True)

    assert rows == [{"id": "1"}]
    client.table.assert_called_with("jobs")
    query.select.assert_called_once_with("*")
    query.eq.assert_any_call("id", str(JOB_ID))
    query.eq.assert_any_call("status", "QA")
    query.order.assert_called_once_with("created_at", desc=True)


def test_select_one_absent_is_none(client, query):
    query.execute.return_value = MagicMock(data=[])
    assert SupabaseStore(client).select_one("templates", {"id": "x"}) is None
    query.limit.assert_called_once_with(1)


def test_insert_returns_created_row(client, query):
    query.execute.return_value = MagicMock(data=[{"id": "abc", "name": "T"}])
    row = SupabaseStore(client).insert("templates", {"name": "T"})
    assert row == {"id": "abc", "name": "T"}
    query.insert.assert_called_once_with({"name": "T"})


def test_insert_without_returned_row_is_storage_error(client, query):
    query.execute.return_value = MagicMock(data=[])
    with pytest.raises(StorageError):
        SupabaseStore(client).insert("jobs", {"buyer_name": "x"})


def test_update_and_delete_filter_by_key(client, query):
    query.execute.return_value = MagicMock(data=[])
    store = SupabaseStore(client)

    store.update("job_checklist", {"qa_pass": True}, {"job_id": JOB_ID})
    query.update.assert_called_once_with({"qa_pass": True})
    query.eq.assert_called_with("job_id", str(JOB_ID))

    store.delete("jobs", {"id": JOB_ID})
    query.delete.assert_called_once_with()


def test_api_error_becomes_storage_error(client, query):
    query.execute.side_effect = APIError({"message": "relation does not exist", "code": "42P01"})

    with pytest.raises(StorageError) as exc:
        SupabaseStore(client).select("jobs")

    assert "jobs select error" in exc.value.message
    assert "relation does not exist" in exc.value.message


def test_transport_error_becomes_storage_error(client, query):
    query.execute.side_effect = httpx.ConnectError("connection refused")

    with pytest.raises(StorageError):
        SupabaseStore(client).update("jobs", {"status": "QA"}, {"id": "1"})
