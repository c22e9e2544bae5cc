# sffhub/store.py
"""Thin CRUD adapter over the Supabase (PostgREST) client.

Every call goes through ``_run`` so that PostgREST and transport failures reach
the managers as ``StorageError`` instead of library-specific exceptions.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .errors import StorageError

log = logging.getLogger("uvicorn.error")

REQUESTS_TABLE = "buyer_requests"
JOBS_TABLE = "jobs"
CHECKLIST_TABLE = "job_checklist"
TEMPLATES_TABLE = "templates"


def _param(value: Any) -> Any:
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


class SupabaseStore:
    def __init__(self, client: Client):
        self.client = client

    def _run(self, table: str, op: str, build: Callable[[], Any]):
        try:
            return build().execute()
        except (APIError, httpx.HTTPError) as e:
            msg = getattr(e, "message", None) or str(e)
            log.error(f"{table} {op} error: {msg}")
            raise StorageError(f"{table} {op} error: {msg}") from e

    def _filtered(self, query, filters: Optional[Dict[str, Any]]):
        for col, val in (filters or {}).items():
            query = query.eq(col, _param(val))
        return query

    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order: Optional[str] = None,
        desc: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        def build():
            q = self._filtered(self.client.table(table).select("*"), filters)
            if order:
                q = q.order(order, desc=desc)
            if limit:
                q = q.limit(limit)
            return q

        resp = self._run(table, "select", build)
        return resp.data or []

    def select_one(self, table: str, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        # .single() errors on zero rows; a limit keeps "absent" a plain None
        rows = self.select(table, filters=filters, limit=1)
        return rows[0] if rows else None

    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        resp = self._run(table, "insert", lambda: self.client.table(table).insert(row))
        if not resp.data:
            log.error(f"{table} insert returned no row")
            raise StorageError(f"{table} insert returned no row")
        return resp.data[0]

    def update(self, table: str, values: Dict[str, Any], filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        resp = self._run(
            table,
            "update",
            lambda: self._filtered(self.client.table(table).update(values), filters),
        )
        return resp.data or []

    def delete(self, table: str, filters: Dict[str, Any]) -> None:
        self._run(
            table,
            "delete",
            lambda: self._filtered(self.client.table(table).delete(), filters),
        )
