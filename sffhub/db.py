# sffhub/db.py
"""Direct Postgres connection, used only by the database health probe.

Application reads and writes go through the Supabase client (see store.py).
"""
import os
import time
from typing import Callable, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

_engine: Optional[AsyncEngine] = None
_SessionLocal: Optional[async_sessionmaker] = None


def async_url(url: str) -> str:
    # Supabase dashboards hand out postgres:// URLs; SQLAlchemy needs the asyncpg driver named
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


def _ensure_engine() -> async_sessionmaker:
    global _engine, _SessionLocal
    if _SessionLocal is None:
        db_url = os.getenv("SUPABASE_DB_URL")
        if not db_url:
            raise RuntimeError("SUPABASE_DB_URL is not set")
        _engine = create_async_engine(async_url(db_url), pool_pre_ping=True, pool_size=1, max_overflow=1)
        _SessionLocal = async_sessionmaker(_engine, expire_on_commit=False)
    return _SessionLocal


def open_session() -> AsyncSession:
    """New session; raises RuntimeError when SUPABASE_DB_URL is unset."""
    return _ensure_engine()()


def get_session_opener() -> Callable[[], AsyncSession]:
    # the route opens the session itself so configuration errors land in its try block
    return open_session


async def ping(session: AsyncSession) -> float:
    """Round-trip ``select 1``; returns latency in milliseconds."""
    started = time.perf_counter()
    result = await session.execute(text("select 1"))
    result.scalar_one()
    return round((time.perf_counter() - started) * 1000, 1)
