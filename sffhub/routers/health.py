# sffhub/routers/health.py
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..db import get_session_opener, ping

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health():
    return {"ok": True}


@router.get("/db")
async def health_db(open_session: Callable[[], AsyncSession] = Depends(get_session_opener)):
    try:
        async with open_session() as db:
            latency_ms = await ping(db)
    except (RuntimeError, SQLAlchemyError, OSError) as e:
        # surface the error so we know exactly what's wrong (unset SUPABASE_DB_URL included)
        raise HTTPException(status_code=503, detail=f"DB check failed: {e}")
    return {"ok": True, "db": "up", "latency_ms": latency_ms}
