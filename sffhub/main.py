# sffhub/main.py
from __future__ import annotations

import os
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import HubError
from .routers.health import router as health_router
from .routers.intake import router as intake_router
from .routers.jobs import router as jobs_router
from .routers.requests import router as requests_router
from .routers.session import router as session_router
from .routers.templates import router as templates_router

log = logging.getLogger("uvicorn.error")

app = FastAPI(
    title="SFF Hub API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url=None,
)

# ──────────────────────────────────────────────────────────────────────────────
# CORS (ALLOWED_ORIGINS is comma-separated; "*" when unset)
# ──────────────────────────────────────────────────────────────────────────────
_origins = [o.strip() for o in os.environ.get("ALLOWED_ORIGINS", "*").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ──────────────────────────────────────────────────────────────────────────────
# Typed failures -> HTTP (message goes out as "detail", same as HTTPException)
# ──────────────────────────────────────────────────────────────────────────────
@app.exception_handler(HubError)
async def hub_error_handler(request: Request, exc: HubError):
    if exc.status_code >= 500:
        log.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/", tags=["default"])
def read_root():
    return {"ok": True, "service": "sff-hub"}


# routers
app.include_router(health_router)
app.include_router(intake_router)
app.include_router(session_router)
app.include_router(requests_router)
app.include_router(jobs_router)
app.include_router(templates_router)


# ──────────────────────────────────────────────────────────────────────────────
# Local dev entrypoint
# ──────────────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "sffhub.main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "8000")),
        reload=True,
    )
