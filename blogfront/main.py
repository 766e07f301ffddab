"""
Blogfront API

Headless blog backend: pages WordPress posts over GraphQL for the front-end.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blogfront.config import get_settings
from blogfront.middleware import RequestIDLogFilter, RequestIDMiddleware
from blogfront.routers import posts
from blogfront.services.http_client import close_shared_client

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s",
)
for _handler in logging.getLogger().handlers:
    _handler.addFilter(RequestIDLogFilter())

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: close the shared upstream client on shutdown."""
    yield
    await close_shared_client()
    logger.info("Shared HTTP client closed")


app = FastAPI(
    title="Blogfront API",
    description="Cursor-paginated WordPress posts for a headless blog front-end",
    version=VERSION,
    lifespan=lifespan,
)

# Request ID
app.add_middleware(RequestIDMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

# Routers
app.include_router(posts.router, prefix="/api")


def _check_config() -> str:
    """Verify the upstream source is configured. Returns 'ok' or 'fail'."""
    return "ok" if get_settings().wordpress_api_url else "fail"


@app.get("/api/health")
async def health_check() -> JSONResponse:
    """Health check reporting configuration status."""
    checks = {"config": _check_config()}
    failed = [k for k, v in checks.items() if v != "ok"]
    if failed:
        logger.warning("Health check degraded — failed: %s", ", ".join(failed))

    result: dict[str, Any] = {
        "status": "degraded" if failed else "ok",
        "service": "blogfront-api",
        "version": VERSION,
        "checks": checks,
    }
    return JSONResponse(content=result, status_code=200)
