# src/jummahfinder/api/app.py
"""
FastAPI application wiring.

This file creates the `FastAPI` instance and installs middleware/error handlers.
Search and proximity logic lives in `jummahfinder.search`; routes only adapt it to HTTP.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from jummahfinder.core.logging import configure_logging

from .routes import close_backend, router

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    yield
    await close_backend()


app = FastAPI(title="Jummah Finder API", version="0.1.0", lifespan=lifespan)

# CORS (dev-friendly): allow local frontends (e.g. http://localhost:5173) to call this API.
# Configure via env:
# - JUMMAHFINDER_CORS_ORIGINS="http://localhost:5173,http://127.0.0.1:5173"
# - JUMMAHFINDER_CORS_ALLOW_LOCAL=0 to disable the default localhost allowance
cors_origins = [s.strip() for s in os.getenv("JUMMAHFINDER_CORS_ORIGINS", "").split(",") if s.strip()]
cors_allow_local = os.getenv("JUMMAHFINDER_CORS_ALLOW_LOCAL", "1").strip().lower() in {"1", "true", "yes", "y"}
cors_origin_regex = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$" if cors_allow_local and not cors_origins else ""
if cors_origins or cors_origin_regex:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_origin_regex=cors_origin_regex or None,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": {"code": "INTERNAL_ERROR", "message": str(exc)}},
    )


app.include_router(router)
