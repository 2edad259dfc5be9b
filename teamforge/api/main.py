"""FastAPI application entrypoint for TeamForge."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from teamforge.api.middleware.logging import LoggingMiddleware
from teamforge.api.routes import admin, allocation, dashboard, employees, skills, teams
from teamforge.core.config import settings
from teamforge.core.exceptions import ApplicationError
from teamforge.core.observability import setup_tracing
from teamforge.roster.seed import seed_demo_roster
from teamforge.roster.store import roster_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Load the demo roster on startup and drop all roster state on shutdown."""

    if settings.SEED_DEMO_DATA:
        seed_demo_roster(roster_store)

    try:
        yield
    finally:
        roster_store.clear()


app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

setup_tracing(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)

# Routers
app.include_router(admin.router, prefix="/api")
app.include_router(employees.router, prefix="/api")
app.include_router(skills.router, prefix="/api")
app.include_router(teams.router, prefix="/api")
app.include_router(allocation.router, prefix="/api")
app.include_router(dashboard.router, prefix="/api")


@app.exception_handler(ApplicationError)
async def handle_application_error(_: Request, exc: ApplicationError):
    """Return standardized responses for application layer exceptions."""

    if exc.status_code >= 500:
        logger.error("Unhandled application error: %s", exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder({"detail": exc.message, "code": exc.code, "details": exc.details}),
    )
