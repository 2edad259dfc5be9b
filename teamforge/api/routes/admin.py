"""Operational endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Response

from teamforge.core.config import settings
from teamforge.utils.monitoring import render_metrics

router = APIRouter(tags=["admin"])


@router.get("/health")
async def healthcheck() -> Dict[str, str]:
    """Liveness probe."""

    return {"status": "ok", "environment": settings.ENVIRONMENT, "version": settings.API_VERSION}


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    payload, content_type = render_metrics()
    return Response(content=payload, media_type=content_type)
