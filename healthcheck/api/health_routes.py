"""API routes for the integration health registry.

Endpoints:
  GET  /health        — aggregate status + per-integration report
  POST /health/reset  — clear all error histories, return the fresh report
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from healthcheck.health.engine import IntegrationRegistry
from healthcheck.health.models import HealthResponse, OverallStatus

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["health"])


def _to_json_response(response: HealthResponse) -> JSONResponse:
    # down -> 503, healthy / unhealthy -> 200
    status_code = 503 if response.status == OverallStatus.DOWN else 200
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))


@health_router.get("/health")
async def health(request: Request) -> JSONResponse:
    registry: IntegrationRegistry = request.app.state.integrations
    response = await registry.get_health_response()
    if response.status != OverallStatus.HEALTHY:
        logger.info("Health check answered %s", response.status.value)
    return _to_json_response(response)


@health_router.post("/health/reset")
async def reset_health(request: Request) -> JSONResponse:
    registry: IntegrationRegistry = request.app.state.integrations
    registry.reset_all_errors()
    return _to_json_response(await registry.get_health_response())
