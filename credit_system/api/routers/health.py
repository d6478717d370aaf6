# This file defines liveness, readiness, and version endpoints for API operations.
# It exists so orchestration and monitoring systems can verify service health quickly.
# The readiness check confirms database connectivity and that the customer and credit tables exist.

from __future__ import annotations

import subprocess
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from credit_system.api.api_config import ApiConfig
from credit_system.api.dependencies import get_config, get_database_client
from credit_system.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse
from credit_system.common.db import DatabaseClient

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _version_fields(config: ApiConfig) -> dict[str, str]:
    return {"api_version": config.api_version_label(), "schema_version": config.schema_version}


def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return completed.stdout.strip() or None


@router.get("/health", response_model=HealthResponse)
def health(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        **_version_fields(config),
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(request: Request, config: ConfigDep, db: DBDep) -> dict[str, object]:
    db_connected = db.can_connect()
    customer_store_ready = db_connected and db.table_exists(config.customer_table_name)
    credit_store_ready = db_connected and db.table_exists(config.credit_table_name)

    return {
        **_version_fields(config),
        "request_id": request.state.request_id,
        "db_connected": db_connected,
        "customer_store_ready": customer_store_ready,
        "credit_store_ready": credit_store_ready,
        "ready": db_connected and customer_store_ready and credit_store_ready,
        "database": "reachable" if db_connected else "unreachable",
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        **_version_fields(config),
        "request_id": request.state.request_id,
        "api_version_path": config.api_version_path,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": config.api_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
