# This file builds the FastAPI application and registers all API routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs, timing headers, Prometheus metrics, and optional request logging.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import RequestResponseEndpoint

from credit_system.api.api_config import get_api_config
from credit_system.api.dependencies import get_database_client
from credit_system.api.error_handlers import register_error_handlers
from credit_system.api.routers.credits import router as credits_router
from credit_system.api.routers.customers import router as customers_router
from credit_system.api.routers.health import router as health_router
from credit_system.common.logging import configure_logging
from credit_system.repositories.ddl import apply_schema

LOGGER = logging.getLogger("api")

API_HTTP_REQUESTS_TOTAL = Counter(
    "credit_api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "credit_api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "credit_api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method", "path"],
)


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = get_api_config()

    app = FastAPI(
        title=config.api_name,
        description="Register customers, request credits against them, and query both back.",
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
            {"name": "customers", "description": "Customer registration and profile management."},
            {"name": "credits", "description": "Credit requests and customer-scoped credit lookups."},
        ],
    )

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        path_label = request.url.path
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"

            if config.enable_request_logging:
                try:
                    get_database_client().log_request(
                        table_name=config.request_log_table_name,
                        request_id=request_id,
                        path=request.url.path,
                        method=request.method,
                        status_code=response.status_code,
                        duration_ms=duration_ms,
                    )
                except SQLAlchemyError:
                    LOGGER.warning("request log write failed request_id=%s", request_id)

            return response
        finally:
            duration_s = time.perf_counter() - started
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.on_event("startup")
    def startup_checks() -> None:
        try:
            db = get_database_client()
            if config.create_schema_on_startup:
                apply_schema(
                    db.engine,
                    customer_table=config.customer_table_name,
                    credit_table=config.credit_table_name,
                    request_log_table=config.request_log_table_name,
                )
            app.state.db_connected_at_startup = db.can_connect()
        except SQLAlchemyError:
            LOGGER.exception("database unavailable at startup")
            app.state.db_connected_at_startup = False

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(customers_router, prefix=config.api_version_path)
    app.include_router(credits_router, prefix=config.api_version_path)

    return app


app = create_app()
