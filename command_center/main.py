import logging
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from command_center.api.fallback import FALLBACK_METHODS, global_not_found
from command_center.api.router import api_router
from command_center.core.config import Settings, load_settings
from command_center.core.db import build_engine, build_session_factory
from command_center.core.envelope import PrettyJSONResponse, error_response
from command_center.core.middleware import EnvelopeMiddleware
from command_center.core.providers import UpstreamError
from command_center.models.base import Base

logger = logging.getLogger(__name__)

# environments where the app creates its own tables instead of relying on alembic
SELF_MANAGED_SCHEMA_ENVS = ("local", "dev", "test")


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


async def _upstream_error_handler(request: Request, exc: UpstreamError):
    return error_response(exc.message, 500)


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response("Invalid request body", 422, details=jsonable_encoder(exc.errors()))


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(str(exc.detail), exc.status_code)


def create_app(
    settings: Optional[Settings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the gateway app.

    `settings` defaults to the env file; `transport` replaces the network for
    every upstream call (tests pass an `httpx.MockTransport`). Run with
    `uvicorn command_center.main:create_app --factory`.
    """
    settings = settings or load_settings()
    _configure_logging(settings)

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, default_response_class=PrettyJSONResponse)
    app.state.settings = settings
    app.state.upstream_transport = transport
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    app.add_middleware(EnvelopeMiddleware)

    app.add_exception_handler(UpstreamError, _upstream_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    app.include_router(api_router)
    app.add_api_route("/{rest:path}", global_not_found, methods=FALLBACK_METHODS, include_in_schema=False)

    @app.on_event("startup")
    def init_record_store():
        # Local/dev convenience: create the agents table if missing
        if settings.ENV not in SELF_MANAGED_SCHEMA_ENVS:
            return
        Base.metadata.create_all(bind=app.state.engine)

    @app.on_event("startup")
    def log_startup():
        configured = [name for name, ok in settings.configured_providers().items() if ok]
        logger.info(
            "starting %s env=%s providers=%s",
            settings.APP_NAME,
            settings.ENV,
            ",".join(configured) or "none",
        )

    return app
