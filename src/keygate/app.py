"""keygate — FastAPI gateway application.

Sits between the Neutron-style API and the key-value store. External ids
are converted to storage keys on the way in, and failed store statuses
are translated into HTTP error codes on the way out.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from keygate.auth import make_api_key_checker
from keygate.config import KeygateConfig, load_config
from keygate.identifiers import KeyEncoder
from keygate.routes import identifiers, meta, objects
from keygate.status import StatusError, translate_failure_status
from keygate.store import KeyValueStore

logger = logging.getLogger("keygate")
audit_logger = logging.getLogger("keygate.audit")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: create the store and encoder. Shutdown: log it."""
    app.state.store = KeyValueStore()
    app.state.encoder = KeyEncoder(logging.getLogger("keygate.identifiers"))
    logger.info("keygate gateway ready")
    yield
    logger.info("keygate gateway shut down")


def install_handlers(app: FastAPI, api_key: str = "") -> None:
    """Register exception handlers, audit middleware and routers on ``app``."""
    check_key = make_api_key_checker(api_key)

    # ── Exception handlers ────────────────────────────────────

    @app.exception_handler(StatusError)
    async def status_handler(request: Request, exc: StatusError):
        code = translate_failure_status(exc.status)
        return JSONResponse(status_code=code, content={"detail": str(exc)})

    # ── Audit middleware ──────────────────────────────────────

    @app.middleware("http")
    async def audit_log(request: Request, call_next):
        start = time.monotonic()
        response = await call_next(request)
        elapsed = time.monotonic() - start
        audit_logger.info(
            "%s %s %d %.3fs",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        return response

    # ── Routers ───────────────────────────────────────────────

    app.include_router(meta.router, dependencies=[Depends(check_key)])
    app.include_router(identifiers.router, dependencies=[Depends(check_key)])
    app.include_router(objects.router, dependencies=[Depends(check_key)])


def create_app(config: KeygateConfig | None = None) -> FastAPI:
    """Application factory."""
    if config is None:
        config = load_config()

    app = FastAPI(
        title="keygate",
        description="Identifier gateway between the Neutron API and the key-value store",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config
    install_handlers(app, config.api_key)
    return app
