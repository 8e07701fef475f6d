"""FastAPI web application for todolist."""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from todolist import __version__
from todolist.api.errors import (
    ApiError,
    api_error_handler,
    http_exception_handler,
    make_unhandled_exception_handler,
    request_validation_handler,
)
from todolist.api.routes import auth_router, dashboard_router, tasks_router
from todolist.auth.jwt import TokenIssuer
from todolist.auth.passwords import PasswordHasher
from todolist.config import AppSettings, JwtSettings, load_app_settings, load_jwt_settings
from todolist.database.database import SessionLocal, init_db
from todolist.database.seeder import seed_database
from todolist.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    jwt_settings: Optional[JwtSettings] = None,
    app_settings: Optional[AppSettings] = None,
    initialize_database: bool = True,
) -> FastAPI:
    """Build the application and its long-lived collaborators.

    Args:
        jwt_settings: Token settings; loaded from the environment if omitted
        app_settings: Application settings; loaded from the environment if omitted
        initialize_database: Create the schema (and seed, if enabled) on startup

    Raises:
        ConfigurationError: If the token signing secret is not configured
    """
    app_settings = app_settings or load_app_settings()
    jwt_settings = jwt_settings or load_jwt_settings()

    password_hasher = PasswordHasher(rounds=app_settings.bcrypt_rounds)
    token_issuer = TokenIssuer(jwt_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if initialize_database:
            init_db()
            if app_settings.seed_database:
                db = SessionLocal()
                try:
                    seed_database(db, password_hasher)
                finally:
                    db.close()
        logger.info("todolist API started")
        yield

    app = FastAPI(
        title="todolist API",
        description="Personal task tracking: authentication, tasks and dashboard metrics",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.password_hasher = password_hasher
    app.state.token_issuer = token_issuer

    if app_settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        logger.info(f"HTTP {request.method} {request.url.path} started")
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = int((time.perf_counter() - started) * 1000)
            logger.info(
                f"HTTP {request.method} {request.url.path} completed with status {status_code} in {elapsed_ms}ms"
            )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, make_unhandled_exception_handler(app_settings.expose_error_detail))

    @app.get("/health", tags=["health"])
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    app.include_router(auth_router)
    app.include_router(tasks_router)
    app.include_router(dashboard_router)
    return app


def create_app_from_env() -> FastAPI:
    """Entry point for uvicorn (`--factory`): configure logging, then build the app."""
    app_settings = load_app_settings()
    setup_logging(app_settings.log_level)
    return create_app(app_settings=app_settings)
