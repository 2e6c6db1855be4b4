import logging

from fastapi import FastAPI
from fastapi.exceptions import HTTPException as FastAPIHTTPException

from app.core.config import Settings, settings as default_settings
from app.core.logger import setup_logging
from app.middleware.cors import configure_cors
from app.middleware.logging import RequestLoggerMiddleware
from app.middleware import error_handler
from app.core.keys import build_token_pair

# Routers
from app.routers import auth as auth_router
from app.routers import users as users_router
from app.routers import health as health_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application instance."""
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)
    description = (
        "User management API.\n\n"
        "Create, read, update and delete users, log in for a signed token, "
        "and look up the profile behind a token."
    )

    openapi_tags = [
        {"name": "authentication", "description": "Login and token-authenticated profile lookup."},
        {"name": "users", "description": "User record management."},
        {"name": "health", "description": "Health checks and service status endpoints."},
    ]

    app = FastAPI(
        title="User Management API",
        version="0.1.0",
        description=description,
        openapi_tags=openapi_tags,
    )

    issuer, verifier = build_token_pair(settings)
    app.state.token_issuer = issuer
    app.state.token_verifier = verifier
    logger.info(
        "Token signing ready (alg=%s, expiry=%s)",
        settings.ALGORITHM,
        issuer.expires_delta or "none",
    )

    # Middleware
    configure_cors(app, settings.BACKEND_CORS_ORIGINS)
    app.add_middleware(RequestLoggerMiddleware)

    # Exception handlers
    app.add_exception_handler(FastAPIHTTPException, error_handler.http_exception_handler)

    # Include routers
    app.include_router(health_router.router)
    app.include_router(auth_router.router)
    app.include_router(users_router.router)

    return app


app = create_app()
