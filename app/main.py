"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, users)
- Error handlers (centralized ApiError mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- The UserService and Clock collaborators, stored on app.state

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from app.core.config import Settings, settings as default_settings
from app.domain.users.ports import Clock, UserService
from app.interfaces.health import router as health_router
from app.interfaces.users.dependencies import build_clock, build_user_service
from app.interfaces.users.router import router as users_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    user_service: Optional[UserService] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. Collaborators not
    passed in are built from settings.

    Args:
        settings: Application settings. Defaults to the environment.
        user_service: UserService implementation serving /users.
        clock: Clock used to timestamp ApiError payloads.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, sql_echo=settings.debug)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Collaborators ---
    app.state.user_service = user_service or build_user_service(settings)
    app.state.clock = clock or build_clock(settings)

    # --- Rate Limiting ---
    app.state.limiter = limiter

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(users_router, prefix=settings.api_prefix)

    logger.info("%s %s ready.", settings.project_name, settings.version)
    return app


app = create_app()
