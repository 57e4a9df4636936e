"""
Dependency wiring for the users bounded context.

Builds the UserService and Clock from settings (composition root)
and hands each request a UserResource holding explicit references
to both. Nothing is looked up from module globals at request time.
"""

import logging
from zoneinfo import ZoneInfo

from fastapi import Request
from sqlalchemy import create_engine

from app.application.users.service import UserCrudService
from app.core.config import Settings
from app.domain.users.ports import Clock, UserService
from app.infrastructure.clock import SystemClock
from app.infrastructure.users.memory_repository import InMemoryUserRepository
from app.infrastructure.users.sql_repository import SqlUserRepository
from app.interfaces.users.resource import UserResource

logger = logging.getLogger(__name__)


def build_user_service(settings: Settings) -> UserService:
    """Build the UserService selected by ``settings.user_store``."""
    if settings.user_store == "sql":
        engine = create_engine(settings.get_database_dsn(), pool_pre_ping=True)
        repository = SqlUserRepository(engine=engine)
        repository.create_schema()
        logger.info("Using SQL user store.")
        return UserCrudService(repository=repository)

    logger.info("Using in-memory user store.")
    return UserCrudService(repository=InMemoryUserRepository())


def build_clock(settings: Settings) -> Clock:
    """Build the wall clock in the configured zone."""
    return SystemClock(zone=ZoneInfo(settings.timezone))


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_user_resource(request: Request) -> UserResource:
    """Build a UserResource from the collaborators stored on the app."""
    return UserResource(
        service=request.app.state.user_service,
        clock=request.app.state.clock,
    )
