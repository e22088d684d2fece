#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

import uuid
from functools import lru_cache
from typing import Generator, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import sessionmaker

from core.app_context import AppContext
from core.config_loader import AppConfig
from core.llm import TextGenerationProvider
from core.scorer import RecommendationService
from database.database import create_db_engine
from database.repositories import CareerProfileRepository
from database.uow import profile_uow
from .config import get_config
from .exceptions import InvalidUserIdException


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, config: AppConfig):
        self.engine = create_db_engine(config.database.url, echo=config.database.echo)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )


@lru_cache()
def get_db_manager() -> DatabaseManager:
    """Database manager built on first use from the cached config."""
    return DatabaseManager(get_config())


@lru_cache()
def get_app_context() -> AppContext:
    return AppContext.build(get_config())


def get_session_factory() -> sessionmaker:
    """
    FastAPI dependency returning the session factory for units of work.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(session_factory: sessionmaker = Depends(get_session_factory)):
            ...
    """
    return get_db_manager().SessionLocal


def get_profile_repository(
    session_factory: sessionmaker = Depends(get_session_factory),
    config: AppConfig = Depends(get_config)
) -> Generator[CareerProfileRepository, None, None]:
    """Yield a repository scoped to one request's unit of work."""
    with profile_uow(config.app_id, session_factory=session_factory) as repo:
        yield repo


def get_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """
    Read and validate the anonymous user id from the X-User-Id header.

    Raises:
        InvalidUserIdException: If the header is missing or not a UUID.
    """
    if not x_user_id:
        raise InvalidUserIdException("Missing X-User-Id header. Start a session first.")
    try:
        return str(uuid.UUID(x_user_id))
    except ValueError:
        raise InvalidUserIdException(
            f"Invalid user id format: {x_user_id}. Must be a valid UUID."
        )


def get_recommendation_service() -> RecommendationService:
    return get_app_context().recommendation_service


def get_text_provider() -> TextGenerationProvider:
    return get_app_context().text_provider
