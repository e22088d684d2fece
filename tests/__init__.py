#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only tests that do not touch a database
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Database tests use an in-memory SQLite engine; no external service is needed.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base

TEST_DB_URL = "sqlite://"


def create_test_engine() -> Engine:
    """
    In-memory SQLite engine with the schema created.

    StaticPool keeps a single connection so every session sees the same
    in-memory database, including sessions opened from TestClient threads.
    """
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


def create_test_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
