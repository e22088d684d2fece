"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from tests import create_test_engine, create_test_session_factory


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def db_engine():
    """Fresh in-memory database per test."""
    engine = create_test_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return create_test_session_factory(db_engine)


@pytest.fixture
def db_session(session_factory):
    """Session that is closed after the test; uncommitted work is discarded."""
    session = session_factory()
    yield session
    session.rollback()
    session.close()
