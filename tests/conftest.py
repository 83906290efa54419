"""Shared pytest fixtures for the tennis club tests."""

import os

# Keep test runs from writing log files
os.environ['LOG_DIR'] = ''

import pytest
import pytest_asyncio

from club.database.database import Database
from club.services.repository import Repository

IN_MEMORY_URL = 'sqlite:///:memory:'


@pytest_asyncio.fixture
async def database():
    """In-memory database holding the canonical tennis club dataset."""
    db = Database(IN_MEMORY_URL)
    await db.initialize(seed=True)
    yield db
    await db.close()


@pytest_asyncio.fixture
async def empty_database():
    """In-memory database with the schema but no players or penalties."""
    db = Database(IN_MEMORY_URL)
    await db.initialize(seed=False)
    yield db
    await db.close()


@pytest.fixture
def repo(database):
    return Repository(database.session_factory)


@pytest.fixture
def empty_repo(empty_database):
    return Repository(empty_database.session_factory)
