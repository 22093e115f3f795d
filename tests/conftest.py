"""Shared pytest fixtures"""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from image_migrator.model import Image, LegacyImage


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def legacy_engine():
    """In-memory legacy store with the original_image table"""
    engine = _memory_engine()
    SQLModel.metadata.create_all(engine, tables=[LegacyImage.__table__])
    yield engine
    engine.dispose()


@pytest.fixture
def destination_engine():
    """In-memory destination store with the image table"""
    engine = _memory_engine()
    SQLModel.metadata.create_all(engine, tables=[Image.__table__])
    yield engine
    engine.dispose()


@pytest.fixture
def bare_engine():
    """In-memory database without any tables"""
    engine = _memory_engine()
    yield engine
    engine.dispose()
