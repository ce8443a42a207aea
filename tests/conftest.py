"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from tests.test_constants import TEST_STORAGE_BUCKET, TEST_STORAGE_KEY, TEST_STORAGE_URL

# Force an in-memory DB when pytest runs; don't inherit from .env
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["STORAGE_URL"] = TEST_STORAGE_URL
os.environ["STORAGE_KEY"] = TEST_STORAGE_KEY
os.environ["STORAGE_BUCKET"] = TEST_STORAGE_BUCKET


@pytest.fixture
def db() -> Session:
    """Fresh in-memory SQLite session with the schema created. Dropped after each test."""
    import platform_settings.models  # noqa: F401
    from platform_settings.db.session import Base

    engine = create_engine(
        "sqlite+pysqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    session = Session(bind=engine, expire_on_commit=False)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def setting_row(db: Session):
    """The seeded singleton settings row."""
    from platform_settings.models import Setting

    row = Setting(
        platform_name="Acme",
        platform_description="Original description",
        plataform_banner="https://cdn.example.com/banner.png",
        pluggou_base_url="https://api.pluggou.test",
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row
