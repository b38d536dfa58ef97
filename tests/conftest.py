"""Shared pytest setup.

Points the database at a throwaway SQLite file before any application
module is imported, and creates the schema once per session.
"""
import os
import tempfile

import pytest

_DB_PATH = os.path.join(tempfile.gettempdir(), "recomp_test.db")
if os.path.exists(_DB_PATH):
    os.remove(_DB_PATH)
os.environ["WRITE_DATABASE_URL"] = f"sqlite:///{_DB_PATH}"
os.environ["READ_DATABASE_URL"] = f"sqlite:///{_DB_PATH}"


@pytest.fixture(scope="session", autouse=True)
def setup_db():
    """Initialize database before tests."""
    from database import init_db
    init_db()


@pytest.fixture
def male_metrics():
    from services.nutrition_calculator import UserMetrics
    return UserMetrics(
        gender="male",
        weight=80,
        height=180,
        age=30,
        body_fat_percentage=15,
        activity_level="moderatelyActive",
    )
