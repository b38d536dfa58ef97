"""FastAPI dependencies shared by the routers.

Database sessions are split into read and write generators so reads can be
routed to a replica. The calculator and validator are injected here rather
than imported directly by the endpoints, which lets tests swap them out via
`app.dependency_overrides`.
"""

from database.database import get_read_session, get_write_session
from services.nutrition_calculator import NutritionCalculator, nutrition_calculator
from services.validator import MetricsValidator, metrics_validator


def get_db_write():
    """Yield a write-capable DB session for FastAPI dependency injection."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()


def get_calculator() -> NutritionCalculator:
    return nutrition_calculator


def get_validator() -> MetricsValidator:
    return metrics_validator
