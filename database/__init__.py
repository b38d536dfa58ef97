"""Database package: the Report model plus engine and session helpers."""

from .database import (
    WriteSessionLocal,
    ReadSessionLocal,
    init_db,
    get_write_session,
    get_read_session,
)
from .models import Base, Report
from . import models

__all__ = [
    "WriteSessionLocal",
    "ReadSessionLocal",
    "init_db",
    "get_write_session",
    "get_read_session",
    "Base",
    "Report",
    "models",
]
