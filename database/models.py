"""SQLAlchemy ORM models for the body recomposition service.

A `Report` stores one calculation: the metric inputs it was run with and
the serialized results. Models stay behavior-free; calculations live in
the services package.
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, Text
from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone

Base = declarative_base()


class Report(Base):
    """ORM model representing a saved calculation report.

    Inputs are stored in metric units; `results` holds the JSON-encoded
    camelCase results bundle.
    """

    __tablename__ = "reports"
    id = Column(Integer, primary_key=True, index=True)
    report_id = Column(String, unique=True, nullable=False, index=True)
    client_name = Column(String, nullable=True)
    gender = Column(String, nullable=False)
    weight = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    age = Column(Integer, nullable=False)
    body_fat_percentage = Column(Float, nullable=False)
    activity_level = Column(String, nullable=False)
    results = Column(Text, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
