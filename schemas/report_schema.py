"""Schemas for saved calculation reports."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from .metrics_schema import MetricsRequest


class ReportCreateRequest(MetricsRequest):
    """Metrics plus the name to print on the report."""

    client_name: Optional[str] = Field(None, max_length=120, examples=["Jane Doe"], description="Client name shown on exports")


class ReportResponse(BaseModel):
    """A stored report with its inputs (metric units) and results."""

    id: int
    report_id: str
    client_name: Optional[str]
    inputs: Dict[str, Any]
    results: Dict[str, Any]
    warnings: List[str] = []
    created_at: str


class ReportSummary(BaseModel):
    id: int
    report_id: str
    client_name: Optional[str]
    tdee: float
    bmi: float
    created_at: str


class ReportListResponse(BaseModel):
    """A page of reports plus the number of reports stored in total."""

    total_reports: int
    reports: List[ReportSummary]
