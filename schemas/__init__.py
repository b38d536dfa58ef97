"""Pydantic schema package for request and response models."""

from .metrics_schema import MetricsRequest, ValidationResponse, ConversionRequest, ConversionResponse
from .results_schema import NutritionPlanSchema, CalculationResponse, CaffeineResponse
from .report_schema import ReportCreateRequest, ReportResponse, ReportSummary, ReportListResponse

__all__ = [
    "MetricsRequest",
    "ValidationResponse",
    "ConversionRequest",
    "ConversionResponse",
    "NutritionPlanSchema",
    "CalculationResponse",
    "CaffeineResponse",
    "ReportCreateRequest",
    "ReportResponse",
    "ReportSummary",
    "ReportListResponse",
]
