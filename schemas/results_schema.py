"""Schemas for calculation results."""

from pydantic import BaseModel
from typing import Any, Dict, List


class NutritionPlanSchema(BaseModel):
    """Daily macro targets; all values are whole numbers."""

    calories: int
    protein: int
    fat: int
    carbs: int
    fiber: int


class CalculationResponse(BaseModel):
    """Full calculation payload.

    `results` carries the camelCase bundle (bodyComposition, nutrition,
    hydration, heartRate). `display_variants` are the extra bulk/cut options
    shown alongside the canonical plans.
    """

    results: Dict[str, Any]
    display_variants: Dict[str, NutritionPlanSchema]
    bmi_category: str
    warnings: List[str] = []


class CaffeineResponse(BaseModel):
    day_type: str
    total_mg: float
    mg_per_kg: float
    coffee_teaspoons: int
    caffeine_from_coffee_mg: int
    additional_mg: float
