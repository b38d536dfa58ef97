"""Calculator API router.

Stateless endpoints: validate metrics, run the nutrition calculation,
convert units and break down the caffeine protocol. Nothing here touches
the database.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from api.deps import get_calculator, get_validator
from core.logger import get_logger
from schemas import (
    MetricsRequest,
    ValidationResponse,
    ConversionRequest,
    ConversionResponse,
    CalculationResponse,
    CaffeineResponse,
)
from services.body_metrics import bmi_category
from services.display_variants import build_display_variants
from services.nutrition_calculator import NutritionCalculator
from services.supplements import caffeine_breakdown
from services.unit_converter import unit_converter
from services.validator import MetricsValidator

logger = get_logger("api.calculator")
router = APIRouter(prefix="/api", tags=["calculator"])


@router.post("/calculate", response_model=CalculationResponse)
def calculate(
    payload: MetricsRequest,
    calculator: NutritionCalculator = Depends(get_calculator),
    validator: MetricsValidator = Depends(get_validator),
):
    """Validate the metrics and return the full calculation.

    Imperial input is converted to metric before the calculator runs.

    Raises:
        MetricsValidationError: If the metrics fail range checks (422).
    """
    metrics, warnings = validator.validate_and_normalize(payload, payload.is_metric)
    results = calculator.calculate_nutrition(metrics)
    variants = build_display_variants(results, metrics, calculator)
    bmi = results.body_composition.bmi
    logger.info(
        "Calculated %s/%s: tdee=%.0f bmi=%.1f",
        metrics.gender,
        metrics.activity_level,
        results.body_composition.tdee,
        bmi,
    )
    return CalculationResponse(
        results=results.to_dict(),
        display_variants={name: asdict(plan) for name, plan in variants.items()},
        bmi_category=bmi_category(bmi),
        warnings=warnings,
    )


@router.post("/validate", response_model=ValidationResponse)
def validate(payload: MetricsRequest, validator: MetricsValidator = Depends(get_validator)):
    """Run the range checks only and report errors and warnings."""
    result = validator.validate_user_metrics(payload, payload.is_metric)
    return ValidationResponse(is_valid=result.is_valid, errors=result.errors, warnings=result.warnings)


@router.post("/convert", response_model=ConversionResponse)
def convert(payload: ConversionRequest):
    """Convert weight (kg/lbs) and height (cm/decimal feet) between systems."""
    to_metric = payload.to_metric
    if to_metric:
        convert_weight = unit_converter.convert_weight_to_metric
        convert_height = unit_converter.convert_height_to_metric
    else:
        convert_weight = unit_converter.convert_weight_from_metric
        convert_height = unit_converter.convert_height_from_metric

    weight = height = height_display = None
    if payload.weight is not None:
        weight = round(convert_weight(payload.weight, False), 2)
    if payload.height is not None:
        height = round(convert_height(payload.height, False), 2)
        height_cm = height if to_metric else payload.height
        height_display = unit_converter.format_height(height_cm, is_metric=to_metric)
    return ConversionResponse(
        weight=weight,
        weight_unit="kg" if to_metric else "lbs",
        height=height,
        height_unit="cm" if to_metric else "ft",
        height_display=height_display,
    )


@router.get("/supplements/caffeine", response_model=CaffeineResponse)
def caffeine(
    weight: float = Query(..., gt=0, description="Body weight"),
    day_type: str = Query("training", description="training or rest"),
    is_metric: bool = Query(True, description="True when weight is in kg"),
):
    """Return the caffeine protocol for a training or rest day."""
    weight_kg = unit_converter.convert_weight_to_metric(weight, is_metric)
    return CaffeineResponse(**asdict(caffeine_breakdown(weight_kg, day_type)))
