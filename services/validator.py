"""Validation of raw biometric input.

Checks user-entered metrics (metric or imperial) against the accepted
ranges, collects blocking errors and advisory warnings, and converts valid
input into the metric `UserMetrics` the calculator expects.
"""

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional

from core.config import (
    ACTIVITY_LEVELS,
    AGE_RANGE,
    BMI_CATEGORIES,
    BODY_FAT_BANDS,
    BODY_FAT_HIGH_WARNING,
    BODY_FAT_RANGE,
    GENDERS,
    SENIOR_AGE,
)
from core.exceptions import MetricsValidationError
from core.logger import get_logger
from services.nutrition_calculator import UserMetrics
from services.unit_converter import UnitConverter

logger = get_logger("services.validator")

MESSAGES = {
    "gender_required": "Please select a gender (male or female)",
    "weight_range": "Weight must be between {min:g} and {max:g} {unit}",
    "height_range": "Height must be between {min:g} and {max:g} {unit}",
    "age_range": "Age must be between {min} and {max} years",
    "activity_required": "Please select a valid activity level",
    "body_fat_range": "Body fat must be between {min}% and {max}%",
    "body_fat_gender_range": (
        "Body fat outside the typical {min}-{max}% range for {gender}s; "
        "macros are calculated at the nearest limit"
    ),
    "body_fat_low": "Body fat below 8% is very low and may be unsafe to maintain",
    "body_fat_high": "Body fat above 30%; consider consulting a healthcare professional",
    "senior": "Age over 65: consult a healthcare professional before changing diet or training",
    "bmi_underweight": "BMI below 18.5 indicates underweight",
    "bmi_obese": "BMI above 30 indicates obesity",
}


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _number(value: Any) -> Optional[float]:
    """Return a usable number or None for missing, zero or non-finite values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(num) or num == 0:
        return None
    return num


class MetricsValidator:
    """Range checks for user metrics in either unit system."""

    def __init__(self, converter: UnitConverter = None):
        self.converter = converter or UnitConverter()

    def validate_user_metrics(self, metrics: Any, is_metric: bool = True) -> ValidationResult:
        """Validate raw metrics.

        Args:
            metrics: Object exposing gender, weight, height, age,
                body_fat_percentage and activity_level attributes; any of
                them may be missing.
            is_metric: Whether weight/height are kg/cm (True) or lbs/ft.

        Returns:
            `ValidationResult` with errors (blocking) and warnings.
        """
        errors: List[str] = []
        warnings: List[str] = []

        gender = getattr(metrics, "gender", None)
        weight = _number(getattr(metrics, "weight", None))
        height = _number(getattr(metrics, "height", None))
        age = _number(getattr(metrics, "age", None))
        body_fat = _number(getattr(metrics, "body_fat_percentage", None))
        activity_level = getattr(metrics, "activity_level", None)

        weight_min, weight_max = self.converter.weight_range(is_metric)
        height_min, height_max = self.converter.height_range(is_metric)

        if gender not in GENDERS:
            errors.append(MESSAGES["gender_required"])

        if weight is None or weight < weight_min or weight > weight_max:
            errors.append(MESSAGES["weight_range"].format(
                min=weight_min, max=weight_max, unit="kg" if is_metric else "lbs"))

        if height is None or height < height_min or height > height_max:
            errors.append(MESSAGES["height_range"].format(
                min=height_min, max=height_max, unit="cm" if is_metric else "ft"))

        if age is None or age < AGE_RANGE[0] or age > AGE_RANGE[1]:
            errors.append(MESSAGES["age_range"].format(min=AGE_RANGE[0], max=AGE_RANGE[1]))

        if activity_level not in ACTIVITY_LEVELS:
            errors.append(MESSAGES["activity_required"])

        if body_fat is None or body_fat < BODY_FAT_RANGE[0] or body_fat > BODY_FAT_RANGE[1]:
            errors.append(MESSAGES["body_fat_range"].format(min=BODY_FAT_RANGE[0], max=BODY_FAT_RANGE[1]))

        if gender in GENDERS and body_fat is not None:
            band_min, band_max = BODY_FAT_BANDS[gender]
            if body_fat < band_min or body_fat > band_max:
                warnings.append(MESSAGES["body_fat_gender_range"].format(
                    min=band_min, max=band_max, gender=gender))

        if body_fat is not None and body_fat < BODY_FAT_RANGE[0]:
            warnings.append(MESSAGES["body_fat_low"])
        if body_fat is not None and body_fat > BODY_FAT_HIGH_WARNING:
            warnings.append(MESSAGES["body_fat_high"])

        if age is not None and age > SENIOR_AGE:
            warnings.append(MESSAGES["senior"])

        if weight is not None and height is not None:
            weight_kg = self.converter.convert_weight_to_metric(weight, is_metric)
            height_cm = self.converter.convert_height_to_metric(height, is_metric)
            bmi = weight_kg / (height_cm / 100) ** 2
            if bmi < BMI_CATEGORIES["underweight"]:
                warnings.append(MESSAGES["bmi_underweight"])
            elif bmi > BMI_CATEGORIES["overweight"]:
                warnings.append(MESSAGES["bmi_obese"])

        result = ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
        if not result.is_valid:
            logger.info("Metrics rejected: %s", errors)
        return result

    def normalize_metrics(self, metrics: Any, is_metric: bool = True) -> UserMetrics:
        """Convert already-validated raw input to metric `UserMetrics`."""
        return UserMetrics(
            gender=metrics.gender,
            weight=self.converter.convert_weight_to_metric(float(metrics.weight), is_metric),
            height=self.converter.convert_height_to_metric(float(metrics.height), is_metric),
            age=int(metrics.age),
            body_fat_percentage=float(metrics.body_fat_percentage),
            activity_level=metrics.activity_level,
        )

    def validate_and_normalize(self, metrics: Any, is_metric: bool = True):
        """Validate and convert in one step.

        Returns:
            Tuple of (`UserMetrics`, warnings).

        Raises:
            MetricsValidationError: If any blocking error was found.
        """
        result = self.validate_user_metrics(metrics, is_metric)
        if not result.is_valid:
            raise MetricsValidationError(result.errors, result.warnings)
        return self.normalize_metrics(metrics, is_metric), result.warnings


metrics_validator = MetricsValidator()
__all__ = ["ValidationResult", "MetricsValidator", "metrics_validator", "MESSAGES"]
