"""Caffeine protocol for training and rest days.

Daily intake is expressed as a whole number of teaspoons of instant coffee
(about 30 mg each), rounded up so the target is always met.
"""

import math
from dataclasses import dataclass

from core.config import CAFFEINE_INTAKE
from core.exceptions import ValidationError

COFFEE_TEASPOON_MG = 30


@dataclass(frozen=True)
class CaffeineBreakdown:
    """One day's caffeine plan.

    Teaspoons are rounded up, so coffee always covers the target and
    `additional_mg` is 0 for every input. The field stays in the payload
    so clients can show the "from other sources" line unconditionally.
    """

    day_type: str
    total_mg: float
    mg_per_kg: float
    coffee_teaspoons: int
    caffeine_from_coffee_mg: int
    additional_mg: float


def caffeine_breakdown(weight_kg: float, day_type: str = "training") -> CaffeineBreakdown:
    """Split the day's caffeine target into coffee teaspoons.

    Raises:
        ValidationError: For an unknown day type or a non-positive weight.
    """
    if day_type not in CAFFEINE_INTAKE:
        raise ValidationError(f"Unknown day type: {day_type}", field="day_type")
    if weight_kg <= 0:
        raise ValidationError("Weight must be greater than zero", field="weight")
    mg_per_kg = CAFFEINE_INTAKE[day_type] / weight_kg
    total = weight_kg * mg_per_kg
    teaspoons = math.ceil(total / COFFEE_TEASPOON_MG)
    from_coffee = teaspoons * COFFEE_TEASPOON_MG
    return CaffeineBreakdown(
        day_type=day_type,
        total_mg=total,
        mg_per_kg=mg_per_kg,
        coffee_teaspoons=teaspoons,
        caffeine_from_coffee_mg=from_coffee,
        additional_mg=max(0, total - from_coffee),
    )
