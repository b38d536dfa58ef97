"""Nutrition calculation engine.

Turns validated, metric `UserMetrics` into a `CalculationResults` bundle:
BMR, TDEE, BMI, lean mass, the three canonical macro plans, hydration needs
and heart-rate zones. Everything here is plain arithmetic with no I/O.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import Dict, Tuple

from core.config import ACTIVITY_LEVELS, BODY_FAT_BANDS, GOALS
from core.exceptions import InvalidActivityLevelError, ValidationError
from core.logger import get_logger

logger = get_logger("services.nutrition_calculator")

# Non-standard values, kept as shipped
ACTIVITY_MULTIPLIERS: Dict[str, float] = {
    "sedentary": 1.35,
    "lightlyActive": 1.65,
    "moderatelyActive": 1.9,
    "highlyActive": 2.1,
}

# Core plan calories as a fraction of TDEE. Display-only variants live in
# services.display_variants and must not be mixed in here.
PLAN_CALORIE_MULTIPLIERS: Dict[str, float] = {
    "bulk": 1.10,
    "cut": 0.90,
    "maintain": 1.0,
}

BODY_FAT_BAND_WIDTH = 10

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

FIBER_MIN_G = 25
FIBER_MAX_G = 75

INTRA_WORKOUT_L = 0.4
POST_WORKOUT_L = 1.25
# intra + post
WORKOUT_EXTRA_L = 1.65


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (``Math.round`` semantics)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class UserMetrics:
    """Biometric input in metric units."""

    gender: str
    weight: float
    height: float
    age: int
    body_fat_percentage: float
    activity_level: str


@dataclass(frozen=True)
class NutritionPlan:
    calories: int
    protein: int
    fat: int
    carbs: int
    fiber: int


@dataclass(frozen=True)
class BodyComposition:
    bmr: float
    tdee: float
    lean_body_mass: float
    bmi: float


@dataclass(frozen=True)
class HydrationNeeds:
    """Daily fluid needs in litres."""

    baseline: float
    pre_workout: float
    intra_workout: float
    post_workout: float
    total: float


@dataclass(frozen=True)
class HeartRate:
    maximum: int
    liss_zone: float


@dataclass(frozen=True)
class CalculationResults:
    body_composition: BodyComposition
    bulk: NutritionPlan
    cut: NutritionPlan
    maintain: NutritionPlan
    regular_hydration: HydrationNeeds
    training_hydration: HydrationNeeds
    heart_rate: HeartRate

    @property
    def nutrition(self) -> Dict[str, NutritionPlan]:
        return {"bulk": self.bulk, "cut": self.cut, "maintain": self.maintain}

    def to_dict(self) -> dict:
        """Serialize to the camelCase shape consumed by clients."""
        bc = self.body_composition
        return {
            "bodyComposition": {
                "bmr": bc.bmr,
                "tdee": bc.tdee,
                "leanBodyMass": bc.lean_body_mass,
                "bmi": bc.bmi,
            },
            "nutrition": {goal: asdict(plan) for goal, plan in self.nutrition.items()},
            "hydration": {
                "regular": _hydration_to_dict(self.regular_hydration),
                "training": _hydration_to_dict(self.training_hydration),
            },
            "heartRate": {
                "maximum": self.heart_rate.maximum,
                "lissZone": self.heart_rate.liss_zone,
            },
        }


def _hydration_to_dict(h: HydrationNeeds) -> dict:
    return {
        "baseline": h.baseline,
        "preWorkout": h.pre_workout,
        "intraWorkout": h.intra_workout,
        "postWorkout": h.post_workout,
        "total": h.total,
    }


class NutritionCalculator:
    """Class-based nutrition calculator used across the app."""

    def calculate_bmr(self, metrics: UserMetrics) -> float:
        """Calculate BMR using the Mifflin-St Jeor equation."""
        base = 10 * metrics.weight + 6.25 * metrics.height - 5 * metrics.age
        if metrics.gender == "male":
            return base + 5
        return base - 161

    def calculate_tdee(self, bmr: float, activity_level: str) -> float:
        """Estimate TDEE from BMR and activity multiplier.

        Raises:
            InvalidActivityLevelError: If the level has no multiplier.
        """
        try:
            multiplier = ACTIVITY_MULTIPLIERS[activity_level]
        except KeyError:
            raise InvalidActivityLevelError(activity_level, list(ACTIVITY_LEVELS))
        val = bmr * multiplier
        logger.debug("TDEE calculated: %s", val)
        return val

    def body_fat_ratio(self, body_fat_percentage: float, gender: str) -> float:
        """Position of body fat within the gender band, 0 (leanest) to 1.

        The value is clamped into the band first, so readings outside it
        behave like the nearest band edge.
        """
        band_min, band_max = BODY_FAT_BANDS["male" if gender == "male" else "female"]
        clamped = max(band_min, min(band_max, body_fat_percentage))
        return (clamped - band_min) / BODY_FAT_BAND_WIDTH

    def calculate_protein(self, metrics: UserMetrics, goal: str) -> float:
        """Daily protein in grams; leaner people get more per kilogram.

        Args:
            metrics: Validated metric input.
            goal: One of 'bulk', 'cut' or 'maintain'.

        Returns:
            Protein target in grams (unrounded).

        Raises:
            ValidationError: If `goal` is not a known plan.
        """
        if goal not in GOALS:
            raise ValidationError(f"Unknown goal: {goal}", field="goal")
        ratio = self.body_fat_ratio(metrics.body_fat_percentage, metrics.gender)
        if goal == "cut":
            # 2.7 g/kg at the lean end down to 1.8 g/kg
            multiplier = 2.7 - ratio * 0.9
        elif goal == "bulk":
            # 2.2 g/kg down to 1.6 g/kg
            multiplier = 2.2 - ratio * 0.6
        else:
            multiplier = 1.6
        return metrics.weight * multiplier

    def calculate_fat(self, calories: float, body_fat_percentage: float, gender: str) -> float:
        """Daily fat in grams, 20-30% of calories rising with body fat."""
        ratio = self.body_fat_ratio(body_fat_percentage, gender)
        fat_percent = 20 + ratio * 10
        return (calories * fat_percent / 100) / KCAL_PER_G_FAT

    def calculate_fiber(self, carbs: float) -> int:
        """Fiber step function: 25 g plus 5 g per 50 g of carbs, capped at 75 g."""
        steps = max(0, math.floor(carbs / 50))
        return round_half_up(min(FIBER_MIN_G + steps * 5, FIBER_MAX_G))

    def calculate_carbs(self, calories: float, protein: float, fat: float) -> int:
        """Carbohydrate grams filling the calories left after protein and fat."""
        remaining = calories - (protein * KCAL_PER_G_PROTEIN + fat * KCAL_PER_G_FAT)
        return round_half_up(remaining / KCAL_PER_G_CARBS)

    def calculate_lean_body_mass(self, metrics: UserMetrics) -> float:
        return metrics.weight * (1 - metrics.body_fat_percentage / 100)

    def calculate_bmi(self, height_cm: float, weight_kg: float) -> float:
        """Calculate BMI from height in cm and weight in kg.

        Raises:
            ValidationError: If height is not positive.
        """
        h_m = height_cm / 100.0
        if h_m <= 0:
            raise ValidationError("Height must be greater than zero", field="height")
        return weight_kg / (h_m * h_m)

    def calculate_hydration(self, tdee: float, weight_kg: float) -> Tuple[HydrationNeeds, HydrationNeeds]:
        """Return (regular, training) daily fluid needs in litres."""
        baseline = tdee / 1000
        regular = HydrationNeeds(
            baseline=baseline,
            pre_workout=0,
            intra_workout=0,
            post_workout=0,
            total=baseline,
        )
        pre_workout = (5 * weight_kg) / 1000
        training = HydrationNeeds(
            baseline=baseline,
            pre_workout=pre_workout,
            intra_workout=INTRA_WORKOUT_L,
            post_workout=POST_WORKOUT_L,
            total=baseline + pre_workout + WORKOUT_EXTRA_L,
        )
        return regular, training

    def calculate_heart_rate(self, age: int) -> HeartRate:
        maximum = 220 - age
        return HeartRate(maximum=maximum, liss_zone=maximum * 0.6)

    def build_plan(self, metrics: UserMetrics, tdee: float, goal: str) -> NutritionPlan:
        """Assemble one canonical macro plan for the given goal."""
        calories = round_half_up(tdee * PLAN_CALORIE_MULTIPLIERS[goal])
        protein = round_half_up(self.calculate_protein(metrics, goal))
        fat = round_half_up(self.calculate_fat(calories, metrics.body_fat_percentage, metrics.gender))
        carbs = self.calculate_carbs(calories, protein, fat)
        fiber = self.calculate_fiber(carbs)
        return NutritionPlan(calories=calories, protein=protein, fat=fat, carbs=carbs, fiber=fiber)

    def calculate_nutrition(self, metrics: UserMetrics) -> CalculationResults:
        """Compute the full result bundle for one set of metrics."""
        bmr = self.calculate_bmr(metrics)
        tdee = self.calculate_tdee(bmr, metrics.activity_level)
        body = BodyComposition(
            bmr=bmr,
            tdee=tdee,
            lean_body_mass=self.calculate_lean_body_mass(metrics),
            bmi=self.calculate_bmi(metrics.height, metrics.weight),
        )
        regular, training = self.calculate_hydration(tdee, metrics.weight)
        results = CalculationResults(
            body_composition=body,
            bulk=self.build_plan(metrics, tdee, "bulk"),
            cut=self.build_plan(metrics, tdee, "cut"),
            maintain=self.build_plan(metrics, tdee, "maintain"),
            regular_hydration=regular,
            training_hydration=training,
            heart_rate=self.calculate_heart_rate(metrics.age),
        )
        logger.debug("Nutrition calculated: bmr=%s tdee=%s bmi=%s", bmr, tdee, body.bmi)
        return results


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = [
    "ACTIVITY_MULTIPLIERS",
    "PLAN_CALORIE_MULTIPLIERS",
    "UserMetrics",
    "NutritionPlan",
    "BodyComposition",
    "HydrationNeeds",
    "HeartRate",
    "CalculationResults",
    "NutritionCalculator",
    "nutrition_calculator",
    "round_half_up",
]
