"""Presentation-only calorie variants.

The result screens show lean/aggressive bulks, moderate/aggressive cuts and
a recomp option next to the three canonical plans. They are derived from the
same TDEE but use their own multipliers, kept apart from
`PLAN_CALORIE_MULTIPLIERS` so display tweaks never change the core plans.
"""

from typing import Dict

from core.logger import get_logger
from services.nutrition_calculator import (
    KCAL_PER_G_CARBS,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    CalculationResults,
    NutritionCalculator,
    NutritionPlan,
    UserMetrics,
    nutrition_calculator,
    round_half_up,
)

logger = get_logger("services.display_variants")

DISPLAY_CALORIE_MULTIPLIERS: Dict[str, float] = {
    "lean_bulk": 1.05,
    "aggressive_bulk": 1.15,
    "moderate_cut": 0.95,
    "aggressive_cut": 0.85,
    "recomp": 1.05,
}

# Which canonical plan supplies the protein figure for each variant
VARIANT_PROTEIN_SOURCE: Dict[str, str] = {
    "lean_bulk": "bulk",
    "aggressive_bulk": "bulk",
    "moderate_cut": "cut",
    "aggressive_cut": "cut",
    "recomp": "cut",
}


def build_variant(
    name: str,
    results: CalculationResults,
    metrics: UserMetrics,
    calculator: NutritionCalculator = nutrition_calculator,
) -> NutritionPlan:
    """Build a single display variant.

    Fat and carbs are computed from the unrounded variant calories and only
    rounded for display. Fiber steps off the unrounded carbs.
    """
    raw_calories = results.body_composition.tdee * DISPLAY_CALORIE_MULTIPLIERS[name]
    protein = results.nutrition[VARIANT_PROTEIN_SOURCE[name]].protein
    fat = calculator.calculate_fat(raw_calories, metrics.body_fat_percentage, metrics.gender)
    raw_carbs = (raw_calories - (protein * KCAL_PER_G_PROTEIN + fat * KCAL_PER_G_FAT)) / KCAL_PER_G_CARBS
    return NutritionPlan(
        calories=round_half_up(raw_calories),
        protein=protein,
        fat=round_half_up(fat),
        carbs=round_half_up(raw_carbs),
        fiber=calculator.calculate_fiber(raw_carbs),
    )


def build_display_variants(
    results: CalculationResults,
    metrics: UserMetrics,
    calculator: NutritionCalculator = nutrition_calculator,
) -> Dict[str, NutritionPlan]:
    """Return every display variant keyed by name."""
    variants = {name: build_variant(name, results, metrics, calculator) for name in DISPLAY_CALORIE_MULTIPLIERS}
    logger.debug("Display variants built: %s", list(variants))
    return variants
