"""Unit conversion between imperial and metric body measurements.

Weight is entered in kilograms or pounds, height in centimetres or decimal
feet (5.5 ft is five and a half feet). The calculator only ever sees metric
values, so everything imperial goes through here first.
"""

import math
from typing import Tuple

LBS_TO_KG = 0.453592
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12

METRIC_WEIGHT_RANGE = (30, 300)      # kg
IMPERIAL_WEIGHT_RANGE = (66, 661)    # lbs
METRIC_HEIGHT_RANGE = (120, 250)     # cm
IMPERIAL_HEIGHT_RANGE = (3.9, 8.2)   # ft


class UnitConverter:
    """Stateless helpers for weight and height conversion."""

    @staticmethod
    def lbs_to_kg(lbs: float) -> float:
        return lbs * LBS_TO_KG

    @staticmethod
    def kg_to_lbs(kg: float) -> float:
        return kg / LBS_TO_KG

    @staticmethod
    def feet_to_inches(feet: float) -> float:
        """Convert decimal feet to inches, keeping the fractional foot."""
        whole_feet = math.floor(feet)
        inches = (feet - whole_feet) * INCHES_PER_FOOT
        return whole_feet * INCHES_PER_FOOT + inches

    @staticmethod
    def inches_to_cm(inches: float) -> float:
        return inches * CM_PER_INCH

    @classmethod
    def feet_to_cm(cls, feet: float) -> float:
        return cls.inches_to_cm(cls.feet_to_inches(feet))

    @staticmethod
    def cm_to_feet(cm: float) -> float:
        return cm / CM_PER_INCH / INCHES_PER_FOOT

    @staticmethod
    def feet_inches_to_cm(feet: int, inches: float = 0) -> float:
        return (feet * INCHES_PER_FOOT + inches) * CM_PER_INCH

    @staticmethod
    def cm_to_feet_inches(cm: float) -> Tuple[int, int]:
        """Split a height into whole feet and rounded inches.

        Rounding can yield 12 inches; that carries over into the next foot.
        """
        total_inches = cm / CM_PER_INCH
        feet = math.floor(total_inches / INCHES_PER_FOOT)
        inches = int(math.floor(total_inches % INCHES_PER_FOOT + 0.5))
        if inches == INCHES_PER_FOOT:
            feet, inches = feet + 1, 0
        return feet, inches

    @classmethod
    def convert_weight_to_metric(cls, weight: float, is_metric: bool) -> float:
        return weight if is_metric else cls.lbs_to_kg(weight)

    @classmethod
    def convert_height_to_metric(cls, height: float, is_metric: bool) -> float:
        return height if is_metric else cls.feet_to_cm(height)

    @classmethod
    def convert_weight_from_metric(cls, weight_kg: float, is_metric: bool) -> float:
        return weight_kg if is_metric else cls.kg_to_lbs(weight_kg)

    @classmethod
    def convert_height_from_metric(cls, height_cm: float, is_metric: bool) -> float:
        return height_cm if is_metric else cls.cm_to_feet(height_cm)

    @staticmethod
    def weight_range(is_metric: bool) -> Tuple[float, float]:
        return METRIC_WEIGHT_RANGE if is_metric else IMPERIAL_WEIGHT_RANGE

    @staticmethod
    def height_range(is_metric: bool) -> Tuple[float, float]:
        return METRIC_HEIGHT_RANGE if is_metric else IMPERIAL_HEIGHT_RANGE

    @classmethod
    def format_weight(cls, weight_kg: float, is_metric: bool = True) -> str:
        if is_metric:
            return f"{weight_kg:g} kg"
        return f"{int(math.floor(cls.kg_to_lbs(weight_kg) + 0.5))} lbs"

    @classmethod
    def format_height(cls, height_cm: float, is_metric: bool = True) -> str:
        if is_metric:
            return f"{height_cm:g} cm"
        feet, inches = cls.cm_to_feet_inches(height_cm)
        return f"{feet}'{inches}\""


unit_converter = UnitConverter()
__all__ = ["UnitConverter", "unit_converter", "LBS_TO_KG", "CM_PER_INCH"]
