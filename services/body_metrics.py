"""BMI classification helpers."""

from core.config import BMI_CATEGORIES


def bmi_category(bmi: float) -> str:
    """Return the WHO-style label for a BMI value."""
    if bmi < BMI_CATEGORIES["underweight"]:
        return "underweight"
    if bmi < BMI_CATEGORIES["normal"]:
        return "normal weight"
    if bmi < BMI_CATEGORIES["overweight"]:
        return "overweight"
    return "obese"
