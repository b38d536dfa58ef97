"""Schemas for biometric input, validation and unit conversion."""

from pydantic import BaseModel, Field
from typing import List, Optional


class MetricsRequest(BaseModel):
    """Raw biometric input as entered by the user.

    Fields are optional so that missing values are reported by the metrics
    validator together with every other problem, instead of one at a time.
    """

    gender: Optional[str] = Field(None, examples=["male"], description="Gender (male/female)")
    weight: Optional[float] = Field(None, examples=[80.0], description="Weight in kg, or lbs when is_metric is false")
    height: Optional[float] = Field(None, examples=[180.0], description="Height in cm, or decimal feet when is_metric is false")
    age: Optional[int] = Field(None, examples=[30], description="Age in years (16-80)")
    body_fat_percentage: Optional[float] = Field(None, examples=[15.0], description="Body fat percentage (8-35)")
    activity_level: Optional[str] = Field(
        None,
        examples=["moderatelyActive"],
        description="Activity level: sedentary, lightlyActive, moderatelyActive, highlyActive",
    )
    is_metric: bool = Field(True, examples=[True], description="True for kg/cm input, false for lbs/ft")


class ValidationResponse(BaseModel):
    """Outcome of validating a `MetricsRequest`."""

    is_valid: bool
    errors: List[str]
    warnings: List[str]


class ConversionRequest(BaseModel):
    """Weight and/or height to convert between unit systems."""

    weight: Optional[float] = Field(None, gt=0, examples=[176.0], description="Weight in the source unit system")
    height: Optional[float] = Field(None, gt=0, examples=[5.9], description="Height in the source unit system")
    to_metric: bool = Field(True, examples=[True], description="True converts lbs/ft to kg/cm, false the reverse")


class ConversionResponse(BaseModel):
    weight: Optional[float] = None
    weight_unit: str
    height: Optional[float] = None
    height_unit: str
    height_display: Optional[str] = None
