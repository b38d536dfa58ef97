"""Tests for the stateless calculator endpoints."""
import pytest

from api.calculator import caffeine, calculate, convert, validate
from core.exceptions import MetricsValidationError
from schemas import ConversionRequest, MetricsRequest
from services.nutrition_calculator import nutrition_calculator
from services.validator import metrics_validator


def _request(**overrides):
    values = dict(
        gender="male",
        weight=80,
        height=180,
        age=30,
        body_fat_percentage=15,
        activity_level="moderatelyActive",
    )
    values.update(overrides)
    return MetricsRequest(**values)


def test_calculate_returns_plans_and_variants():
    res = calculate(_request(), calculator=nutrition_calculator, validator=metrics_validator)
    assert res.results["nutrition"]["bulk"] == {
        "calories": 3720, "protein": 152, "fat": 103, "carbs": 546, "fiber": 75,
    }
    assert res.results["heartRate"]["maximum"] == 190
    assert res.display_variants["aggressive_cut"].calories == 2875
    assert res.bmi_category == "normal weight"
    assert res.warnings == []


def test_calculate_imperial_matches_metric():
    metric = calculate(_request(height=182.88), calculator=nutrition_calculator, validator=metrics_validator)
    imperial = calculate(
        _request(weight=80 / 0.453592, height=6, is_metric=False),
        calculator=nutrition_calculator,
        validator=metrics_validator,
    )
    assert imperial.results["nutrition"] == metric.results["nutrition"]


def test_calculate_rejects_invalid_metrics():
    with pytest.raises(MetricsValidationError) as exc_info:
        calculate(_request(gender=None, age=100), calculator=nutrition_calculator, validator=metrics_validator)
    assert len(exc_info.value.errors) == 2


def test_validate_reports_without_raising():
    res = validate(_request(body_fat_percentage=40), validator=metrics_validator)
    assert not res.is_valid
    assert len(res.errors) == 1

    ok = validate(_request(body_fat_percentage=25), validator=metrics_validator)
    assert ok.is_valid
    assert len(ok.warnings) == 1


def test_convert_to_metric_and_back():
    to_metric = convert(ConversionRequest(weight=176, height=6, to_metric=True))
    assert to_metric.weight == pytest.approx(79.83)
    assert to_metric.height == pytest.approx(182.88)
    assert to_metric.height_unit == "cm"
    assert to_metric.height_display == "182.88 cm"

    to_imperial = convert(ConversionRequest(weight=80, height=180, to_metric=False))
    assert to_imperial.weight == pytest.approx(176.37)
    assert to_imperial.weight_unit == "lbs"
    assert to_imperial.height_display == "5'11\""


def test_convert_weight_only():
    res = convert(ConversionRequest(weight=100, to_metric=True))
    assert res.height is None
    assert res.height_display is None


def test_caffeine_endpoint_converts_imperial_weight():
    res = caffeine(weight=80, day_type="rest", is_metric=True)
    assert res.total_mg == pytest.approx(150)
    assert res.coffee_teaspoons == 5

    imperial = caffeine(weight=176, day_type="training", is_metric=False)
    assert imperial.total_mg == pytest.approx(250)
    assert imperial.mg_per_kg == pytest.approx(250 / 79.832, abs=1e-3)
