"""Tests for metric validation and normalization."""
from types import SimpleNamespace

import pytest

from core.exceptions import MetricsValidationError
from services.validator import MESSAGES, MetricsValidator

validator = MetricsValidator()


def _raw(**overrides):
    values = dict(
        gender="male",
        weight=80,
        height=180,
        age=30,
        body_fat_percentage=15,
        activity_level="moderatelyActive",
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_valid_metrics_have_no_errors_or_warnings():
    result = validator.validate_user_metrics(_raw())
    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []


def test_missing_fields_report_every_error():
    result = validator.validate_user_metrics(SimpleNamespace())
    assert not result.is_valid
    assert len(result.errors) == 6
    assert MESSAGES["gender_required"] in result.errors
    assert MESSAGES["activity_required"] in result.errors


@pytest.mark.parametrize("field,value", [
    ("age", 15),
    ("age", 81),
    ("weight", 29),
    ("weight", 301),
    ("height", 119),
    ("height", 251),
    ("body_fat_percentage", 7),
    ("body_fat_percentage", 36),
    ("weight", float("nan")),
    ("height", 0),
    ("gender", "other"),
    ("activity_level", "veryActive"),
])
def test_out_of_range_values_are_errors(field, value):
    result = validator.validate_user_metrics(_raw(**{field: value}))
    assert not result.is_valid
    assert len(result.errors) == 1


@pytest.mark.parametrize("is_metric,field,inside,outside", [
    (True, "age", 16, 15),
    (True, "age", 80, 81),
    (True, "body_fat_percentage", 8, 7.9),
    (True, "body_fat_percentage", 35, 35.1),
    (True, "weight", 30, 29.9),
    (True, "weight", 300, 300.1),
    (True, "height", 120, 119.9),
    (True, "height", 250, 250.1),
    (False, "weight", 66, 65.9),
    (False, "weight", 661, 661.1),
    (False, "height", 3.9, 3.8),
    (False, "height", 8.2, 8.3),
])
def test_range_bounds_are_inclusive(is_metric, field, inside, outside):
    base = {} if is_metric else {"weight": 176, "height": 5.9}
    ok = validator.validate_user_metrics(_raw(**{**base, field: inside}), is_metric=is_metric)
    assert ok.is_valid, ok.errors
    rejected = validator.validate_user_metrics(_raw(**{**base, field: outside}), is_metric=is_metric)
    assert not rejected.is_valid
    assert len(rejected.errors) == 1


def test_imperial_ranges():
    ok = validator.validate_user_metrics(_raw(weight=176, height=5.9), is_metric=False)
    assert ok.is_valid
    wrong_units = validator.validate_user_metrics(_raw(weight=30, height=180), is_metric=False)
    assert not wrong_units.is_valid
    assert any("lbs" in e for e in wrong_units.errors)
    assert any("ft" in e for e in wrong_units.errors)


def test_gender_band_warning():
    result = validator.validate_user_metrics(_raw(body_fat_percentage=25))
    assert result.is_valid
    assert any("10-20%" in w for w in result.warnings)

    female = validator.validate_user_metrics(_raw(gender="female", body_fat_percentage=15, weight=60, height=165))
    assert any("18-28%" in w for w in female.warnings)


def test_high_body_fat_senior_and_bmi_warnings():
    result = validator.validate_user_metrics(_raw(body_fat_percentage=32, age=70, weight=110, height=180))
    assert result.is_valid
    assert MESSAGES["body_fat_high"] in result.warnings
    assert MESSAGES["senior"] in result.warnings
    assert MESSAGES["bmi_obese"] in result.warnings

    thin = validator.validate_user_metrics(_raw(weight=55, height=185))
    assert MESSAGES["bmi_underweight"] in thin.warnings


def test_validate_and_normalize_converts_imperial():
    metrics, warnings = validator.validate_and_normalize(_raw(weight=176, height=6), is_metric=False)
    assert metrics.weight == pytest.approx(79.83, abs=0.01)
    assert metrics.height == pytest.approx(182.88)
    assert metrics.age == 30
    assert warnings == []


def test_validate_and_normalize_raises_with_all_messages():
    with pytest.raises(MetricsValidationError) as exc_info:
        validator.validate_and_normalize(_raw(age=90, body_fat_percentage=40))
    exc = exc_info.value
    assert exc.status_code == 422
    assert len(exc.errors) == 2
    assert exc.details["errors"] == exc.errors
    assert any("10-20%" in w for w in exc.details["warnings"])
