"""Tests for the caffeine protocol."""
import pytest

from core.exceptions import ValidationError
from services.supplements import caffeine_breakdown


def test_training_day_breakdown():
    b = caffeine_breakdown(80, "training")
    assert b.total_mg == 250
    assert b.mg_per_kg == pytest.approx(3.125)
    assert b.coffee_teaspoons == 9
    assert b.caffeine_from_coffee_mg == 270
    assert b.additional_mg == 0


def test_rest_day_breakdown():
    b = caffeine_breakdown(80, "rest")
    assert b.total_mg == 150
    assert b.coffee_teaspoons == 5
    assert b.caffeine_from_coffee_mg == 150
    assert b.additional_mg == 0


def test_unknown_day_type_rejected():
    with pytest.raises(ValidationError) as exc_info:
        caffeine_breakdown(80, "cheat")
    assert exc_info.value.details == {"field": "day_type"}


@pytest.mark.parametrize("weight", [45, 62.5, 80, 117.3, 300])
@pytest.mark.parametrize("day_type", ["training", "rest"])
def test_coffee_always_covers_target(weight, day_type):
    b = caffeine_breakdown(weight, day_type)
    assert b.caffeine_from_coffee_mg >= b.total_mg
    assert b.additional_mg == 0
