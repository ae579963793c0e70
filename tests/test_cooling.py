import pytest

from typewise_alert.breach import infer_breach
from typewise_alert.cooling import COOLING_LIMITS, classify_temperature_breach, limits_for
from typewise_alert.domain.models import BreachType, CoolingType


def test_every_cooling_type_has_limits() -> None:
    assert set(COOLING_LIMITS) == set(CoolingType)


def test_limits_table() -> None:
    assert limits_for(CoolingType.passive).upper == 35
    assert limits_for(CoolingType.hi_active).upper == 45
    assert limits_for(CoolingType.med_active).upper == 40
    assert {limits.lower for limits in COOLING_LIMITS.values()} == {0}


@pytest.mark.parametrize(
    ("cooling_type", "temperature", "expected"),
    [
        (CoolingType.passive, 25, BreachType.normal),
        (CoolingType.passive, 45, BreachType.too_high),
        (CoolingType.passive, -2, BreachType.too_low),
        (CoolingType.hi_active, 35, BreachType.normal),
        (CoolingType.hi_active, 50, BreachType.too_high),
        (CoolingType.hi_active, -3, BreachType.too_low),
        (CoolingType.med_active, 30, BreachType.normal),
        (CoolingType.med_active, 45, BreachType.too_high),
        (CoolingType.med_active, -1, BreachType.too_low),
    ],
)
def test_classify_temperature_breach(cooling_type, temperature, expected) -> None:
    assert classify_temperature_breach(cooling_type, temperature) == expected


@pytest.mark.parametrize("cooling_type", list(CoolingType))
def test_classify_matches_infer_breach(cooling_type) -> None:
    upper = limits_for(cooling_type).upper
    for temperature in (-0.5, 0, upper / 2, upper, upper + 0.5):
        assert classify_temperature_breach(cooling_type, temperature) == infer_breach(
            temperature, 0, upper
        )


def test_classify_boundaries_are_normal() -> None:
    assert classify_temperature_breach(CoolingType.passive, 0) == BreachType.normal
    assert classify_temperature_breach(CoolingType.passive, 35) == BreachType.normal
    assert classify_temperature_breach(CoolingType.med_active, 40) == BreachType.normal
    assert classify_temperature_breach(CoolingType.med_active, 40.01) == BreachType.too_high


def test_incomplete_limits_table_is_rejected(monkeypatch) -> None:
    from typewise_alert import cooling

    monkeypatch.delitem(cooling.COOLING_LIMITS, CoolingType.med_active)
    with pytest.raises(RuntimeError, match="med_active"):
        cooling._validate_limits_table()
