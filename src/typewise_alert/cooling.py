"""Temperature limits per cooling type."""

from __future__ import annotations

import logging
from typing import Dict

from typewise_alert.breach import infer_breach
from typewise_alert.domain.models import BreachType, CoolingType, TemperatureLimits

logger = logging.getLogger(__name__)

COOLING_LIMITS: Dict[CoolingType, TemperatureLimits] = {
    CoolingType.passive: TemperatureLimits(lower=0, upper=35),
    CoolingType.hi_active: TemperatureLimits(lower=0, upper=45),
    CoolingType.med_active: TemperatureLimits(lower=0, upper=40),
}


def _validate_limits_table() -> None:
    missing = set(CoolingType) - set(COOLING_LIMITS)
    if missing:
        names = sorted(member.value for member in missing)
        raise RuntimeError(f"No temperature limits defined for cooling types: {names}")


_validate_limits_table()


def limits_for(cooling_type: CoolingType) -> TemperatureLimits:
    return COOLING_LIMITS[cooling_type]


def classify_temperature_breach(cooling_type: CoolingType, temperature_in_c: float) -> BreachType:
    limits = limits_for(cooling_type)
    breach = infer_breach(temperature_in_c, limits.lower, limits.upper)
    logger.debug(
        "Classified %.2f C for %s cooling as %s",
        temperature_in_c,
        cooling_type.value,
        breach.name,
    )
    return breach
