"""Breach classification against a temperature range."""

from __future__ import annotations

from typewise_alert.domain.models import BreachType


def infer_breach(value: float, lower_limit: float, upper_limit: float) -> BreachType:
    """Classify ``value`` against the inclusive range ``[lower_limit, upper_limit]``.

    Callers must pass ``lower_limit <= upper_limit``; the limits are not
    checked here. Values equal to either limit are normal.
    """
    if value < lower_limit:
        return BreachType.too_low
    if value > upper_limit:
        return BreachType.too_high
    return BreachType.normal
