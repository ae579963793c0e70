"""Ports (interfaces) for alert delivery."""

from __future__ import annotations

from typing import Protocol

from typewise_alert.domain.models import BreachType


class NotifierPort(Protocol):
    def notify(self, breach: BreachType) -> None:
        ...
