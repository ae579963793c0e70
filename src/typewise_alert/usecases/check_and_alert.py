"""Check a battery temperature and alert the selected target."""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from typewise_alert.cooling import classify_temperature_breach
from typewise_alert.domain.models import AlertTarget, BatteryCharacter, BreachType
from typewise_alert.domain.ports import NotifierPort
from typewise_alert.infra.controller_notifier import ControllerNotifier
from typewise_alert.infra.email_notifier import EmailNotifier

logger = logging.getLogger(__name__)


class AlertRouter:
    """Dispatch breach classifications to one notifier per alert target."""

    def __init__(self, notifiers: Mapping[AlertTarget, NotifierPort]) -> None:
        missing = set(AlertTarget) - set(notifiers)
        if missing:
            names = sorted(target.value for target in missing)
            raise ValueError(f"Missing notifiers for alert targets: {names}")
        self._notifiers: Dict[AlertTarget, NotifierPort] = dict(notifiers)

    def notifier_for(self, target: AlertTarget) -> NotifierPort:
        return self._notifiers[target]

    def check_and_alert(
        self,
        target: AlertTarget,
        battery: BatteryCharacter,
        temperature_in_c: float,
    ) -> BreachType:
        breach = classify_temperature_breach(battery.cooling_type, temperature_in_c)
        logger.debug("Routing %s to %s", breach.name, target.value)
        self.notifier_for(target).notify(breach)
        return breach


def default_notifiers() -> Dict[AlertTarget, NotifierPort]:
    return {
        AlertTarget.to_controller: ControllerNotifier(),
        AlertTarget.to_email: EmailNotifier(),
    }


def check_and_alert(
    target: AlertTarget,
    battery: BatteryCharacter,
    temperature_in_c: float,
    *,
    router: Optional[AlertRouter] = None,
) -> BreachType:
    router = router or AlertRouter(default_notifiers())
    return router.check_and_alert(target, battery, temperature_in_c)
