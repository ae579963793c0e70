"""Composition root for typewise-alert."""

from __future__ import annotations

from typing import Optional, TextIO

from typewise_alert.config import AlertConfig
from typewise_alert.domain.models import AlertTarget
from typewise_alert.infra.controller_notifier import ControllerNotifier
from typewise_alert.infra.email_notifier import EmailNotifier
from typewise_alert.usecases.check_and_alert import AlertRouter


def build_router(config: AlertConfig, stream: Optional[TextIO] = None) -> AlertRouter:
    return AlertRouter(
        {
            AlertTarget.to_controller: ControllerNotifier(
                header=config.controller.header,
                stream=stream,
            ),
            AlertTarget.to_email: EmailNotifier(
                recipient=config.email.recipient,
                stream=stream,
            ),
        }
    )
