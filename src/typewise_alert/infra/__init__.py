"""Notifier implementations."""

from typewise_alert.infra.controller_notifier import ControllerNotifier
from typewise_alert.infra.email_notifier import EmailNotifier

__all__ = ["ControllerNotifier", "EmailNotifier"]
