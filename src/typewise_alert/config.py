"""Configuration loading for typewise-alert."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from typewise_alert.domain.models import AlertTarget
from typewise_alert.infra.controller_notifier import DEFAULT_HEADER
from typewise_alert.infra.email_notifier import DEFAULT_RECIPIENT
from typewise_alert.yaml_utils import load_yaml


class LogLevel(str, Enum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


class EmailConfig(BaseModel):
    recipient: str = DEFAULT_RECIPIENT

    @field_validator("recipient")
    @classmethod
    def validate_recipient(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError(f"Invalid email recipient: {value!r}")
        return value


class ControllerConfig(BaseModel):
    header: int = Field(default=DEFAULT_HEADER, ge=0, le=0xFFFF)


class AlertConfig(BaseModel):
    version: int = 1
    email: EmailConfig = EmailConfig()
    controller: ControllerConfig = ControllerConfig()
    default_target: AlertTarget = AlertTarget.to_controller
    log_level: LogLevel = LogLevel.warning

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: int) -> int:
        if value != 1:
            raise ValueError("Only version 1 config is supported")
        return value


def load_config(path: str) -> AlertConfig:
    payload = load_yaml(path)
    return AlertConfig(**payload)
