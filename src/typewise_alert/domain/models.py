"""Domain models for battery temperature alerting."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

BRAND_MAX_LENGTH = 47


class CoolingType(str, Enum):
    """Battery thermal management mode, declared in controller order 0..2."""

    passive = "passive"
    hi_active = "hi_active"
    med_active = "med_active"


class BreachType(int, Enum):
    """Breach classification; the integer value is sent in controller frames."""

    normal = 0
    too_low = 1
    too_high = 2


class AlertTarget(str, Enum):
    """Notification channel, declared in controller order 0..1."""

    to_controller = "to_controller"
    to_email = "to_email"


class BatteryCharacter(BaseModel):
    """Cooling type and brand of a battery pack.

    The brand is carried for the caller's benefit only; classification never
    looks at it.
    """

    model_config = ConfigDict(frozen=True)

    cooling_type: CoolingType
    brand: str = Field(default="", max_length=BRAND_MAX_LENGTH)

    @field_validator("brand")
    @classmethod
    def validate_brand(cls, value: str) -> str:
        if not value.isprintable():
            raise ValueError("Brand must contain printable characters only")
        return value


class TemperatureLimits(BaseModel):
    """Inclusive [lower, upper] range of tolerated temperatures in Celsius."""

    model_config = ConfigDict(frozen=True)

    lower: float = 0.0
    upper: float

    @model_validator(mode="after")
    def validate_order(self) -> "TemperatureLimits":
        if self.lower > self.upper:
            raise ValueError(
                f"Lower limit {self.lower} exceeds upper limit {self.upper}"
            )
        return self
