"""CLI for typewise-alert."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import typer

from typewise_alert.config import AlertConfig, LogLevel, load_config
from typewise_alert.cooling import COOLING_LIMITS
from typewise_alert.domain.models import AlertTarget, BatteryCharacter, CoolingType
from typewise_alert.server.wire import build_router

app = typer.Typer(help="Battery temperature alerting CLI")

DEMO_BRAND = "BOSCH"

# (cooling type, normal, too high, too low) readings from the acceptance sweep
DEMO_READINGS: List[Tuple[CoolingType, float, float, float]] = [
    (CoolingType.passive, 25, 45, -2),
    (CoolingType.hi_active, 35, 50, -3),
    (CoolingType.med_active, 30, 45, -1),
]


@app.command()
def check(
    cooling: CoolingType = typer.Option(..., "--cooling", help="Battery cooling type"),
    temperature: float = typer.Option(..., "--temperature", help="Reading in Celsius"),
    target: Optional[AlertTarget] = typer.Option(None, "--target", help="Where to send the alert"),
    brand: str = typer.Option("", "--brand", help="Battery brand"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to config YAML"),
    log_level: Optional[LogLevel] = typer.Option(
        None, "--log-level", case_sensitive=False, help="Override log level"
    ),
) -> None:
    """Classify one temperature reading and alert the chosen target."""
    cfg = _load(config)
    _configure_logging(log_level or cfg.log_level)
    try:
        battery = BatteryCharacter(cooling_type=cooling, brand=brand)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--brand") from exc
    router = build_router(cfg)
    router.check_and_alert(target or cfg.default_target, battery, temperature)


@app.command()
def limits() -> None:
    """Show the tolerated temperature range for each cooling type."""
    for cooling_type, bounds in COOLING_LIMITS.items():
        typer.echo(f"{cooling_type.value}: {bounds.lower:g} .. {bounds.upper:g} C")


@app.command()
def demo(
    config: Optional[str] = typer.Option(None, "--config", help="Path to config YAML"),
) -> None:
    """Replay the reference sweep over every cooling type and target."""
    cfg = _load(config)
    _configure_logging(cfg.log_level)
    router = build_router(cfg)
    for cooling_type, normal, too_high, too_low in DEMO_READINGS:
        battery = BatteryCharacter(cooling_type=cooling_type, brand=DEMO_BRAND)
        for target in AlertTarget:
            for temperature in (normal, too_high, too_low):
                router.check_and_alert(target, battery, temperature)


def _load(config: Optional[str]) -> AlertConfig:
    if config is None:
        return AlertConfig()
    try:
        return load_config(config)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level.value)
