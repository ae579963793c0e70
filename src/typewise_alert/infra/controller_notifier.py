"""Controller notifier writing hex frames to a text stream."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from typewise_alert.domain.models import BreachType
from typewise_alert.domain.ports import NotifierPort

logger = logging.getLogger(__name__)

DEFAULT_HEADER = 0xFEED


def format_controller_frame(header: int, breach: BreachType) -> str:
    return f"{header:x} : {breach.value:x}"


@dataclass
class ControllerNotifier(NotifierPort):
    header: int = DEFAULT_HEADER
    stream: Optional[TextIO] = None

    def __post_init__(self) -> None:
        if not 0 <= self.header <= 0xFFFF:
            raise ValueError(f"Controller header must fit in 16 bits: {self.header:#x}")

    def notify(self, breach: BreachType) -> None:
        frame = format_controller_frame(self.header, breach)
        logger.debug("Sending controller frame %r", frame)
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(frame + "\n")
