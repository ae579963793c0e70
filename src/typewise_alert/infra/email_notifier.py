"""Email notifier rendering breach messages to a text stream."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from typewise_alert.domain.models import BreachType
from typewise_alert.domain.ports import NotifierPort

logger = logging.getLogger(__name__)

DEFAULT_RECIPIENT = "a.b@c.com"

_BREACH_WORDING = {
    BreachType.too_low: "too low",
    BreachType.too_high: "too high",
}


def render_email(recipient: str, breach: BreachType) -> List[str]:
    """Return the message lines for ``breach``; normal readings yield none."""
    wording = _BREACH_WORDING.get(breach)
    if wording is None:
        return []
    return [
        f"To: {recipient}",
        f"Hi, the temperature is {wording}",
    ]


@dataclass
class EmailNotifier(NotifierPort):
    recipient: str = DEFAULT_RECIPIENT
    stream: Optional[TextIO] = None

    def notify(self, breach: BreachType) -> None:
        lines = render_email(self.recipient, breach)
        if not lines:
            logger.debug("Temperature normal; no email for %s", self.recipient)
            return
        logger.debug("Emailing %s about %s", self.recipient, breach.name)
        stream = self.stream if self.stream is not None else sys.stdout
        for line in lines:
            stream.write(line + "\n")
