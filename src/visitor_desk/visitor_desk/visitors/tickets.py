from __future__ import annotations

import random
from datetime import datetime
from typing import Callable, Optional

from ..core.constants import DEFAULT_TICKET_PREFIX
from ..core.exceptions import ConflictError

MAX_DRAWS = 50


class TicketIssuer:
    """Issues library ticket numbers like NAZ-24-1234 (prefix, 2-digit year, 4 digits)."""

    def __init__(self, prefix: str = DEFAULT_TICKET_PREFIX, *, rng: random.Random | None = None):
        self._prefix = prefix
        self._rng = rng or random.Random()

    def issue(self, now: datetime, *, in_use: Optional[Callable[[str], bool]] = None) -> str:
        """Draw a ticket number, drawing again while `in_use` reports it taken."""
        for _ in range(MAX_DRAWS):
            ticket = f"{self._prefix}-{now:%y}-{self._rng.randint(1000, 9999)}"
            if in_use is None or not in_use(ticket):
                return ticket
        raise ConflictError("Could not issue a free ticket number")
