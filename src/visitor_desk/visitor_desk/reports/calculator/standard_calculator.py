from __future__ import annotations

from typing import Optional

from ...visitors.model import Visitor
from .base import StayCalculator


class StandardStayCalculator(StayCalculator):
    """Standard rule: time_out - time_in in minutes."""

    def stay_minutes(self, visitor: Visitor) -> Optional[float]:
        if not visitor.time_out:
            return None
        return (visitor.time_out - visitor.time_in).total_seconds() / 60
