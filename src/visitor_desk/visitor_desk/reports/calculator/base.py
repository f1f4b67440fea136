from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...visitors.model import Visitor


class StayCalculator(ABC):
    """Calculator interface (Strategy Pattern for visit duration)."""

    @abstractmethod
    def stay_minutes(self, visitor: Visitor) -> Optional[float]:
        """Minutes spent on site, or None while the visitor is still in."""

        raise NotImplementedError
