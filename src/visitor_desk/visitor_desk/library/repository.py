from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import CheckStatus
from .model import LibraryVisit
from .schemas import LibraryVisitCreate


class LibraryVisitRepository(Protocol):
    def create(self, data: LibraryVisitCreate, *, date: str) -> LibraryVisit:
        raise NotImplementedError

    def get_by_id(self, visit_id: int) -> Optional[LibraryVisit]:
        raise NotImplementedError

    def get_active_by_ticket(self, ticket_number: str) -> Optional[LibraryVisit]:
        """First CheckedIn visit holding this ticket."""

        raise NotImplementedError

    def list_all(self) -> Sequence[LibraryVisit]:
        raise NotImplementedError

    def list_by_date(self, date: str) -> Sequence[LibraryVisit]:
        raise NotImplementedError

    def list_by_status(self, status: CheckStatus) -> Sequence[LibraryVisit]:
        raise NotImplementedError

    def list_by_visitor(self, visitor_id: int) -> Sequence[LibraryVisit]:
        raise NotImplementedError

    def mark_checked_out(self, visit_id: int, *, check_out_time: datetime, notes: Optional[str]) -> Optional[LibraryVisit]:
        raise NotImplementedError
