from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import date_key, now_utc
from ..core.enums import CheckStatus
from ..core.exceptions import ConflictError
from .model import LibraryVisit
from .repository import LibraryVisitRepository
from .schemas import LibraryVisitCreate

logger = logging.getLogger(__name__)


class LibraryService:
    """Reading-room check-in/check-out.

    Whether the visitor exists and has paid is the front desk's call; only
    the ticket is checked here.
    """

    def __init__(self, visits: LibraryVisitRepository):
        self._visits = visits

    def check_in(self, data: LibraryVisitCreate) -> LibraryVisit:
        if self._visits.get_active_by_ticket(data.ticket_number):
            logger.warning("rejected library check-in: ticket %s already in use", data.ticket_number)
            raise ConflictError(f"Ticket {data.ticket_number} is already checked into the library")

        visit = self._visits.create(data, date=date_key(data.check_in_time))
        logger.info("library visit %s opened for visitor %s", visit.visit_id, visit.visitor_id)
        return visit

    def check_out(self, visit_id: int, *, notes: Optional[str] = None, now: datetime | None = None) -> Optional[LibraryVisit]:
        visit = self._visits.get_by_id(visit_id)
        if not visit:
            return None
        if not visit.is_checked_in:
            raise ConflictError("Library visit is already checked out")

        notes = notes.strip() if notes else None
        updated = self._visits.mark_checked_out(visit_id, check_out_time=now or now_utc(), notes=notes)
        logger.info("library visit %s closed", visit_id)
        return updated

    def get(self, visit_id: int) -> Optional[LibraryVisit]:
        return self._visits.get_by_id(visit_id)

    def get_active_by_ticket(self, ticket_number: str) -> Optional[LibraryVisit]:
        return self._visits.get_active_by_ticket(ticket_number)

    def list_by_date(self, date: str) -> Sequence[LibraryVisit]:
        return self._visits.list_by_date(date)

    def list_checked_in(self) -> Sequence[LibraryVisit]:
        return self._visits.list_by_status(CheckStatus.CHECKED_IN)

    def list_for_visitor(self, visitor_id: int) -> Sequence[LibraryVisit]:
        return self._visits.list_by_visitor(visitor_id)
