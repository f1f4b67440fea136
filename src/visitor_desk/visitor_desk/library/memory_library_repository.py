from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import CheckStatus
from ..storage.table import Table
from .model import LibraryVisit
from .repository import LibraryVisitRepository
from .schemas import LibraryVisitCreate


class InMemoryLibraryVisitRepository(LibraryVisitRepository):
    def __init__(self, table: Table[LibraryVisit]):
        self._table = table

    def create(self, data: LibraryVisitCreate, *, date: str) -> LibraryVisit:
        return self._table.insert(
            lambda visit_id: LibraryVisit(
                visit_id=visit_id,
                visitor_id=data.visitor_id,
                ticket_number=data.ticket_number,
                specific_study_area=data.specific_study_area,
                materials_requested=data.materials_requested,
                control_officer=data.control_officer,
                check_in_time=data.check_in_time,
                check_out_time=None,
                status=CheckStatus.CHECKED_IN,
                notes=None,
                date=date,
            )
        )

    def get_by_id(self, visit_id: int) -> Optional[LibraryVisit]:
        return self._table.get(visit_id)

    def get_active_by_ticket(self, ticket_number: str) -> Optional[LibraryVisit]:
        return self._table.find(lambda v: v.ticket_number == ticket_number and v.status == CheckStatus.CHECKED_IN)

    def list_all(self) -> Sequence[LibraryVisit]:
        return self._table.all()

    def list_by_date(self, date: str) -> Sequence[LibraryVisit]:
        return self._table.filter(lambda v: v.date == date)

    def list_by_status(self, status: CheckStatus) -> Sequence[LibraryVisit]:
        return self._table.filter(lambda v: v.status == status)

    def list_by_visitor(self, visitor_id: int) -> Sequence[LibraryVisit]:
        return self._table.filter(lambda v: v.visitor_id == visitor_id)

    def mark_checked_out(self, visit_id: int, *, check_out_time: datetime, notes: Optional[str]) -> Optional[LibraryVisit]:
        visit = self._table.get(visit_id)
        if not visit:
            return None
        return self._table.replace(
            visit_id,
            replace(
                visit,
                check_out_time=check_out_time,
                status=CheckStatus.CHECKED_OUT,
                notes=notes or visit.notes,
            ),
        )
