from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import CheckStatus, Department, VisitorType
from ..storage.table import Table
from .model import Visitor
from .repository import VisitorRepository
from .schemas import VisitorCreate


class InMemoryVisitorRepository(VisitorRepository):
    def __init__(self, table: Table[Visitor]):
        self._table = table

    def create(self, data: VisitorCreate, *, date: str) -> Visitor:
        return self._table.insert(
            lambda visitor_id: Visitor(
                visitor_id=visitor_id,
                full_name=data.full_name,
                id_number=data.id_number,
                phone_number=data.phone_number,
                visitor_type=data.visitor_type,
                destination=data.destination,
                time_in=data.time_in,
                date=date,
                status=CheckStatus.CHECKED_IN,
                time_out=None,
                institute=data.institute,
                research_area=data.research_area,
                home_address=data.home_address,
                ticket_number=data.ticket_number,
                fee_paid=bool(data.fee_paid),
            )
        )

    def get_by_id(self, visitor_id: int) -> Optional[Visitor]:
        return self._table.get(visitor_id)

    def get_active_by_id_number(self, id_number: str) -> Optional[Visitor]:
        return self._table.find(lambda v: v.id_number == id_number and v.status == CheckStatus.CHECKED_IN)

    def get_by_ticket(self, ticket_number: str) -> Optional[Visitor]:
        return self._table.find(lambda v: v.ticket_number == ticket_number)

    def list_all(self) -> Sequence[Visitor]:
        return self._table.all()

    def list_by_date(self, date: str) -> Sequence[Visitor]:
        return self._table.filter(lambda v: v.date == date)

    def list_by_status(self, status: CheckStatus) -> Sequence[Visitor]:
        return self._table.filter(lambda v: v.status == status)

    def list_by_type_and_date(self, visitor_type: VisitorType, date: str) -> Sequence[Visitor]:
        return self._table.filter(lambda v: v.visitor_type == visitor_type and v.date == date)

    def list_by_department_and_date(self, department: Department, date: str) -> Sequence[Visitor]:
        return self._table.filter(lambda v: v.destination == department and v.date == date)

    def mark_checked_out(self, visitor_id: int, *, time_out: datetime) -> Optional[Visitor]:
        visitor = self._table.get(visitor_id)
        if not visitor:
            return None
        return self._table.replace(visitor_id, replace(visitor, time_out=time_out, status=CheckStatus.CHECKED_OUT))

    def update_fee(self, visitor_id: int, *, fee_paid: bool, ticket_number: Optional[str]) -> Optional[Visitor]:
        visitor = self._table.get(visitor_id)
        if not visitor:
            return None
        return self._table.replace(visitor_id, replace(visitor, fee_paid=fee_paid, ticket_number=ticket_number))
