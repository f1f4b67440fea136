from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import CheckStatus, Department, VisitorType
from .model import Visitor
from .schemas import VisitorCreate


class VisitorRepository(Protocol):
    def create(self, data: VisitorCreate, *, date: str) -> Visitor:
        raise NotImplementedError

    def get_by_id(self, visitor_id: int) -> Optional[Visitor]:
        raise NotImplementedError

    def get_active_by_id_number(self, id_number: str) -> Optional[Visitor]:
        """First CheckedIn visitor carrying this ID number."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Visitor]:
        raise NotImplementedError

    def list_by_date(self, date: str) -> Sequence[Visitor]:
        raise NotImplementedError

    def list_by_status(self, status: CheckStatus) -> Sequence[Visitor]:
        raise NotImplementedError

    def list_by_type_and_date(self, visitor_type: VisitorType, date: str) -> Sequence[Visitor]:
        raise NotImplementedError

    def list_by_department_and_date(self, department: Department, date: str) -> Sequence[Visitor]:
        raise NotImplementedError

    def get_by_ticket(self, ticket_number: str) -> Optional[Visitor]:
        raise NotImplementedError

    def mark_checked_out(self, visitor_id: int, *, time_out: datetime) -> Optional[Visitor]:
        raise NotImplementedError

    def update_fee(self, visitor_id: int, *, fee_paid: bool, ticket_number: Optional[str]) -> Optional[Visitor]:
        raise NotImplementedError
