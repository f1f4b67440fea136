from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import date_key, now_utc
from ..core.enums import CheckStatus, Department, VisitorType
from ..core.exceptions import ConflictError
from ..library.repository import LibraryVisitRepository
from .model import Visitor
from .repository import VisitorRepository
from .schemas import VisitorCreate
from .tickets import TicketIssuer

logger = logging.getLogger(__name__)


class VisitorService:
    """Reception and accounts use cases for facility visitors."""

    def __init__(
        self,
        visitors: VisitorRepository,
        *,
        tickets: TicketIssuer | None = None,
        library: LibraryVisitRepository | None = None,
    ):
        self._visitors = visitors
        self._tickets = tickets or TicketIssuer()
        self._library = library

    def check_in(self, data: VisitorCreate) -> Visitor:
        active = self._visitors.get_active_by_id_number(data.id_number)
        if active:
            logger.warning("rejected check-in: id number %s already checked in as visitor %s", data.id_number, active.visitor_id)
            raise ConflictError(f"A visitor with ID number {data.id_number} is already checked in")

        visitor = self._visitors.create(data, date=date_key(data.time_in))
        logger.info(
            "visitor %s checked in (%s -> %s)",
            visitor.visitor_id,
            visitor.visitor_type.value,
            visitor.destination.value,
        )
        return visitor

    def check_out(self, visitor_id: int, *, now: datetime | None = None) -> Optional[Visitor]:
        """Close a visit with the server clock. None when the visitor is unknown."""
        visitor = self._visitors.get_by_id(visitor_id)
        if not visitor:
            return None
        if not visitor.is_checked_in:
            raise ConflictError("Visitor is already checked out")

        updated = self._visitors.mark_checked_out(visitor_id, time_out=now or now_utc())
        logger.info("visitor %s checked out", visitor_id)
        return updated

    def update_fee(
        self,
        visitor_id: int,
        *,
        fee_paid: bool,
        ticket_number: Optional[str] = None,
        now: datetime | None = None,
    ) -> Optional[Visitor]:
        """Record a researcher's fee payment.

        A paid fee without a ticket number keeps the visitor's current ticket
        or issues a new one. An unpaid fee stores only the ticket given, if any.
        """
        visitor = self._visitors.get_by_id(visitor_id)
        if not visitor:
            return None
        if not visitor.is_researcher:
            logger.warning("rejected fee update for %s visitor %s", visitor.visitor_type.value, visitor_id)
            raise ConflictError("Fee payment only applies to Researcher visitors")

        if fee_paid:
            ticket = ticket_number or visitor.ticket_number
            if not ticket:
                ticket = self._tickets.issue(now or now_utc(), in_use=self._ticket_taken)
        else:
            ticket = ticket_number

        updated = self._visitors.update_fee(visitor_id, fee_paid=fee_paid, ticket_number=ticket)
        logger.info("visitor %s fee_paid=%s ticket=%s", visitor_id, fee_paid, ticket)
        return updated

    def _ticket_taken(self, ticket_number: str) -> bool:
        if self._visitors.get_by_ticket(ticket_number):
            return True
        return bool(self._library and self._library.get_active_by_ticket(ticket_number))

    def get(self, visitor_id: int) -> Optional[Visitor]:
        return self._visitors.get_by_id(visitor_id)

    def get_active_by_id_number(self, id_number: str) -> Optional[Visitor]:
        return self._visitors.get_active_by_id_number(id_number)

    def list_checked_in(self) -> Sequence[Visitor]:
        return self._visitors.list_by_status(CheckStatus.CHECKED_IN)

    def list_by_date(self, date: str) -> Sequence[Visitor]:
        return self._visitors.list_by_date(date)

    def search(
        self,
        *,
        date: str,
        status: Optional[CheckStatus] = None,
        visitor_type: Optional[VisitorType] = None,
        department: Optional[Department] = None,
    ) -> Sequence[Visitor]:
        """Reception list filters.

        A status filter spans all dates; type and department narrow the given day.
        """
        if status:
            return self._visitors.list_by_status(status)
        if visitor_type and department:
            return [v for v in self._visitors.list_by_type_and_date(visitor_type, date) if v.destination == department]
        if visitor_type:
            return self._visitors.list_by_type_and_date(visitor_type, date)
        if department:
            return self._visitors.list_by_department_and_date(department, date)
        return self._visitors.list_by_date(date)
