from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso
from ..core.enums import CheckStatus, Department, VisitorType


@dataclass(frozen=True)
class Visitor:
    """Domain entity: one arrival at the facility.

    `date` is the YYYY-MM-DD key of `time_in`, fixed at check-in.
    Researcher-only fields stay None/False for General visitors.
    """

    visitor_id: int
    full_name: str
    id_number: str
    phone_number: str
    visitor_type: VisitorType
    destination: Department
    time_in: datetime
    date: str
    status: CheckStatus = CheckStatus.CHECKED_IN
    time_out: Optional[datetime] = None
    institute: Optional[str] = None
    research_area: Optional[str] = None
    home_address: Optional[str] = None
    ticket_number: Optional[str] = None
    fee_paid: bool = False

    @property
    def is_researcher(self) -> bool:
        return self.visitor_type == VisitorType.RESEARCHER

    @property
    def is_checked_in(self) -> bool:
        return self.status == CheckStatus.CHECKED_IN

    def to_json(self) -> dict:
        return {
            "id": self.visitor_id,
            "fullName": self.full_name,
            "idNumber": self.id_number,
            "phoneNumber": self.phone_number,
            "visitorType": self.visitor_type.value,
            "destination": self.destination.value,
            "timeIn": to_iso(self.time_in),
            "timeOut": to_iso(self.time_out),
            "status": self.status.value,
            "institute": self.institute,
            "researchArea": self.research_area,
            "homeAddress": self.home_address,
            "ticketNumber": self.ticket_number,
            "feePaid": self.fee_paid,
            "date": self.date,
        }
