from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso
from ..core.enums import CheckStatus


@dataclass(frozen=True)
class LibraryVisit:
    """Domain entity: a researcher's session in the reading room.

    `visitor_id` points into the visitor collection but is not checked.
    """

    visit_id: int
    visitor_id: int
    ticket_number: str
    specific_study_area: str
    control_officer: str
    check_in_time: datetime
    date: str
    status: CheckStatus = CheckStatus.CHECKED_IN
    materials_requested: Optional[str] = None
    check_out_time: Optional[datetime] = None
    notes: Optional[str] = None

    @property
    def is_checked_in(self) -> bool:
        return self.status == CheckStatus.CHECKED_IN

    def to_json(self) -> dict:
        return {
            "id": self.visit_id,
            "visitorId": self.visitor_id,
            "ticketNumber": self.ticket_number,
            "specificStudyArea": self.specific_study_area,
            "materialsRequested": self.materials_requested,
            "controlOfficer": self.control_officer,
            "checkInTime": to_iso(self.check_in_time),
            "checkOutTime": to_iso(self.check_out_time),
            "status": self.status.value,
            "notes": self.notes,
            "date": self.date,
        }
