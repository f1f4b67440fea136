from __future__ import annotations

import random
from datetime import datetime, timezone

import pytest

from src.visitor_desk.visitor_desk.core.enums import CheckStatus, Department, VisitorType
from src.visitor_desk.visitor_desk.core.exceptions import ConflictError
from src.visitor_desk.visitor_desk.library.memory_library_repository import InMemoryLibraryVisitRepository
from src.visitor_desk.visitor_desk.library.schemas import LibraryVisitCreate
from src.visitor_desk.visitor_desk.storage.table import Table
from src.visitor_desk.visitor_desk.visitors.memory_visitor_repository import InMemoryVisitorRepository
from src.visitor_desk.visitor_desk.visitors.schemas import VisitorCreate
from src.visitor_desk.visitor_desk.visitors.service import VisitorService
from src.visitor_desk.visitor_desk.visitors.tickets import TicketIssuer


def _payload(**overrides) -> VisitorCreate:
    data = {
        "fullName": "A",
        "idNumber": "123",
        "phoneNumber": "0772000000",
        "visitorType": "Researcher",
        "destination": "Library",
        "timeIn": "2024-01-01T09:00:00Z",
    }
    data.update(overrides)
    return VisitorCreate.model_validate(data)


@pytest.fixture
def repo():
    return InMemoryVisitorRepository(Table("visitors"))


@pytest.fixture
def svc(repo):
    return VisitorService(repo, tickets=TicketIssuer("NAZ", rng=random.Random(7)))


def test_check_in_creates_checked_in_record(svc):
    v = svc.check_in(_payload())

    assert v.visitor_id == 1
    assert v.status == CheckStatus.CHECKED_IN
    assert v.time_out is None
    assert v.date == "2024-01-01"
    assert v.visitor_type == VisitorType.RESEARCHER
    assert v.destination == Department.LIBRARY
    assert v.fee_paid is False
    assert v.institute is None


def test_date_comes_from_time_in_not_wall_clock(svc):
    v = svc.check_in(_payload(timeIn="2023-06-30T23:30:00+00:00"))
    assert v.date == "2023-06-30"


def test_check_out_sets_time_and_status(svc, fixed_now):
    v = svc.check_in(_payload())

    out = svc.check_out(v.visitor_id, now=fixed_now)

    assert out.status == CheckStatus.CHECKED_OUT
    assert out.time_out == fixed_now
    assert svc.get(v.visitor_id) == out


def test_check_out_unknown_visitor_returns_none(svc, fixed_now):
    assert svc.check_out(99, now=fixed_now) is None


def test_second_check_out_is_rejected_and_keeps_first_time(svc, fixed_now):
    v = svc.check_in(_payload())
    svc.check_out(v.visitor_id, now=fixed_now)

    with pytest.raises(ConflictError):
        svc.check_out(v.visitor_id, now=datetime(2024, 1, 1, 15, 0, tzinfo=timezone.utc))

    assert svc.get(v.visitor_id).time_out == fixed_now


def test_active_lookup_only_returns_checked_in(svc, fixed_now):
    v = svc.check_in(_payload())
    assert svc.get_active_by_id_number("123").visitor_id == v.visitor_id

    svc.check_out(v.visitor_id, now=fixed_now)

    assert svc.get_active_by_id_number("123") is None


def test_duplicate_active_id_number_is_rejected(svc):
    svc.check_in(_payload())

    with pytest.raises(ConflictError):
        svc.check_in(_payload(fullName="Someone Else"))

    assert len(svc.list_by_date("2024-01-01")) == 1


def test_id_number_can_be_reused_after_check_out(svc, fixed_now):
    first = svc.check_in(_payload())
    svc.check_out(first.visitor_id, now=fixed_now)

    second = svc.check_in(_payload(timeIn="2024-01-02T09:00:00Z"))

    assert second.visitor_id == 2
    assert svc.get_active_by_id_number("123").visitor_id == 2


def test_fee_update_on_researcher(svc):
    v = svc.check_in(_payload())

    updated = svc.update_fee(v.visitor_id, fee_paid=True, ticket_number="NAZ-24-1234")

    assert updated.fee_paid is True
    assert updated.ticket_number == "NAZ-24-1234"
    assert updated.status == CheckStatus.CHECKED_IN


def test_fee_update_on_general_visitor_fails_and_leaves_record(svc):
    v = svc.check_in(_payload(visitorType="General", destination="Records"))

    with pytest.raises(ConflictError):
        svc.update_fee(v.visitor_id, fee_paid=True, ticket_number="NAZ-24-1234")

    assert svc.get(v.visitor_id) == v


def test_fee_update_unknown_visitor_returns_none(svc):
    assert svc.update_fee(5, fee_paid=True, ticket_number="T") is None


def test_paid_fee_without_ticket_issues_one(svc, fixed_now):
    v = svc.check_in(_payload())

    updated = svc.update_fee(v.visitor_id, fee_paid=True, now=fixed_now)

    assert updated.ticket_number.startswith("NAZ-24-")
    assert len(updated.ticket_number.split("-")[-1]) == 4


def test_paid_fee_keeps_existing_ticket(svc, fixed_now):
    v = svc.check_in(_payload(ticketNumber="NAZ-23-0001"))

    updated = svc.update_fee(v.visitor_id, fee_paid=True, now=fixed_now)

    assert updated.ticket_number == "NAZ-23-0001"


def test_search_filters(svc, fixed_now):
    a = svc.check_in(_payload(idNumber="1", visitorType="General", destination="Records"))
    svc.check_in(_payload(idNumber="2", visitorType="Researcher", destination="Library"))
    svc.check_in(_payload(idNumber="3", visitorType="General", destination="Library"))
    svc.check_in(_payload(idNumber="4", timeIn="2024-01-02T09:00:00Z"))
    svc.check_out(a.visitor_id, now=fixed_now)

    assert len(svc.search(date="2024-01-01")) == 3
    assert [v.id_number for v in svc.search(date="2024-01-01", visitor_type=VisitorType.GENERAL)] == ["1", "3"]
    assert [v.id_number for v in svc.search(date="2024-01-01", department=Department.LIBRARY)] == ["2", "3"]
    assert [v.id_number for v in svc.search(date="2024-01-01", visitor_type=VisitorType.GENERAL, department=Department.LIBRARY)] == ["3"]
    # status spans every date
    assert [v.id_number for v in svc.search(date="2024-01-01", status=CheckStatus.CHECKED_IN)] == ["2", "3", "4"]
    assert [v.id_number for v in svc.list_checked_in()] == ["2", "3", "4"]


def test_unpaid_fee_clears_the_ticket(svc, fixed_now):
    v = svc.check_in(_payload())
    svc.update_fee(v.visitor_id, fee_paid=True, ticket_number="NAZ-24-1234", now=fixed_now)

    revoked = svc.update_fee(v.visitor_id, fee_paid=False, ticket_number=None, now=fixed_now)

    assert revoked.fee_paid is False
    assert revoked.ticket_number is None


def test_unpaid_fee_stores_explicit_ticket(svc, fixed_now):
    v = svc.check_in(_payload(ticketNumber="NAZ-23-0001"))

    updated = svc.update_fee(v.visitor_id, fee_paid=False, ticket_number="NAZ-23-0002", now=fixed_now)

    assert updated.fee_paid is False
    assert updated.ticket_number == "NAZ-23-0002"


class _ScriptedRandom:
    """randint returns the queued numbers in order."""

    def __init__(self, *numbers):
        self._numbers = list(numbers)

    def randint(self, a, b):
        return self._numbers.pop(0)


def test_issued_ticket_skips_numbers_held_by_visitors(repo, fixed_now):
    svc = VisitorService(repo, tickets=TicketIssuer("NAZ", rng=_ScriptedRandom(1111, 2222)))
    svc.check_in(_payload(idNumber="1", ticketNumber="NAZ-24-1111"))
    v = svc.check_in(_payload(idNumber="2"))

    updated = svc.update_fee(v.visitor_id, fee_paid=True, now=fixed_now)

    assert updated.ticket_number == "NAZ-24-2222"


def test_issued_ticket_skips_open_library_tickets(repo, fixed_now):
    library = InMemoryLibraryVisitRepository(Table("library_visits"))
    library.create(
        LibraryVisitCreate.model_validate(
            {
                "visitorId": 9,
                "ticketNumber": "NAZ-24-1111",
                "specificStudyArea": "Maps",
                "controlOfficer": "R. Moyo",
                "checkInTime": "2024-01-01T09:30:00Z",
            }
        ),
        date="2024-01-01",
    )
    svc = VisitorService(repo, tickets=TicketIssuer("NAZ", rng=_ScriptedRandom(1111, 3333)), library=library)
    v = svc.check_in(_payload())

    updated = svc.update_fee(v.visitor_id, fee_paid=True, now=fixed_now)

    assert updated.ticket_number == "NAZ-24-3333"


def test_ticket_issuer_gives_up_when_every_draw_is_taken(fixed_now):
    issuer = TicketIssuer("NAZ", rng=random.Random(1))

    with pytest.raises(ConflictError):
        issuer.issue(fixed_now, in_use=lambda ticket: True)
