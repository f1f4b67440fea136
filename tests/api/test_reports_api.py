from __future__ import annotations

from datetime import datetime, timezone

from src.visitor_desk.visitor_desk.core.enums import Role
from src.visitor_desk.visitor_desk.visitors import service as visitor_service_module

BASE = {
    "fullName": "A",
    "phoneNumber": "0772000000",
    "timeIn": "2024-01-01T09:00:00Z",
}


def _seed(client):
    client.post("/api/visitors", json={**BASE, "idNumber": "1", "visitorType": "Researcher", "destination": "Library"})
    client.post("/api/visitors", json={**BASE, "idNumber": "2", "visitorType": "General", "destination": "Records"})
    client.post("/api/visitors", json={**BASE, "idNumber": "3", "visitorType": "General", "destination": "Library"})


def test_daily_summary(staff_client):
    desk = staff_client(Role.RECEPTIONIST)
    _seed(desk)

    body = desk.get("/api/reports/daily-summary?date=2024-01-01").get_json()

    assert body["totalVisitors"] == 3
    assert body["generalVisitors"] == 2
    assert body["researchers"] == 1
    assert len(body["departments"]) == 9
    assert body["departments"]["Library"] == 2
    assert body["departments"]["Oral"] == 0


def test_daily_summary_for_empty_day(staff_client):
    body = staff_client(Role.ACCOUNTANT).get("/api/reports/daily-summary?date=2030-05-05").get_json()

    assert body["totalVisitors"] == 0
    assert sorted(body["departments"]) == sorted(
        ["Records", "Accounts", "IT", "Admin", "Library", "HR", "Research", "Oral", "Secretary"]
    )


def test_department_report_with_average_stay(staff_client, monkeypatch):
    desk = staff_client(Role.RECEPTIONIST)
    _seed(desk)
    monkeypatch.setattr(
        visitor_service_module, "now_utc", lambda: datetime(2024, 1, 1, 11, 0, tzinfo=timezone.utc)
    )
    desk.patch("/api/visitors/1/checkout")

    body = desk.get("/api/reports/departments?date=2024-01-01").get_json()

    library = next(r for r in body["departments"] if r["department"] == "Library")
    assert library["total"] == 2
    assert library["avgDuration"] == "2h 0m"
    assert body["mostVisited"] == {"department": "Library", "count": 2}
    assert body["leastVisited"] == {"department": "Records", "count": 1}
    assert body["averageStay"] == "2h 0m"


def test_exports(staff_client):
    desk = staff_client(Role.RECEPTIONIST)
    _seed(desk)

    txt = desk.get("/api/reports/daily-summary/export?date=2024-01-01")
    assert txt.status_code == 200
    assert txt.mimetype == "text/plain"
    assert "visitor-summary-2024-01-01.txt" in txt.headers["Content-Disposition"]
    assert "Total Visitors: 3" in txt.get_data(as_text=True)

    csv_res = desk.get("/api/reports/departments/export?date=2024-01-01")
    assert csv_res.mimetype == "text/csv"
    lines = csv_res.get_data().decode("utf-8-sig").splitlines()
    assert lines[0] == "department,generalVisitors,researchers,total,avgDuration"
    assert len(lines) == 10


def test_reports_require_session(client):
    assert client.get("/api/reports/daily-summary?date=2024-01-01").status_code == 401


def test_bad_date_is_400(staff_client):
    assert staff_client(Role.ACCOUNTANT).get("/api/reports/daily-summary?date=yesterday").status_code == 400


def test_unpadded_date_query_counts_the_day(staff_client):
    desk = staff_client(Role.RECEPTIONIST)
    _seed(desk)

    body = desk.get("/api/reports/daily-summary?date=2024-1-1").get_json()

    assert body["totalVisitors"] == 3
    assert body["departments"]["Library"] == 2
