from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.constants import DURATION_UNAVAILABLE
from ..core.enums import Department, VisitorType
from ..visitors.model import Visitor
from ..visitors.repository import VisitorRepository
from .calculator.base import StayCalculator
from .calculator.standard_calculator import StandardStayCalculator


def empty_department_counts() -> dict[str, int]:
    return {d.value: 0 for d in Department}


def format_minutes(total_minutes: int) -> str:
    return f"{total_minutes // 60}h {total_minutes % 60}m"


@dataclass(frozen=True)
class DailySummary:
    date: str
    total_visitors: int
    general_visitors: int
    researchers: int
    departments: dict[str, int] = field(default_factory=empty_department_counts)

    def to_json(self) -> dict:
        return {
            "totalVisitors": self.total_visitors,
            "generalVisitors": self.general_visitors,
            "researchers": self.researchers,
            "departments": dict(self.departments),
        }


@dataclass(frozen=True)
class DepartmentReport:
    date: str
    rows: list[dict]
    most_visited: Optional[dict]
    least_visited: Optional[dict]
    average_stay: str

    def to_json(self) -> dict:
        return {
            "date": self.date,
            "departments": self.rows,
            "mostVisited": self.most_visited,
            "leastVisited": self.least_visited,
            "averageStay": self.average_stay,
        }


class ReportService:
    def __init__(self, visitors: VisitorRepository, *, calculator: Optional[StayCalculator] = None):
        self._visitors = visitors
        self._calculator = calculator or StandardStayCalculator()

    def daily_summary(self, date: str) -> DailySummary:
        visitors = self._visitors.list_by_date(date)

        departments = empty_department_counts()
        for v in visitors:
            key = getattr(v.destination, "value", v.destination)
            # unknown destinations are left out of the tally
            if key in departments:
                departments[key] += 1

        return DailySummary(
            date=date,
            total_visitors=len(visitors),
            general_visitors=sum(1 for v in visitors if v.visitor_type == VisitorType.GENERAL),
            researchers=sum(1 for v in visitors if v.visitor_type == VisitorType.RESEARCHER),
            departments=departments,
        )

    def average_stay(self, visitors: Iterable[Visitor]) -> str:
        """Mean stay as "Hh Mm", rounded to the nearest minute.

        Visitors still on site are skipped; with nobody checked out the
        result is DURATION_UNAVAILABLE rather than "0h 0m".
        """
        minutes = [m for m in (self._calculator.stay_minutes(v) for v in visitors) if m is not None]
        if not minutes:
            return DURATION_UNAVAILABLE

        mean = sum(minutes) / len(minutes)
        return format_minutes(int(math.floor(mean + 0.5)))

    def department_breakdown(self, date: str) -> DepartmentReport:
        visitors = self._visitors.list_by_date(date)

        rows: list[dict] = []
        for dept in Department:
            dept_visitors = [v for v in visitors if v.destination == dept]
            rows.append(
                {
                    "department": dept.value,
                    "generalVisitors": sum(1 for v in dept_visitors if v.visitor_type == VisitorType.GENERAL),
                    "researchers": sum(1 for v in dept_visitors if v.visitor_type == VisitorType.RESEARCHER),
                    "total": len(dept_visitors),
                    "avgDuration": self.average_stay(dept_visitors),
                }
            )

        most: Optional[dict] = None
        least: Optional[dict] = None
        for row in rows:
            if row["total"] == 0:
                continue
            if most is None or row["total"] > most["count"]:
                most = {"department": row["department"], "count": row["total"]}
            if least is None or row["total"] < least["count"]:
                least = {"department": row["department"], "count": row["total"]}

        return DepartmentReport(
            date=date,
            rows=rows,
            most_visited=most,
            least_visited=least,
            average_stay=self.average_stay(visitors),
        )

    def render_daily_summary_text(self, date: str) -> str:
        """Plain-text version of the daily summary for download."""
        summary = self.daily_summary(date)
        day = parse_iso_date(date)

        lines = [
            f"Daily Visitor Summary for {day:%B} {day.day}, {day:%Y}",
            "",
            f"Total Visitors: {summary.total_visitors}",
            f"General Visitors: {summary.general_visitors}",
            f"Researchers: {summary.researchers}",
            "",
            "Visitors by Department:",
        ]
        lines.extend(f"  {name}: {count}" for name, count in summary.departments.items())
        return "\n".join(lines) + "\n"
