from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Staff roles used for access control."""

    ADMIN = "Admin"
    RECEPTIONIST = "Receptionist"
    ACCOUNTANT = "Accountant"
    LIBRARY_OFFICER = "LibraryOfficer"


class VisitorType(str, Enum):
    GENERAL = "General"
    RESEARCHER = "Researcher"


class Department(str, Enum):
    """Facility sections a visitor can be routed to."""

    RECORDS = "Records"
    ACCOUNTS = "Accounts"
    IT = "IT"
    ADMIN = "Admin"
    LIBRARY = "Library"
    HR = "HR"
    RESEARCH = "Research"
    ORAL = "Oral"
    SECRETARY = "Secretary"


class CheckStatus(str, Enum):
    """Lifecycle of a visitor or library visit: CheckedIn -> CheckedOut."""

    CHECKED_IN = "CheckedIn"
    CHECKED_OUT = "CheckedOut"
