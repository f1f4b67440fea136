from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ..common.datetime_utils import as_utc
from ..common.schemas import CamelModel


class LibraryVisitCreate(CamelModel):
    visitor_id: int
    ticket_number: str = Field(..., min_length=1)
    specific_study_area: str = Field(..., min_length=1)
    materials_requested: Optional[str] = None
    control_officer: str = Field(..., min_length=1)
    check_in_time: datetime

    @field_validator("check_in_time")
    @classmethod
    def _normalize_check_in(cls, value: datetime) -> datetime:
        return as_utc(value)

    @field_validator("materials_requested", mode="before")
    @classmethod
    def _blank_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LibraryCheckout(CamelModel):
    notes: Optional[str] = None
