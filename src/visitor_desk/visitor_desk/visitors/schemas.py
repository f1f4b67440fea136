from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from ..common.datetime_utils import as_utc
from ..common.schemas import CamelModel
from ..core.enums import Department, VisitorType


class VisitorCreate(CamelModel):
    """Reception check-in form."""

    full_name: str = Field(..., min_length=1)
    id_number: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)
    visitor_type: VisitorType
    destination: Department
    time_in: datetime

    institute: Optional[str] = None
    research_area: Optional[str] = None
    home_address: Optional[str] = None
    ticket_number: Optional[str] = None
    fee_paid: Optional[bool] = None

    @field_validator("time_in")
    @classmethod
    def _normalize_time_in(cls, value: datetime) -> datetime:
        return as_utc(value)

    @field_validator("institute", "research_area", "home_address", "ticket_number", mode="before")
    @classmethod
    def _blank_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _fee_fields_need_researcher(self):
        if self.visitor_type != VisitorType.RESEARCHER and (self.fee_paid or self.ticket_number):
            raise ValueError("feePaid and ticketNumber only apply to Researcher visitors")
        return self


class FeeUpdate(CamelModel):
    """Accounts desk payment form."""

    fee_paid: bool
    ticket_number: Optional[str] = None

    @field_validator("ticket_number", mode="before")
    @classmethod
    def _blank_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value
