"""
Lead Submission Models — Contact data captured at the end of the funnel.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field


class LeadSubmission(BaseModel):
    """Contact form or satellite-scan request submitted by a visitor."""

    form_type: Literal["satellite-scan", "contact-form"]
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=1)
    address: str | None = None
    plz: str | None = None
    screen_width: int = 0
    screen_height: int = 0
    platform: str = ""
    additional_data: dict[str, Any] = Field(default_factory=dict)

    @property
    def display_name(self) -> str:
        full = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return self.name or full or "Unbekannt"


class DeviceInfo(BaseModel):
    device_type: str
    user_agent: str
    screen_width: int = 0
    screen_height: int = 0
    platform: str = ""


class NotificationResult(BaseModel):
    """Outcome of a lead notification attempt."""

    status: Literal["sent", "logged", "failed"]
    channel: Literal["emailjs", "webhook", "log"]
    error: str | None = None


class LeadEntry(BaseModel):
    """One line of the lead log."""

    received_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    form_type: str
    name: str
    plz: str | None = None
    device_type: str = ""
    notification: NotificationResult


class LeadResponse(BaseModel):
    status: Literal["sent", "logged", "failed"]
    channel: Literal["emailjs", "webhook", "log"]
