"""Domain models for job postings and tutor preferences.

Only the fields the matcher reads are required. The remaining optional fields
mirror the job and tutor records kept by the marketplace so the same objects can
flow from the record store through matching and into alert rendering.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Job(BaseModel):
    """A tuition job posting as consumed by the matcher.

    ``subject``, ``level``, ``location`` and ``rate`` are free text written by
    admins (e.g. "E Maths", "Secondary 3-4", "Tampines", "$40-60/hr").
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "0b4c6a3e-5b7e-4a0c-9a55-2f1f0d2c9a11",
                "subject": "E Maths",
                "level": "Secondary 3-4",
                "location": "Tampines",
                "rate": "$40-60/hr",
                "schedule": "Weekday evenings",
                "lessons_per_week": 2,
                "status": "Open",
                "created_at": "2025-11-01T12:00:00Z",
            }
        },
    )

    subject: str = Field(..., description="Subject requested, free text")
    level: str = Field(..., description="Education level, free text")
    location: str = Field(..., description="Lesson location, free text")
    rate: str = Field(..., description="Offered rate, free text")
    id: Optional[str] = Field(None, description="Record identifier")
    schedule: Optional[str] = Field(None, description="Preferred lesson schedule")
    lessons_per_week: Optional[int] = Field(None, ge=1, description="Lessons per week")
    status: str = Field("Open", description="Posting status")
    created_at: Optional[datetime] = Field(None, description="When the job was posted (UTC)")

    @field_validator("subject", "level", "location", "rate")
    @classmethod
    def strip_required(cls, v: str) -> str:
        """Strip whitespace from required text fields."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Field cannot be empty or whitespace-only")
        return stripped

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Treat naive datetimes as UTC and convert aware ones to UTC."""
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class HourlyRates(BaseModel):
    """A tutor's declared hourly rate band, in dollars."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(..., ge=0, description="Lowest acceptable hourly rate")
    max: float = Field(..., ge=0, description="Highest expected hourly rate")

    @model_validator(mode="after")
    def check_band(self):
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) cannot be greater than max ({self.max})")
        return self


class Tutor(BaseModel):
    """A tutor's matching preferences.

    Preference entries are stripped and blank entries dropped, since a blank
    string would substring-match every job. An absent ``hourly_rates`` means
    no rate preference, not a zero-dollar band.
    """

    model_config = ConfigDict(frozen=True)

    subjects: List[str] = Field(default_factory=list, description="Subjects the tutor teaches")
    levels: List[str] = Field(default_factory=list, description="Levels the tutor teaches")
    locations: List[str] = Field(default_factory=list, description="Preferred locations")
    hourly_rates: Optional[HourlyRates] = Field(None, description="Declared rate band")
    id: Optional[str] = Field(None, description="Record identifier")
    name: Optional[str] = Field(None, description="Display name")
    notifications_enabled: bool = Field(True, description="Whether job alerts are wanted")
    telegram_id: Optional[str] = Field(None, description="Linked chat account, if any")

    @field_validator("subjects", "levels", "locations")
    @classmethod
    def drop_blank_entries(cls, v: List[str]) -> List[str]:
        """Strip entries and remove empty ones, keeping declaration order."""
        cleaned = []
        for entry in v:
            stripped = entry.strip()
            if stripped:
                cleaned.append(stripped)
        return cleaned
