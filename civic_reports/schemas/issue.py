# File: civic_reports/schemas/issue.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime, timezone


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalise to an aware UTC datetime; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Coordinates(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None


class IssueFields(BaseModel):
    """Writable issue fields. Wire names are camelCase; unknown keys are dropped."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    title: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    date_reported: Optional[datetime] = Field(default=None, alias="dateReported")
    reported_by: Optional[str] = Field(default=None, alias="reportedBy")
    photo: Optional[str] = None
    department: Optional[str] = None
    coordinates: Optional[Coordinates] = None

    @field_validator("date_reported")
    @classmethod
    def date_reported_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class IssueCreate(IssueFields):
    # a client supplied "id" is ignored, ids are always assigned server side
    pass


class IssueUpdate(IssueFields):
    pass


class IssueOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    date_reported: Optional[datetime] = Field(default=None, serialization_alias="dateReported")
    reported_by: Optional[str] = Field(default=None, serialization_alias="reportedBy")
    photo: Optional[str] = None
    department: Optional[str] = None
    coordinates: Optional[Coordinates] = None

    # SQLite hands datetimes back without an offset; they are stored as UTC
    @field_validator("date_reported")
    @classmethod
    def date_reported_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class StatsOut(BaseModel):
    totalReports: int
    pending: int
    inProgress: int
    resolved: int
    averageResolutionTime: str
