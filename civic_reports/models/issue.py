# File: civic_reports/models/issue.py
from __future__ import annotations
from datetime import datetime, timezone
from sqlalchemy import String, Float, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from civic_reports.db.base import Base

DEFAULT_STATUS = "Pending"

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Issue(Base):
    __tablename__ = "issues"

    # public identifier, e.g. CIV001; assigned once by services.issue_ids
    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(Text, index=True, nullable=True)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    priority: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str | None] = mapped_column(Text, default=DEFAULT_STATUS, index=True, nullable=True)

    date_reported: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=utcnow, index=True, nullable=True)
    reported_by: Mapped[str | None] = mapped_column(Text, nullable=True)
    photo: Mapped[str | None] = mapped_column(Text, nullable=True)  # URL or data URI
    department: Mapped[str | None] = mapped_column(Text, nullable=True)

    lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    lng: Mapped[float | None] = mapped_column(Float, nullable=True)

    @property
    def coordinates(self) -> dict | None:
        if self.lat is None and self.lng is None:
            return None
        return {"lat": self.lat, "lng": self.lng}

    @coordinates.setter
    def coordinates(self, value: dict | None) -> None:
        value = value or {}
        self.lat = value.get("lat")
        self.lng = value.get("lng")
