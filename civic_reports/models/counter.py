# File: civic_reports/models/counter.py

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from civic_reports.db.base import Base

class IssueCounter(Base):
    __tablename__ = "issue_counters"

    # one row per sequence; "issues" backs the CIV### identifiers
    name: Mapped[str] = mapped_column(String(50), primary_key=True)
    value: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
