# File: civic_reports/services/issue_ids.py
from sqlalchemy import func, update
from sqlalchemy.orm import Session
from civic_reports.models.counter import IssueCounter
from civic_reports.models.issue import Issue

ID_PREFIX = "CIV"
ID_WIDTH = 3
COUNTER_NAME = "issues"

def format_issue_id(number: int) -> str:
    """CIV + number zero padded to at least three digits (CIV007, CIV1234)."""
    return f"{ID_PREFIX}{number:0{ID_WIDTH}d}"

def next_issue_number(db: Session) -> int:
    """Atomically bump the issue counter and return the new value.

    Runs inside the caller's transaction, so a failed insert rolls the
    increment back too. A missing counter row is seeded from the current
    issue count.
    """
    value = db.execute(
        update(IssueCounter)
        .where(IssueCounter.name == COUNTER_NAME)
        .values(value=IssueCounter.value + 1)
        .returning(IssueCounter.value)
        .execution_options(synchronize_session=False)
    ).scalar_one_or_none()
    if value is not None:
        return value
    value = (db.query(func.count(Issue.id)).scalar() or 0) + 1
    db.add(IssueCounter(name=COUNTER_NAME, value=value))
    db.flush()
    return value

def next_issue_id(db: Session) -> str:
    return format_issue_id(next_issue_number(db))
