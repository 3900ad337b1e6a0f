# File: civic_reports/routers/issues_stats.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from civic_reports.core.config import settings
from civic_reports.core.logging import get_logger
from civic_reports.db.session import get_db
from civic_reports.models.issue import Issue
from civic_reports.schemas.issue import StatsOut

router = APIRouter(prefix="/api/stats", tags=["issues:stats"])
logger = get_logger(__name__)

@router.get("", response_model=StatsOut)
def stats(db: Session = Depends(get_db)):
    try:
        q = db.query(Issue)
        total = q.count()
        pending = q.filter(Issue.status == "Pending").count()
        in_progress = q.filter(Issue.status == "In Progress").count()
        resolved = q.filter(Issue.status == "Resolved").count()
    except SQLAlchemyError as e:
        logger.error(f"Failed to compute issue stats: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    return {
        "totalReports": total,
        "pending": pending,
        "inProgress": in_progress,
        "resolved": resolved,
        # placeholder, not derived from the data
        "averageResolutionTime": settings.average_resolution_time,
    }
