# File: civic_reports/routers/issues.py
from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from civic_reports.core.logging import get_logger
from civic_reports.db.session import get_db
from civic_reports.models.issue import Issue, DEFAULT_STATUS, utcnow
from civic_reports.schemas.issue import IssueCreate, IssueOut, IssueUpdate
from civic_reports.services.issue_ids import next_issue_id

router = APIRouter(prefix="/api/issues", tags=["issues"])
logger = get_logger(__name__)


def _read_failed(e: SQLAlchemyError, what: str) -> HTTPException:
    logger.error(f"Failed to {what}: {e}", exc_info=True)
    return HTTPException(status_code=500, detail=str(e))


def _write_failed(db: Session, e: SQLAlchemyError, what: str) -> HTTPException:
    db.rollback()
    logger.error(f"Failed to {what}: {e}", exc_info=True)
    return HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=List[IssueOut])
def list_issues(db: Session = Depends(get_db)):
    try:
        return db.query(Issue).order_by(Issue.date_reported.desc()).all()
    except SQLAlchemyError as e:
        raise _read_failed(e, "list issues")


@router.post("", response_model=IssueOut, status_code=201)
def create_issue(payload: Optional[IssueCreate] = Body(default=None), db: Session = Depends(get_db)):
    # a missing body is an empty record
    data = payload.model_dump(exclude_unset=True) if payload is not None else {}
    data.setdefault("status", DEFAULT_STATUS)
    data.setdefault("date_reported", utcnow())
    try:
        issue = Issue(id=next_issue_id(db), **data)
        db.add(issue)
        db.commit()
        db.refresh(issue)
    except SQLAlchemyError as e:
        raise _write_failed(db, e, "create issue")
    logger.info(f"Created issue {issue.id}")
    return issue


@router.put("/{issue_id}", response_model=IssueOut)
def update_issue(issue_id: str, payload: Optional[IssueUpdate] = Body(default=None), db: Session = Depends(get_db)):
    changes = payload.model_dump(exclude_unset=True) if payload is not None else {}
    try:
        issue = db.query(Issue).filter(Issue.id == issue_id).first()
        if not issue:
            raise HTTPException(status_code=404, detail="Issue not found")
        for field, value in changes.items():
            setattr(issue, field, value)
        db.commit()
        db.refresh(issue)
    except SQLAlchemyError as e:
        raise _write_failed(db, e, f"update issue {issue_id}")
    logger.info(f"Updated issue {issue.id}: {', '.join(changes) or 'no changes'}")
    return issue


@router.get("/category/{category}", response_model=List[IssueOut])
def issues_by_category(category: str, db: Session = Depends(get_db)):
    try:
        return db.query(Issue).filter(Issue.category == category).all()
    except SQLAlchemyError as e:
        raise _read_failed(e, f"list issues in category {category!r}")


@router.get("/status/{status}", response_model=List[IssueOut])
def issues_by_status(status: str, db: Session = Depends(get_db)):
    try:
        return db.query(Issue).filter(Issue.status == status).all()
    except SQLAlchemyError as e:
        raise _read_failed(e, f"list issues with status {status!r}")
