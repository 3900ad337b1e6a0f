# File: civic_reports/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from civic_reports.core.config import settings
from civic_reports.db.base import Base

def make_engine(url: str) -> Engine:
    if make_url(url).get_backend_name() == "sqlite":
        # FastAPI serves sync handlers from a threadpool
        return create_engine(url, connect_args={"check_same_thread": False}, pool_pre_ping=True)
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        pool_recycle=3600,
        pool_timeout=30
    )

engine = make_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db(bind: Engine = engine) -> None:
    # register models on Base.metadata
    from civic_reports.models import counter, issue  # noqa: F401
    Base.metadata.create_all(bind=bind)

def masked_database_url(url: str = settings.database_url) -> str:
    return make_url(url).render_as_string(hide_password=True)
