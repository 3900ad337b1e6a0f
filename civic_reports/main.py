# File: civic_reports/main.py

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from civic_reports.core.config import cors_origins_list, settings
from civic_reports.core.errors import register_exception_handlers
from civic_reports.core.limits import BodySizeLimitMiddleware
from civic_reports.core.logging import configure_logging, get_logger
from civic_reports.db.session import init_db, masked_database_url
from civic_reports.routers import issues, issues_stats, public

logger = get_logger("civic_reports")

@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Database: {masked_database_url()}")
    if settings.auto_create_tables:
        init_db()
    yield
    logger.info("Shutting down Civic Reports API")

def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Civic Reports API", version=public.API_VERSION, lifespan=lifespan)
    register_exception_handlers(app)

    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    origins = cors_origins_list()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(public.router)
    app.include_router(issues.router)
    app.include_router(issues_stats.router)
    return app

app = create_app()

def run() -> None:
    logger.info(f"Civic Reports API running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)

if __name__ == "__main__":
    run()
