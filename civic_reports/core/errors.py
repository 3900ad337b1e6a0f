# File: civic_reports/core/errors.py

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

MAX_ERRORS = 5


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def format_validation_errors(exc: RequestValidationError) -> str:
    details = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        msg = error.get("msg", "")
        details.append(f"{loc}: {msg}" if loc else msg)
    shown = details[:MAX_ERRORS]
    if len(details) > MAX_ERRORS:
        shown.append("...and more errors")
    return "; ".join(shown) if shown else "Invalid request data"


def register_exception_handlers(app: FastAPI) -> None:
    """Every error leaves the API as {"error": <message>}."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:  # noqa
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return error_response(exc.status_code, detail)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa
        return error_response(400, format_validation_errors(exc))
