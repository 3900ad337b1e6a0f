# File: civic_reports/routers/public.py

from fastapi import APIRouter

router = APIRouter(tags=["public"])

API_VERSION = "1.0.0"

ENDPOINTS = [
    "GET /api/issues - Get all issues",
    "POST /api/issues - Create new issue",
    "PUT /api/issues/:id - Update issue",
    "GET /api/stats - Get statistics",
    "GET /api/issues/category/:category - Get issues by category",
    "GET /api/issues/status/:status - Get issues by status",
]

@router.get("/")
def banner():
    return {
        "message": "Civic Reports API is running!",
        "version": API_VERSION,
        "status": "Active",
        "endpoints": ENDPOINTS,
    }

@router.get("/health")
def health():
    return {"ok": True}
