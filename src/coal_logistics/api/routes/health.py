"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/database", status_code=status.HTTP_200_OK)
def check_database() -> dict:
    """Check the Supabase connection by counting shipments."""
    from ...data.errors import DataAccessError
    from ...data.shipments_repository import shipments_repository
    from ...db.supabase import get_supabase_client

    supabase = get_supabase_client()
    if not supabase:
        return {
            "configured": False,
            "message": "Supabase not configured. Set CLM_SUPABASE_URL and CLM_SUPABASE_KEY environment variables.",
            "shipments_count": 0,
        }

    try:
        count = shipments_repository(supabase).count()
    except DataAccessError as exc:
        return {
            "configured": True,
            "connected": False,
            "error": str(exc),
            "message": f"Database connection error: {exc}",
        }
    return {
        "configured": True,
        "connected": True,
        "shipments_count": count,
        "message": f"Database connected. Found {count} shipments.",
    }
