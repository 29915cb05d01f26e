from __future__ import annotations

import asyncio

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from notebook_api.config import settings
from notebook_api.db.base import get_supabase_client

router = APIRouter()


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "notebook-api",
            "version": "0.1.0"
        }
    )


@router.get("/ready")
async def readiness_check():
    """Readiness check endpoint; reports 503 when the notes table is unreachable."""
    db_status = "connected"
    code = status.HTTP_200_OK
    try:
        client = get_supabase_client()
        await asyncio.to_thread(
            lambda: client.table(settings.notes_table).select("id").limit(1).execute()
        )
    except Exception as e:
        db_status = f"error: {str(e)}"
        code = status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(
        status_code=code,
        content={
            "status": "ready" if code == status.HTTP_200_OK else "degraded",
            "database": db_status,
            "api_prefix": settings.api_prefix
        }
    )
