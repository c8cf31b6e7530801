"""
RepSheet — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from ..config import config
from ..dependencies import get_sessions, SessionManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    sessions: SessionManager = Depends(get_sessions)
) -> HealthResponse:
    """Перевірка стану сервера"""
    return HealthResponse(
        status="ok",
        version=config.api_version,
        active_sessions=sessions.get_active_count()
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": config.api_title,
        "version": config.api_version,
        "description": config.api_description,
        "docs": "/docs",
        "health": "/health",
    }
