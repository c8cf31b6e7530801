"""
RepSheet — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .cases import router as cases_router
from .search import router as search_router

__all__ = [
    'health_router',
    'cases_router',
    'search_router',
]
