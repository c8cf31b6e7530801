"""
RepSheet — Search Routes

Проксі до сервісу пошуку по реперторію та каталог реперторіїв.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from rep_sheet.search import OOREPClient, REPERTORIES

from ..dependencies import get_search_client
from ..models import RepertoryResponse, SearchResponse

router = APIRouter(tags=["Search"])


@router.get("/repertories", response_model=List[RepertoryResponse])
async def list_repertories() -> List[RepertoryResponse]:
    """Доступні реперторії"""
    return [
        RepertoryResponse(
            code=r.code,
            label=r.label,
            language=r.language,
            source=r.source.value,
        )
        for r in REPERTORIES
    ]


@router.get("/search", response_model=SearchResponse)
def search_rubrics(
    symptom: str = Query(..., description="Симптом для пошуку"),
    repertory: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    min_weight: int = Query(default=1, ge=1, le=5),
    remedy_filter: str = Query(default=""),
    client: OOREPClient = Depends(get_search_client)
) -> SearchResponse:
    """
    Пошук рубрик.

    Порожній симптом → 400, помилка сервісу пошуку → 502.
    """
    # Синхронний endpoint: FastAPI виконує його в threadpool
    result = client.lookup(
        symptom,
        repertory=repertory,
        page=page,
        min_weight=min_weight,
        remedy_filter=remedy_filter,
    )

    return SearchResponse(
        results=result.results,
        total_results=result.total_results,
        total_pages=result.total_pages,
        current_page=result.current_page,
        has_more=result.has_more,
        remedy_stats=result.remedy_stats,
    )
