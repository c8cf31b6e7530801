"""
RepSheet API — Pydantic Models

Моделі для запитів та відповідей REST API.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from rep_sheet.schemas import CoverageBand, RemedyAggregate, RubricResult


# === Request Models ===

class ImportanceRequest(BaseModel):
    """Запит на зміну важливості рубрики"""
    importance: int = Field(
        ...,
        description="Множник важливості: 1 (Normal), 2 (Important), 3 (Very Important)",
        examples=[2]
    )


# === Response Models ===

class SelectedRubricResponse(BaseModel):
    """Рубрика в кейсі"""
    rubric_id: str
    full_path: str
    importance: int
    remedies_count: int


class RemedyResponse(BaseModel):
    """Препарат у рейтингу"""
    rank: int
    key: str
    abbreviation: str
    name: str
    total_score: int
    occurrences: int
    max_weight: int
    coverage_percent: int
    band: CoverageBand


class CaseResponse(BaseModel):
    """Стан кейсу разом з аналізом"""
    case_id: str
    rubrics: List[SelectedRubricResponse]
    remedies: List[RemedyResponse]
    total_remedies: int
    created_at: str
    updated_at: str


class MutationResponse(BaseModel):
    """Результат зміни кейсу"""
    case_id: str
    changed: bool
    rubrics_count: int


class RemedyDetailResponse(RemedyResponse):
    """Препарат з внеском кожної рубрики"""
    contributions: List[Dict[str, Any]]


class SearchResponse(BaseModel):
    """Сторінка результатів пошуку"""
    results: List[RubricResult]
    total_results: int
    total_pages: int
    current_page: int
    has_more: bool
    remedy_stats: List[Any] = Field(default_factory=list)


class RepertoryResponse(BaseModel):
    code: str
    label: str
    language: str
    source: str


class HealthResponse(BaseModel):
    """Стан сервера"""
    status: str
    version: str
    active_sessions: int


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: Optional[Dict[str, Any]] = None


def remedy_to_response(rank: int, agg: RemedyAggregate) -> RemedyResponse:
    """Конвертувати агрегат в response"""
    return RemedyResponse(
        rank=rank,
        key=agg.key,
        abbreviation=agg.abbreviation,
        name=agg.name,
        total_score=agg.total_score,
        occurrences=agg.occurrences,
        max_weight=agg.max_weight,
        coverage_percent=agg.coverage_percent,
        band=agg.band,
    )
