"""
RepSheet — Cases Routes

Endpoints для реперторного листа:
- Створення / видалення кейсу
- Додавання та видалення рубрик
- Зміна важливості
- Аналіз та текстовий експорт
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from rep_sheet.analysis import RepertorySheet
from rep_sheet.export import ExportMetadata, export_filename
from rep_sheet.schemas import RubricResult
from rep_sheet.search import repertory_label

from ..dependencies import get_sessions, get_sheet_or_404, SessionManager
from ..models import (
    CaseResponse,
    ImportanceRequest,
    MutationResponse,
    RemedyDetailResponse,
    SelectedRubricResponse,
    remedy_to_response,
)

router = APIRouter(prefix="/cases", tags=["Cases"])


def sheet_to_response(sheet: RepertorySheet, top_n: Optional[int] = None) -> CaseResponse:
    """Конвертувати лист в Pydantic модель"""
    case = sheet.case

    rubrics = [
        SelectedRubricResponse(
            rubric_id=entry.rubric_id,
            full_path=entry.full_path,
            importance=entry.importance,
            remedies_count=len(entry.rubric.weighted_remedies),
        )
        for entry in case.selected_rubrics
    ]

    remedies = [
        remedy_to_response(i, agg)
        for i, agg in enumerate(sheet.top(top_n), start=1)
    ]

    return CaseResponse(
        case_id=case.case_id,
        rubrics=rubrics,
        remedies=remedies,
        total_remedies=len(sheet.aggregates),
        created_at=case.created_at.isoformat(),
        updated_at=case.updated_at.isoformat(),
    )


def _mutation(sheet: RepertorySheet, changed: bool) -> MutationResponse:
    return MutationResponse(
        case_id=sheet.case.case_id,
        changed=changed,
        rubrics_count=sheet.case.n_rubrics,
    )


@router.post("", response_model=CaseResponse, status_code=201)
async def create_case(
    sessions: SessionManager = Depends(get_sessions)
) -> CaseResponse:
    """Почати новий реперторний лист"""
    sheet = sessions.create_sheet()
    return sheet_to_response(sheet)


@router.get("/{case_id}", response_model=CaseResponse)
async def get_case(
    case_id: str,
    top_n: Optional[int] = Query(default=None, ge=0, description="Скільки препаратів повернути"),
    sessions: SessionManager = Depends(get_sessions)
) -> CaseResponse:
    """Стан кейсу та рейтинг препаратів"""
    sheet = get_sheet_or_404(case_id, sessions)
    return sheet_to_response(sheet, top_n)


@router.delete("/{case_id}", response_model=MutationResponse)
async def discard_case(
    case_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> MutationResponse:
    """Закрити сесію (кейс не зберігається)"""
    sheet = get_sheet_or_404(case_id, sessions)
    sessions.delete_sheet(case_id)
    return MutationResponse(case_id=case_id, changed=True, rubrics_count=sheet.case.n_rubrics)


@router.post("/{case_id}/rubrics", response_model=MutationResponse)
async def add_rubric(
    case_id: str,
    rubric: RubricResult,
    sessions: SessionManager = Depends(get_sessions)
) -> MutationResponse:
    """
    Додати рубрику з результатів пошуку.

    Повторне додавання тієї ж рубрики нічого не змінює (`changed: false`).
    """
    sheet = get_sheet_or_404(case_id, sessions)
    return _mutation(sheet, sheet.add_rubric(rubric))


@router.delete("/{case_id}/rubrics", response_model=MutationResponse)
async def clear_rubrics(
    case_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> MutationResponse:
    """Очистити лист"""
    sheet = get_sheet_or_404(case_id, sessions)
    had_rubrics = not sheet.case.is_empty
    sheet.clear()
    return _mutation(sheet, had_rubrics)


@router.delete("/{case_id}/rubrics/{rubric_id}", response_model=MutationResponse)
async def remove_rubric(
    case_id: str,
    rubric_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> MutationResponse:
    """Видалити рубрику (відсутня рубрика — `changed: false`)"""
    sheet = get_sheet_or_404(case_id, sessions)
    return _mutation(sheet, sheet.remove_rubric(rubric_id))


@router.put("/{case_id}/rubrics/{rubric_id}/importance", response_model=MutationResponse)
async def set_importance(
    case_id: str,
    rubric_id: str,
    request: ImportanceRequest,
    sessions: SessionManager = Depends(get_sessions)
) -> MutationResponse:
    """
    Змінити важливість рубрики.

    Недопустиме значення → 422, кейс не змінюється.
    """
    sheet = get_sheet_or_404(case_id, sessions)

    # InvalidImportanceError обробляється в app.py
    changed = sheet.set_importance(rubric_id, request.importance)
    if not changed:
        raise HTTPException(status_code=404, detail=f"Rubric {rubric_id} not in case")

    return _mutation(sheet, changed)


@router.get("/{case_id}/remedy", response_model=RemedyDetailResponse)
async def get_remedy(
    case_id: str,
    key: str = Query(..., description="Ключ препарату"),
    sessions: SessionManager = Depends(get_sessions)
) -> RemedyDetailResponse:
    """Препарат з внеском кожної рубрики"""
    sheet = get_sheet_or_404(case_id, sessions)

    for i, agg in enumerate(sheet.aggregates, start=1):
        if agg.key == key:
            base = remedy_to_response(i, agg)
            return RemedyDetailResponse(
                **base.model_dump(),
                contributions=[c.model_dump() for c in agg.contributions],
            )

    raise HTTPException(status_code=404, detail=f"Remedy {key} not in analysis")


@router.get("/{case_id}/export", response_class=PlainTextResponse)
async def export_case(
    case_id: str,
    repertory: str = Query(default="publicum", description="Код реперторію"),
    export_date: Optional[date] = Query(default=None, description="Дата (YYYY-MM-DD)"),
    top_n: Optional[int] = Query(default=None, ge=0),
    sessions: SessionManager = Depends(get_sessions)
) -> PlainTextResponse:
    """Текстовий експорт реперторного листа"""
    sheet = get_sheet_or_404(case_id, sessions)
    export_date = export_date or date.today()

    text = sheet.export(
        ExportMetadata(export_date=export_date, repertory_name=repertory_label(repertory)),
        top_n=top_n,
    )

    filename = export_filename(export_date, sheet.config.export.filename_prefix)
    return PlainTextResponse(
        content=text,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
