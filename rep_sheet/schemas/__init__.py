"""
RepSheet — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Компоненти:
- repertory.py: Remedy, WeightedRemedyLink, Rubric, RubricResult
- analysis.py: CoverageBand, RubricContribution, RemedyAggregate

Приклад використання:
    from rep_sheet.schemas import RubricResult

    # Результат від сервісу пошуку (camelCase ключі)
    result = RubricResult.model_validate(payload)

    # Серіалізація назад в JSON
    json_data = result.model_dump_json(by_alias=True)
"""

from .repertory import (
    Remedy,
    WeightedRemedyLink,
    Rubric,
    RubricResult,
)

from .analysis import (
    CoverageBand,
    RubricContribution,
    RemedyAggregate,
)


__all__ = [
    # Repertory
    "Remedy",
    "WeightedRemedyLink",
    "Rubric",
    "RubricResult",

    # Analysis
    "CoverageBand",
    "RubricContribution",
    "RemedyAggregate",
]
