"""
RepSheet — Scoring Engine

Чиста функція: вибрані рубрики → агрегована статистика по препаратах.

Для кожного препарату m:
    total_score[m]      = Σ weight(m, r) × importance(r)
    occurrences[m]      = кількість рубрик з m
    max_weight[m]       = max weight(m, r)
    coverage_percent[m] = round(occurrences[m] / |rubrics| × 100)

Результат не залежить від порядку додавання рубрик.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence
import logging

from rep_sheet.case import SelectedRubric
from rep_sheet.schemas import Remedy, RemedyAggregate, RubricContribution, WeightedRemedyLink

from .ranking import rank


logger = logging.getLogger(__name__)


def remedy_key(remedy: Remedy, rubric_id: str, position: int) -> str:
    """
    Ключ ідентичності препарату.

    - є скорочення        → скорочення
    - тільки повна назва  → "~<назва>"
    - нічого немає        → "?<rubric_id>#<позиція>" (унікальний для кожного зв'язку)
    """
    if remedy.abbreviation:
        return remedy.abbreviation

    long_name = (remedy.name_long or "").strip()
    if long_name:
        return f"~{long_name}"

    return f"?{rubric_id}#{position}"


def coverage_percent(occurrences: int, n_rubrics: int) -> int:
    """Відсоток покриття з округленням half-up (12.5 → 13)"""
    if n_rubrics <= 0:
        return 0
    return (200 * occurrences + n_rubrics) // (2 * n_rubrics)


@dataclass
class _Accumulator:
    key: str
    abbreviation: str
    name: str
    total_score: int = 0
    max_weight: int = 0
    contributions: List[RubricContribution] = field(default_factory=list)


def _strongest_links(entry: SelectedRubric) -> Dict[str, WeightedRemedyLink]:
    """Препарат, що повторюється в рубриці, враховується один раз з більшою вагою"""
    links: Dict[str, WeightedRemedyLink] = {}
    for position, link in enumerate(entry.rubric.weighted_remedies):
        key = remedy_key(link.remedy, entry.rubric_id, position)
        current = links.get(key)
        if current is None or link.weight > current.weight:
            links[key] = link
    return links


def compute_aggregates(selected_rubrics: Sequence[SelectedRubric]) -> List[RemedyAggregate]:
    """
    Обчислити статистику препаратів по вибраних рубриках.

    Args:
        selected_rubrics: рубрики кейсу з множниками важливості

    Returns:
        Список RemedyAggregate, відсортований rank()
    """
    n_rubrics = len(selected_rubrics)
    if n_rubrics == 0:
        return []

    accumulators: Dict[str, _Accumulator] = {}

    # Обхід у порядку rubric_id
    for entry in sorted(selected_rubrics, key=lambda e: e.rubric_id):
        for key, link in _strongest_links(entry).items():
            acc = accumulators.get(key)
            if acc is None:
                acc = _Accumulator(
                    key=key,
                    abbreviation=link.remedy.abbreviation,
                    name=link.remedy.display_name,
                )
                accumulators[key] = acc

            acc.total_score += link.weight * entry.importance
            acc.max_weight = max(acc.max_weight, link.weight)
            acc.contributions.append(RubricContribution(
                rubric_id=entry.rubric_id,
                rubric_path=entry.full_path,
                weight=link.weight,
                importance=entry.importance,
            ))

    aggregates = [
        RemedyAggregate(
            key=acc.key,
            abbreviation=acc.abbreviation,
            name=acc.name,
            total_score=acc.total_score,
            occurrences=len(acc.contributions),
            max_weight=acc.max_weight,
            coverage_percent=coverage_percent(len(acc.contributions), n_rubrics),
            contributions=acc.contributions,
        )
        for acc in accumulators.values()
    ]

    logger.debug("Scored %d remedies across %d rubrics", len(aggregates), n_rubrics)

    return rank(aggregates)
