"""
RepSheet — Ranking Presenter

Впорядкування та смуги покриття для агрегатів препаратів.

Порядок:
1. occurrences ↓
2. total_score ↓
3. скорочення ↑ (лексично), потім ключ ↑ — детермінований tie-break
"""

from typing import Iterable, List

from rep_sheet.schemas import CoverageBand, RemedyAggregate


def _sort_key(aggregate: RemedyAggregate):
    return (
        -aggregate.occurrences,
        -aggregate.total_score,
        aggregate.abbreviation,
        aggregate.key,
    )


def rank(aggregates: Iterable[RemedyAggregate]) -> List[RemedyAggregate]:
    """Відсортувати препарати (новий список, вхід не змінюється)"""
    return sorted(aggregates, key=_sort_key)


def band_for_coverage(pct: float) -> CoverageBand:
    """Смуга покриття: >=80 very-high, 60-79 high, 40-59 moderate, 20-39 low, <20 minimal"""
    return CoverageBand.from_coverage(pct)


def top_n(aggregates: Iterable[RemedyAggregate], n: int) -> List[RemedyAggregate]:
    """
    Перші n препаратів після rank().

    n більше за довжину → весь список; n <= 0 → порожній список.
    """
    if n <= 0:
        return []
    return rank(aggregates)[:n]
