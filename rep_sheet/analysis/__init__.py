"""
RepSheet — Аналіз реперторного листа

Компоненти:
- compute_aggregates: Scoring Engine (чиста функція)
- rank, band_for_coverage, top_n: Ranking Presenter
- RepertorySheet: кейс + перерахунок аналізу після кожної зміни

Приклад використання:
    from rep_sheet.analysis import compute_aggregates, rank, top_n

    aggregates = compute_aggregates(case.selected_rubrics)
    for agg in top_n(aggregates, 10):
        print(f"{agg.label}: {agg.total_score} ({agg.coverage_percent}%)")
"""

from .ranking import rank, band_for_coverage, top_n
from .scoring import compute_aggregates, coverage_percent, remedy_key
from .sheet import RepertorySheet


__all__ = [
    # Scoring
    "compute_aggregates",
    "coverage_percent",
    "remedy_key",

    # Ranking
    "rank",
    "band_for_coverage",
    "top_n",

    # Sheet
    "RepertorySheet",
]
