"""
RepSheet — Текстовий експорт реперторного листа

serialize_case() формує детермінований plain-text документ:
заголовок (дата, реперторій), вибрані рубрики, топ-N препаратів.
Сама функція не робить I/O — запис виконує write_export().
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence
import logging

from rep_sheet.case import SelectedRubric
from rep_sheet.config import ExportConfig
from rep_sheet.errors import ExportWriteError
from rep_sheet.schemas import RemedyAggregate, RubricResult


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportMetadata:
    """Метадані експорту"""
    export_date: date
    repertory_name: str


def _underline(text: str, char: str) -> str:
    return char * len(text)


def serialize_case(
    selected_rubrics: Sequence[SelectedRubric],
    ranked_aggregates: Sequence[RemedyAggregate],
    metadata: ExportMetadata,
    top_n: Optional[int] = None,
    config: Optional[ExportConfig] = None
) -> str:
    """
    Серіалізувати кейс та рейтинг препаратів у текст.

    Args:
        selected_rubrics: рубрики в порядку кейсу
        ranked_aggregates: препарати вже в порядку rank()
        metadata: дата та назва реперторію
        top_n: скільки препаратів виводити (за замовчуванням config.top_n)
        config: ExportConfig

    Returns:
        Текст без завершального переносу рядка
    """
    config = config or ExportConfig()
    limit = config.top_n if top_n is None else max(0, top_n)
    n_rubrics = len(selected_rubrics)

    lines: List[str] = [
        config.title,
        _underline(config.title, "="),
        f"Date: {config.date_format.format(d=metadata.export_date)}",
        f"Repertory: {metadata.repertory_name}",
        "",
        "SELECTED RUBRICS:",
        "----------------",
    ]

    for i, entry in enumerate(selected_rubrics, start=1):
        lines.append(f"{i}. {entry.full_path} (Importance: {entry.importance})")

    lines += [
        "",
        "REMEDY ANALYSIS:",
        "----------------",
    ]

    for i, agg in enumerate(list(ranked_aggregates)[:limit], start=1):
        lines.append(
            f"{i}. {agg.label} ({agg.name}) - Score: {agg.total_score}, "
            f"Coverage: {agg.coverage_percent}%, "
            f"Occurrences: {agg.occurrences}/{n_rubrics}"
        )

    return "\n".join(lines)


def export_filename(export_date: date, prefix: str = "repertory-sheet") -> str:
    """Ім'я файлу: repertory-sheet-YYYY-MM-DD.txt"""
    return f"{prefix}-{export_date.isoformat()}.txt"


def rubric_paths_text(selected_rubrics: Sequence[SelectedRubric]) -> str:
    """Шляхи рубрик, по одному на рядок (для копіювання)"""
    return "\n".join(entry.full_path for entry in selected_rubrics)


def rubric_summary(rubric: RubricResult, limit: int = 10) -> str:
    """
    Короткий опис рубрики: шлях + найсильніші препарати.

    Приклад:
        Mind > Anxiety > evening
        Remedies: Ars.(3), Calc.(2)
    """
    links = sorted(
        rubric.weighted_remedies,
        key=lambda link: (-link.weight, link.remedy.abbreviation)
    )[:max(0, limit)]

    remedies = ", ".join(
        f"{link.remedy.abbreviation or '?'}({link.weight})" for link in links
    )
    return f"{rubric.full_path}\nRemedies: {remedies}"


def write_export(text: str, path) -> Path:
    """
    Записати експорт у файл (UTF-8).

    Raises:
        ExportWriteError: помилка файлової системи; стан кейсу не змінюється
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.warning("Export write failed: %s (%s)", path, e)
        raise ExportWriteError(str(path), str(e)) from e

    logger.info("Repertory sheet exported to %s", path)
    return path
