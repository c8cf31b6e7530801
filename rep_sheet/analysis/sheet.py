"""
RepSheet — Реперторний лист

RepertorySheet об'єднує компоненти:
1. RepertoryCase — набір вибраних рубрик
2. compute_aggregates — оцінка препаратів
3. rank / band_for_coverage — впорядкування та смуги покриття
4. serialize_case — текстовий експорт

Після кожної успішної зміни кейсу аналіз перераховується повністю.
"""

from typing import Any, Dict, List, Optional
import logging

from rep_sheet.case import RepertoryCase, SelectedRubric
from rep_sheet.config import RepSheetConfig, get_default_config
from rep_sheet.export import ExportMetadata, serialize_case
from rep_sheet.schemas import CoverageBand, RemedyAggregate, RubricResult

from .ranking import band_for_coverage
from .scoring import compute_aggregates


logger = logging.getLogger(__name__)


class RepertorySheet:
    """
    Реперторний лист однієї консультації.

    Приклад використання:
        sheet = RepertorySheet()

        sheet.add_rubric(anxiety_evening)
        sheet.add_rubric(thirst_small_quantities)
        sheet.set_importance(anxiety_evening.id, 3)

        for agg in sheet.top(5):
            print(agg.label, agg.total_score, sheet.band_for(agg).value)

        text = sheet.export(ExportMetadata(date.today(), "Kent (English)"))
    """

    def __init__(
        self,
        case: Optional[RepertoryCase] = None,
        config: Optional[RepSheetConfig] = None
    ):
        """
        Args:
            case: Існуючий кейс (за замовчуванням новий порожній)
            config: Конфігурація
        """
        self.config = config or get_default_config()
        # Порожній кейс хибний (__len__), тому перевірка саме на None
        self.case = case if case is not None else RepertoryCase(config=self.config.case)
        self._aggregates: List[RemedyAggregate] = []
        self.refresh()

    # === Зміни кейсу ===

    def add_rubric(self, rubric: RubricResult) -> bool:
        """Додати рубрику (повтор — no-op)"""
        changed = self.case.add_rubric(rubric)
        if changed:
            self.refresh()
        return changed

    def remove_rubric(self, rubric_id: str) -> bool:
        """Видалити рубрику (відсутня — no-op)"""
        changed = self.case.remove_rubric(rubric_id)
        if changed:
            self.refresh()
        return changed

    def set_importance(self, rubric_id: str, value: int) -> bool:
        """
        Змінити важливість рубрики.

        Raises:
            InvalidImportanceError: кейс та аналіз залишаються без змін
        """
        changed = self.case.set_importance(rubric_id, value)
        if changed:
            self.refresh()
        return changed

    def clear(self) -> None:
        """Очистити лист"""
        self.case.clear()
        self.refresh()

    def refresh(self) -> List[RemedyAggregate]:
        """Перерахувати аналіз з поточного кейсу"""
        self._aggregates = compute_aggregates(self.case.selected_rubrics)
        logger.debug(
            "Sheet %s recomputed: %d rubrics, %d remedies",
            self.case.case_id, self.case.n_rubrics, len(self._aggregates)
        )
        return self._aggregates

    # === Читання ===

    @property
    def selected_rubrics(self) -> List[SelectedRubric]:
        return self.case.selected_rubrics

    @property
    def aggregates(self) -> List[RemedyAggregate]:
        """Препарати в порядку рейтингу (копія)"""
        return list(self._aggregates)

    def top(self, n: Optional[int] = None) -> List[RemedyAggregate]:
        """Топ-N препаратів (за замовчуванням analysis.default_top_n)"""
        n = self.config.analysis.default_top_n if n is None else n
        if n <= 0:
            return []
        return self._aggregates[:n]

    @staticmethod
    def band_for(aggregate: RemedyAggregate) -> CoverageBand:
        return band_for_coverage(aggregate.coverage_percent)

    @property
    def top_remedy(self) -> Optional[RemedyAggregate]:
        return self._aggregates[0] if self._aggregates else None

    def summary(self) -> Dict[str, Any]:
        """Підсумок листа"""
        top = self.top_remedy
        return {
            "case_id": self.case.case_id,
            "rubrics": self.case.n_rubrics,
            "remedies": len(self._aggregates),
            "top_remedy": top.label if top else None,
            "top_band": self.band_for(top).value if top else None,
        }

    def export(self, metadata: ExportMetadata, top_n: Optional[int] = None) -> str:
        """Текстовий експорт листа"""
        text = serialize_case(
            self.case.selected_rubrics,
            self._aggregates,
            metadata,
            top_n=top_n,
            config=self.config.export,
        )
        logger.info(
            "Sheet %s exported (%d rubrics, %d remedies)",
            self.case.case_id, self.case.n_rubrics, len(self._aggregates)
        )
        return text

    def __repr__(self) -> str:
        top = self.top_remedy
        return (
            f"RepertorySheet("
            f"case={self.case.case_id}, "
            f"rubrics={self.case.n_rubrics}, "
            f"remedies={len(self._aggregates)}, "
            f"top={top.label if top else 'None'}"
            f")"
        )
