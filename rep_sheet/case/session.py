"""
RepSheet — Кейс (набір вибраних рубрик)

RepertoryCase зберігає робочий набір рубрик клініциста для однієї консультації:
- Вибрані рубрики в порядку додавання (тільки для відображення)
- Множник важливості кожної рубрики
- Час створення та останньої зміни

Кейс живе лише в пам'яті і ніколи не зберігається цим пакетом.
"""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from datetime import datetime
import logging
import uuid

from rep_sheet.config import CaseConfig
from rep_sheet.errors import InvalidImportanceError
from rep_sheet.schemas import RubricResult


logger = logging.getLogger(__name__)


@dataclass
class SelectedRubric:
    """Рубрика в кейсі разом з множником важливості"""
    rubric: RubricResult
    importance: int = 1

    @property
    def rubric_id(self) -> str:
        return self.rubric.id

    @property
    def full_path(self) -> str:
        return self.rubric.full_path


@dataclass
class RepertoryCase:
    """
    Кейс реперторизації.

    Приклад:
        case = RepertoryCase()

        case.add_rubric(rubric)              # importance = 1
        case.set_importance(rubric.id, 3)    # Very Important (3x)
        case.remove_rubric(rubric.id)
        case.clear()
    """

    # Ідентифікатор
    case_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])

    # Налаштування
    config: CaseConfig = field(default_factory=CaseConfig)

    # Рубрики: rubric_id -> SelectedRubric (dict зберігає порядок додавання)
    _entries: Dict[str, SelectedRubric] = field(default_factory=dict, repr=False)

    # Timestamps
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def add_rubric(self, rubric: RubricResult) -> bool:
        """
        Додати рубрику.

        Якщо рубрика з таким id вже є — нічого не змінюється
        (перше додавання виграє, важливість не скидається).

        Returns:
            True якщо рубрику додано
        """
        if rubric.id in self._entries:
            logger.debug("Case %s: rubric %s already selected", self.case_id, rubric.id)
            return False

        self._entries[rubric.id] = SelectedRubric(
            rubric=rubric,
            importance=self.config.default_importance
        )
        self._touch()
        return True

    def remove_rubric(self, rubric_id: str) -> bool:
        """
        Видалити рубрику (без помилки якщо її немає).

        Returns:
            True якщо рубрику видалено
        """
        if self._entries.pop(rubric_id, None) is None:
            logger.debug("Case %s: rubric %s not in case", self.case_id, rubric_id)
            return False

        self._touch()
        return True

    def set_importance(self, rubric_id: str, value: Any) -> bool:
        """
        Встановити множник важливості рубрики.

        Args:
            rubric_id: ID рубрики
            value: одне з config.allowed_importance

        Returns:
            True якщо значення застосовано, False якщо рубрики немає в кейсі

        Raises:
            InvalidImportanceError: значення поза дозволеним набором
        """
        allowed = self.config.allowed_importance

        # bool є підкласом int, але не множником
        if isinstance(value, bool) or not isinstance(value, int) or value not in allowed:
            logger.warning(
                "Case %s: rejected importance %r for rubric %s",
                self.case_id, value, rubric_id
            )
            raise InvalidImportanceError(rubric_id, value, allowed)

        entry = self._entries.get(rubric_id)
        if entry is None:
            return False

        entry.importance = value
        self._touch()
        return True

    def clear(self) -> None:
        """Очистити кейс"""
        self._entries.clear()
        self._touch()

    def get(self, rubric_id: str) -> Optional[SelectedRubric]:
        """Отримати вибрану рубрику"""
        return self._entries.get(rubric_id)

    def __contains__(self, rubric_id: object) -> bool:
        return rubric_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def selected_rubrics(self) -> List[SelectedRubric]:
        """Вибрані рубрики в порядку додавання (копія)"""
        return list(self._entries.values())

    @property
    def rubric_ids(self) -> List[str]:
        return list(self._entries.keys())

    @property
    def n_rubrics(self) -> int:
        return len(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def get_summary(self) -> Dict[str, Any]:
        """Отримати підсумок кейсу"""
        return {
            "case_id": self.case_id,
            "rubrics": self.n_rubrics,
            "importance": {e.rubric_id: e.importance for e in self._entries.values()},
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    def _touch(self) -> None:
        self.updated_at = datetime.now()

    def __repr__(self) -> str:
        return f"RepertoryCase(id={self.case_id}, rubrics={self.n_rubrics})"
