"""
RepSheet — Схеми результатів аналізу

Pydantic моделі для:
- CoverageBand: смуга покриття (very-high ... minimal)
- RubricContribution: внесок однієї рубрики в оцінку препарату
- RemedyAggregate: агрегована статистика препарату по кейсу
"""

from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class CoverageBand(str, Enum):
    """Смуга покриття рубрик препаратом"""
    VERY_HIGH = "very-high"   # >= 80%
    HIGH = "high"             # 60-79%
    MODERATE = "moderate"     # 40-59%
    LOW = "low"               # 20-39%
    MINIMAL = "minimal"       # < 20%

    @classmethod
    def from_coverage(cls, pct: float) -> "CoverageBand":
        if pct >= 80:
            return cls.VERY_HIGH
        elif pct >= 60:
            return cls.HIGH
        elif pct >= 40:
            return cls.MODERATE
        elif pct >= 20:
            return cls.LOW
        else:
            return cls.MINIMAL


class RubricContribution(BaseModel):
    """Внесок рубрики в оцінку препарату"""
    model_config = ConfigDict(frozen=True)

    rubric_id: str
    rubric_path: str
    weight: int = Field(..., ge=1, le=5)
    importance: int = Field(..., ge=1)

    @property
    def score(self) -> int:
        return self.weight * self.importance


class RemedyAggregate(BaseModel):
    """
    Агрегована статистика препарату по всіх вибраних рубриках.

    Завжди обчислюється з поточного кейсу, ніколи не змінюється напряму.
    """
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Ключ ідентичності препарату")
    abbreviation: str = Field(default="", description="Скорочення ('' якщо відсутнє)")
    name: str = Field(..., description="Назва для відображення")

    total_score: int = Field(..., ge=0, description="Σ weight × importance")
    occurrences: int = Field(..., ge=0, description="Кількість рубрик з препаратом")
    max_weight: int = Field(..., ge=0, le=5, description="Максимальна вага")
    coverage_percent: int = Field(..., ge=0, le=100, description="Покриття рубрик, %")

    contributions: List[RubricContribution] = Field(default_factory=list)

    @property
    def band(self) -> CoverageBand:
        """Смуга покриття"""
        return CoverageBand.from_coverage(self.coverage_percent)

    @property
    def label(self) -> str:
        """Скорочення для відображення ('?' якщо відсутнє)"""
        return self.abbreviation or "?"
