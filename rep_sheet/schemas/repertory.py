"""
RepSheet — Схеми даних реперторію

Pydantic моделі для даних від сервісу пошуку:
- Remedy: препарат (скорочення + повна назва)
- WeightedRemedyLink: препарат з вагою 1-5 в межах рубрики
- Rubric: рубрика (id + повний шлях)
- RubricResult: рубрика разом з препаратами (одиниця вибору в кейс)

Поля приймають як snake_case, так і camelCase ключі сервісу пошуку
(nameAbbrev, fullPath, weightedRemedies).
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Remedy(BaseModel):
    """
    Гомеопатичний препарат.

    Приклад:
        remedy = Remedy(name_abbrev="Ars.", name_long="Arsenicum album")
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name_abbrev: Optional[str] = Field(
        default=None,
        alias="nameAbbrev",
        description="Скорочення (ключ ідентичності)"
    )
    name_long: Optional[str] = Field(
        default=None,
        alias="nameLong",
        description="Повна назва"
    )

    @property
    def abbreviation(self) -> str:
        """Скорочення без пробілів ('' якщо відсутнє)"""
        return (self.name_abbrev or "").strip()

    @property
    def display_name(self) -> str:
        """Назва для відображення"""
        long_name = (self.name_long or "").strip()
        return long_name or self.abbreviation or "Unknown"


class WeightedRemedyLink(BaseModel):
    """Препарат з вагою в межах однієї рубрики"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    remedy: Remedy
    weight: int = Field(..., ge=1, le=5, description="Сила зв'язку 1-5")


class Rubric(BaseModel):
    """Рубрика реперторію"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Зовнішній ID рубрики")
    full_path: str = Field(
        default="",
        alias="fullPath",
        description="Повний шлях, напр. 'Mind > Anxiety > evening'"
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Сервіс може повертати числовий id"""
        if isinstance(v, bool):
            raise ValueError("rubric id must be a string or integer")
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("id")
    @classmethod
    def non_blank_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("rubric id must not be blank")
        return v


class RubricResult(BaseModel):
    """
    Результат пошуку: рубрика з препаратами.

    Приклад:
        result = RubricResult.model_validate({
            "rubric": {"id": "101", "fullPath": "Mind > Anxiety > evening"},
            "weightedRemedies": [
                {"remedy": {"nameAbbrev": "Ars.", "nameLong": "Arsenicum album"}, "weight": 3}
            ]
        })
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rubric: Rubric
    weighted_remedies: List[WeightedRemedyLink] = Field(
        default_factory=list,
        alias="weightedRemedies"
    )

    @field_validator("weighted_remedies", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v

    @property
    def id(self) -> str:
        return self.rubric.id

    @property
    def full_path(self) -> str:
        return self.rubric.full_path
