"""
RepSheet — Каталог реперторіїв

Локальні реперторії обслуговує власний інстанс (Docker),
решта — публічний сервер.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class RepertorySource(str, Enum):
    """Де розміщений реперторій"""
    LOCAL = "local"
    REMOTE = "remote"


class RepertoryInfo(BaseModel):
    """Опис реперторію"""
    model_config = ConfigDict(frozen=True)

    code: str
    label: str
    language: str = "en"
    source: RepertorySource = RepertorySource.REMOTE


REPERTORIES: List[RepertoryInfo] = [
    # Локальний інстанс
    RepertoryInfo(code="publicum", label="Publicum (English)", language="en", source=RepertorySource.LOCAL),
    RepertoryInfo(code="kent-de", label="Kent (Deutsch)", language="de", source=RepertorySource.LOCAL),

    # Публічний сервер
    RepertoryInfo(code="kent", label="Kent (English)"),
    RepertoryInfo(code="boger", label="Boger"),
    RepertoryInfo(code="bogboen", label="Boenninghausen (Boger)"),
    RepertoryInfo(code="hering", label="Hering"),
    RepertoryInfo(code="robasif", label="Roberts - Sensations As If"),
    RepertoryInfo(code="tylercold", label="Tyler - Common Cold"),
    RepertoryInfo(code="bogsk", label="Boger Synoptic Key"),
    RepertoryInfo(code="bogsk-de", label="Boger Synoptic Key (Deutsch)", language="de"),
    RepertoryInfo(code="dorcsi-de", label="Dorcsi (Deutsch)", language="de"),
]

_BY_CODE = {r.code: r for r in REPERTORIES}


def get_repertory(code: str) -> Optional[RepertoryInfo]:
    return _BY_CODE.get(code)


def repertory_label(code: str) -> str:
    """Назва реперторію для експорту (невідомий код повертається як є)"""
    info = _BY_CODE.get(code)
    return info.label if info else code


def is_local_repertory(code: str) -> bool:
    info = _BY_CODE.get(code)
    return info is not None and info.source == RepertorySource.LOCAL
