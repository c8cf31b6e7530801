"""
RepSheet — Пошук по реперторію

Компоненти:
- OOREPClient: HTTP клієнт сервісу пошуку (requests)
- SearchPage: сторінка результатів
- REPERTORIES: каталог реперторіїв
"""

from .catalog import (
    RepertorySource,
    RepertoryInfo,
    REPERTORIES,
    get_repertory,
    repertory_label,
    is_local_repertory,
)
from .client import OOREPClient, SearchPage


__all__ = [
    "OOREPClient",
    "SearchPage",
    "RepertorySource",
    "RepertoryInfo",
    "REPERTORIES",
    "get_repertory",
    "repertory_label",
    "is_local_repertory",
]
