"""
RepSheet — Налаштування системи

Всі параметри зібрані в dataclass-и для:
- Легкого доступу через config.case.allowed_importance
- Серіалізації в YAML/JSON
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Tuple


# =============================================================================
# CASE
# =============================================================================

@dataclass
class CaseConfig:
    """Параметри кейсу (набору вибраних рубрик)"""

    # Дозволені множники важливості: Normal (1x), Important (2x), Very Important (3x)
    allowed_importance: Tuple[int, ...] = (1, 2, 3)
    default_importance: int = 1

    def __post_init__(self):
        self.allowed_importance = tuple(int(v) for v in self.allowed_importance)
        if not self.allowed_importance:
            raise ValueError("allowed_importance must not be empty")
        if any(v < 1 for v in self.allowed_importance):
            raise ValueError("allowed_importance values must be positive integers")
        if self.default_importance not in self.allowed_importance:
            raise ValueError(
                f"default_importance {self.default_importance} "
                f"not in allowed_importance {self.allowed_importance}"
            )


# =============================================================================
# ANALYSIS
# =============================================================================

@dataclass
class AnalysisConfig:
    """Параметри аналізу"""
    default_top_n: int = 20


# =============================================================================
# EXPORT
# =============================================================================

@dataclass
class ExportConfig:
    """Параметри текстового експорту"""
    title: str = "REPERTORY SHEET ANALYSIS"
    top_n: int = 20
    # Шаблон str.format над датою d: без нулів як en-IN, або "{d:%Y-%m-%d}"
    date_format: str = "{d.day}/{d.month}/{d.year}"
    filename_prefix: str = "repertory-sheet"


# =============================================================================
# SEARCH
# =============================================================================

@dataclass
class SearchConfig:
    """Параметри клієнта пошуку по реперторію"""

    # Локальний інстанс (Docker) та публічний сервер
    local_url: str = "http://localhost:9000"
    remote_url: str = "https://www.oorep.com"

    timeout_seconds: float = 30.0
    default_repertory: str = "publicum"

    # Cookie-сесія віддаленого сервера
    session_ttl_minutes: int = 20

    # Кеш списку препаратів
    remedies_cache_minutes: int = 60

    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


# =============================================================================
# MAIN CONFIG
# =============================================================================

@dataclass
class RepSheetConfig:
    """Головна конфігурація RepSheet"""

    version: str = "0.1.0"

    case: CaseConfig = field(default_factory=CaseConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    search: SearchConfig = field(default_factory=SearchConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RepSheetConfig":
        """Створити конфігурацію зі словника (наприклад, з YAML)"""
        data = data or {}
        sections = {
            "case": CaseConfig,
            "analysis": AnalysisConfig,
            "export": ExportConfig,
            "search": SearchConfig,
        }

        kwargs: Dict[str, Any] = {}
        for name, section_cls in sections.items():
            raw = data.get(name) or {}
            known = {f.name for f in fields(section_cls)}
            kwargs[name] = section_cls(**{k: v for k, v in raw.items() if k in known})

        if "version" in data:
            kwargs["version"] = str(data["version"])

        return cls(**kwargs)


def get_default_config() -> RepSheetConfig:
    """Отримати конфігурацію за замовчуванням"""
    return RepSheetConfig()
