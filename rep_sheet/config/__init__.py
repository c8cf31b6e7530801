"""RepSheet — Модуль конфігурації"""
from .settings import (
    RepSheetConfig,
    get_default_config,
    CaseConfig,
    AnalysisConfig,
    ExportConfig,
    SearchConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "RepSheetConfig",
    "get_default_config",
    "CaseConfig",
    "AnalysisConfig",
    "ExportConfig",
    "SearchConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
