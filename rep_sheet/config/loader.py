"""RepSheet — Завантаження конфігурації"""
import yaml
from pathlib import Path
from dataclasses import asdict
from .settings import RepSheetConfig


def save_yaml(config: RepSheetConfig, path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = asdict(config)
    # YAML safe_load не читає tuple
    data["case"]["allowed_importance"] = list(data["case"]["allowed_importance"])
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def save_config(config: RepSheetConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> RepSheetConfig:
    return RepSheetConfig.from_dict(load_yaml(path))
