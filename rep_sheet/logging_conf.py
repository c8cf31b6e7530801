"""
RepSheet — Налаштування логування

Один виклик setup_logging() на старті застосунку (API, скрипти).
Модулі пакету пишуть через logging.getLogger(__name__).
"""

import logging
import os
import sys
from typing import Optional


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Налаштувати root logger.

    Повторний виклик нічого не робить, якщо handler уже доданий.

    Args:
        level: DEBUG / INFO / WARNING / ERROR (за замовчуванням LOG_LEVEL або INFO)
    """
    root = logging.getLogger()

    if any(getattr(h, "_rep_sheet", False) for h in root.handlers):
        return

    effective_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root.setLevel(effective_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._rep_sheet = True
    root.addHandler(handler)
