"""
RepSheet — API Dependencies

Dependency Injection для FastAPI:
- SessionManager: реперторні листи активних сесій (в пам'яті)
- OOREPClient: клієнт сервісу пошуку
"""

from typing import Dict, Optional
from datetime import datetime, timedelta
import logging
import threading

from fastapi import HTTPException

from rep_sheet.analysis import RepertorySheet
from rep_sheet.config import SearchConfig, get_default_config
from rep_sheet.search import OOREPClient

from .config import config


logger = logging.getLogger(__name__)


class SessionManager:
    """
    Менеджер сесій.
    Зберігає один RepertorySheet на сесію в пам'яті.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.sheets: Dict[str, RepertorySheet] = {}
        self.lock = threading.Lock()

    def create_sheet(self) -> RepertorySheet:
        """Створити новий лист"""
        sheet = RepertorySheet(config=get_default_config())

        with self.lock:
            self._cleanup_old_sessions()

            if len(self.sheets) >= config.max_sessions:
                oldest = min(self.sheets, key=lambda sid: self.sheets[sid].case.updated_at)
                del self.sheets[oldest]

            self.sheets[sheet.case.case_id] = sheet

        logger.info("Session %s created", sheet.case.case_id)
        return sheet

    def get_sheet(self, case_id: str) -> Optional[RepertorySheet]:
        """Отримати лист"""
        return self.sheets.get(case_id)

    def delete_sheet(self, case_id: str) -> bool:
        """Видалити лист"""
        with self.lock:
            if case_id in self.sheets:
                del self.sheets[case_id]
                logger.info("Session %s discarded", case_id)
                return True
        return False

    def get_active_count(self) -> int:
        """Кількість активних сесій"""
        return len(self.sheets)

    def reset(self) -> None:
        """Видалити всі сесії"""
        with self.lock:
            self.sheets.clear()

    def _cleanup_old_sessions(self):
        """Видалити застарілі сесії"""
        timeout = timedelta(minutes=config.session_timeout_minutes)
        now = datetime.now()

        expired = [
            sid for sid, sheet in self.sheets.items()
            if now - sheet.case.updated_at > timeout
        ]

        for sid in expired:
            del self.sheets[sid]
            logger.info("Session %s expired", sid)


# Глобальні екземпляри
session_manager = SessionManager()
search_client = OOREPClient(SearchConfig(local_url=config.search_url))


def get_sessions() -> SessionManager:
    """Dependency для SessionManager"""
    return session_manager


def get_search_client() -> OOREPClient:
    """Dependency для OOREPClient"""
    return search_client


def get_sheet_or_404(case_id: str, sessions: SessionManager) -> RepertorySheet:
    """Лист сесії або 404"""
    sheet = sessions.get_sheet(case_id)
    if sheet is None:
        raise HTTPException(status_code=404, detail=f"Case {case_id} not found")
    return sheet
