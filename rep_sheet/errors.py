"""
RepSheet — Ієрархія помилок

Всі помилки пакету наслідуються від RepSheetError і несуть:
- message: текст помилки
- code: машинний код для API відповідей
- details: додаткові дані
"""

from typing import Any, Dict, Optional


class RepSheetError(Exception):
    """Базова помилка RepSheet"""

    def __init__(
        self,
        message: str,
        code: str = "REPSHEET_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Словник для відповіді API"""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidImportanceError(RepSheetError, ValueError):
    """
    Недопустиме значення важливості рубрики.

    Кейс при цьому не змінюється — можна повторити з валідним значенням.
    """

    def __init__(self, rubric_id: str, value: Any, allowed: tuple):
        super().__init__(
            message=f"Importance must be one of {list(allowed)}, got {value!r}",
            code="INVALID_IMPORTANCE",
            details={"rubric_id": rubric_id, "value": repr(value), "allowed": list(allowed)},
        )
        self.rubric_id = rubric_id
        self.value = value
        self.allowed = allowed


class ExportWriteError(RepSheetError, OSError):
    """Не вдалося записати експорт (файл, буфер обміну)"""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Failed to write export to {path}: {reason}",
            code="EXPORT_WRITE_ERROR",
            details={"path": path},
        )
        self.path = path


class SearchQueryError(RepSheetError, ValueError):
    """Некоректний пошуковий запит (порожній симптом)"""

    def __init__(self, message: str):
        super().__init__(message=message, code="SEARCH_QUERY_ERROR")


class SearchServiceError(RepSheetError):
    """Помилка зовнішнього сервісу пошуку по реперторію"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="SEARCH_SERVICE_ERROR",
            details={"status_code": status_code, **(details or {})},
        )
        self.status_code = status_code
