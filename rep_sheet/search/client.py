"""
RepSheet — Клієнт сервісу пошуку по реперторію

Пошук рубрик (/api/lookup_rep) та список препаратів (/api/available_remedies).

Публічний сервер вимагає cookie-сесію:
1. Головна сторінка → CSRF cookie
2. Будь-який API endpoint → PLAY_SESSION cookie
Сесія живе session_ttl_minutes; при 401/403 відновлюється один раз.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging
import threading
import time

import requests
from pydantic import ValidationError

from rep_sheet.config import SearchConfig
from rep_sheet.errors import SearchQueryError, SearchServiceError
from rep_sheet.schemas import RubricResult

from .catalog import is_local_repertory


logger = logging.getLogger(__name__)


@dataclass
class SearchPage:
    """Одна сторінка результатів пошуку"""
    results: List[RubricResult]
    total_results: int = 0
    total_pages: int = 1
    current_page: int = 1
    remedy_stats: List[Any] = field(default_factory=list)

    @property
    def has_more(self) -> bool:
        return self.current_page < self.total_pages


class OOREPClient:
    """
    Клієнт пошуку по реперторію.

    Приклад:
        client = OOREPClient()
        page = client.lookup("anxiety evening", repertory="kent", min_weight=2)

        for result in page.results:
            print(result.full_path, len(result.weighted_remedies))
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        session: Optional[requests.Session] = None
    ):
        self.config = config or SearchConfig()
        self.http = session or requests.Session()

        self._remote_ready_at: Optional[float] = None
        # Клієнт спільний для потоків threadpool FastAPI
        self._session_lock = threading.RLock()
        self._session_generation = 0
        self._remedies_cache: Optional[List[Dict[str, Any]]] = None
        self._remedies_cached_at: Optional[float] = None

    # === Пошук ===

    def lookup(
        self,
        symptom: str,
        repertory: Optional[str] = None,
        page: int = 1,
        min_weight: int = 1,
        remedy_filter: str = ""
    ) -> SearchPage:
        """
        Знайти рубрики за симптомом.

        Raises:
            SearchQueryError: порожній symptom
            SearchServiceError: помилка мережі / сервісу / формату відповіді
        """
        if not symptom or not symptom.strip():
            raise SearchQueryError("Search term is required")

        repertory = repertory or self.config.default_repertory
        params = {
            "repertory": repertory,
            "symptom": symptom.strip(),
            "page": str(page),
            "remedyString": remedy_filter,
            "minWeight": str(min_weight),
            "getRemedies": "1",
        }

        raw = self._get_json("/api/lookup_rep", params, remote=not is_local_repertory(repertory))
        return self._parse_page(raw, page)

    def available_remedies(self) -> List[Dict[str, Any]]:
        """Список препаратів локального інстансу (кешується)"""
        ttl = self.config.remedies_cache_minutes * 60
        now = time.monotonic()

        if self._remedies_cache is not None and now - self._remedies_cached_at < ttl:
            return self._remedies_cache

        data = self._get_json("/api/available_remedies", params=None, remote=False)
        if not isinstance(data, list):
            raise SearchServiceError("Unexpected remedies payload")

        self._remedies_cache = data
        self._remedies_cached_at = now
        return data

    # === Парсинг ===

    def _parse_page(self, raw: Any, requested_page: int) -> SearchPage:
        # Відповідь: [searchResults, remedyStats] або один об'єкт
        if isinstance(raw, list):
            search_results = raw[0] if raw else {}
            remedy_stats = raw[1] if len(raw) > 1 and raw[1] else []
        else:
            search_results = raw
            remedy_stats = []

        if not isinstance(search_results, dict):
            raise SearchServiceError("Unexpected search payload")

        try:
            results = [
                RubricResult.model_validate(item)
                for item in search_results.get("results") or []
            ]
        except ValidationError as e:
            raise SearchServiceError(
                "Malformed rubric in search results",
                details={"errors": e.error_count()}
            ) from e

        return SearchPage(
            results=results,
            total_results=int(search_results.get("totalNumberOfResults") or 0),
            total_pages=int(search_results.get("totalNumberOfPages") or 1),
            current_page=int(search_results.get("currPage") or requested_page),
            remedy_stats=remedy_stats,
        )

    # === HTTP ===

    def _get_json(self, path: str, params: Optional[Dict[str, str]], remote: bool) -> Any:
        base_url = self.config.remote_url if remote else self.config.local_url

        session_marker = None
        if remote:
            session_marker = self._ensure_remote_session()

        response = self._request(base_url + path, params, remote)

        if remote and response.status_code in (401, 403):
            logger.info("Remote search session expired, refreshing")
            self._refresh_remote_session(session_marker)
            response = self._request(base_url + path, params, remote)

        if not response.ok:
            logger.warning("Search service error %s for %s", response.status_code, path)
            raise SearchServiceError(
                f"Search service error: {response.status_code}",
                status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise SearchServiceError("Search service returned invalid JSON") from e

    def _request(self, url: str, params: Optional[Dict[str, str]], remote: bool) -> requests.Response:
        headers = {"Accept": "application/json"}
        if remote:
            headers["User-Agent"] = self.config.user_agent
            headers["Referer"] = self.config.remote_url

        try:
            return self.http.get(
                url,
                params=params,
                headers=headers,
                timeout=self.config.timeout_seconds
            )
        except requests.RequestException as e:
            logger.warning("Search request failed: %s", e)
            raise SearchServiceError(f"Search request failed: {e}") from e

    def _ensure_remote_session(self) -> int:
        """
        Отримати CSRF та PLAY_SESSION cookies публічного сервера.

        Returns:
            Номер поточної сесії (для _refresh_remote_session)
        """
        with self._session_lock:
            ttl = self.config.session_ttl_minutes * 60
            if self._remote_ready_at is not None and time.monotonic() - self._remote_ready_at < ttl:
                return self._session_generation

            headers = {"User-Agent": self.config.user_agent}
            try:
                home = self.http.get(
                    self.config.remote_url,
                    headers={**headers, "Accept": "text/html,application/xhtml+xml"},
                    timeout=self.config.timeout_seconds
                )
                if not home.ok:
                    raise SearchServiceError(
                        f"Failed to open search session: {home.status_code}",
                        status_code=home.status_code
                    )

                api = self.http.get(
                    self.config.remote_url + "/api/available_remedies",
                    headers={**headers, "Accept": "application/json"},
                    timeout=self.config.timeout_seconds
                )
                if not api.ok:
                    raise SearchServiceError(
                        f"Failed to open search session: {api.status_code}",
                        status_code=api.status_code
                    )
            except requests.RequestException as e:
                raise SearchServiceError(f"Failed to open search session: {e}") from e

            if "PLAY_SESSION" not in self.http.cookies:
                raise SearchServiceError("Search service did not issue a session cookie")

            self._remote_ready_at = time.monotonic()
            self._session_generation += 1
            logger.info("Remote search session established")
            return self._session_generation

    def _refresh_remote_session(self, stale_marker: Optional[int]) -> int:
        """
        Відновити сесію після 401/403.

        Якщо інший потік уже відновив сесію після stale_marker,
        cookies не скидаються і використовується нова сесія.
        """
        with self._session_lock:
            if self._remote_ready_at is None or self._session_generation == stale_marker:
                self.reset_session()
            return self._ensure_remote_session()

    def reset_session(self) -> None:
        """Скинути cookie-сесію публічного сервера"""
        with self._session_lock:
            self.http.cookies.clear()
            self._remote_ready_at = None
