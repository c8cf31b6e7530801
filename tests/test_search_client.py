"""
Тести для модуля search (без мережі)

HTTP сесія підміняється через monkeypatch на client.http.get.

Запуск: pytest tests/test_search_client.py -v
"""

import pytest
import requests


SEARCH_PAYLOAD = [
    {
        "totalNumberOfResults": 2,
        "totalNumberOfPages": 3,
        "currPage": 1,
        "results": [
            {
                "rubric": {"id": 11, "fullPath": "Mind > Anxiety > evening"},
                "weightedRemedies": [
                    {"remedy": {"nameAbbrev": "Ars.", "nameLong": "Arsenicum album"}, "weight": 3},
                ]
            },
            {
                "rubric": {"id": 12, "fullPath": "Mind > Anxiety > night"},
                "weightedRemedies": None
            },
        ]
    },
    [{"nameAbbrev": "Ars.", "count": 1}],
]


class FakeResponse:
    def __init__(self, status_code=200, payload=None, invalid_json=False):
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._invalid_json:
            raise ValueError("not json")
        return self._payload


class FakeServer:
    """Записує запити та віддає відповіді за URL"""

    def __init__(self, session, responses, issue_cookie=True):
        self.session = session
        self.responses = responses
        self.issue_cookie = issue_cookie
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append(url)
        if url.endswith("/api/available_remedies") and self.issue_cookie:
            self.session.cookies.set("PLAY_SESSION", "session-token")

        queue = self.responses.get(url)
        if queue is None:
            return FakeResponse(200, [])
        if isinstance(queue, list) and queue and isinstance(queue[0], FakeResponse):
            return queue.pop(0) if len(queue) > 1 else queue[0]
        return queue


@pytest.fixture
def client():
    from rep_sheet.config import SearchConfig
    from rep_sheet.search import OOREPClient

    return OOREPClient(SearchConfig(local_url="http://local", remote_url="https://remote"))


def test_lookup_local(client, monkeypatch):
    """Пошук у локальному реперторії"""
    server = FakeServer(client.http, {
        "http://local/api/lookup_rep": FakeResponse(200, SEARCH_PAYLOAD),
    })
    monkeypatch.setattr(client.http, "get", server.get)

    page = client.lookup("  anxiety  ", repertory="publicum")

    assert server.calls == ["http://local/api/lookup_rep"]
    assert [r.id for r in page.results] == ["11", "12"]
    assert page.results[1].weighted_remedies == []
    assert page.total_results == 2
    assert page.total_pages == 3
    assert page.has_more
    assert page.remedy_stats == [{"nameAbbrev": "Ars.", "count": 1}]

    print(f"✓ Lookup: {len(page.results)} rubrics")


def test_lookup_single_object_payload(client, monkeypatch):
    """Відповідь без статистики препаратів (один об'єкт)"""
    server = FakeServer(client.http, {
        "http://local/api/lookup_rep": FakeResponse(200, SEARCH_PAYLOAD[0]),
    })
    monkeypatch.setattr(client.http, "get", server.get)

    page = client.lookup("anxiety")

    assert len(page.results) == 2
    assert page.remedy_stats == []


@pytest.mark.parametrize("symptom", ["", "   "])
def test_lookup_blank_symptom(client, symptom):
    """Порожній симптом — помилка запиту"""
    from rep_sheet.errors import SearchQueryError

    with pytest.raises(SearchQueryError):
        client.lookup(symptom)


def test_lookup_service_error(client, monkeypatch):
    """Помилка сервісу → SearchServiceError зі статусом"""
    from rep_sheet.errors import SearchServiceError

    server = FakeServer(client.http, {
        "http://local/api/lookup_rep": FakeResponse(500),
    })
    monkeypatch.setattr(client.http, "get", server.get)

    with pytest.raises(SearchServiceError) as exc_info:
        client.lookup("anxiety")

    assert exc_info.value.status_code == 500


def test_lookup_invalid_json(client, monkeypatch):
    """Невалідний JSON → SearchServiceError"""
    from rep_sheet.errors import SearchServiceError

    server = FakeServer(client.http, {
        "http://local/api/lookup_rep": FakeResponse(200, invalid_json=True),
    })
    monkeypatch.setattr(client.http, "get", server.get)

    with pytest.raises(SearchServiceError):
        client.lookup("anxiety")


def test_lookup_malformed_rubric(client, monkeypatch):
    """Рубрика з вагою поза 1-5 → SearchServiceError"""
    from rep_sheet.errors import SearchServiceError

    payload = {"results": [{
        "rubric": {"id": "1", "fullPath": "Mind"},
        "weightedRemedies": [{"remedy": {"nameAbbrev": "Ars."}, "weight": 9}],
    }]}
    server = FakeServer(client.http, {
        "http://local/api/lookup_rep": FakeResponse(200, payload),
    })
    monkeypatch.setattr(client.http, "get", server.get)

    with pytest.raises(SearchServiceError):
        client.lookup("anxiety")


def test_network_failure(client, monkeypatch):
    """Мережева помилка → SearchServiceError"""
    from rep_sheet.errors import SearchServiceError

    def failing_get(url, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(client.http, "get", failing_get)

    with pytest.raises(SearchServiceError):
        client.lookup("anxiety")


def test_remote_session_flow(client, monkeypatch):
    """Віддалений реперторій: головна сторінка → API cookie → пошук"""
    server = FakeServer(client.http, {
        "https://remote/api/lookup_rep": FakeResponse(200, SEARCH_PAYLOAD),
    })
    monkeypatch.setattr(client.http, "get", server.get)

    client.lookup("anxiety", repertory="kent")
    client.lookup("thirst", repertory="kent")

    assert server.calls == [
        "https://remote",
        "https://remote/api/available_remedies",
        "https://remote/api/lookup_rep",
        "https://remote/api/lookup_rep",
    ]


def test_remote_session_retry_on_403(client, monkeypatch):
    """403 → сесія відновлюється, запит повторюється один раз"""
    server = FakeServer(client.http, {
        "https://remote/api/lookup_rep": [FakeResponse(403), FakeResponse(200, SEARCH_PAYLOAD)],
    })
    monkeypatch.setattr(client.http, "get", server.get)

    page = client.lookup("anxiety", repertory="kent")

    assert len(page.results) == 2
    assert server.calls.count("https://remote") == 2
    assert server.calls.count("https://remote/api/lookup_rep") == 2


def test_remote_session_without_cookie(client, monkeypatch):
    """Сервер не видав PLAY_SESSION → SearchServiceError"""
    from rep_sheet.errors import SearchServiceError

    server = FakeServer(client.http, {}, issue_cookie=False)
    monkeypatch.setattr(client.http, "get", server.get)

    with pytest.raises(SearchServiceError):
        client.lookup("anxiety", repertory="kent")


def test_available_remedies_cached(client, monkeypatch):
    """Список препаратів кешується"""
    remedies = [{"nameAbbrev": "Ars.", "nameLong": "Arsenicum album"}]
    server = FakeServer(client.http, {
        "http://local/api/available_remedies": FakeResponse(200, remedies),
    })
    monkeypatch.setattr(client.http, "get", server.get)

    assert client.available_remedies() == remedies
    assert client.available_remedies() == remedies
    assert server.calls == ["http://local/api/available_remedies"]


def test_repertory_catalog():
    """Каталог реперторіїв"""
    from rep_sheet.search import REPERTORIES, is_local_repertory, repertory_label

    codes = [r.code for r in REPERTORIES]

    assert len(codes) == len(set(codes))
    assert is_local_repertory("publicum")
    assert not is_local_repertory("kent")
    assert not is_local_repertory("unknown")
    assert repertory_label("kent") == "Kent (English)"
    assert repertory_label("custom") == "custom"


def test_remote_session_shared_between_threads(client, monkeypatch):
    """Паралельні пошуки відкривають сесію один раз"""
    import time
    from concurrent.futures import ThreadPoolExecutor

    server = FakeServer(client.http, {
        "https://remote/api/lookup_rep": FakeResponse(200, SEARCH_PAYLOAD),
    })

    def slow_get(url, **kwargs):
        if url == "https://remote":
            time.sleep(0.05)
        return server.get(url, **kwargs)

    monkeypatch.setattr(client.http, "get", slow_get)

    with ThreadPoolExecutor(max_workers=4) as pool:
        pages = list(pool.map(lambda s: client.lookup(s, repertory="kent"), ["a", "b", "c", "d"]))

    assert all(len(page.results) == 2 for page in pages)
    assert server.calls.count("https://remote") == 1
    assert server.calls.count("https://remote/api/lookup_rep") == 4


def test_refresh_skipped_when_session_already_renewed(client, monkeypatch):
    """Застаріла мітка: сесію вже відновив інший запит, cookies не скидаються"""
    server = FakeServer(client.http, {})
    monkeypatch.setattr(client.http, "get", server.get)

    stale_marker = client._ensure_remote_session()
    fresh_marker = client._refresh_remote_session(stale_marker)
    assert fresh_marker != stale_marker
    calls_after_first_refresh = len(server.calls)

    # Другий потік з тією ж застарілою міткою
    assert client._refresh_remote_session(stale_marker) == fresh_marker
    assert len(server.calls) == calls_after_first_refresh
    assert "PLAY_SESSION" in client.http.cookies
