"""
Тести для модуля api

Клієнт пошуку підміняється через app.dependency_overrides (без мережі).

Запуск: pytest tests/test_api.py -v
"""

import pytest


RUBRIC_A = {
    "rubric": {"id": "A", "fullPath": "Mind > Anxiety > evening"},
    "weightedRemedies": [
        {"remedy": {"nameAbbrev": "X", "nameLong": "X long"}, "weight": 3},
        {"remedy": {"nameAbbrev": "Y", "nameLong": "Y long"}, "weight": 2},
    ]
}

RUBRIC_B = {
    "rubric": {"id": "B", "fullPath": "Generals > Thirst > small quantities"},
    "weightedRemedies": [
        {"remedy": {"nameAbbrev": "X", "nameLong": "X long"}, "weight": 1},
        {"remedy": {"nameAbbrev": "Y", "nameLong": "Y long"}, "weight": 4},
    ]
}


class FakeSearchClient:
    """Клієнт пошуку з фіксованою відповіддю"""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def lookup(self, symptom, repertory=None, page=1, min_weight=1, remedy_filter=""):
        from rep_sheet.errors import SearchQueryError
        from rep_sheet.schemas import RubricResult
        from rep_sheet.search import SearchPage

        self.calls.append((symptom, repertory, page, min_weight))
        if not symptom.strip():
            raise SearchQueryError("Search term is required")
        if self.error is not None:
            raise self.error

        return SearchPage(
            results=[RubricResult.model_validate(RUBRIC_A)],
            total_results=1,
            total_pages=1,
            current_page=page,
        )


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from rep_sheet.api import app, session_manager

    session_manager.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()
    session_manager.reset()


@pytest.fixture
def case_id(client):
    response = client.post("/api/cases")
    assert response.status_code == 201
    return response.json()["case_id"]


def test_health(client):
    """Health check"""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"

    root = client.get("/")
    assert root.json()["name"] == "RepSheet API"

    print(f"✓ Health: {response.json()}")


def test_create_case(client):
    """Новий кейс порожній"""
    response = client.post("/api/cases")
    data = response.json()

    assert response.status_code == 201
    assert data["rubrics"] == []
    assert data["remedies"] == []
    assert client.get("/health").json()["active_sessions"] == 1


def test_unknown_case(client):
    """Невідомий кейс → 404"""
    assert client.get("/api/cases/missing").status_code == 404
    assert client.post("/api/cases/missing/rubrics", json=RUBRIC_A).status_code == 404


def test_analysis_flow(client, case_id):
    """Додавання рубрик, важливість, рейтинг"""
    first = client.post(f"/api/cases/{case_id}/rubrics", json=RUBRIC_A).json()
    assert first["changed"] is True

    duplicate = client.post(f"/api/cases/{case_id}/rubrics", json=RUBRIC_A).json()
    assert duplicate["changed"] is False
    assert duplicate["rubrics_count"] == 1

    client.post(f"/api/cases/{case_id}/rubrics", json=RUBRIC_B)
    response = client.put(f"/api/cases/{case_id}/rubrics/B/importance", json={"importance": 2})
    assert response.status_code == 200

    data = client.get(f"/api/cases/{case_id}").json()

    assert [r["rubric_id"] for r in data["rubrics"]] == ["A", "B"]
    assert [r["importance"] for r in data["rubrics"]] == [1, 2]
    assert [(r["key"], r["total_score"]) for r in data["remedies"]] == [("Y", 10), ("X", 5)]
    assert data["remedies"][0]["rank"] == 1
    assert data["remedies"][0]["band"] == "very-high"

    print(f"✓ Ranking: {[r['key'] for r in data['remedies']]}")


def test_invalid_importance(client, case_id):
    """Недопустима важливість → 422, кейс без змін"""
    client.post(f"/api/cases/{case_id}/rubrics", json=RUBRIC_A)

    response = client.put(f"/api/cases/{case_id}/rubrics/A/importance", json={"importance": 5})

    assert response.status_code == 422
    assert response.json()["error"] == "INVALID_IMPORTANCE"

    data = client.get(f"/api/cases/{case_id}").json()
    assert data["rubrics"][0]["importance"] == 1


def test_importance_for_missing_rubric(client, case_id):
    """Важливість для рубрики поза кейсом → 404"""
    response = client.put(f"/api/cases/{case_id}/rubrics/Z/importance", json={"importance": 2})

    assert response.status_code == 404


def test_remove_and_clear(client, case_id):
    """Видалення рубрики та очищення листа"""
    client.post(f"/api/cases/{case_id}/rubrics", json=RUBRIC_A)
    client.post(f"/api/cases/{case_id}/rubrics", json=RUBRIC_B)

    removed = client.delete(f"/api/cases/{case_id}/rubrics/A").json()
    assert removed["changed"] is True
    assert removed["rubrics_count"] == 1

    missing = client.delete(f"/api/cases/{case_id}/rubrics/A").json()
    assert missing["changed"] is False

    cleared = client.delete(f"/api/cases/{case_id}/rubrics").json()
    assert cleared["changed"] is True
    assert client.get(f"/api/cases/{case_id}").json()["remedies"] == []


def test_remedy_detail(client, case_id):
    """Препарат з внеском рубрик"""
    client.post(f"/api/cases/{case_id}/rubrics", json=RUBRIC_A)
    client.post(f"/api/cases/{case_id}/rubrics", json=RUBRIC_B)

    response = client.get(f"/api/cases/{case_id}/remedy", params={"key": "X"})
    data = response.json()

    assert response.status_code == 200
    assert data["total_score"] == 4
    assert [c["rubric_id"] for c in data["contributions"]] == ["A", "B"]

    assert client.get(f"/api/cases/{case_id}/remedy", params={"key": "Nope"}).status_code == 404


def test_export(client, case_id):
    """Текстовий експорт як файл"""
    client.post(f"/api/cases/{case_id}/rubrics", json=RUBRIC_A)

    response = client.get(
        f"/api/cases/{case_id}/export",
        params={"repertory": "kent", "export_date": "2024-03-05"},
    )

    assert response.status_code == 200
    assert 'filename="repertory-sheet-2024-03-05.txt"' in response.headers["content-disposition"]
    assert "Repertory: Kent (English)" in response.text
    assert "Date: 5/3/2024" in response.text


def test_discard_case(client, case_id):
    """Закриття сесії"""
    assert client.delete(f"/api/cases/{case_id}").status_code == 200
    assert client.get(f"/api/cases/{case_id}").status_code == 404


def test_repertories(client):
    """Каталог реперторіїв"""
    data = client.get("/api/repertories").json()

    codes = {r["code"]: r for r in data}
    assert codes["publicum"]["source"] == "local"
    assert codes["kent"]["source"] == "remote"


def test_search(client):
    """Пошук через підмінений клієнт"""
    from rep_sheet.api import app, get_search_client

    fake = FakeSearchClient()
    app.dependency_overrides[get_search_client] = lambda: fake

    response = client.get("/api/search", params={"symptom": "anxiety", "repertory": "kent", "min_weight": 2})
    data = response.json()

    assert response.status_code == 200
    assert data["results"][0]["rubric"]["id"] == "A"
    assert data["has_more"] is False
    assert fake.calls == [("anxiety", "kent", 1, 2)]


def test_search_errors(client):
    """Порожній запит → 400, збій сервісу → 502"""
    from rep_sheet.api import app, get_search_client
    from rep_sheet.errors import SearchServiceError

    app.dependency_overrides[get_search_client] = lambda: FakeSearchClient()
    assert client.get("/api/search", params={"symptom": "  "}).status_code == 400

    app.dependency_overrides[get_search_client] = lambda: FakeSearchClient(
        error=SearchServiceError("Search service error: 503", status_code=503)
    )
    response = client.get("/api/search", params={"symptom": "anxiety"})

    assert response.status_code == 502
    assert response.json()["error"] == "SEARCH_SERVICE_ERROR"
