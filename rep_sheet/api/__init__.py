"""
RepSheet — REST API модуль

FastAPI REST API для реперторного листа.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: Сесії та клієнт пошуку

Запуск:
    uvicorn rep_sheet.api.app:app --reload --port 8000

Або:
    python scripts/run_api.py

Документація:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET    /                                          - Root info
    GET    /health                                    - Health check

    GET    /api/repertories                           - Каталог реперторіїв
    GET    /api/search?symptom=                       - Пошук рубрик

    POST   /api/cases                                 - Новий лист
    GET    /api/cases/{id}                            - Кейс + рейтинг
    DELETE /api/cases/{id}                            - Закрити сесію
    POST   /api/cases/{id}/rubrics                    - Додати рубрику
    DELETE /api/cases/{id}/rubrics                    - Очистити лист
    DELETE /api/cases/{id}/rubrics/{rubric_id}        - Видалити рубрику
    PUT    /api/cases/{id}/rubrics/{rubric_id}/importance - Важливість
    GET    /api/cases/{id}/remedy?key=                - Деталі препарату
    GET    /api/cases/{id}/export                     - Текстовий експорт
"""

from .app import app
from .dependencies import session_manager, get_sessions, get_search_client


__all__ = [
    "app",
    "session_manager",
    "get_sessions",
    "get_search_client",
]
