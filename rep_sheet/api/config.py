"""
RepSheet — API Configuration

Налаштування FastAPI сервера.
"""

from dataclasses import dataclass, field
import os


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # Сервіс пошуку (локальний інстанс)
    search_url: str = "http://localhost:9000"

    # Сесії
    max_sessions: int = 1000
    session_timeout_minutes: int = 60

    # API
    api_prefix: str = "/api"
    api_title: str = "RepSheet API"
    api_description: str = "Реперторний аналіз: рубрики, оцінка та рейтинг препаратів"
    api_version: str = "0.1.0"

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "true").lower() == "true",
            search_url=os.getenv("OOREP_API_URL", "http://localhost:9000"),
            session_timeout_minutes=int(os.getenv("SESSION_TIMEOUT_MINUTES", "60")),
        )


# Глобальна конфігурація
config = APIConfig.from_env()
