"""
RepSheet — FastAPI Application

Головний файл FastAPI додатку.

Запуск:
    uvicorn rep_sheet.api.app:app --reload --host 0.0.0.0 --port 8000

    або:

    python scripts/run_api.py
"""

from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rep_sheet.errors import (
    InvalidImportanceError,
    RepSheetError,
    SearchQueryError,
    SearchServiceError,
)
from rep_sheet.logging_conf import setup_logging

from .config import config
from .dependencies import session_manager
from .routes import (
    health_router,
    cases_router,
    search_router,
)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager"""
    setup_logging()
    logger.info("RepSheet API starting (search service: %s)", config.search_url)
    logger.info("Swagger UI: http://%s:%s/docs", config.host, config.port)

    yield

    session_manager.reset()
    logger.info("RepSheet API stopping")


# Створюємо додаток
app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=config.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


# Middleware для логування запитів
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    # Логуємо тільки API запити
    if request.url.path.startswith(config.api_prefix):
        logger.info(
            "%s %s -> %s (%.1fms)",
            request.method, request.url.path, response.status_code, process_time * 1000
        )

    return response


# Обробники помилок
_STATUS_BY_ERROR = (
    (InvalidImportanceError, 422),
    (SearchQueryError, 400),
    (SearchServiceError, 502),
)


@app.exception_handler(RepSheetError)
async def repsheet_exception_handler(request: Request, exc: RepSheetError):
    status_code = next(
        (code for error_cls, code in _STATUS_BY_ERROR if isinstance(exc, error_cls)),
        500
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if config.debug else None
        }
    )


# Підключаємо роутери
app.include_router(health_router)
app.include_router(search_router, prefix=config.api_prefix)
app.include_router(cases_router, prefix=config.api_prefix)
