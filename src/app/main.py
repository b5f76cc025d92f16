"""Точка входа в приложение snippet-service."""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.logging_config import LOG_LEVEL, get_logger, init_logging
from api import router as api_router
from snippets.service import SnippetService

settings = get_settings()
logger = get_logger(__name__)


app = FastAPI(title=settings.app_name)


@app.on_event("startup")
async def on_startup() -> None:
    """Действия при запуске приложения."""

    init_logging()
    app.state.is_ready = False
    app.state.init_error = None

    logger.info("[Startup] Инициализация сервиса сниппетов")
    try:
        service = SnippetService(settings)
        # Прогрев генератора по умолчанию: ошибки конфигурации варианта видны сразу
        service.generator_for()
    except ValueError as exc:
        app.state.init_error = f"Ошибка конфигурации генератора: {exc}"
        logger.exception("[Startup] Не удалось создать генератор сниппетов")
        return

    app.state.snippet_service = service
    app.state.is_ready = True
    logger.info(
        "Сервис %s запущен на %s:%s, вариант по умолчанию: %s",
        settings.app_name,
        settings.host,
        settings.port,
        settings.default_variant,
    )


@app.on_event("shutdown")
async def on_shutdown() -> None:
    """Действия при остановке приложения."""

    logger.info("Сервис %s останавливается", settings.app_name)


@app.get("/health", summary="Проверка доступности сервиса")
async def healthcheck() -> dict[str, str]:
    """Простой health-endpoint."""

    is_ready = getattr(app.state, "is_ready", False)
    error = getattr(app.state, "init_error", None)
    status = "ok" if is_ready else "initializing"

    payload = {"status": status, "service": settings.app_name}
    if error:
        payload["error"] = error

    if not is_ready:
        return JSONResponse(status_code=503, content=payload)

    return payload


app.include_router(api_router, prefix=settings.api_prefix)


def main() -> None:
    """Запустить backend-сервис."""

    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=logging.getLevelName(LOG_LEVEL).lower(),
    )


if __name__ == "__main__":
    main()
