"""Роуты генерации сниппетов step definitions."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, status

from api.schemas import GenerateSnippetsRequest, GenerateSnippetsResponse, VariantsResponse
from snippets.errors import SnippetConfigurationError, UnknownVariantError, UnsupportedLanguageError
from snippets.service import SnippetService

router = APIRouter(prefix="/snippets", tags=["snippets"])
logger = logging.getLogger(__name__)


def _get_service(request: Request) -> SnippetService:
    service: SnippetService | None = getattr(request.app.state, "snippet_service", None)
    if not service:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Snippet service is not initialized",
        )
    return service


@router.get("/variants", response_model=VariantsResponse, summary="Список вариантов сниппетов")
async def list_variants(request: Request) -> VariantsResponse:
    service = _get_service(request)
    return VariantsResponse(
        variants=service.variants(),
        default_variant=service.settings.default_variant,
    )


@router.post("", response_model=GenerateSnippetsResponse, summary="Сгенерировать сниппеты шагов")
async def generate_snippets(
    payload: GenerateSnippetsRequest, request: Request
) -> GenerateSnippetsResponse:
    """Возвращает по одному сниппету на каждый уникальный шаг."""

    service = _get_service(request)
    steps = payload.to_domain_steps()
    if not steps:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="steps or lines must contain at least one step",
        )

    try:
        generator = service.generator_for(payload.variant, payload.language)
    except SnippetConfigurationError as exc:
        logger.exception("API: вариант сниппета %r сконфигурирован некорректно", payload.variant)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Snippet variant is misconfigured: {exc}",
        ) from exc
    except (UnknownVariantError, UnsupportedLanguageError) as exc:
        logger.warning(
            "API: неизвестный вариант %r или язык %r", payload.variant, payload.language
        )
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc

    snippets = service.generate(steps, payload.variant, payload.language)
    logger.info("API: сниппеты %s для %s шагов", generator.variant.name, len(steps))
    return GenerateSnippetsResponse(variant=generator.variant.name, snippets=snippets)
