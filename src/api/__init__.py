"""Маршруты HTTP API."""
from fastapi import APIRouter

from .routes_snippets import router as snippets_router

router = APIRouter()
router.include_router(snippets_router)

__all__ = ["router"]
