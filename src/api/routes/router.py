"""Agregador de rotas — registra todos os routers por canal.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.twitter.router import TWITTER_WEBHOOK_PREFIX, router as twitter_router

__all__ = ["TWITTER_WEBHOOK_PREFIX", "create_api_router"]


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Twitter DMs
    api_router.include_router(twitter_router, tags=["twitter"])

    return api_router
