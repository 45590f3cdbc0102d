"""Agregador de rotas — registra health e webhooks.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.tally.webhook import TALLY_WEBHOOK_PATH
from api.routes.tally.webhook import router as tally_webhook_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        tally_webhook_router,
        prefix=TALLY_WEBHOOK_PATH,
        tags=["tally"],
    )

    return api_router
