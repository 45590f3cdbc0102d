"""Endpoints de health check."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings, get_mailerlite_settings, get_tally_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe — secret do Tally e credenciais do MailerLite presentes."""
    checks = {
        "tally": get_tally_settings().validate(),
        "mailerlite": get_mailerlite_settings().validate(),
    }
    ready = not any(checks.values())
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            name: {"status": "ok" if not errors else "failed", "errors": errors}
            for name, errors in checks.items()
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
