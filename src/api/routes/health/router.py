"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.routes.dependencies import MessageStoreDep

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "mailsink"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    emails: int
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    detail: dict[str, Any] | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "detail": self.detail,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check(store: MessageStoreDep) -> HealthResponse:
    """Liveness probe: processo de pé e store acessível."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
        emails=store.count(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: listener SMTP aceitando conexões."""
    smtp_check = _check_smtp(getattr(request.app.state, "smtp_server", None))
    ready = smtp_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"smtp": smtp_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_smtp(smtp_server: Any | None) -> DependencyCheck:
    if smtp_server is None:
        return DependencyCheck(status="failed", error="not_configured")
    if not smtp_server.is_serving:
        return DependencyCheck(status="failed", error="not_listening")
    return DependencyCheck(
        status="ok",
        detail={
            "port": smtp_server.port,
            "active_connections": smtp_server.active_connections,
        },
    )
