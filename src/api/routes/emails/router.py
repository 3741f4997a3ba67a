"""Endpoints de consulta das mensagens capturadas.

Endpoints:
- GET /api/emails: todas as mensagens, mais recentes primeiro
- GET /api/emails/{email_id}: uma mensagem (404 se inexistente)
- POST /api/clear: remove todas as mensagens (outros métodos -> 405)

A ordenação por recência é responsabilidade desta camada; o store
mantém apenas a ordem de inserção.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, HTTPException, status

from api.routes.dependencies import MessageStoreDep
from api.routes.emails.schemas import ClearResponse, EmailResponse
from app.domain.message import Message

logger = logging.getLogger(__name__)

router = APIRouter()

_OLDEST = datetime.min.replace(tzinfo=UTC)


def _captured_at(message: Message) -> datetime:
    return message.captured_at or _OLDEST


def sort_by_recency(messages: list[Message]) -> list[Message]:
    """Ordena por horário de captura, do mais recente para o mais antigo."""
    return sorted(messages, key=_captured_at, reverse=True)


@router.get("/emails", response_model=list[EmailResponse])
async def list_emails(store: MessageStoreDep) -> list[EmailResponse]:
    """Lista todas as mensagens capturadas (mais recentes primeiro)."""
    return [EmailResponse.from_message(m) for m in sort_by_recency(store.list())]


@router.get("/emails/", include_in_schema=False)
async def missing_email_id() -> None:
    """Caminho sem id: requisição inválida."""
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Email ID not specified",
    )


@router.get("/emails/{email_id}", response_model=EmailResponse)
async def get_email(email_id: str, store: MessageStoreDep) -> EmailResponse:
    """Retorna uma mensagem pelo id.

    Raises:
        HTTPException: 404 se o id não existir.
    """
    message = store.get(email_id)
    if message is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Email not found",
        )
    return EmailResponse.from_message(message)


@router.post("/clear", response_model=ClearResponse)
async def clear_emails(store: MessageStoreDep) -> ClearResponse:
    """Remove todas as mensagens (os ids continuam crescendo)."""
    removed = store.count()
    store.clear()
    logger.info("emails_cleared", extra={"removed": removed})
    return ClearResponse()
