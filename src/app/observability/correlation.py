"""Identificador da sessão SMTP corrente para rastreamento em logs.

Cada conexão SMTP roda em sua própria task asyncio; o ContextVar
mantém o id isolado por task.

Uso:
    from app.observability import reset_session_id, set_session_id

    token = set_session_id()
    try:
        ...  # atender conexão
    finally:
        reset_session_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_session_id: ContextVar[str] = ContextVar("session_id", default="")


def get_session_id() -> str:
    """Retorna o id da sessão corrente ou string vazia fora de uma sessão."""
    return _session_id.get()


def set_session_id(session_id: str | None = None) -> Token[str]:
    """Define o id da sessão no contexto atual.

    Args:
        session_id: ID a definir. Se None, gera um novo (uuid4 hex curto).

    Returns:
        Token para reset posterior via reset_session_id().
    """
    return _session_id.set(session_id or generate_session_id())


def reset_session_id(token: Token[str]) -> None:
    """Restaura o id de sessão ao valor anterior."""
    _session_id.reset(token)


def generate_session_id() -> str:
    """Gera um novo id de sessão."""
    return uuid.uuid4().hex[:12]
