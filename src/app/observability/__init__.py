"""Observabilidade: contexto de sessão para logs estruturados."""

from app.observability.correlation import (
    generate_session_id,
    get_session_id,
    reset_session_id,
    set_session_id,
)

__all__ = [
    "generate_session_id",
    "get_session_id",
    "reset_session_id",
    "set_session_id",
]
