"""Dependências FastAPI compartilhadas pelas rotas."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.protocols.message_store import MessageStoreProtocol


def get_message_store(request: Request) -> MessageStoreProtocol:
    """Store criado no bootstrap e anexado a `app.state`."""
    return request.app.state.message_store


MessageStoreDep = Annotated[MessageStoreProtocol, Depends(get_message_store)]
