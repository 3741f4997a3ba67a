"""Factories das dependências compartilhadas."""

from __future__ import annotations

import logging

from app.infra.stores import MemoryMessageStore
from app.protocols.message_store import MessageStoreProtocol

logger = logging.getLogger(__name__)


def create_message_store() -> MessageStoreProtocol:
    """Cria o store de mensagens (um por processo, passado explicitamente)."""
    store = MemoryMessageStore()
    logger.info("message_store_created", extra={"backend": "memory"})
    return store
