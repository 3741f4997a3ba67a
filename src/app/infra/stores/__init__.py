"""Stores: implementações concretas de armazenamento.

Módulos disponíveis:
    - memory_message_store: Store de mensagens capturadas em memória
    - rwlock: Lock de leitura/escrita usado pelo store
"""

from __future__ import annotations

from app.infra.stores.memory_message_store import MemoryMessageStore
from app.infra.stores.rwlock import ReadWriteLock

__all__ = [
    "MemoryMessageStore",
    "ReadWriteLock",
]
