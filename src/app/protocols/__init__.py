"""Protocolos e contratos do core da aplicação."""

from .message_store import MessageStoreProtocol

__all__ = [
    "MessageStoreProtocol",
]
