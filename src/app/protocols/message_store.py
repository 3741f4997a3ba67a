"""Contrato do store de mensagens capturadas."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.message import Message


class MessageStoreProtocol(ABC):
    """Contrato mínimo do store compartilhado entre sessões SMTP e API.

    Toda operação é atômica em relação às demais.
    """

    @abstractmethod
    def add(self, candidate: Message) -> Message:
        """Armazena a mensagem, atribuindo id e horário se ausentes."""

    @abstractmethod
    def list(self) -> list[Message]:
        """Cópia das mensagens em ordem de inserção."""

    @abstractmethod
    def get(self, message_id: str) -> Message | None: ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def count(self) -> int: ...
