"""Store de mensagens em memória.

Sem persistência: o conteúdo some quando o processo termina.
O contador de ids nunca é reiniciado, nem por `clear()`, para que
um id nunca seja reutilizado durante a vida do processo.
"""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime

from app.domain.message import Message
from app.infra.stores.rwlock import ReadWriteLock
from app.protocols.message_store import MessageStoreProtocol


class MemoryMessageStore(MessageStoreProtocol):
    """Coleção ordenada de mensagens protegida por um lock leitura/escrita."""

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._next_id = 1
        self._lock = ReadWriteLock()

    def add(self, candidate: Message) -> Message:
        """Armazena a mensagem no fim da coleção.

        Atribui o próximo id (string decimal) se `candidate.id` estiver vazio
        e o horário atual (UTC) se `captured_at` não estiver definido; um
        `captured_at` sem fuso horário é tratado como UTC.

        Returns:
            A mensagem efetivamente armazenada.
        """
        with self._lock.write_locked():
            changes: dict[str, object] = {}
            if not candidate.id:
                changes["id"] = str(self._next_id)
                self._next_id += 1
            if candidate.captured_at is None:
                changes["captured_at"] = datetime.now(UTC)
            elif candidate.captured_at.tzinfo is None:
                # horário sem fuso é interpretado como UTC
                changes["captured_at"] = candidate.captured_at.replace(tzinfo=UTC)
            message = dataclasses.replace(candidate, **changes) if changes else candidate
            self._messages.append(message)
            return message

    def list(self) -> list[Message]:
        """Snapshot das mensagens em ordem de inserção (sem ordenação)."""
        with self._lock.read_locked():
            return list(self._messages)

    def get(self, message_id: str) -> Message | None:
        """Busca linear por id; None se não encontrada."""
        with self._lock.read_locked():
            for message in self._messages:
                if message.id == message_id:
                    return message
            return None

    def clear(self) -> None:
        """Remove todas as mensagens, preservando o contador de ids."""
        with self._lock.write_locked():
            self._messages = []

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._messages)
