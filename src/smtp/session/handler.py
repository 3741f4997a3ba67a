"""
Núcleo do protocolo: sessão SMTP dirigida por linhas.

`SMTPSession` não faz IO. Recebe cada linha já sem CRLF e devolve a
resposta a enviar; o driver de conexão (`smtp.session.connection`)
cuida do socket. Isso permite testar a máquina de estados inteira
sem rede.

Fluxo:
1. IDLE: comandos MAIL/RCPT/HELO/EHLO/RSET/NOOP/QUIT/DATA
2. DATA -> IN_DATA: linhas acumuladas até "."
3. "." -> mensagem entregue ao store, transação zerada, volta a IDLE
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from smtp import replies
from smtp.commands.parser import CommandVerb, parse_command
from smtp.errors import ProtocolStateError
from smtp.manager.machine import create_state_machine
from smtp.session.transaction import Transaction, is_end_of_data
from smtp.states.session import SMTPState

if TYPE_CHECKING:
    from app.domain.message import Message
    from app.protocols.message_store import MessageStoreProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionResponse:
    """Resultado do processamento de uma linha.

    Attributes:
        reply: Texto a enviar ao peer (None = nada a enviar)
        close: True se a conexão deve ser encerrada após o envio
    """

    reply: str | None = None
    close: bool = False


_NO_REPLY = SessionResponse()


class SMTPSession:
    """Sessão SMTP de uma conexão.

    Args:
        store: Store compartilhado que recebe as mensagens concluídas.
    """

    def __init__(self, store: MessageStoreProtocol) -> None:
        self._store = store
        self._machine = create_state_machine()
        self._transaction = Transaction()
        self._committed = 0

    @property
    def state(self) -> SMTPState:
        return self._machine.current_state

    @property
    def transaction(self) -> Transaction:
        """Transação pendente (somente leitura por convenção)."""
        return self._transaction

    @property
    def committed_count(self) -> int:
        """Quantidade de mensagens entregues ao store nesta sessão."""
        return self._committed

    @property
    def is_closed(self) -> bool:
        return self._machine.is_terminal

    def greeting(self) -> str:
        return replies.GREETING

    def summary(self) -> dict[str, Any]:
        """Estado, transições e mensagens entregues, para o log de encerramento."""
        return {**self._machine.get_state_summary(), "committed": self._committed}

    def handle_line(self, line: str) -> SessionResponse:
        """Processa uma linha recebida (sem o terminador CRLF)."""
        if self.is_closed:
            raise ProtocolStateError("Sessão já encerrada")
        if self.state is SMTPState.IN_DATA:
            return self._handle_data_line(line)
        return self._handle_command(line)

    def close(self, trigger: str = "disconnect") -> None:
        """Encerra a sessão, descartando qualquer transação pendente."""
        if self.is_closed:
            return
        if self.state is SMTPState.IN_DATA or self._transaction.data_lines:
            logger.info(
                "smtp_transaction_discarded",
                extra={"trigger": trigger, "line_count": len(self._transaction.data_lines)},
            )
        self._transaction.reset()
        self._move_to(SMTPState.CLOSED, trigger)

    def _handle_command(self, line: str) -> SessionResponse:
        command = parse_command(line)
        verb = command.verb

        if verb is CommandVerb.MAIL:
            self._transaction.sender = command.argument
            return SessionResponse(replies.SENDER_OK)

        if verb is CommandVerb.RCPT:
            self._transaction.recipients.append(command.argument)
            return SessionResponse(replies.RECIPIENT_OK)

        if verb is CommandVerb.DATA:
            self._move_to(SMTPState.IN_DATA, "data")
            return SessionResponse(replies.START_MAIL_INPUT)

        if verb is CommandVerb.QUIT:
            self.close("quit")
            return SessionResponse(replies.BYE, close=True)

        if verb in (CommandVerb.HELO, CommandVerb.EHLO):
            return SessionResponse(replies.HELLO)

        if verb is CommandVerb.RSET:
            self._transaction.reset()
            return SessionResponse(replies.OK)

        if verb is CommandVerb.NOOP:
            return SessionResponse(replies.OK)

        logger.debug("smtp_unknown_command", extra={"length": len(line)})
        return SessionResponse(replies.UNKNOWN_COMMAND)

    def _handle_data_line(self, line: str) -> SessionResponse:
        if not is_end_of_data(line):
            self._transaction.append_data_line(line)
            return _NO_REPLY

        message = self._commit()
        self._move_to(SMTPState.IDLE, "end_of_data")
        logger.info(
            "email_captured",
            extra={
                "message_id": message.id,
                "recipient_count": len(message.recipients),
                "is_html": message.is_html,
            },
        )
        return SessionResponse(replies.MAIL_ACCEPTED)

    def _commit(self) -> Message:
        message = self._store.add(self._transaction.to_message())
        self._transaction.reset()
        self._committed += 1
        return message

    def _move_to(self, target: SMTPState, trigger: str) -> None:
        result = self._machine.transition(target, trigger)
        if not result.success:
            raise ProtocolStateError(result.error_reason)
