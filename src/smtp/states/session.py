"""
Estados de uma sessão SMTP.

Uma sessão começa em IDLE, entra em IN_DATA após o comando DATA,
volta a IDLE ao receber a linha terminadora e termina em CLOSED
(QUIT, EOF, erro de transporte ou timeout).
"""

from enum import StrEnum


class SMTPState(StrEnum):
    """
    Estados canônicos da sessão.

    Estados não-terminais:
        - IDLE: Aguardando comandos
        - IN_DATA: Acumulando linhas do conteúdo da mensagem

    Estados terminais:
        - CLOSED: Conexão encerrada
    """

    IDLE = "IDLE"
    IN_DATA = "IN_DATA"
    CLOSED = "CLOSED"

    def __str__(self) -> str:
        return self.value


TERMINAL_STATES: frozenset[SMTPState] = frozenset({SMTPState.CLOSED})

DEFAULT_INITIAL_STATE: SMTPState = SMTPState.IDLE


def is_terminal(state: SMTPState) -> bool:
    """Verifica se o estado é terminal (conexão encerrada)."""
    return state in TERMINAL_STATES
