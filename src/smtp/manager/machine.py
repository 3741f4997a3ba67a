"""
Máquina de estados de uma sessão SMTP.

Controla o estado corrente e mantém o histórico de transições
para logs de encerramento da sessão.
"""

from typing import Any

from smtp.states.session import (
    DEFAULT_INITIAL_STATE,
    SMTPState,
    is_terminal,
)
from smtp.transitions.rules import is_transition_valid
from smtp.types.transition import StateTransition, TransitionResult


class SMTPStateMachine:
    """
    Máquina de estados de uma conexão SMTP.

    Attributes:
        current_state: Estado atual da máquina
        history: Histórico de transições realizadas
    """

    __slots__ = ("_current_state", "_history")

    def __init__(self, initial_state: SMTPState | None = None) -> None:
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []

    @property
    def current_state(self) -> SMTPState:
        """Estado atual da máquina."""
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def is_terminal(self) -> bool:
        """Verifica se a sessão já foi encerrada."""
        return is_terminal(self._current_state)

    def transition(self, target: SMTPState, trigger: str) -> TransitionResult:
        """
        Tenta realizar uma transição de estado.

        Args:
            target: Estado de destino
            trigger: Identificador do gatilho (ex: 'data', 'quit', 'eof')

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
        )
        self._current_state = target
        self._history.append(transition)

        return TransitionResult(success=True, transition=transition)

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo do estado atual e das transições, para logs."""
        return {
            "current_state": self._current_state.name,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
            "transitions": [t.to_log_dict() for t in self._history],
        }


def create_state_machine() -> SMTPStateMachine:
    """Cria uma máquina no estado inicial (IDLE)."""
    return SMTPStateMachine()
