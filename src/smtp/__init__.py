"""
Protocolo SMTP simplificado da porta de captura.

Estrutura:
    - states/: Estados da sessão (SMTPState)
    - transitions/: Transições permitidas (VALID_TRANSITIONS)
    - types/: Registros de transição (StateTransition, TransitionResult)
    - manager/: Máquina de estados (SMTPStateMachine)
    - commands/: Interpretação das linhas de comando
    - message/: Extração de Subject/Content-Type e corpo
    - session/: Sessão por conexão e driver asyncio
    - server.py: Listener (uma task por conexão)
"""

from smtp.manager import SMTPStateMachine, create_state_machine
from smtp.states import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    SMTPState,
    is_terminal,
)
from smtp.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from smtp.types import StateTransition, TransitionResult

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "SMTPState",
    "SMTPStateMachine",
    "StateTransition",
    "TransitionResult",
    "create_state_machine",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "validate_transition_map",
]
