"""
Transições permitidas entre estados da sessão SMTP.
"""

from smtp.states.session import TERMINAL_STATES, SMTPState

TransitionMap = dict[SMTPState, frozenset[SMTPState]]

# Chave: estado de origem; valor: destinos permitidos
VALID_TRANSITIONS: TransitionMap = {
    # IDLE: DATA inicia a coleta; QUIT/EOF encerram
    SMTPState.IDLE: frozenset({
        SMTPState.IN_DATA,
        SMTPState.CLOSED,
    }),

    # IN_DATA: "." conclui a mensagem; EOF descarta a transação
    SMTPState.IN_DATA: frozenset({
        SMTPState.IDLE,
        SMTPState.CLOSED,
    }),

    SMTPState.CLOSED: frozenset(),
}


def get_valid_targets(state: SMTPState) -> frozenset[SMTPState]:
    """Retorna os destinos válidos a partir de `state` (vazio se terminal)."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: SMTPState, to_state: SMTPState) -> bool:
    """Verifica se a transição é permitida pelo mapa."""
    if from_state in TERMINAL_STATES:
        return False
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Verifica:
    - Todos os estados do enum estão no mapa
    - Estados terminais têm conjunto vazio
    - Todo estado não-terminal alcança CLOSED

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in SMTPState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for state in TERMINAL_STATES:
        targets = VALID_TRANSITIONS.get(state, frozenset())
        if targets:
            errors.append(
                f"Estado terminal {state.name} não deveria ter transições: {targets}"
            )

    for from_state, targets in VALID_TRANSITIONS.items():
        if from_state not in TERMINAL_STATES and SMTPState.CLOSED not in targets:
            errors.append(f"Estado {from_state.name} não pode encerrar a conexão")

    return errors
