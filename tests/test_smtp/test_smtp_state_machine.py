"""
Testes da máquina de estados SMTP: estados, mapa de transições e manager.
"""

import pytest

from smtp import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    SMTPState,
    SMTPStateMachine,
    StateTransition,
    TransitionResult,
    create_state_machine,
    get_valid_targets,
    is_terminal,
    is_transition_valid,
    validate_transition_map,
)


class TestStatesAndTransitions:
    """Estados, terminais e integridade do mapa."""

    def test_states_and_terminals(self) -> None:
        assert set(SMTPState) == {SMTPState.IDLE, SMTPState.IN_DATA, SMTPState.CLOSED}
        assert DEFAULT_INITIAL_STATE is SMTPState.IDLE
        assert TERMINAL_STATES == frozenset({SMTPState.CLOSED})
        assert is_terminal(SMTPState.CLOSED)
        assert not is_terminal(SMTPState.IN_DATA)
        assert str(SMTPState.IN_DATA) == "IN_DATA"

    def test_transition_map_is_valid(self) -> None:
        assert validate_transition_map() == []
        assert set(VALID_TRANSITIONS) == set(SMTPState)

    @pytest.mark.parametrize(
        ("source", "target", "expected"),
        [
            (SMTPState.IDLE, SMTPState.IN_DATA, True),
            (SMTPState.IDLE, SMTPState.CLOSED, True),
            (SMTPState.IN_DATA, SMTPState.IDLE, True),
            (SMTPState.IN_DATA, SMTPState.CLOSED, True),
            (SMTPState.IDLE, SMTPState.IDLE, False),
            (SMTPState.IN_DATA, SMTPState.IN_DATA, False),
            (SMTPState.CLOSED, SMTPState.IDLE, False),
        ],
    )
    def test_is_transition_valid(self, source: SMTPState, target: SMTPState, expected: bool) -> None:
        assert is_transition_valid(source, target) is expected

    def test_closed_has_no_targets(self) -> None:
        assert get_valid_targets(SMTPState.CLOSED) == frozenset()


class TestSMTPStateMachine:
    """Manager: transições aplicadas, recusadas e histórico."""

    def test_full_cycle_records_history(self) -> None:
        machine = create_state_machine()

        assert machine.transition(SMTPState.IN_DATA, "data").success
        assert machine.transition(SMTPState.IDLE, "end_of_data").success
        assert machine.transition(SMTPState.CLOSED, "quit").success

        assert machine.is_terminal
        assert [t.trigger for t in machine.history] == ["data", "end_of_data", "quit"]
        assert machine.get_state_summary() == {
            "current_state": "CLOSED",
            "is_terminal": True,
            "transition_count": 3,
            "transitions": [
                {"from_state": "IDLE", "to_state": "IN_DATA", "trigger": "data"},
                {"from_state": "IN_DATA", "to_state": "IDLE", "trigger": "end_of_data"},
                {"from_state": "IDLE", "to_state": "CLOSED", "trigger": "quit"},
            ],
        }

    def test_invalid_transition_is_refused(self) -> None:
        machine = SMTPStateMachine()
        result = machine.transition(SMTPState.IDLE, "noop")

        assert isinstance(result, TransitionResult)
        assert result.success is False
        assert "IDLE → IDLE" in (result.error_reason or "")
        assert machine.current_state is SMTPState.IDLE
        assert machine.history == []

    def test_history_is_a_copy(self) -> None:
        machine = SMTPStateMachine()
        machine.transition(SMTPState.IN_DATA, "data")
        machine.history.clear()
        assert len(machine.history) == 1

    def test_state_transition_requires_trigger(self) -> None:
        with pytest.raises(ValueError, match="trigger"):
            StateTransition(SMTPState.IDLE, SMTPState.IN_DATA, trigger=" ")

    def test_transition_result_consistency(self) -> None:
        with pytest.raises(ValueError):
            TransitionResult(success=True)
        with pytest.raises(ValueError):
            TransitionResult(success=False)
