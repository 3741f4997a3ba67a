"""
Exports públicos do módulo smtp/states.
"""

from smtp.states.session import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    SMTPState,
    is_terminal,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "SMTPState",
    "is_terminal",
]
