"""
Exports públicos do módulo smtp/manager.
"""

from smtp.manager.machine import SMTPStateMachine, create_state_machine

__all__ = [
    "SMTPStateMachine",
    "create_state_machine",
]
