"""
Exports públicos do módulo smtp/types.
"""

from smtp.types.transition import StateTransition, TransitionResult

__all__ = [
    "StateTransition",
    "TransitionResult",
]
