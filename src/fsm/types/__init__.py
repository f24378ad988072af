"""
Exports públicos do módulo fsm/types.

Tipos para registro de transições de estado.
"""

from fsm.types.transition import StateTransition, TransitionResult

__all__ = [
    "StateTransition",
    "TransitionResult",
]
