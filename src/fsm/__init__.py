"""
Módulo FSM: Máquina de estados da sessão do cliente admin.

Estrutura:
    - states/: Estados de autenticação (AuthState)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - manager/: Máquina de estados (AuthStateMachine)
    - types/: Tipos de dados (StateTransition, TransitionResult)
"""

from fsm.manager import AuthStateMachine
from fsm.states import DEFAULT_INITIAL_STATE, AuthState
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import StateTransition, TransitionResult

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "VALID_TRANSITIONS",
    "AuthState",
    "AuthStateMachine",
    "StateTransition",
    "TransitionResult",
    "get_valid_targets",
    "is_transition_valid",
    "validate_transition_map",
]
