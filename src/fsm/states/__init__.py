"""
Exports públicos do módulo fsm/states.

Estados de autenticação da sessão.
"""

from fsm.states.auth import DEFAULT_INITIAL_STATE, AuthState

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "AuthState",
]
