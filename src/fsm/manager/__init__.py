"""
Exports públicos do módulo fsm/manager.

Máquina de estados de autenticação.
"""

from fsm.manager.machine import AuthStateMachine

__all__ = ["AuthStateMachine"]
