"""
Máquina de estados de autenticação (AuthStateMachine).

Controla as transições UNAUTHENTICATED / LOADING / AUTHENTICATED e
mantém histórico rastreável. Não faz I/O; o SessionManager decide
quando transitar.
"""

from typing import Any

from fsm.states.auth import DEFAULT_INITIAL_STATE, AuthState
from fsm.transitions.rules import is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult


class AuthStateMachine:
    """
    Máquina de estados da sessão do cliente admin.

    Attributes:
        current_state: Estado atual
        history: Transições realizadas, em ordem
    """

    __slots__ = ("_current_state", "_history")

    def __init__(self, initial_state: AuthState | None = None) -> None:
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []

    @property
    def current_state(self) -> AuthState:
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    def transition(
        self,
        target: AuthState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de estado.

        Args:
            target: Estado de destino
            trigger: Identificador do gatilho
            metadata: Dados adicionais para auditoria (nunca PII)

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        self._current_state = target
        self._history.append(transition)
        return TransitionResult(success=True, transition=transition)
