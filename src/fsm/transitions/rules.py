"""
Regras de transição válidas entre estados de autenticação.

Grafo:
    UNAUTHENTICATED → LOADING (login/fetch) | UNAUTHENTICATED (logout)
    LOADING → AUTHENTICATED | UNAUTHENTICATED | LOADING (nova tentativa)
    AUTHENTICATED → LOADING (refetch) | UNAUTHENTICATED (logout)

Não há estado terminal: logout é aceito a partir de qualquer estado.
"""

from fsm.states.auth import AuthState

TransitionMap = dict[AuthState, frozenset[AuthState]]

VALID_TRANSITIONS: TransitionMap = {
    AuthState.UNAUTHENTICATED: frozenset({
        AuthState.LOADING,
        AuthState.UNAUTHENTICATED,
    }),
    AuthState.LOADING: frozenset({
        AuthState.AUTHENTICATED,
        AuthState.UNAUTHENTICATED,
        AuthState.LOADING,
    }),
    AuthState.AUTHENTICATED: frozenset({
        AuthState.LOADING,
        AuthState.UNAUTHENTICATED,
    }),
}


def get_valid_targets(state: AuthState) -> frozenset[AuthState]:
    """Retorna os estados de destino válidos para um estado de origem."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: AuthState, to_state: AuthState) -> bool:
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Verifica:
    - Todos os estados do enum estão no mapa
    - Todo estado alcança UNAUTHENTICATED (logout incondicional)
    - Nenhuma transição aponta para estado inexistente

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in AuthState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for from_state, targets in VALID_TRANSITIONS.items():
        if AuthState.UNAUTHENTICATED not in targets:
            errors.append(f"Estado {from_state.name} não permite logout")
        for target in targets:
            if not isinstance(target, AuthState):
                errors.append(f"Transição {from_state.name} → {target}: destino inválido")

    return errors
