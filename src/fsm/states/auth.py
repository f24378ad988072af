"""
Estados de autenticação da sessão do cliente admin.

A sessão percorre um ciclo curto: sem sessão → carregando → autenticada.
Falhas no bootstrap resolvem para UNAUTHENTICATED (não há estado de erro).
"""

from enum import StrEnum


class AuthState(StrEnum):
    """
    Estados canônicos da sessão.

    - UNAUTHENTICATED: Sem usuário (inicial, pós-logout ou pós-falha)
    - LOADING: Bootstrap em andamento (/users/me → /organizations)
    - AUTHENTICATED: Usuário carregado; organização pode ser None
    """

    UNAUTHENTICATED = "UNAUTHENTICATED"
    LOADING = "LOADING"
    AUTHENTICATED = "AUTHENTICATED"

    def __str__(self) -> str:
        return self.value


DEFAULT_INITIAL_STATE: AuthState = AuthState.UNAUTHENTICATED
