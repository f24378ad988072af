"""Modelos da sessão do cliente admin.

Session é um snapshot imutável: toda mudança produz um novo valor,
trocado atomicamente pelo SessionManager.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from api.models.records import Organization, User


@dataclass(frozen=True, slots=True)
class Session:
    """Estado de sessão observado pela UI.

    Atributos:
        user: Usuário autenticado (payload de /users/me) ou None
        organization: Organização ativa (primeira de /organizations) ou None
        is_authenticated: True somente após bootstrap completo
        is_loading: True enquanto o bootstrap está em andamento
    """

    user: User | None = None
    organization: Organization | None = None
    is_authenticated: bool = False
    is_loading: bool = False

    def to_log_dict(self) -> dict[str, Any]:
        """Resumo sem PII (apenas ids e flags)."""
        return {
            "user_id": (self.user or {}).get("id"),
            "organization_id": (self.organization or {}).get("id"),
            "is_authenticated": self.is_authenticated,
            "is_loading": self.is_loading,
        }


UNAUTHENTICATED_SESSION = Session()


@dataclass(frozen=True, slots=True)
class BootstrapResult:
    """Resultado de login/fetch_current_user.

    A falha já foi absorvida (sessão volta a não autenticada); o
    chamador pode ignorar o resultado ou inspecionar o erro capturado.
    """

    success: bool
    error: BaseException | None = None

    def __bool__(self) -> bool:
        return self.success


class SessionSupersededError(Exception):
    """Bootstrap concluiu depois de um logout; o resultado foi descartado."""

    def __init__(self, trigger: str) -> None:
        super().__init__(f"{trigger} superado por logout durante o bootstrap")
        self.trigger = trigger
