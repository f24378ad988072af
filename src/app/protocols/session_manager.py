"""Protocolo para o gerenciador de sessão do cliente admin.

Consumidores (UI, CLI, testes) devem depender deste contrato.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.sessions.models import BootstrapResult, Session


class SessionManagerProtocol(Protocol):
    def get_session(self) -> Session: ...

    async def login(self) -> BootstrapResult: ...

    async def fetch_current_user(self) -> BootstrapResult: ...

    def logout(self) -> None: ...

    def update_organization(self, changes: Mapping[str, Any]) -> None: ...
