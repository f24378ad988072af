"""Gerenciador da sessão do cliente admin.

Sequência de bootstrap (login e fetch_current_user são idênticos):
    1. LOADING (is_loading=True)
    2. GET /users/me
    3. somente se (2) resolveu: GET /organizations
    4. organização = primeiro item (ou None) → AUTHENTICATED

Qualquer falha é absorvida: log de fallback e sessão não autenticada.
Cancelamento também reseta a sessão, mas é repropagado.
Nenhuma exceção chega ao chamador.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from app.observability import correlation_scope
from app.sessions.models import (
    UNAUTHENTICATED_SESSION,
    BootstrapResult,
    Session,
    SessionSupersededError,
)
from config.logging import log_fallback
from fsm import AuthState, AuthStateMachine

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from api.connectors.cip.dispatcher import RequestOptions
    from fsm import StateTransition

    DispatchFn = Callable[[str, RequestOptions | None], Awaitable[Any]]

logger = logging.getLogger(__name__)

CURRENT_USER_PATH = "/users/me"
ORGANIZATIONS_PATH = "/organizations"


class SessionManager:
    """Dono do estado de sessão do processo.

    O snapshot de Session e a máquina de estados são alterados juntos,
    sob um único lock; leitores sempre veem um valor completo.
    """

    __slots__ = ("_dispatch", "_lock", "_machine", "_session")

    def __init__(self, dispatch: DispatchFn | None = None) -> None:
        """Inicializa gerenciador.

        Args:
            dispatch: Função de despacho (default: dispatcher do processo)
        """
        self._dispatch = dispatch
        self._lock = threading.Lock()
        self._machine = AuthStateMachine()
        self._session = UNAUTHENTICATED_SESSION

    @property
    def state(self) -> AuthState:
        return self._machine.current_state

    @property
    def history(self) -> list[StateTransition]:
        return self._machine.history

    def get_session(self) -> Session:
        """Retorna o snapshot atual da sessão."""
        with self._lock:
            return self._session

    async def login(self) -> BootstrapResult:
        return await self._bootstrap("login")

    async def fetch_current_user(self) -> BootstrapResult:
        return await self._bootstrap("fetch_current_user")

    def logout(self) -> None:
        """Reseta a sessão incondicionalmente (qualquer estado)."""
        self._apply(AuthState.UNAUTHENTICATED, "logout", UNAUTHENTICATED_SESSION)
        logger.info("session_logout")

    def update_organization(self, changes: Mapping[str, Any]) -> None:
        """Merge raso de `changes` sobre a organização ativa.

        Sem organização ativa é no-op. Não chama o backend.
        """
        with self._lock:
            organization = self._session.organization
            if organization is None:
                return
            merged = {**organization, **changes}
            self._session = replace(self._session, organization=merged)

    async def _bootstrap(self, trigger: str) -> BootstrapResult:
        with correlation_scope():
            started = time.perf_counter()
            self._apply(
                AuthState.LOADING,
                trigger,
                replace(self.get_session(), is_loading=True),
            )
            try:
                user = await self._call(CURRENT_USER_PATH)
                organizations = await self._call(ORGANIZATIONS_PATH)
                items = organizations["items"]
                organization = items[0] if items else None
            except asyncio.CancelledError:
                self._apply(
                    AuthState.UNAUTHENTICATED,
                    "bootstrap_cancelled",
                    UNAUTHENTICATED_SESSION,
                )
                logger.info("session_bootstrap_cancelled", extra={"trigger": trigger})
                raise
            except Exception as exc:
                reason = type(exc).__name__
                log_fallback(
                    logger,
                    "session_bootstrap",
                    reason=reason,
                    elapsed_ms=(time.perf_counter() - started) * 1000,
                )
                self._apply(
                    AuthState.UNAUTHENTICATED,
                    "bootstrap_failed",
                    UNAUTHENTICATED_SESSION,
                    metadata={"error": reason},
                )
                return BootstrapResult(success=False, error=exc)

            session = Session(
                user=user,
                organization=organization,
                is_authenticated=True,
                is_loading=False,
            )
            if not self._apply(AuthState.AUTHENTICATED, "user_loaded", session):
                # logout() durante o voo: a sessão resetada prevalece
                logger.info("session_bootstrap_superseded", extra={"trigger": trigger})
                return BootstrapResult(success=False, error=SessionSupersededError(trigger))
            logger.info("session_authenticated", extra=session.to_log_dict())
            return BootstrapResult(success=True)

    async def _call(self, endpoint: str) -> Any:
        dispatch = self._dispatch
        if dispatch is None:
            # Resolvido por chamada para respeitar set_dispatcher()
            from api.connectors.cip.dispatcher import dispatch
        return await dispatch(endpoint, None)

    def _apply(
        self,
        target: AuthState,
        trigger: str,
        session: Session,
        metadata: dict[str, Any] | None = None,
    ) -> bool:
        """Transita e troca o snapshot; False se a transição foi rejeitada."""
        with self._lock:
            result = self._machine.transition(target, trigger, metadata)
            if not result.success:
                logger.warning(
                    "session_transition_rejected",
                    extra={"trigger": trigger, "reason": result.error_reason},
                )
                return False
            self._session = session
        logger.debug("session_transition", extra=result.transition.to_log_dict())
        return True
