"""Testes para SessionManager (bootstrap de autenticação).

Testa:
    - Sequência /users/me → /organizations
    - Falha silenciosa (sessão não autenticada, nada propaga)
    - logout e update_organization
    - Histórico de transições da FSM
"""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from api.connectors.cip.errors import ApiClientError
from app.sessions import (
    CURRENT_USER_PATH,
    ORGANIZATIONS_PATH,
    UNAUTHENTICATED_SESSION,
    BootstrapResult,
    Session,
    SessionManager,
    SessionSupersededError,
)
from fsm import AuthState

USER = {"id": "u1", "email": "ana@co.io", "role": "ADMIN"}
ORG_1 = {"id": "o1", "name": "Org 1"}
ORG_2 = {"id": "o2", "name": "Org 2"}

# ──────────────────────────────────────────────────────────────────────────────
# Fixtures
# ──────────────────────────────────────────────────────────────────────────────


def routed_dispatch(routes: dict[str, object]) -> AsyncMock:
    """AsyncMock que responde por path; exceções são levantadas."""

    async def _dispatch(endpoint: str, options=None):
        result = routes[endpoint]
        if isinstance(result, BaseException):
            raise result
        return result

    return AsyncMock(side_effect=_dispatch)


def gated_dispatch(gate: asyncio.Event, entered: asyncio.Event) -> AsyncMock:
    """/users/me fica pendente até `gate` ser liberado."""

    async def _dispatch(endpoint: str, options=None):
        if endpoint == CURRENT_USER_PATH:
            entered.set()
            await gate.wait()
            return USER
        return {"items": [ORG_1]}

    return AsyncMock(side_effect=_dispatch)


@pytest.fixture
def ok_dispatch() -> AsyncMock:
    return routed_dispatch(
        {CURRENT_USER_PATH: USER, ORGANIZATIONS_PATH: {"items": [ORG_1, ORG_2]}}
    )


@pytest_asyncio.fixture
async def authenticated(ok_dispatch: AsyncMock) -> SessionManager:
    manager = SessionManager(dispatch=ok_dispatch)
    await manager.login()
    return manager


# ──────────────────────────────────────────────────────────────────────────────
# Testes: Bootstrap
# ──────────────────────────────────────────────────────────────────────────────


class TestInitialSession:
    def test_starts_unauthenticated_and_idle(self) -> None:
        manager = SessionManager(dispatch=AsyncMock())
        assert manager.get_session() == Session(None, None, False, False)
        assert manager.state is AuthState.UNAUTHENTICATED


class TestBootstrapSuccess:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", ["login", "fetch_current_user"])
    async def test_user_then_first_organization(
        self, ok_dispatch: AsyncMock, operation: str
    ) -> None:
        manager = SessionManager(dispatch=ok_dispatch)

        result = await getattr(manager, operation)()

        assert result == BootstrapResult(success=True)
        assert manager.get_session() == Session(
            user=USER, organization=ORG_1, is_authenticated=True, is_loading=False
        )
        assert [call.args[0] for call in ok_dispatch.await_args_list] == [
            CURRENT_USER_PATH,
            ORGANIZATIONS_PATH,
        ]

    @pytest.mark.asyncio
    async def test_empty_organization_list_still_authenticates(self) -> None:
        dispatch = routed_dispatch({CURRENT_USER_PATH: USER, ORGANIZATIONS_PATH: {"items": []}})
        manager = SessionManager(dispatch=dispatch)

        await manager.login()

        session = manager.get_session()
        assert session.is_authenticated is True
        assert session.organization is None
        assert session.user == USER

    @pytest.mark.asyncio
    async def test_loading_visible_while_in_flight(self) -> None:
        observed: list[Session] = []
        manager: SessionManager

        async def _dispatch(endpoint: str, options=None):
            observed.append(manager.get_session())
            return USER if endpoint == CURRENT_USER_PATH else {"items": [ORG_1]}

        manager = SessionManager(dispatch=_dispatch)
        await manager.login()

        assert all(session.is_loading for session in observed)
        assert manager.get_session().is_loading is False

    @pytest.mark.asyncio
    async def test_transition_history(self, authenticated: SessionManager) -> None:
        history = [(t.from_state, t.to_state, t.trigger) for t in authenticated.history]
        assert history == [
            (AuthState.UNAUTHENTICATED, AuthState.LOADING, "login"),
            (AuthState.LOADING, AuthState.AUTHENTICATED, "user_loaded"),
        ]

    @pytest.mark.asyncio
    async def test_transitions_are_logged(
        self, ok_dispatch: AsyncMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        manager = SessionManager(dispatch=ok_dispatch)

        with caplog.at_level(logging.DEBUG, logger="app.sessions.manager"):
            await manager.login()

        moves = [
            (r.from_state, r.to_state)
            for r in caplog.records
            if r.getMessage() == "session_transition"
        ]
        assert moves == [("UNAUTHENTICATED", "LOADING"), ("LOADING", "AUTHENTICATED")]


class TestBootstrapFailure:
    @pytest.mark.asyncio
    async def test_user_failure_skips_organization_fetch(self) -> None:
        error = ApiClientError(401, {"message": "Unauthorized"})
        dispatch = routed_dispatch({CURRENT_USER_PATH: error, ORGANIZATIONS_PATH: {"items": []}})
        manager = SessionManager(dispatch=dispatch)

        result = await manager.login()

        assert result.success is False
        assert result.error is error
        assert not result
        assert [call.args[0] for call in dispatch.await_args_list] == [CURRENT_USER_PATH]
        assert manager.get_session() == UNAUTHENTICATED_SESSION

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "org_result",
        [
            ApiClientError(500, {"message": "boom"}),
            httpx.ConnectError("offline"),
            {"unexpected": "shape"},
        ],
    )
    async def test_organization_failure_clears_user(self, org_result: object) -> None:
        dispatch = routed_dispatch({CURRENT_USER_PATH: USER, ORGANIZATIONS_PATH: org_result})
        manager = SessionManager(dispatch=dispatch)

        await manager.fetch_current_user()

        assert manager.get_session() == Session(None, None, False, False)
        assert manager.state is AuthState.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_failure_clears_previous_session(self, authenticated: SessionManager) -> None:
        authenticated._dispatch = routed_dispatch(
            {CURRENT_USER_PATH: ApiClientError(401, {"message": "expired"})}
        )

        await authenticated.fetch_current_user()

        assert authenticated.get_session() == UNAUTHENTICATED_SESSION
        assert authenticated.history[-1].metadata == {"error": "ApiClientError"}

    @pytest.mark.asyncio
    async def test_failure_logs_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        dispatch = routed_dispatch({CURRENT_USER_PATH: httpx.ReadTimeout("slow")})
        manager = SessionManager(dispatch=dispatch)

        with caplog.at_level(logging.INFO, logger="app.sessions.manager"):
            await manager.login()

        records = [r for r in caplog.records if getattr(r, "fallback_used", False)]
        assert len(records) == 1
        assert records[0].component == "session_bootstrap"
        assert records[0].reason == "ReadTimeout"

    @pytest.mark.asyncio
    async def test_cancellation_resets_session_and_propagates(self) -> None:
        gate, entered = asyncio.Event(), asyncio.Event()
        manager = SessionManager(dispatch=gated_dispatch(gate, entered))

        task = asyncio.create_task(manager.login())
        await entered.wait()
        assert manager.get_session().is_loading is True
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert manager.get_session() == UNAUTHENTICATED_SESSION
        assert manager.state is AuthState.UNAUTHENTICATED
        assert manager.history[-1].trigger == "bootstrap_cancelled"


# ──────────────────────────────────────────────────────────────────────────────
# Testes: logout e update_organization
# ──────────────────────────────────────────────────────────────────────────────


class TestLogout:
    def test_from_unauthenticated(self) -> None:
        manager = SessionManager(dispatch=AsyncMock())
        manager.logout()
        assert manager.get_session() == UNAUTHENTICATED_SESSION

    @pytest.mark.asyncio
    async def test_from_authenticated(self, authenticated: SessionManager) -> None:
        authenticated.logout()
        assert authenticated.get_session() == UNAUTHENTICATED_SESSION
        assert authenticated.state is AuthState.UNAUTHENTICATED
        assert authenticated.history[-1].trigger == "logout"

    @pytest.mark.asyncio
    async def test_from_loading_wins_over_late_bootstrap(self) -> None:
        gate, entered = asyncio.Event(), asyncio.Event()
        dispatch = gated_dispatch(gate, entered)
        manager = SessionManager(dispatch=dispatch)

        task = asyncio.create_task(manager.login())
        await entered.wait()
        assert manager.state is AuthState.LOADING

        manager.logout()

        assert manager.get_session() == UNAUTHENTICATED_SESSION
        assert manager.state is AuthState.UNAUTHENTICATED

        gate.set()
        result = await task

        assert not result
        assert isinstance(result.error, SessionSupersededError)
        assert manager.get_session() == UNAUTHENTICATED_SESSION
        assert manager.state is AuthState.UNAUTHENTICATED
        assert [t.trigger for t in manager.history] == ["login", "logout"]


class TestUpdateOrganization:
    def test_noop_without_organization(self) -> None:
        dispatch = AsyncMock()
        manager = SessionManager(dispatch=dispatch)

        manager.update_organization({"name": "X"})

        assert manager.get_session().organization is None
        dispatch.assert_not_called()

    @pytest.mark.asyncio
    async def test_shallow_merge(self, authenticated: SessionManager) -> None:
        before = authenticated.get_session()

        authenticated.update_organization({"name": "Renamed", "plan": "pro"})

        after = authenticated.get_session()
        assert after.organization == {"id": "o1", "name": "Renamed", "plan": "pro"}
        assert after.user == before.user
        assert after.is_authenticated is True
        assert before.organization == ORG_1
