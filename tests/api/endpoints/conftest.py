"""Fixtures compartilhadas dos testes de facades."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def patch_dispatch(monkeypatch: pytest.MonkeyPatch):
    """Substitui `dispatch` no módulo de facade informado."""

    def _patch(module: Any, return_value: Any = None) -> AsyncMock:
        mock = AsyncMock(return_value=return_value)
        monkeypatch.setattr(module, "dispatch", mock)
        return mock

    return _patch


def _sent_request(mock: AsyncMock) -> tuple[str, str, Any]:
    """(path, método, corpo decodificado) da única chamada ao dispatch."""
    mock.assert_awaited_once()
    args = mock.await_args.args
    path = args[0]
    options = args[1] if len(args) > 1 else None
    if options is None:
        return path, "GET", None
    body = json.loads(options.body) if options.body is not None else None
    return path, options.method, body


@pytest.fixture
def sent_request():
    return _sent_request
