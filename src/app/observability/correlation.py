"""Correlation id das operações do cliente.

Cada tentativa de bootstrap de sessão roda sob um correlation_id próprio,
de modo que os logs do dispatcher (/users/me, /organizations) e o log
de fallback fiquem agrupados. Usa ContextVar (async-safe).

Uso:
    from app.observability import correlation_scope, get_correlation_id

    with correlation_scope() as correlation_id:
        await dispatch("/users/me")
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Executa um bloco sob um correlation_id, restaurando o anterior ao sair.

    Um correlation_id já ativo no contexto é reaproveitado quando nenhum
    valor explícito é informado.
    """
    value = correlation_id or get_correlation_id() or generate_correlation_id()
    token = set_correlation_id(value)
    try:
        yield value
    finally:
        reset_correlation_id(token)
