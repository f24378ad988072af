"""Protocolo do backend simulado consumido pelo dispatcher."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from api.connectors.cip.dispatcher import RequestOptions


class MockResponderProtocol(ABC):
    """Contrato mínimo para responder chamadas em modo simulado.

    Recebe exatamente o path e as options que o dispatcher receberia
    em modo live. Erros de API devem ser levantados como ApiClientError.
    """

    @abstractmethod
    async def handle(self, path: str, options: RequestOptions) -> Any: ...
