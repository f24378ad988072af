"""Cliente HTTP base para o acesso à API CIP.

Tentativa única por chamada: retry/backoff ficam fora do escopo deste
cliente. Falhas de transporte (rede, timeout) propagam como exceções
do httpx, sem tradução.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro HTTP fora do contrato do dispatcher (ex: upload pré-assinado)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples, uma requisição por chamada.

    `transport` permite injetar um httpx.MockTransport em testes.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def request(
        self,
        method: str,
        url: str,
        *,
        content: str | bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Executa uma requisição e devolve a resposta já lida.

        Headers do chamador têm precedência sobre os defaults do config.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            transport=self._transport,
        ) as client:
            response = await client.request(
                method,
                url,
                content=content,
                headers=merged_headers,
                timeout=self._config.timeout_seconds,
            )
        logger.debug(
            "http_request_completed",
            extra={"method": method, "status_code": response.status_code},
        )
        return response

    async def put(
        self,
        url: str,
        content: bytes,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("PUT", url, content=content, headers=headers)
