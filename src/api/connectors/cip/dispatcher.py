"""Dispatcher único de requisições para a API CIP.

Todo acesso de saída passa por aqui. O modo de execução é resolvido
por chamada a partir de uma flag fixa no startup:

- Simulado: aguarda latência artificial (base + jitter uniforme) e
  repassa path + options ao mock responder, propagando resultado
  ou exceção sem alteração. Nenhuma chamada de rede é feita.
- Live: uma requisição `METHOD base_url + path` via httpx, com
  `Content-Type: application/json` por baixo dos headers do chamador.

Contrato de resposta (live):
- status fora de 2xx → ApiClientError(status, payload JSON)
- 204 → None, sem ler o corpo
- demais 2xx → corpo JSON como veio (sem validação de schema)
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.cip.errors import ApiClientError, parse_error_payload
from api.connectors.cip.request_logging import log_api_error, log_success
from api.connectors.http_base import HttpClient, HttpClientConfig

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from app.protocols.mock_responder import MockResponderProtocol
    from config.settings import ApiSettings

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}
NO_CONTENT = 204


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """Opções de uma chamada ao dispatcher.

    Attributes:
        method: Método HTTP (GET, POST, PATCH, DELETE, ...)
        body: Corpo já serializado em JSON (ou None)
        headers: Headers extras; sobrepõem os defaults
    """

    method: str = "GET"
    body: str | None = None
    headers: Mapping[str, str] | None = None


class ApiDispatcher:
    """Ponto único de despacho de chamadas à API CIP.

    Não guarda estado entre chamadas além da flag de modo e da base URL.
    """

    __slots__ = (
        "_base_url",
        "_http",
        "_mock_delay_base_ms",
        "_mock_delay_jitter_ms",
        "_mock_responder",
        "_sleep",
        "_use_mock",
    )

    def __init__(
        self,
        *,
        base_url: str,
        use_mock: bool = False,
        http_client: HttpClient | None = None,
        mock_responder: MockResponderProtocol | None = None,
        mock_delay_base_ms: float = 300.0,
        mock_delay_jitter_ms: float = 200.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        if use_mock and mock_responder is None:
            raise ValueError("mock_responder é obrigatório com use_mock=True")
        self._base_url = base_url.rstrip("/")
        self._use_mock = use_mock
        self._http = http_client or HttpClient()
        self._mock_responder = mock_responder
        self._mock_delay_base_ms = mock_delay_base_ms
        self._mock_delay_jitter_ms = mock_delay_jitter_ms
        self._sleep = sleep

    @property
    def use_mock(self) -> bool:
        return self._use_mock

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> HttpClient:
        return self._http

    def mock_delay_seconds(self) -> float:
        """Latência simulada: base + até jitter ms, uniforme."""
        jitter = random.uniform(0, self._mock_delay_jitter_ms)
        return (self._mock_delay_base_ms + jitter) / 1000

    async def simulate_latency(self) -> None:
        await self._sleep(self.mock_delay_seconds())

    async def dispatch(
        self,
        endpoint: str,
        options: RequestOptions | None = None,
    ) -> Any:
        """Despacha uma chamada e devolve o corpo da resposta.

        Args:
            endpoint: Path relativo à base URL (ex: "/projects/p1")
            options: Método, corpo e headers

        Returns:
            Corpo JSON decodificado, ou None para 204

        Raises:
            ApiClientError: Status fora de 2xx
            httpx.TransportError: Falha de rede/timeout
            json.JSONDecodeError: Corpo não-JSON
        """
        opts = options or RequestOptions()
        if self._use_mock:
            return await self._dispatch_simulated(endpoint, opts)
        return await self._dispatch_live(endpoint, opts)

    async def _dispatch_simulated(self, endpoint: str, opts: RequestOptions) -> Any:
        responder = self._mock_responder
        if responder is None:
            raise RuntimeError("dispatcher simulado sem mock_responder")
        await self.simulate_latency()
        try:
            result = await responder.handle(endpoint, opts)
        except ApiClientError as exc:
            log_api_error(exc, opts.method, endpoint, simulated=True)
            raise
        log_success(opts.method, endpoint, None, simulated=True)
        return result

    async def _dispatch_live(self, endpoint: str, opts: RequestOptions) -> Any:
        response = await self._http.request(
            opts.method,
            f"{self._base_url}{endpoint}",
            content=opts.body,
            headers=merge_headers(opts.headers),
        )

        if not response.is_success:
            error = ApiClientError(response.status_code, parse_error_payload(response))
            log_api_error(error, opts.method, endpoint)
            raise error

        log_success(opts.method, endpoint, response.status_code)
        if response.status_code == NO_CONTENT:
            return None
        return response.json()


def merge_headers(headers: Mapping[str, str] | None) -> httpx.Headers:
    """Aplica headers do chamador sobre os defaults (case-insensitive)."""
    merged = httpx.Headers(DEFAULT_HEADERS)
    if headers:
        merged.update(headers)
    return merged


# ──────────────────────────────────────────────────────────────────────────────
# Dispatcher do processo
# ──────────────────────────────────────────────────────────────────────────────

_dispatcher: ApiDispatcher | None = None


def build_dispatcher(
    settings: ApiSettings,
    mock_responder: MockResponderProtocol | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ApiDispatcher:
    """Monta um dispatcher a partir de ApiSettings."""
    http_client = HttpClient(
        HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
        transport=transport,
    )
    return ApiDispatcher(
        base_url=settings.base_url,
        use_mock=settings.use_mock,
        http_client=http_client,
        mock_responder=mock_responder,
        mock_delay_base_ms=settings.mock_delay_base_ms,
        mock_delay_jitter_ms=settings.mock_delay_jitter_ms,
    )


def get_dispatcher() -> ApiDispatcher:
    """Retorna o dispatcher do processo (criado no primeiro uso)."""
    global _dispatcher
    if _dispatcher is None:
        # Import local para evitar dependência circular
        from app.bootstrap import create_dispatcher

        _dispatcher = create_dispatcher()
        logger.info(
            "dispatcher_created",
            extra={"simulated": _dispatcher.use_mock, "base_url": _dispatcher.base_url},
        )
    return _dispatcher


def set_dispatcher(dispatcher: ApiDispatcher | None) -> None:
    """Substitui o dispatcher do processo (bootstrap/testes). None reseta."""
    global _dispatcher
    _dispatcher = dispatcher


async def dispatch(endpoint: str, options: RequestOptions | None = None) -> Any:
    """Atalho: despacha pelo dispatcher do processo."""
    return await get_dispatcher().dispatch(endpoint, options)
