"""Settings da API CIP.

Configurações do dispatcher: modo de execução (backend simulado ou rede),
base URL e latência artificial do modo simulado.

Resolvidas uma única vez no startup; não mudam durante o processo.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

DEFAULT_API_BASE_URL = "https://cip-api-dev.kartel.ai/v1"

MockClientId = Literal["newell", "earnin"]
MOCK_CLIENT_IDS: frozenset[str] = frozenset({"newell", "earnin"})
DEFAULT_MOCK_CLIENT: MockClientId = "newell"


@dataclass(frozen=True)
class ApiSettings:
    """Configurações do acesso à API CIP.

    Attributes:
        use_mock: Usa o backend simulado em vez da rede
        base_url: Prefixo de todas as rotas (sem barra final)
        request_timeout_seconds: Timeout por request live
        mock_delay_base_ms: Latência fixa simulada
        mock_delay_jitter_ms: Latência adicional máxima (uniforme)
        mock_client_id: Conjunto de dados do backend simulado
    """

    use_mock: bool = False
    base_url: str = DEFAULT_API_BASE_URL
    request_timeout_seconds: float = 30.0
    mock_delay_base_ms: float = 300.0
    mock_delay_jitter_ms: float = 200.0
    mock_client_id: MockClientId = DEFAULT_MOCK_CLIENT

    def validate(self, base: BaseSettings | None = None) -> list[str]:
        """Valida configurações da API.

        Args:
            base: BaseSettings para verificar ambiente (opcional).

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.base_url.startswith(("http://", "https://")):
            errors.append(f"CIP_API_BASE deve ser http(s): {self.base_url}")

        if self.request_timeout_seconds <= 0:
            errors.append("CIP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.mock_delay_base_ms < 0 or self.mock_delay_jitter_ms < 0:
            errors.append("CIP_MOCK_DELAY_* não pode ser negativo")

        if self.mock_client_id not in MOCK_CLIENT_IDS:
            errors.append(f"CIP_MOCK_CLIENT inválido: {self.mock_client_id}")

        if base is not None and self.use_mock and base.is_production:
            errors.append("CIP_USE_MOCK=true proibido em production")

        return errors


def _parse_mock_client(value: str) -> MockClientId:
    """Converte string para MockClientId (fallback no default)."""
    value_lower = value.strip().lower()
    if value_lower == "earnin":
        return "earnin"
    return DEFAULT_MOCK_CLIENT


def _load_api_from_env() -> ApiSettings:
    """Carrega ApiSettings de variáveis de ambiente."""
    return ApiSettings(
        use_mock=os.getenv("CIP_USE_MOCK", "").lower() in ("true", "1", "yes"),
        base_url=os.getenv("CIP_API_BASE", "") or DEFAULT_API_BASE_URL,
        request_timeout_seconds=float(os.getenv("CIP_REQUEST_TIMEOUT_SECONDS", "30")),
        mock_delay_base_ms=float(os.getenv("CIP_MOCK_DELAY_BASE_MS", "300")),
        mock_delay_jitter_ms=float(os.getenv("CIP_MOCK_DELAY_JITTER_MS", "200")),
        mock_client_id=_parse_mock_client(os.getenv("CIP_MOCK_CLIENT", DEFAULT_MOCK_CLIENT)),
    )


@lru_cache(maxsize=1)
def get_api_settings() -> ApiSettings:
    """Retorna instância cacheada de ApiSettings."""
    return _load_api_from_env()
