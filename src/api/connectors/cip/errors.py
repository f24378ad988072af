"""Modelo de erro da API CIP.

ApiClientError representa o caso "o servidor entendeu a requisição e
reportou falha de aplicação" (qualquer status fora de 2xx). Falhas de
transporte (rede, JSON inválido) nunca viram ApiClientError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

ApiErrorPayload = dict[str, Any]


class ApiClientError(Exception):
    """Falha de aplicação reportada pela API.

    Attributes:
        status: Status HTTP observado
        error: Payload de erro como o servidor enviou ({message, code, ...})
    """

    def __init__(self, status: int, error: ApiErrorPayload) -> None:
        super().__init__(_extract_message(error))
        self.status = status
        self.error = error

    @property
    def message(self) -> str:
        return _extract_message(self.error)

    @property
    def code(self) -> str | None:
        if isinstance(self.error, dict):
            code = self.error.get("code")
            return str(code) if code is not None else None
        return None

    def to_log_dict(self) -> dict[str, Any]:
        """Campos seguros para log (sem o payload completo)."""
        return {"status_code": self.status, "error_code": self.code}

    def __repr__(self) -> str:
        return f"ApiClientError(status={self.status!r}, error={self.error!r})"


def _extract_message(error: Any) -> str:
    if isinstance(error, dict):
        message = error.get("message")
        if message is not None:
            return str(message)
    return str(error)


def parse_error_payload(response: httpx.Response) -> ApiErrorPayload:
    """Lê o corpo de uma resposta de erro como JSON.

    Raises:
        json.JSONDecodeError: Corpo não é JSON (propaga sem embrulhar)
    """
    return response.json()
