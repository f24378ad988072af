"""Helpers de logging do dispatcher (sem corpos de request/response)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import ApiClientError

logger = logging.getLogger(__name__)


def log_api_error(
    error: ApiClientError,
    method: str,
    endpoint: str,
    *,
    simulated: bool = False,
) -> None:
    """Loga resposta de erro da API."""
    logger.warning(
        "api_error_response",
        extra={
            "method": method,
            "endpoint": endpoint,
            "simulated": simulated,
            **error.to_log_dict(),
        },
    )


def log_success(
    method: str,
    endpoint: str,
    status_code: int | None,
    *,
    simulated: bool = False,
) -> None:
    logger.debug(
        "api_request_ok",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
            "simulated": simulated,
        },
    )
