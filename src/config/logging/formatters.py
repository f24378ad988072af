"""Formatter JSON dos logs do cliente CIP.

Campos sempre presentes, nesta ordem:
asctime, level, logger, message, service, environment, correlation_id.
Campos passados via `extra` (ex: method, endpoint, status_code) são
anexados pelo JsonFormatter ao final.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável para facilitar leitura em terminal
LOG_FIELD_ORDER: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "environment",
    "correlation_id",
)

REQUIRED_LOG_FIELDS = frozenset(LOG_FIELD_ORDER)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter com os campos padronizados.

    Exemplo de output:
        {"asctime": "2026-10-18 10:30:00,120", "level": "WARNING",
         "logger": "api.connectors.cip.request_logging",
         "message": "api_error_response", "service": "cip_admin_client",
         "environment": "development", "correlation_id": "abc-123",
         "method": "GET", "endpoint": "/users/me", "status_code": 401}
    """
    format_string = " ".join(f"%({field})s" for field in LOG_FIELD_ORDER)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
