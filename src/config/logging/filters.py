"""Filter de logging para injeção de contexto.

Adiciona a cada record os campos que o chamador não informa:
- correlation_id: ID da tentativa de bootstrap / operação corrente
- service: Nome do serviço (ex: cip_admin_client)
- environment: Ambiente de execução (development|staging|production)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id, service e environment em cada record.

    Um correlation_id passado via `extra` tem precedência sobre o do contexto.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        environment: str = "development",
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._environment = environment
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta."""
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing or self._get_correlation_id()
        record.service = self._service_name
        if not getattr(record, "environment", None):
            record.environment = self._environment
        return True
