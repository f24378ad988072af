"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas (HttpClient, mock responder,
SessionManager) aos seus consumidores.

Uso:
    from app.bootstrap import initialize_app, get_session_manager

    # Na inicialização do processo
    initialize_app()

    # Sessão
    result = await get_session_manager().login()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from api.connectors.cip.dispatcher import build_dispatcher
from app.observability import get_correlation_id
from app.sessions import SessionManager
from config.logging import configure_logging
from config.settings import get_api_settings, get_base_settings
from fsm import validate_transition_map

if TYPE_CHECKING:
    import httpx

    from api.connectors.cip.dispatcher import ApiDispatcher
    from app.protocols import SessionManagerProtocol
    from config.settings import ApiSettings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com as configurações do ambiente.

    Deve ser chamada uma vez no início do processo.

    Configura:
    - Logging estruturado JSON com correlation_id
    - Validação de settings (falha rápido em staging/production)
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        environment=base.environment,
    )
    validate_runtime_settings()


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (logging DEBUG, sem validação)."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"api: {error}" for error in get_api_settings().validate(base))
    errors.extend(f"fsm: {error}" for error in validate_transition_map())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


def create_dispatcher(
    settings: ApiSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ApiDispatcher:
    """Cria o dispatcher conforme ApiSettings.

    Em modo simulado conecta o InMemoryMockResponder do cliente
    configurado (CIP_MOCK_CLIENT); em modo live nenhum responder é criado.
    """
    settings = settings or get_api_settings()
    mock_responder = None
    if settings.use_mock:
        from app.infra.mock import InMemoryMockResponder

        mock_responder = InMemoryMockResponder(settings.mock_client_id)
        logger.warning(
            "mock_backend_enabled",
            extra={"component": "bootstrap", "mock_client": settings.mock_client_id},
        )
    return build_dispatcher(settings, mock_responder=mock_responder, transport=transport)


@lru_cache(maxsize=1)
def get_session_manager() -> SessionManagerProtocol:
    """Obtém o SessionManager do processo (singleton)."""
    return SessionManager()


__all__ = [
    "STRICT_VALIDATION_ENVS",
    "create_dispatcher",
    "get_session_manager",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
