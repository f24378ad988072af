"""Agregador de settings do cliente CIP.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# API settings
from config.settings.api import (
    DEFAULT_API_BASE_URL,
    DEFAULT_MOCK_CLIENT,
    MOCK_CLIENT_IDS,
    ApiSettings,
    MockClientId,
    get_api_settings,
)

# Base settings
from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    # Constants
    "DEFAULT_API_BASE_URL",
    "DEFAULT_MOCK_CLIENT",
    "MOCK_CLIENT_IDS",
    "VALID_LOG_LEVELS",
    # API
    "ApiSettings",
    # Base
    "BaseSettings",
    "Environment",
    "MockClientId",
    "get_api_settings",
    "get_base_settings",
]
