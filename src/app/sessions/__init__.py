"""Módulo de sessão do cliente admin.

Exporta o snapshot de sessão e o gerenciador de bootstrap.
"""

from app.sessions.manager import CURRENT_USER_PATH, ORGANIZATIONS_PATH, SessionManager
from app.sessions.models import (
    UNAUTHENTICATED_SESSION,
    BootstrapResult,
    Session,
    SessionSupersededError,
)

__all__ = [
    "CURRENT_USER_PATH",
    "ORGANIZATIONS_PATH",
    "UNAUTHENTICATED_SESSION",
    "BootstrapResult",
    "Session",
    "SessionManager",
    "SessionSupersededError",
]
