"""Protocolos e contratos do core da aplicação."""

from .mock_responder import MockResponderProtocol
from .session_manager import SessionManagerProtocol

__all__ = [
    "MockResponderProtocol",
    "SessionManagerProtocol",
]
