"""Loader dos datasets YAML do backend simulado.

Um dataset por cliente (`fixtures/<client_id>.yaml`). Cada chamada a
`load_dataset` devolve uma cópia independente, que o responder pode
mutar livremente.
"""

from __future__ import annotations

import copy
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from config.settings import DEFAULT_MOCK_CLIENT, MOCK_CLIENT_IDS

_FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

COLLECTIONS: tuple[str, ...] = (
    "users",
    "organizations",
    "workspaces",
    "projects",
    "asset_requests",
    "jobs",
    "uploads",
    "conversations",
    "chat_messages",
    "audit_events",
)


class MockDatasetError(RuntimeError):
    """Erro ao carregar dataset simulado."""


def is_valid_client_id(client_id: str) -> bool:
    return client_id in MOCK_CLIENT_IDS


@lru_cache(maxsize=8)
def _read_dataset(client_id: str) -> dict[str, Any]:
    path = _FIXTURES_DIR / f"{client_id}.yaml"
    if not path.is_file():
        raise MockDatasetError(f"Dataset simulado nao encontrado: {client_id}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise MockDatasetError(f"YAML invalido em {path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise MockDatasetError(f"Dataset {client_id} deve ser um mapeamento")
    return data


def load_dataset(client_id: str = DEFAULT_MOCK_CLIENT) -> dict[str, Any]:
    """Carrega o dataset de um cliente (fallback no cliente padrão).

    Returns:
        Dict com `current_user` e uma lista por coleção de COLLECTIONS.
    """
    if not is_valid_client_id(client_id):
        client_id = DEFAULT_MOCK_CLIENT
    data = copy.deepcopy(_read_dataset(client_id))
    for name in COLLECTIONS:
        data[name] = list(data.get(name) or [])
    return data
