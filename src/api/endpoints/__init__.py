"""Facades por família de recurso.

Cada função mapeia uma operação de domínio para exatamente uma chamada
ao dispatcher, com path e método fixos. Facades não capturam nem
traduzem erros: ApiClientError e falhas de transporte propagam.

Identificadores são interpolados no path como vieram (tokens opacos);
o chamador garante que são segmentos de path válidos.
"""

from api.endpoints import (
    asset_requests,
    conversations,
    jobs,
    organizations,
    projects,
    uploads,
    users,
    workspaces,
)

__all__ = [
    "asset_requests",
    "conversations",
    "jobs",
    "organizations",
    "projects",
    "uploads",
    "users",
    "workspaces",
]
