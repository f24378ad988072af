"""Casamento de rotas do backend simulado.

Padrões usam segmentos `:nome` (ex: "/projects/:projectId/uploads").
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Route:
    method: str
    pattern: str
    handler: str


def match_path(pattern: str, path: str) -> dict[str, str] | None:
    """Casa um path com o padrão e extrai os parâmetros.

    Query string é ignorada. Retorna None se não casar.
    """
    pattern_parts = pattern.split("/")
    path_parts = path.split("?", 1)[0].split("/")
    if len(pattern_parts) != len(path_parts):
        return None

    params: dict[str, str] = {}
    for expected, actual in zip(pattern_parts, path_parts, strict=True):
        if expected.startswith(":"):
            params[expected[1:]] = actual
        elif expected != actual:
            return None
    return params


ROUTES: tuple[Route, ...] = (
    # Usuários
    Route("GET", "/users/me", "get_current_user"),
    Route("GET", "/users/:userId", "get_user"),
    Route("PATCH", "/users/:userId", "update_user"),
    Route("DELETE", "/users/:userId", "delete_user"),
    # Organizações
    Route("GET", "/organizations", "list_organizations"),
    Route("GET", "/organizations/:organizationId", "get_organization"),
    Route("GET", "/organizations/:organizationId/users", "list_organization_users"),
    Route("POST", "/organizations/:organizationId/users", "invite_user"),
    Route("DELETE", "/organizations/:organizationId/users/:userId", "remove_user"),
    Route("GET", "/organizations/:organizationId/workspaces", "list_workspaces"),
    Route("POST", "/organizations/:organizationId/workspaces", "create_workspace"),
    Route("GET", "/organizations/:organizationId/projects", "list_projects"),
    Route("POST", "/organizations/:organizationId/projects", "create_project"),
    # Workspaces
    Route("GET", "/workspaces/:workspaceId", "get_workspace"),
    Route("PATCH", "/workspaces/:workspaceId", "update_workspace"),
    Route("DELETE", "/workspaces/:workspaceId", "delete_workspace"),
    Route("GET", "/workspaces/:workspaceId/jobs", "list_workspace_jobs"),
    Route("GET", "/workspaces/:workspaceId/uploads", "list_workspace_uploads"),
    Route(
        "GET",
        "/workspaces/:workspaceId/request-agent/conversations",
        "list_workspace_conversations",
    ),
    Route(
        "POST",
        "/workspaces/:workspaceId/request-agent/conversations",
        "start_workspace_conversation",
    ),
    Route("GET", "/workspaces/:workspaceId/audit-events", "list_workspace_audit_events"),
    # Projetos
    Route("GET", "/projects/:projectId", "get_project"),
    Route("PATCH", "/projects/:projectId", "update_project"),
    Route("DELETE", "/projects/:projectId", "delete_project"),
    Route("GET", "/projects/:projectId/uploads", "list_project_uploads"),
    Route("POST", "/projects/:projectId/uploads", "create_project_upload"),
    Route(
        "GET",
        "/projects/:projectId/request-agent/conversations",
        "list_project_conversations",
    ),
    Route(
        "POST",
        "/projects/:projectId/request-agent/conversations",
        "start_project_conversation",
    ),
    Route("GET", "/projects/:projectId/chat-messages", "list_chat_messages"),
    Route("POST", "/projects/:projectId/chat-messages", "send_chat_message"),
    Route("GET", "/projects/:projectId/audit-events", "list_project_audit_events"),
    Route("GET", "/projects/:projectId/asset-requests", "list_asset_requests"),
    Route("POST", "/projects/:projectId/asset-requests", "create_asset_request"),
    # Asset requests
    Route("GET", "/asset-requests/:assetRequestId", "get_asset_request"),
    Route("PATCH", "/asset-requests/:assetRequestId", "update_asset_request"),
    Route("DELETE", "/asset-requests/:assetRequestId", "delete_asset_request"),
    Route("GET", "/asset-requests/:assetRequestId/uploads", "list_asset_request_uploads"),
    # Uploads
    Route("GET", "/uploads/:uploadId", "get_upload"),
    Route("PATCH", "/uploads/:uploadId", "update_upload"),
    Route("DELETE", "/uploads/:uploadId", "delete_upload"),
    # Jobs
    Route("GET", "/jobs/:jobId", "get_job"),
    Route("PATCH", "/jobs/:jobId", "update_job"),
    Route("DELETE", "/jobs/:jobId", "delete_job"),
    Route("GET", "/jobs/:jobId/uploads", "list_job_uploads"),
    Route("POST", "/jobs/:jobId/uploads", "create_job_upload"),
    # Conversas
    Route("GET", "/conversations/:conversationId", "get_conversation"),
    Route("GET", "/conversations/:conversationId/messages", "list_conversation_messages"),
    Route("POST", "/conversations/:conversationId/messages", "send_conversation_message"),
)


def resolve_route(method: str, path: str) -> tuple[Route, dict[str, str]] | None:
    """Primeira rota que casa método + path."""
    method_upper = method.upper()
    for route in ROUTES:
        if route.method != method_upper:
            continue
        params = match_path(route.pattern, path)
        if params is not None:
            return route, params
    return None
