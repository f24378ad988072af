"""Facades de workspaces (escopo: organização)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.cip.dispatcher import RequestOptions, dispatch
from api.models.payloads import encode_body

if TYPE_CHECKING:
    from api.models.payloads import Payload
    from api.models.records import (
        AuditEvent,
        Conversation,
        Job,
        PaginatedResponse,
        Upload,
        Workspace,
    )


async def list_workspaces(organization_id: str) -> PaginatedResponse[Workspace]:
    return await dispatch(f"/organizations/{organization_id}/workspaces")


async def get_workspace(workspace_id: str) -> Workspace:
    return await dispatch(f"/workspaces/{workspace_id}")


async def create_workspace(organization_id: str, data: Payload) -> Workspace:
    return await dispatch(
        f"/organizations/{organization_id}/workspaces",
        RequestOptions(method="POST", body=encode_body(data)),
    )


async def update_workspace(workspace_id: str, data: Payload) -> Workspace:
    return await dispatch(
        f"/workspaces/{workspace_id}",
        RequestOptions(method="PATCH", body=encode_body(data)),
    )


async def delete_workspace(workspace_id: str) -> None:
    await dispatch(f"/workspaces/{workspace_id}", RequestOptions(method="DELETE"))


async def list_workspace_jobs(workspace_id: str) -> PaginatedResponse[Job]:
    return await dispatch(f"/workspaces/{workspace_id}/jobs")


async def list_workspace_uploads(workspace_id: str) -> PaginatedResponse[Upload]:
    return await dispatch(f"/workspaces/{workspace_id}/uploads")


async def list_workspace_conversations(
    workspace_id: str,
) -> PaginatedResponse[Conversation]:
    return await dispatch(f"/workspaces/{workspace_id}/request-agent/conversations")


async def start_workspace_conversation(workspace_id: str) -> Conversation:
    """Abre uma conversa com o request agent (POST sem corpo)."""
    return await dispatch(
        f"/workspaces/{workspace_id}/request-agent/conversations",
        RequestOptions(method="POST"),
    )


async def list_workspace_audit_events(
    workspace_id: str,
) -> PaginatedResponse[AuditEvent]:
    return await dispatch(f"/workspaces/{workspace_id}/audit-events")
