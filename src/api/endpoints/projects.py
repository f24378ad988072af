"""Facades de projetos (escopo: organização).

Uploads do projeto são listados por `api.endpoints.uploads`;
`list_project_uploads` é re-exportado aqui por conveniência.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.cip.dispatcher import RequestOptions, dispatch
from api.endpoints.uploads import list_project_uploads
from api.models.payloads import encode_body

if TYPE_CHECKING:
    from api.models.payloads import Payload
    from api.models.records import (
        AuditEvent,
        ChatMessage,
        Conversation,
        PaginatedResponse,
        Project,
    )

__all__ = [
    "create_project",
    "delete_project",
    "get_project",
    "list_project_audit_events",
    "list_project_chat_messages",
    "list_project_conversations",
    "list_project_uploads",
    "list_projects",
    "send_project_chat_message",
    "start_project_conversation",
    "update_project",
]


async def list_projects(organization_id: str) -> PaginatedResponse[Project]:
    return await dispatch(f"/organizations/{organization_id}/projects")


async def get_project(project_id: str) -> Project:
    return await dispatch(f"/projects/{project_id}")


async def create_project(organization_id: str, data: Payload) -> Project:
    return await dispatch(
        f"/organizations/{organization_id}/projects",
        RequestOptions(method="POST", body=encode_body(data)),
    )


async def update_project(project_id: str, data: Payload) -> Project:
    return await dispatch(
        f"/projects/{project_id}",
        RequestOptions(method="PATCH", body=encode_body(data)),
    )


async def delete_project(project_id: str) -> None:
    await dispatch(f"/projects/{project_id}", RequestOptions(method="DELETE"))


async def list_project_conversations(project_id: str) -> PaginatedResponse[Conversation]:
    return await dispatch(f"/projects/{project_id}/request-agent/conversations")


async def start_project_conversation(project_id: str) -> Conversation:
    return await dispatch(
        f"/projects/{project_id}/request-agent/conversations",
        RequestOptions(method="POST"),
    )


async def list_project_chat_messages(project_id: str) -> PaginatedResponse[ChatMessage]:
    return await dispatch(f"/projects/{project_id}/chat-messages")


async def send_project_chat_message(project_id: str, data: Payload) -> ChatMessage:
    """Envia mensagem no chat do projeto.

    Args:
        project_id: ID do projeto
        data: ChatMessageCreate ou mapping com senderEmail, senderName, message
    """
    return await dispatch(
        f"/projects/{project_id}/chat-messages",
        RequestOptions(method="POST", body=encode_body(data)),
    )


async def list_project_audit_events(project_id: str) -> PaginatedResponse[AuditEvent]:
    return await dispatch(f"/projects/{project_id}/audit-events")
