"""Facades de conversas com o request agent."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.cip.dispatcher import RequestOptions, dispatch
from api.models.payloads import SendMessageRequest, encode_body

if TYPE_CHECKING:
    from api.models.records import Conversation, ConversationMessage, PaginatedResponse


async def get_conversation(conversation_id: str) -> Conversation:
    return await dispatch(f"/conversations/{conversation_id}")


async def list_conversation_messages(
    conversation_id: str,
) -> PaginatedResponse[ConversationMessage]:
    return await dispatch(f"/conversations/{conversation_id}/messages")


async def send_message(conversation_id: str, content: str) -> ConversationMessage:
    """Envia mensagem do usuário; retorna a resposta do agente."""
    return await dispatch(
        f"/conversations/{conversation_id}/messages",
        RequestOptions(method="POST", body=encode_body(SendMessageRequest(content=content))),
    )
