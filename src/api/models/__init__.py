"""Contratos tipados da API CIP: records pass-through e DTOs de escrita."""

from api.models.payloads import (
    ApiPayload,
    ChatMessageCreate,
    JobUpdate,
    Payload,
    ProjectCreate,
    ProjectUpdate,
    SendMessageRequest,
    UploadCreate,
    UploadUpdate,
    UserInvite,
    UserUpdate,
    WorkspaceCreate,
    WorkspaceUpdate,
    encode_body,
)
from api.models.records import (
    AssetRequest,
    AuditEvent,
    ChatMessage,
    Conversation,
    ConversationMessage,
    Job,
    Organization,
    PaginatedResponse,
    Project,
    Upload,
    UploadResponse,
    User,
    Workspace,
)

__all__ = [
    "ApiPayload",
    "AssetRequest",
    "AuditEvent",
    "ChatMessage",
    "ChatMessageCreate",
    "Conversation",
    "ConversationMessage",
    "Job",
    "JobUpdate",
    "Organization",
    "PaginatedResponse",
    "Payload",
    "Project",
    "ProjectCreate",
    "ProjectUpdate",
    "SendMessageRequest",
    "Upload",
    "UploadCreate",
    "UploadResponse",
    "UploadUpdate",
    "User",
    "UserInvite",
    "UserUpdate",
    "Workspace",
    "WorkspaceCreate",
    "WorkspaceUpdate",
    "encode_body",
]
