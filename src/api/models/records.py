"""Records da API CIP (formas de transporte, pass-through).

Os records não são validados nem transformados pelo cliente: o corpo
devolvido pelo servidor é autoritativo. Os TypedDicts abaixo apenas
documentam os campos conhecidos (todos opcionais em tempo de execução).
"""

from __future__ import annotations

from typing import Any, Generic, Literal, TypedDict, TypeVar

T = TypeVar("T")

UserRole = Literal["VIEWER", "EDITOR", "ADMIN", "STAFF"]
ConversationStatus = Literal["ACTIVE", "COMPLETED", "ABANDONED"]
JobStatus = Literal[
    "DRAFT", "PENDING", "IN_PRODUCTION", "IN_REVIEW", "COMPLETED", "CANCELLED"
]


class PaginationInfo(TypedDict, total=False):
    nextToken: str | None


class PaginatedResponse(TypedDict, Generic[T], total=False):
    """Lista paginada; `items` preserva a ordem do servidor."""

    items: list[T]
    pagination: PaginationInfo


class Organization(TypedDict, total=False):
    id: str
    name: str
    slug: str
    hubspotId: str
    createdAt: str
    updatedAt: str


class User(TypedDict, total=False):
    id: str
    email: str
    name: str
    organizationId: str
    role: UserRole
    createdAt: str
    updatedAt: str


class Workspace(TypedDict, total=False):
    id: str
    name: str
    organizationId: str
    dataCoreUrl: str
    trainingCoreUrls: list[str]
    requestAgentPrompt: str
    createdAt: str
    updatedAt: str


class Project(TypedDict, total=False):
    id: str
    name: str
    organizationId: str
    projectType: str
    status: str
    createdAt: str
    updatedAt: str


class AssetRequest(TypedDict, total=False):
    id: str
    projectId: str
    title: str
    status: str
    createdAt: str
    updatedAt: str


class Job(TypedDict, total=False):
    id: str
    title: str
    description: str
    status: JobStatus
    workspaceId: str
    organizationId: str
    createdAt: str
    updatedAt: str


class Upload(TypedDict, total=False):
    id: str
    filename: str
    mimeType: str
    uri: str
    projectId: str
    workspaceId: str
    organizationId: str
    jobId: str
    assetRequestId: str | None
    label: str
    reviewStatus: str
    reviewNotes: str
    metadata: dict[str, Any]
    createdAt: str
    updatedAt: str


class UploadResponse(TypedDict, total=False):
    """Resposta de criação de upload: record + URL pré-assinada."""

    upload: Upload
    presignedUrl: str


class ConversationMessage(TypedDict, total=False):
    userId: str
    content: str
    createdAt: str


class Conversation(TypedDict, total=False):
    id: str
    workspaceId: str
    projectId: str
    status: ConversationStatus
    jobId: str
    messages: list[ConversationMessage]
    createdAt: str
    updatedAt: str


class ChatMessage(TypedDict, total=False):
    id: str
    projectId: str
    senderEmail: str
    senderName: str
    message: str
    createdAt: str


class AuditEvent(TypedDict, total=False):
    id: str
    createdAt: str
    userId: str
    organizationId: str
    action: str
    resourceType: str
    resourceId: str
    details: dict[str, Any]
