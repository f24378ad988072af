"""DTOs de escrita (create/update) da API CIP.

Campos em snake_case no Python, serializados em camelCase.
Apenas os campos informados vão para o corpo (exclude_unset), o que
mantém PATCH parciais parciais.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from api.models.records import UserRole


class ApiPayload(BaseModel):
    """Base dos DTOs: aliases camelCase, campos extras repassados."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class WorkspaceCreate(ApiPayload):
    name: str = Field(..., min_length=1)
    data_core_url: str | None = None
    training_core_urls: list[str] | None = None
    request_agent_prompt: str | None = None


class WorkspaceUpdate(ApiPayload):
    name: str | None = None
    data_core_url: str | None = None
    training_core_urls: list[str] | None = None
    request_agent_prompt: str | None = None


class ProjectCreate(ApiPayload):
    name: str = Field(..., min_length=1)
    project_type: str | None = None
    workspace_id: str | None = None


class ProjectUpdate(ApiPayload):
    name: str | None = None
    project_type: str | None = None
    status: str | None = None


class JobUpdate(ApiPayload):
    title: str | None = None
    description: str | None = None
    airtable_url: str | None = None
    frameio_url: str | None = None
    figma_url: str | None = None


class UploadCreate(ApiPayload):
    filename: str = Field(..., min_length=1)
    mime_type: str = Field(..., min_length=1)
    job_id: str | None = None
    asset_request_id: str | None = None


class UploadUpdate(ApiPayload):
    label: str | None = None
    asset_request_id: str | None = None
    review_status: str | None = None
    review_notes: str | None = None


class ChatMessageCreate(ApiPayload):
    sender_email: str
    sender_name: str
    message: str


class SendMessageRequest(ApiPayload):
    content: str


class UserInvite(ApiPayload):
    email: str = Field(..., min_length=3)
    role: UserRole
    name: str | None = None


class UserUpdate(ApiPayload):
    name: str | None = None
    role: UserRole | None = None


Payload = ApiPayload | Mapping[str, Any]


def encode_body(payload: Payload | None) -> str | None:
    """Serializa o payload de uma facade em JSON.

    Mappings vão como estão (inclusive valores None explícitos);
    DTOs passam por `to_body()`.
    """
    if payload is None:
        return None
    if isinstance(payload, ApiPayload):
        return json.dumps(payload.to_body())
    return json.dumps(dict(payload))
