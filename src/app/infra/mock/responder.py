"""Backend simulado em memória para o modo CIP_USE_MOCK=true.

Atende todas as rotas usadas pelas facades com o mesmo contrato do
backend real, do ponto de vista do dispatcher:
- GET → record ou {"items": [...], "pagination": {"nextToken": None}}
- POST/PATCH → record resultante (autoritativo)
- DELETE → None
- recurso/rota inexistente → ApiClientError(404, {"code", "message"})

Estado é mantido em memória e se perde entre reinícios.
ATENÇÃO: Não usar em staging/production.
"""

from __future__ import annotations

import copy
import json
import logging
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from api.connectors.cip.errors import ApiClientError
from app.infra.mock.datasets import load_dataset
from app.infra.mock.routes import resolve_route
from app.protocols.mock_responder import MockResponderProtocol
from config.settings import DEFAULT_MOCK_CLIENT

if TYPE_CHECKING:
    from collections.abc import Callable

    from api.connectors.cip.dispatcher import RequestOptions

logger = logging.getLogger(__name__)

Record = dict[str, Any]

# Campos atribuídos pelo servidor; o corpo da requisição não os sobrescreve
SERVER_FIELDS = frozenset({"id", "createdAt", "updatedAt"})

AGENT_RESPONSES: tuple[str, ...] = (
    "Happy to help! Could you tell me more about the requirements for this request?",
    "Got it. Who is the target audience, and what is the deadline?",
    "Thanks for the details. I'm drafting the brief now; anything else to add?",
    "All set. The job has been created and you can track it in the Jobs section.",
)


def _utc_now() -> str:
    return datetime.now(UTC).isoformat()


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def _writable(body: Record) -> Record:
    return {key: value for key, value in body.items() if key not in SERVER_FIELDS}


def _paginated(items: list[Record]) -> dict[str, Any]:
    return {"items": copy.deepcopy(items), "pagination": {"nextToken": None}}


class InMemoryMockResponder(MockResponderProtocol):
    """Mock responder com estado em memória, semeado por dataset YAML."""

    def __init__(
        self,
        client_id: str = DEFAULT_MOCK_CLIENT,
        dataset: dict[str, Any] | None = None,
        clock: Callable[[], str] = _utc_now,
        id_factory: Callable[[str], str] = _new_id,
    ) -> None:
        self._client_id = client_id
        self._data = dataset if dataset is not None else load_dataset(client_id)
        self._clock = clock
        self._new_id = id_factory

    @property
    def client_id(self) -> str:
        return self._client_id

    async def handle(self, path: str, options: RequestOptions) -> Any:
        method = options.method.upper()
        resolved = resolve_route(method, path)
        if resolved is None:
            logger.warning("mock_route_not_found", extra={"method": method, "endpoint": path})
            raise ApiClientError(
                404,
                {"code": "NOT_FOUND", "message": f"Rota simulada inexistente: {method} {path}"},
            )
        route, params = resolved
        body = json.loads(options.body) if options.body else {}
        handler = getattr(self, f"_{route.handler}")
        return handler(params, body)

    # ──────────────────────────────────────────────────────────────────────
    # Helpers de coleção
    # ──────────────────────────────────────────────────────────────────────

    def _items(self, collection: str) -> list[Record]:
        return self._data.setdefault(collection, [])

    def _find(self, collection: str, record_id: str) -> Record:
        for record in self._items(collection):
            if record.get("id") == record_id:
                return record
        raise ApiClientError(
            404,
            {"code": "NOT_FOUND", "message": f"{collection}/{record_id} não encontrado"},
        )

    def _filter(self, collection: str, **criteria: str) -> list[Record]:
        return [
            record
            for record in self._items(collection)
            if all(record.get(key) == value for key, value in criteria.items())
        ]

    def _insert(self, collection: str, prefix: str, base: Record, body: Record) -> Record:
        now = self._clock()
        record = {
            **base,
            **_writable(body),
            "id": self._new_id(prefix),
            "createdAt": now,
            "updatedAt": now,
        }
        self._items(collection).append(record)
        return record

    def _patch(self, collection: str, record_id: str, body: Record) -> Record:
        record = self._find(collection, record_id)
        record.update(_writable(body))
        record["updatedAt"] = self._clock()
        return copy.deepcopy(record)

    def _remove(self, collection: str, record_id: str) -> None:
        record = self._find(collection, record_id)
        self._items(collection).remove(record)

    def _get(self, collection: str, record_id: str) -> Record:
        return copy.deepcopy(self._find(collection, record_id))

    # ──────────────────────────────────────────────────────────────────────
    # Usuários e organizações
    # ──────────────────────────────────────────────────────────────────────

    def _get_current_user(self, params: dict[str, str], body: Record) -> Record:
        current = self._data.get("current_user")
        if not current:
            raise ApiClientError(401, {"code": "UNAUTHENTICATED", "message": "Sem sessão ativa"})
        return copy.deepcopy(current)

    def _get_user(self, params: dict[str, str], body: Record) -> Record:
        return self._get("users", params["userId"])

    def _update_user(self, params: dict[str, str], body: Record) -> Record:
        return self._patch("users", params["userId"], body)

    def _delete_user(self, params: dict[str, str], body: Record) -> None:
        self._remove("users", params["userId"])

    def _list_organizations(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._items("organizations"))

    def _get_organization(self, params: dict[str, str], body: Record) -> Record:
        return self._get("organizations", params["organizationId"])

    def _list_organization_users(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._filter("users", organizationId=params["organizationId"]))

    def _invite_user(self, params: dict[str, str], body: Record) -> Record:
        self._find("organizations", params["organizationId"])
        base = {"organizationId": params["organizationId"], "name": body.get("email", "")}
        return copy.deepcopy(self._insert("users", "u", base, body))

    def _remove_user(self, params: dict[str, str], body: Record) -> None:
        user = self._find("users", params["userId"])
        if user.get("organizationId") != params["organizationId"]:
            raise ApiClientError(
                404, {"code": "NOT_FOUND", "message": "Usuário não pertence à organização"}
            )
        self._items("users").remove(user)

    # ──────────────────────────────────────────────────────────────────────
    # Workspaces
    # ──────────────────────────────────────────────────────────────────────

    def _list_workspaces(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._filter("workspaces", organizationId=params["organizationId"]))

    def _create_workspace(self, params: dict[str, str], body: Record) -> Record:
        base = {"organizationId": params["organizationId"]}
        return copy.deepcopy(self._insert("workspaces", "ws", base, body))

    def _get_workspace(self, params: dict[str, str], body: Record) -> Record:
        return self._get("workspaces", params["workspaceId"])

    def _update_workspace(self, params: dict[str, str], body: Record) -> Record:
        return self._patch("workspaces", params["workspaceId"], body)

    def _delete_workspace(self, params: dict[str, str], body: Record) -> None:
        self._remove("workspaces", params["workspaceId"])

    def _list_workspace_jobs(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._filter("jobs", workspaceId=params["workspaceId"]))

    def _list_workspace_uploads(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._filter("uploads", workspaceId=params["workspaceId"]))

    def _list_workspace_conversations(
        self, params: dict[str, str], body: Record
    ) -> dict[str, Any]:
        return _paginated(self._filter("conversations", workspaceId=params["workspaceId"]))

    def _start_workspace_conversation(self, params: dict[str, str], body: Record) -> Record:
        base = {"workspaceId": params["workspaceId"], "status": "ACTIVE", "messages": []}
        return copy.deepcopy(self._insert("conversations", "conv", base, {}))

    def _list_workspace_audit_events(
        self, params: dict[str, str], body: Record
    ) -> dict[str, Any]:
        workspace_id = params["workspaceId"]
        related = {workspace_id}
        related.update(job["id"] for job in self._filter("jobs", workspaceId=workspace_id))
        related.update(up["id"] for up in self._filter("uploads", workspaceId=workspace_id))
        return _paginated(
            [event for event in self._items("audit_events") if event.get("resourceId") in related]
        )

    # ──────────────────────────────────────────────────────────────────────
    # Projetos e chat
    # ──────────────────────────────────────────────────────────────────────

    def _list_projects(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._filter("projects", organizationId=params["organizationId"]))

    def _create_project(self, params: dict[str, str], body: Record) -> Record:
        base = {"organizationId": params["organizationId"], "status": "DRAFT"}
        return copy.deepcopy(self._insert("projects", "prj", base, body))

    def _get_project(self, params: dict[str, str], body: Record) -> Record:
        return self._get("projects", params["projectId"])

    def _update_project(self, params: dict[str, str], body: Record) -> Record:
        return self._patch("projects", params["projectId"], body)

    def _delete_project(self, params: dict[str, str], body: Record) -> None:
        self._remove("projects", params["projectId"])

    def _list_project_conversations(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._filter("conversations", projectId=params["projectId"]))

    def _start_project_conversation(self, params: dict[str, str], body: Record) -> Record:
        project = self._find("projects", params["projectId"])
        base = {
            "projectId": project["id"],
            "workspaceId": project.get("workspaceId"),
            "status": "ACTIVE",
            "messages": [],
        }
        return copy.deepcopy(self._insert("conversations", "conv", base, {}))

    def _list_chat_messages(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._filter("chat_messages", projectId=params["projectId"]))

    def _send_chat_message(self, params: dict[str, str], body: Record) -> Record:
        self._find("projects", params["projectId"])
        record = {
            "id": self._new_id("chat"),
            "projectId": params["projectId"],
            "createdAt": self._clock(),
            **body,
        }
        self._items("chat_messages").append(record)
        return copy.deepcopy(record)

    def _list_project_audit_events(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        project_id = params["projectId"]
        related = {project_id}
        related.update(up["id"] for up in self._filter("uploads", projectId=project_id))
        related.update(ar["id"] for ar in self._filter("asset_requests", projectId=project_id))
        return _paginated(
            [event for event in self._items("audit_events") if event.get("resourceId") in related]
        )

    # ──────────────────────────────────────────────────────────────────────
    # Asset requests
    # ──────────────────────────────────────────────────────────────────────

    def _list_asset_requests(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._filter("asset_requests", projectId=params["projectId"]))

    def _create_asset_request(self, params: dict[str, str], body: Record) -> Record:
        self._find("projects", params["projectId"])
        base = {"projectId": params["projectId"], "status": "PENDING"}
        return copy.deepcopy(self._insert("asset_requests", "ar", base, body))

    def _get_asset_request(self, params: dict[str, str], body: Record) -> Record:
        return self._get("asset_requests", params["assetRequestId"])

    def _update_asset_request(self, params: dict[str, str], body: Record) -> Record:
        return self._patch("asset_requests", params["assetRequestId"], body)

    def _delete_asset_request(self, params: dict[str, str], body: Record) -> None:
        self._remove("asset_requests", params["assetRequestId"])

    def _list_asset_request_uploads(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._filter("uploads", assetRequestId=params["assetRequestId"]))

    # ──────────────────────────────────────────────────────────────────────
    # Uploads e jobs
    # ──────────────────────────────────────────────────────────────────────

    def _create_upload(self, base: Record, body: Record) -> dict[str, Any]:
        record = self._insert("uploads", "up", base, body)
        record.setdefault("uri", f"https://uploads.mock.local/{record['id']}")
        return {
            "upload": copy.deepcopy(record),
            "presignedUrl": f"https://uploads.mock.local/presigned/{record['id']}",
        }

    def _create_project_upload(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        project = self._find("projects", params["projectId"])
        base = {
            "projectId": project["id"],
            "workspaceId": project.get("workspaceId"),
            "organizationId": project.get("organizationId"),
            "assetRequestId": None,
        }
        return self._create_upload(base, body)

    def _create_job_upload(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        job = self._find("jobs", params["jobId"])
        base = {
            "jobId": job["id"],
            "workspaceId": job.get("workspaceId"),
            "organizationId": job.get("organizationId"),
            "assetRequestId": None,
        }
        return self._create_upload(base, body)

    def _list_project_uploads(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._filter("uploads", projectId=params["projectId"]))

    def _list_job_uploads(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        return _paginated(self._filter("uploads", jobId=params["jobId"]))

    def _get_upload(self, params: dict[str, str], body: Record) -> Record:
        return self._get("uploads", params["uploadId"])

    def _update_upload(self, params: dict[str, str], body: Record) -> Record:
        return self._patch("uploads", params["uploadId"], body)

    def _delete_upload(self, params: dict[str, str], body: Record) -> None:
        self._remove("uploads", params["uploadId"])

    def _get_job(self, params: dict[str, str], body: Record) -> Record:
        return self._get("jobs", params["jobId"])

    def _update_job(self, params: dict[str, str], body: Record) -> Record:
        return self._patch("jobs", params["jobId"], body)

    def _delete_job(self, params: dict[str, str], body: Record) -> None:
        self._remove("jobs", params["jobId"])

    # ──────────────────────────────────────────────────────────────────────
    # Conversas
    # ──────────────────────────────────────────────────────────────────────

    def _get_conversation(self, params: dict[str, str], body: Record) -> Record:
        return self._get("conversations", params["conversationId"])

    def _list_conversation_messages(self, params: dict[str, str], body: Record) -> dict[str, Any]:
        conversation = self._find("conversations", params["conversationId"])
        return _paginated(conversation.get("messages") or [])

    def _send_conversation_message(self, params: dict[str, str], body: Record) -> Record:
        conversation = self._find("conversations", params["conversationId"])
        messages = conversation.setdefault("messages", [])
        now = self._clock()
        replies = sum(1 for message in messages if message.get("role") == "agent")
        messages.append({"role": "user", "content": body.get("content", ""), "createdAt": now})
        reply = {
            "role": "agent",
            "content": AGENT_RESPONSES[replies % len(AGENT_RESPONSES)],
            "createdAt": now,
        }
        messages.append(reply)
        conversation["updatedAt"] = now
        return copy.deepcopy(reply)
