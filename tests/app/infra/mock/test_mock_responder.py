"""Testes do InMemoryMockResponder."""

from __future__ import annotations

import json
from itertools import count

import pytest

from api.connectors.cip.dispatcher import RequestOptions
from api.connectors.cip.errors import ApiClientError
from app.infra.mock import AGENT_RESPONSES, InMemoryMockResponder, load_dataset
from app.infra.mock.datasets import COLLECTIONS

FIXED_NOW = "2026-01-01T00:00:00+00:00"


@pytest.fixture
def responder() -> InMemoryMockResponder:
    ids = count(1)
    return InMemoryMockResponder(
        "newell",
        clock=lambda: FIXED_NOW,
        id_factory=lambda prefix: f"{prefix}-{next(ids)}",
    )


def _opts(method: str = "GET", body: dict | None = None) -> RequestOptions:
    return RequestOptions(method=method, body=json.dumps(body) if body is not None else None)


# ──────────────────────────────────────────────────────────────────────────────
# Datasets
# ──────────────────────────────────────────────────────────────────────────────


class TestDatasets:
    def test_every_collection_is_a_list(self) -> None:
        data = load_dataset("earnin")
        assert all(isinstance(data[name], list) for name in COLLECTIONS)
        assert data["current_user"]["id"] == "u-earnin-1"

    def test_unknown_client_falls_back_to_default(self) -> None:
        assert load_dataset("acme")["current_user"]["id"] == "u-newell-1"

    def test_copies_are_independent(self) -> None:
        first = load_dataset("newell")
        first["projects"].clear()
        assert load_dataset("newell")["projects"]


# ──────────────────────────────────────────────────────────────────────────────
# Leitura
# ──────────────────────────────────────────────────────────────────────────────


class TestReads:
    @pytest.mark.asyncio
    async def test_current_user_and_organizations(self, responder: InMemoryMockResponder) -> None:
        user = await responder.handle("/users/me", _opts())
        orgs = await responder.handle("/organizations", _opts())

        assert user["id"] == "u-newell-1"
        assert [org["id"] for org in orgs["items"]] == ["org-newell"]
        assert orgs["pagination"] == {"nextToken": None}

    @pytest.mark.asyncio
    async def test_upload_listings_by_parent(self, responder: InMemoryMockResponder) -> None:
        by_project = await responder.handle("/projects/prj-newell-spring/uploads", _opts())
        by_job = await responder.handle("/jobs/job-newell-1/uploads", _opts())
        by_asset = await responder.handle("/asset-requests/ar-newell-hero/uploads", _opts())

        for listing in (by_project, by_job, by_asset):
            assert [item["id"] for item in listing["items"]] == ["up-newell-1"]

    @pytest.mark.asyncio
    async def test_project_audit_events(self, responder: InMemoryMockResponder) -> None:
        events = await responder.handle("/projects/prj-newell-spring/audit-events", _opts())
        assert [event["id"] for event in events["items"]] == ["ae-newell-1"]

    @pytest.mark.asyncio
    async def test_workspace_audit_events_include_jobs(
        self, responder: InMemoryMockResponder
    ) -> None:
        events = await responder.handle("/workspaces/ws-newell-home/audit-events", _opts())
        assert [event["id"] for event in events["items"]] == ["ae-newell-2"]

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, responder: InMemoryMockResponder) -> None:
        project = await responder.handle("/projects/prj-newell-spring", _opts())
        project["name"] = "mutated"
        again = await responder.handle("/projects/prj-newell-spring", _opts())
        assert again["name"] == "Spring Campaign"


# ──────────────────────────────────────────────────────────────────────────────
# Escrita
# ──────────────────────────────────────────────────────────────────────────────


class TestWrites:
    @pytest.mark.asyncio
    async def test_create_then_list(self, responder: InMemoryMockResponder) -> None:
        created = await responder.handle(
            "/organizations/org-newell/workspaces",
            _opts("POST", {"name": "Outdoor"}),
        )
        listing = await responder.handle("/organizations/org-newell/workspaces", _opts())

        assert created == {
            "id": "ws-1",
            "organizationId": "org-newell",
            "name": "Outdoor",
            "createdAt": FIXED_NOW,
            "updatedAt": FIXED_NOW,
        }
        assert "ws-1" in [item["id"] for item in listing["items"]]

    @pytest.mark.asyncio
    async def test_patch_merges_and_touches_updated_at(
        self, responder: InMemoryMockResponder
    ) -> None:
        updated = await responder.handle(
            "/projects/prj-newell-spring", _opts("PATCH", {"status": "DELIVERED"})
        )
        assert updated["status"] == "DELIVERED"
        assert updated["name"] == "Spring Campaign"
        assert updated["updatedAt"] == FIXED_NOW

    @pytest.mark.asyncio
    async def test_body_cannot_override_server_fields(
        self, responder: InMemoryMockResponder
    ) -> None:
        body = {"id": "ws-newell-home", "name": "Clone", "createdAt": "1999-01-01"}
        created = await responder.handle(
            "/organizations/org-newell/workspaces", _opts("POST", body)
        )
        patched = await responder.handle(
            "/projects/prj-newell-spring",
            _opts("PATCH", {"id": "prj-other", "createdAt": "1999-01-01", "name": "Renamed"}),
        )

        assert created["id"] == "ws-1"
        assert created["createdAt"] == FIXED_NOW
        assert created["name"] == "Clone"
        assert patched["id"] == "prj-newell-spring"
        assert patched["createdAt"] == "2025-03-01T10:00:00Z"
        assert patched["name"] == "Renamed"
        assert (await responder.handle("/workspaces/ws-newell-home", _opts()))["name"] != "Clone"

    @pytest.mark.asyncio
    async def test_delete_then_get_is_not_found(self, responder: InMemoryMockResponder) -> None:
        assert await responder.handle("/jobs/job-newell-1", _opts("DELETE")) is None

        with pytest.raises(ApiClientError) as exc_info:
            await responder.handle("/jobs/job-newell-1", _opts())

        assert exc_info.value.status == 404
        assert exc_info.value.code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_create_upload_returns_presigned_url(
        self, responder: InMemoryMockResponder
    ) -> None:
        result = await responder.handle(
            "/projects/prj-newell-spring/uploads",
            _opts("POST", {"filename": "a.png", "mimeType": "image/png"}),
        )
        upload = result["upload"]
        assert upload["id"] == "up-1"
        assert upload["projectId"] == "prj-newell-spring"
        assert upload["assetRequestId"] is None
        assert result["presignedUrl"].endswith("/up-1")

    @pytest.mark.asyncio
    async def test_conversation_reply_cycle(self, responder: InMemoryMockResponder) -> None:
        first = await responder.handle(
            "/conversations/conv-newell-1/messages", _opts("POST", {"content": "Hi"})
        )
        second = await responder.handle(
            "/conversations/conv-newell-1/messages", _opts("POST", {"content": "More"})
        )
        messages = await responder.handle("/conversations/conv-newell-1/messages", _opts())

        assert first["content"] == AGENT_RESPONSES[0]
        assert second["content"] == AGENT_RESPONSES[1]
        assert len(messages["items"]) == 5

    @pytest.mark.asyncio
    async def test_remove_user_from_other_org(self, responder: InMemoryMockResponder) -> None:
        with pytest.raises(ApiClientError):
            await responder.handle("/organizations/org-other/users/u-newell-2", _opts("DELETE"))


class TestErrors:
    @pytest.mark.asyncio
    async def test_unknown_route(self, responder: InMemoryMockResponder) -> None:
        with pytest.raises(ApiClientError) as exc_info:
            await responder.handle("/billing", _opts())
        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_missing_current_user_is_unauthenticated(self) -> None:
        responder = InMemoryMockResponder(dataset={"current_user": None})
        with pytest.raises(ApiClientError) as exc_info:
            await responder.handle("/users/me", _opts())
        assert exc_info.value.status == 401
