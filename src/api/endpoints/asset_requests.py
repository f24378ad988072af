"""Facades de asset requests (escopo: projeto)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.cip.dispatcher import RequestOptions, dispatch
from api.models.payloads import encode_body

if TYPE_CHECKING:
    from api.models.payloads import Payload
    from api.models.records import AssetRequest, PaginatedResponse


async def list_asset_requests(project_id: str) -> PaginatedResponse[AssetRequest]:
    return await dispatch(f"/projects/{project_id}/asset-requests")


async def get_asset_request(asset_request_id: str) -> AssetRequest:
    return await dispatch(f"/asset-requests/{asset_request_id}")


async def create_asset_request(project_id: str, data: Payload) -> AssetRequest:
    return await dispatch(
        f"/projects/{project_id}/asset-requests",
        RequestOptions(method="POST", body=encode_body(data)),
    )


async def update_asset_request(asset_request_id: str, data: Payload) -> AssetRequest:
    return await dispatch(
        f"/asset-requests/{asset_request_id}",
        RequestOptions(method="PATCH", body=encode_body(data)),
    )


async def delete_asset_request(asset_request_id: str) -> None:
    await dispatch(f"/asset-requests/{asset_request_id}", RequestOptions(method="DELETE"))
