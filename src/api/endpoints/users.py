"""Facades de usuários e membros da organização."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.cip.dispatcher import RequestOptions, dispatch
from api.models.payloads import encode_body

if TYPE_CHECKING:
    from api.models.payloads import Payload
    from api.models.records import PaginatedResponse, User

CURRENT_USER_PATH = "/users/me"


async def get_current_user() -> User:
    return await dispatch(CURRENT_USER_PATH)


async def get_user(user_id: str) -> User:
    return await dispatch(f"/users/{user_id}")


async def update_user(user_id: str, data: Payload) -> User:
    return await dispatch(
        f"/users/{user_id}",
        RequestOptions(method="PATCH", body=encode_body(data)),
    )


async def delete_user(user_id: str) -> None:
    await dispatch(f"/users/{user_id}", RequestOptions(method="DELETE"))


async def list_organization_users(organization_id: str) -> PaginatedResponse[User]:
    return await dispatch(f"/organizations/{organization_id}/users")


async def invite_user(organization_id: str, data: Payload) -> User:
    return await dispatch(
        f"/organizations/{organization_id}/users",
        RequestOptions(method="POST", body=encode_body(data)),
    )


async def remove_user_from_organization(organization_id: str, user_id: str) -> None:
    await dispatch(
        f"/organizations/{organization_id}/users/{user_id}",
        RequestOptions(method="DELETE"),
    )
