"""Facades de organizações."""

from __future__ import annotations

from api.connectors.cip.dispatcher import dispatch
from api.models.records import Organization, PaginatedResponse


async def list_organizations() -> PaginatedResponse[Organization]:
    return await dispatch("/organizations")


async def get_organization(organization_id: str) -> Organization:
    return await dispatch(f"/organizations/{organization_id}")
