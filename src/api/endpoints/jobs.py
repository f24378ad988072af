"""Facades de jobs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.cip.dispatcher import RequestOptions, dispatch
from api.models.payloads import encode_body

if TYPE_CHECKING:
    from api.models.payloads import Payload
    from api.models.records import Job


async def get_job(job_id: str) -> Job:
    return await dispatch(f"/jobs/{job_id}")


async def update_job(job_id: str, data: Payload) -> Job:
    return await dispatch(
        f"/jobs/{job_id}",
        RequestOptions(method="PATCH", body=encode_body(data)),
    )


async def delete_job(job_id: str) -> None:
    await dispatch(f"/jobs/{job_id}", RequestOptions(method="DELETE"))
