"""Facades de uploads.

Uploads podem ser listados sob três pais distintos (projeto, job,
asset request); cada um tem sua própria rota e sua própria função.
A associação com um asset request é um PATCH de campo único
(`assetRequestId`), feito por link/unlink.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.cip.dispatcher import RequestOptions, dispatch, get_dispatcher
from api.connectors.http_base import HttpError
from api.models.payloads import encode_body

if TYPE_CHECKING:
    from api.models.payloads import Payload
    from api.models.records import PaginatedResponse, Upload, UploadResponse

logger = logging.getLogger(__name__)


async def list_project_uploads(project_id: str) -> PaginatedResponse[Upload]:
    """Lista uploads de um projeto."""
    return await dispatch(f"/projects/{project_id}/uploads")


async def list_job_uploads(job_id: str) -> PaginatedResponse[Upload]:
    """Lista uploads de um job."""
    return await dispatch(f"/jobs/{job_id}/uploads")


async def list_asset_request_uploads(asset_request_id: str) -> PaginatedResponse[Upload]:
    """Lista uploads vinculados a um asset request."""
    return await dispatch(f"/asset-requests/{asset_request_id}/uploads")


async def get_upload(upload_id: str) -> Upload:
    return await dispatch(f"/uploads/{upload_id}")


async def create_upload(project_id: str, data: Payload) -> UploadResponse:
    """Cria upload no projeto e obtém a URL pré-assinada.

    Args:
        project_id: ID do projeto
        data: UploadCreate (filename, mime_type, job_id opcional)

    Returns:
        {"upload": Upload, "presignedUrl": str}
    """
    return await dispatch(
        f"/projects/{project_id}/uploads",
        RequestOptions(method="POST", body=encode_body(data)),
    )


async def create_job_upload(job_id: str, data: Payload) -> UploadResponse:
    """Cria upload no escopo de um job."""
    return await dispatch(
        f"/jobs/{job_id}/uploads",
        RequestOptions(method="POST", body=encode_body(data)),
    )


async def update_upload(upload_id: str, data: Payload) -> Upload:
    """Atualiza label, assetRequestId, reviewStatus ou reviewNotes."""
    return await dispatch(
        f"/uploads/{upload_id}",
        RequestOptions(method="PATCH", body=encode_body(data)),
    )


async def delete_upload(upload_id: str) -> None:
    await dispatch(f"/uploads/{upload_id}", RequestOptions(method="DELETE"))


async def link_upload_to_asset(upload_id: str, asset_request_id: str) -> Upload:
    """Vincula o upload a um asset request."""
    return await dispatch(
        f"/uploads/{upload_id}",
        RequestOptions(method="PATCH", body=encode_body({"assetRequestId": asset_request_id})),
    )


async def unlink_upload_from_asset(upload_id: str) -> Upload:
    """Remove o vínculo (assetRequestId explícito em null)."""
    return await dispatch(
        f"/uploads/{upload_id}",
        RequestOptions(method="PATCH", body=encode_body({"assetRequestId": None})),
    )


async def upload_file(content: bytes, presigned_url: str, content_type: str) -> None:
    """Envia o arquivo direto para a URL pré-assinada (PUT).

    Não passa pelo dispatcher: a URL é absoluta e fora da API CIP.
    No modo simulado a URL é fictícia; apenas a latência é aplicada.

    Raises:
        HttpError: Status fora de 2xx no PUT
        httpx.TransportError: Falha de rede
    """
    dispatcher = get_dispatcher()
    if dispatcher.use_mock:
        await dispatcher.simulate_latency()
        logger.debug("upload_file_simulated", extra={"size_bytes": len(content)})
        return

    response = await dispatcher.http_client.put(
        presigned_url,
        content=content,
        headers={"Content-Type": content_type},
    )
    if not response.is_success:
        logger.warning("upload_file_failed", extra={"status_code": response.status_code})
        raise HttpError("upload_failed", status_code=response.status_code)
