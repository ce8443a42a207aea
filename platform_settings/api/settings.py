"""Settings API routes.

Each route returns the flat {success, data, message} envelope. The HTTP status
is derived from the result's error kind; the body shape never changes.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from platform_settings.api.deps import get_settings_service
from platform_settings.schemas.settings import SettingRead, SettingsEnvelope
from platform_settings.services.errors import ErrorKind
from platform_settings.services.result import ServiceResult
from platform_settings.services.settings_service import SettingsService
from platform_settings.storage.uploads import UploadedAsset

router = APIRouter()

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 422,
    ErrorKind.UPLOAD: 502,
}


def _serialize(data: Any) -> SettingRead | list[SettingRead] | None:
    if data is None:
        return None
    if isinstance(data, list):
        return [SettingRead.model_validate(row) for row in data]
    return SettingRead.model_validate(data)


def render_result(result: ServiceResult) -> JSONResponse:
    """Render a ServiceResult as the envelope with a status matching its error kind."""
    envelope = SettingsEnvelope(
        success=result.success,
        data=_serialize(result.data),
        message=result.message,
    )
    status_code = 200 if result.success else _STATUS_BY_KIND.get(result.error_kind, 500)
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json"))


@router.get("", response_model=SettingsEnvelope)
def api_get_settings(service: SettingsService = Depends(get_settings_service)) -> JSONResponse:
    """Return every settings row."""
    return render_result(service.get_settings())


@router.patch("", response_model=SettingsEnvelope)
def api_update_setting(
    data: dict[str, Any] | None = Body(None),
    service: SettingsService = Depends(get_settings_service),
) -> JSONResponse:
    """Patch platform name and/or description."""
    return render_result(service.update_setting(data or {}))


@router.patch("/pluggou", response_model=SettingsEnvelope)
def api_update_pluggou_settings(
    data: dict[str, Any] | None = Body(None),
    service: SettingsService = Depends(get_settings_service),
) -> JSONResponse:
    """Patch Pluggou integration credentials."""
    return render_result(service.update_pluggou_settings(data or {}))


@router.post("/images", response_model=SettingsEnvelope)
async def api_upload_setting_images(
    request: Request,
    service: SettingsService = Depends(get_settings_service),
) -> JSONResponse:
    """Replace branding images. One multipart file part per slot (logo, banner, ...).

    Empty parts (an untouched file input: no filename, no bytes) are dropped so
    they never overwrite a stored asset URL.
    """
    form = await request.form()
    uploads: dict[str, UploadedAsset] = {}
    for field, value in form.multi_items():
        if not isinstance(value, UploadFile) or field in uploads:
            continue
        content = await value.read()
        if not value.filename and not content:
            continue
        uploads[field] = UploadedAsset(
            content=content,
            filename=value.filename or "",
            content_type=value.content_type or "",
        )
    result = await run_in_threadpool(service.upload_setting_images, uploads)
    return render_result(result)
