"""Settings response schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class SettingRead(BaseModel):
    """Schema for reading the settings record (response)."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    platform_name: str | None = None
    platform_description: str | None = None
    plataform_logo: str | None = None
    plataform_banner: str | None = None
    plataform_banner_2: str | None = None
    plataform_banner_3: str | None = None
    register_banner: str | None = None
    login_banner: str | None = None
    deposit_banner: str | None = None
    pluggou_base_url: str | None = None
    pluggou_api_key: str | None = None
    pluggou_organization_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SettingsEnvelope(BaseModel):
    """Flat result envelope shared by every settings endpoint."""

    success: bool
    data: SettingRead | list[SettingRead] | None = None
    message: str
