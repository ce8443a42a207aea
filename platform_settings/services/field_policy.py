"""Field allow-lists for settings updates and branding uploads."""

from __future__ import annotations

import time
import uuid
from collections.abc import Iterator, Mapping
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Any

from platform_settings.storage.uploads import UploadedAsset

ASSET_PATH_PREFIX = "settings"

# Upload slot name -> Setting attribute. Closed set; anything else is ignored.
IMAGE_SLOT_FIELDS: Mapping[str, str] = MappingProxyType(
    {
        "logo": "plataform_logo",
        "banner": "plataform_banner",
        "banner_2": "plataform_banner_2",
        "banner_3": "plataform_banner_3",
        "register_banner": "register_banner",
        "login_banner": "login_banner",
        "deposit_banner": "deposit_banner",
    }
)

TEXT_FIELDS: tuple[str, ...] = ("platform_name", "platform_description")

PLUGGOU_FIELDS: tuple[str, ...] = (
    "pluggou_base_url",
    "pluggou_api_key",
    "pluggou_organization_id",
)


def select_uploads(
    uploads: Mapping[str, UploadedAsset],
) -> Iterator[tuple[str, str, UploadedAsset]]:
    """Yield (slot, attribute, asset) for each policy slot present in uploads.

    Walks the policy table, not the input, so unknown keys never reach the store.
    """
    for slot, attribute in IMAGE_SLOT_FIELDS.items():
        asset = uploads.get(slot)
        if asset is not None:
            yield slot, attribute, asset


def filter_text_fields(data: Mapping[str, Any] | None, allowed: tuple[str, ...]) -> dict[str, str]:
    """Return trimmed values for allowed fields holding a non-blank string.

    Missing, non-string, empty and whitespace-only values count as not supplied.
    """
    if not data:
        return {}
    accepted: dict[str, str] = {}
    for field in allowed:
        value = data.get(field)
        if isinstance(value, str) and value.strip():
            accepted[field] = value.strip()
    return accepted


def build_asset_path(slot: str, filename: str) -> str:
    """Unique object path: settings/{slot}/{ms}-{token}-{filename}."""
    name = PurePosixPath((filename or "").replace("\\", "/")).name.strip() or "upload"
    token = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"
    return f"{ASSET_PATH_PREFIX}/{slot}/{token}-{name}"
