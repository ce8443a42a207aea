"""Settings service: read settings, patch text fields, replace branding assets.

Every public method returns a ServiceResult and never raises. Writes follow one
linear flow: filter input -> fetch the singleton -> (upload assets) -> single
repository update.

Store/database gap: blobs uploaded before a later slot fails (or before the
repository write fails) stay in the bucket. No compensating delete is issued;
the orphaned keys are logged at WARNING.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from platform_settings.repositories.settings_repository import SettingsRepository
from platform_settings.services.errors import (
    ConfigError,
    SettingsError,
    UploadError,
    ValidationError,
)
from platform_settings.services.field_policy import (
    PLUGGOU_FIELDS,
    TEXT_FIELDS,
    build_asset_path,
    filter_text_fields,
    select_uploads,
)
from platform_settings.services.result import ServiceResult
from platform_settings.storage.asset_store import AssetStoreGateway
from platform_settings.storage.uploads import UploadedAsset

logger = logging.getLogger(__name__)

MSG_SETTINGS_READ = "Settings retrieved successfully."
MSG_IMAGES_UPDATED = "Images updated successfully."
MSG_SETTINGS_UPDATED = "Settings updated successfully."
MSG_PLUGGOU_UPDATED = "Pluggou settings updated successfully."
MSG_NO_VALID_FILES = "No valid files submitted."
MSG_NO_VALID_FIELDS = "No valid fields to update."


class SettingsService:
    """Orchestrates the settings repository and the asset store."""

    def __init__(
        self,
        repository: SettingsRepository,
        asset_store: AssetStoreGateway,
        bucket: str | None,
    ) -> None:
        self.repository = repository
        self.asset_store = asset_store
        self.bucket = bucket

    def get_settings(self) -> ServiceResult:
        """Return all settings rows (a list; empty when the table is empty)."""
        try:
            rows = self.repository.list_all()
        except Exception as exc:
            return self._failure("get_settings", exc)
        return ServiceResult.ok(rows, MSG_SETTINGS_READ)

    def upload_setting_images(self, uploads: Mapping[str, UploadedAsset]) -> ServiceResult:
        """Upload allow-listed branding images and store their public URLs.

        All-or-nothing on the database side: any upload failure skips the write.
        """
        uploaded_keys: list[str] = []
        try:
            bucket = (self.bucket or "").strip()
            if not bucket:
                raise ConfigError("Storage bucket is not configured")

            setting = self.repository.fetch_singleton()

            staged: dict[str, str] = {}
            for slot, attribute, asset in select_uploads(uploads or {}):
                path = build_asset_path(slot, asset.filename)
                try:
                    key = self.asset_store.upload(bucket, path, asset.read_bytes(), asset.content_type)
                except UploadError as exc:
                    raise UploadError(f"Failed to upload {slot}: {exc}", slot=slot, cause=exc.cause) from exc
                uploaded_keys.append(key)
                staged[attribute] = self.asset_store.public_url(bucket, path)

            if not staged:
                raise ValidationError(MSG_NO_VALID_FILES)

            updated = self.repository.apply_partial_update(setting.id, staged)
        except Exception as exc:
            if uploaded_keys:
                logger.warning(
                    "Settings images not saved; %d uploaded object(s) left in store: %s",
                    len(uploaded_keys),
                    ", ".join(uploaded_keys),
                )
            return self._failure("upload_setting_images", exc)

        logger.info("Settings images updated: %s", ", ".join(sorted(staged)))
        return ServiceResult.ok(updated, MSG_IMAGES_UPDATED)

    def update_setting(self, data: Mapping[str, Any] | None) -> ServiceResult:
        """Patch platform_name / platform_description with their trimmed values."""
        return self._update_text_fields("update_setting", data, TEXT_FIELDS, MSG_SETTINGS_UPDATED)

    def update_pluggou_settings(self, data: Mapping[str, Any] | None) -> ServiceResult:
        """Patch the Pluggou integration credentials with their trimmed values."""
        return self._update_text_fields(
            "update_pluggou_settings", data, PLUGGOU_FIELDS, MSG_PLUGGOU_UPDATED
        )

    def _update_text_fields(
        self,
        operation: str,
        data: Mapping[str, Any] | None,
        allowed: tuple[str, ...],
        success_message: str,
    ) -> ServiceResult:
        try:
            fields = filter_text_fields(data, allowed)
            if not fields:
                raise ValidationError(MSG_NO_VALID_FIELDS)
            setting = self.repository.fetch_singleton()
            updated = self.repository.apply_partial_update(setting.id, fields)
        except Exception as exc:
            return self._failure(operation, exc)

        # Field names only; values may be credentials
        logger.info("%s applied fields: %s", operation, ", ".join(sorted(fields)))
        return ServiceResult.ok(updated, success_message)

    @staticmethod
    def _failure(operation: str, exc: Exception) -> ServiceResult:
        if isinstance(exc, SettingsError):
            logger.error("%s failed (%s): %s", operation, exc.kind.value, exc)
        else:
            logger.exception("%s failed unexpectedly", operation)
        return ServiceResult.from_error(exc)
