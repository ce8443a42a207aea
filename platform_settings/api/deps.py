"""Shared FastAPI dependencies for API routes."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from platform_settings.config import get_settings
from platform_settings.db.session import get_db  # re-export
from platform_settings.repositories.settings_repository import SettingsRepository
from platform_settings.services.settings_service import SettingsService
from platform_settings.storage.asset_store import AssetStoreGateway

__all__ = ["get_db", "get_asset_store", "get_settings_service"]


@lru_cache(maxsize=1)
def get_asset_store() -> AssetStoreGateway:
    """Process-wide gateway (one pooled httpx client). Closed on app shutdown."""
    return AssetStoreGateway.from_settings(get_settings())


def get_settings_service(db: Session = Depends(get_db)) -> SettingsService:
    """Build a SettingsService bound to the request's DB session."""
    return SettingsService(
        repository=SettingsRepository(db),
        asset_store=get_asset_store(),
        bucket=get_settings().storage_bucket,
    )
