"""Settings repository: read the settings table and apply partial updates by id.

The table is a singleton by convention. This layer never creates rows; seeding
belongs to the migration.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from platform_settings.models.setting import Setting
from platform_settings.services.errors import NotFoundError, PersistenceError

logger = logging.getLogger(__name__)

_IMMUTABLE_COLUMNS = frozenset({"id", "created_at", "updated_at"})
UPDATABLE_COLUMNS = frozenset(c.key for c in Setting.__table__.columns) - _IMMUTABLE_COLUMNS


class SettingsRepository:
    """Wraps a Session for Setting reads and single-commit partial writes."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list_all(self) -> list[Setting]:
        """Return every settings row (normally one, possibly none)."""
        try:
            return self.db.query(Setting).all()
        except SQLAlchemyError as exc:
            logger.error("Failed to read settings: %s", exc)
            raise PersistenceError(f"Failed to read settings: {exc}") from exc

    def fetch_singleton(self) -> Setting:
        """Return the settings row. Raises NotFoundError when the table is empty."""
        try:
            row = self.db.query(Setting).first()
        except SQLAlchemyError as exc:
            logger.error("Failed to read settings: %s", exc)
            raise PersistenceError(f"Failed to read settings: {exc}") from exc
        if row is None:
            raise NotFoundError("Settings record not found")
        return row

    def apply_partial_update(self, setting_id: uuid.UUID, fields: Mapping[str, Any]) -> Setting:
        """Assign fields onto the row with setting_id and commit once.

        Only the given attributes change. Returns the refreshed row.
        """
        unknown = sorted(set(fields) - UPDATABLE_COLUMNS)
        if unknown:
            raise PersistenceError(f"Unknown or immutable settings fields: {', '.join(unknown)}")

        try:
            row = self.db.query(Setting).filter(Setting.id == setting_id).first()
            if row is None:
                raise NotFoundError("Settings record not found")
            for key, value in fields.items():
                setattr(row, key, value)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Failed to update settings %s: %s", setting_id, exc)
            raise PersistenceError(f"Failed to update settings: {exc}") from exc
        return row
