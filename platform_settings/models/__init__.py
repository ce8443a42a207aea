"""SQLAlchemy models."""

from platform_settings.models.setting import Setting

__all__ = ["Setting"]
