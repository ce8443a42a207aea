"""Error taxonomy for the settings service.

Every error carries an ``ErrorKind`` so callers of the service can branch on
the failure without parsing messages. The service converts these into a
``ServiceResult``; none of them escape a public service operation.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Structured failure category carried by ServiceResult."""

    CONFIG = "config"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    UPLOAD = "upload"
    PERSISTENCE = "persistence"
    INTERNAL = "internal"


class SettingsError(Exception):
    """Base class for expected settings failures."""

    kind: ErrorKind = ErrorKind.INTERNAL


class ConfigError(SettingsError):
    """Required configuration (e.g. storage bucket) is missing."""

    kind = ErrorKind.CONFIG


class NotFoundError(SettingsError):
    """The settings record does not exist."""

    kind = ErrorKind.NOT_FOUND


class ValidationError(SettingsError):
    """Nothing valid was supplied after filtering the input."""

    kind = ErrorKind.VALIDATION


class UploadError(SettingsError):
    """Object store rejected a write.

    ``slot`` is set by the service once the failing upload slot is known;
    the gateway raises with ``slot=None``.
    """

    kind = ErrorKind.UPLOAD

    def __init__(self, message: str, slot: str | None = None, cause: Exception | None = None) -> None:
        self.slot = slot
        self.cause = cause
        super().__init__(message)


class PersistenceError(SettingsError):
    """Repository read or write failed."""

    kind = ErrorKind.PERSISTENCE
