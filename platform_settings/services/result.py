"""Tagged result returned by every SettingsService operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from platform_settings.services.errors import ErrorKind, SettingsError


@dataclass(frozen=True)
class ServiceResult:
    """Outcome of a settings operation.

    ``error_kind`` is None on success. ``to_envelope()`` renders the flat
    ``{success, data, message}`` shape existing clients consume.
    """

    success: bool
    data: Any = None
    message: str = ""
    error_kind: ErrorKind | None = None

    @classmethod
    def ok(cls, data: Any, message: str) -> ServiceResult:
        return cls(success=True, data=data, message=message)

    @classmethod
    def from_error(cls, exc: Exception) -> ServiceResult:
        kind = exc.kind if isinstance(exc, SettingsError) else ErrorKind.INTERNAL
        return cls(success=False, data=None, message=str(exc) or exc.__class__.__name__, error_kind=kind)

    def to_envelope(self) -> dict[str, Any]:
        return {"success": self.success, "data": self.data, "message": self.message}
