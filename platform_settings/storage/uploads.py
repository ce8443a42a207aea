"""Uploaded asset descriptor handed from the transport to the settings service."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def guess_content_type(filename: str) -> str:
    """Guess MIME type from filename (defaults to application/octet-stream)."""
    content_type, _ = mimetypes.guess_type(filename)
    return content_type or DEFAULT_CONTENT_TYPE


@dataclass
class UploadedAsset:
    """One uploaded file: raw bytes or a readable binary handle, plus its metadata."""

    content: bytes | BinaryIO
    filename: str
    content_type: str = ""

    def __post_init__(self) -> None:
        if not self.content_type or not self.content_type.strip():
            self.content_type = guess_content_type(self.filename)

    @classmethod
    def from_path(cls, path: str | Path, content_type: str | None = None) -> UploadedAsset:
        """Build an asset from a file on disk (e.g. a spooled multipart upload)."""
        p = Path(path)
        return cls(content=p.read_bytes(), filename=p.name, content_type=content_type or "")

    def read_bytes(self) -> bytes:
        """Return the payload bytes, reading the handle from the start when needed."""
        if isinstance(self.content, (bytes, bytearray)):
            return bytes(self.content)
        if hasattr(self.content, "seek"):
            self.content.seek(0)
        return self.content.read()
