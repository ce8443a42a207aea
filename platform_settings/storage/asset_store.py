"""Object store gateway for branding assets (Supabase-compatible Storage REST API).

Handles:
- Upserting a blob at bucket/path
- Deriving the public URL of a stored object

Security: the service key is sent as a header. Do not log request headers.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from platform_settings.config import Settings
from platform_settings.services.errors import UploadError

logger = logging.getLogger(__name__)

_OBJECT_PATH = "storage/v1/object"
_PUBLIC_OBJECT_PATH = "storage/v1/object/public"


def _object_ref(bucket: str, path: str) -> str:
    return f"{quote(bucket, safe='')}/{quote(path.lstrip('/'), safe='/')}"


def _error_detail(response: httpx.Response) -> str:
    """Best-effort error text from a Storage API error body."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {response.status_code}"


class AssetStoreGateway:
    """Upload blobs and derive public URLs against one storage endpoint."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Args:
            base_url: Storage project URL (e.g. https://xyz.supabase.co)
            api_key: Service key used for both apikey and bearer auth
            timeout: Request timeout in seconds for the owned client
            client: Optional pre-built httpx client (tests inject a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> AssetStoreGateway:
        return cls(settings.storage_url, settings.storage_key, timeout=settings.storage_timeout)

    def upload(self, bucket: str, path: str, content: bytes, content_type: str) -> str:
        """Store content at bucket/path, overwriting any existing object.

        Returns the stored object key. Raises UploadError on rejection or transport failure.
        """
        url = f"{self.base_url}/{_OBJECT_PATH}/{_object_ref(bucket, path)}"
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "apikey": self._api_key,
            "Content-Type": content_type,
            "x-upsert": "true",
        }
        try:
            response = self._client.post(url, content=content, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Storage upload failed for %s/%s: %s", bucket, path, exc)
            raise UploadError(str(exc) or exc.__class__.__name__, cause=exc) from exc

        if response.is_success:
            try:
                key = response.json().get("Key")
            except (ValueError, AttributeError):
                key = None
            return key or f"{bucket}/{path}"

        detail = _error_detail(response)
        logger.error("Storage rejected upload %s/%s: %s", bucket, path, detail)
        raise UploadError(detail, cause=httpx.HTTPStatusError(detail, request=response.request, response=response))

    def public_url(self, bucket: str, path: str) -> str:
        """Public retrieval URL for bucket/path. Pure; does not check the object exists."""
        return f"{self.base_url}/{_PUBLIC_OBJECT_PATH}/{_object_ref(bucket, path)}"

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
