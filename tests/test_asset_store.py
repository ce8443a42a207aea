"""Tests for the object store gateway (httpx MockTransport)."""

from __future__ import annotations

import json

import httpx
import pytest

from platform_settings.services.errors import UploadError
from platform_settings.storage.asset_store import AssetStoreGateway
from tests.test_constants import TEST_STORAGE_KEY, TEST_STORAGE_URL


def _gateway(handler) -> AssetStoreGateway:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return AssetStoreGateway(TEST_STORAGE_URL + "/", TEST_STORAGE_KEY, client=client)


class TestUpload:
    """Tests for AssetStoreGateway.upload()."""

    def test_posts_with_upsert_and_returns_key(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"Key": "branding/settings/logo/1-a-logo.png"})

        key = _gateway(handler).upload("branding", "settings/logo/1-a-logo.png", b"PNG", "image/png")

        assert key == "branding/settings/logo/1-a-logo.png"
        assert len(seen) == 1
        req = seen[0]
        assert req.method == "POST"
        assert str(req.url) == f"{TEST_STORAGE_URL}/storage/v1/object/branding/settings/logo/1-a-logo.png"
        assert req.headers["x-upsert"] == "true"
        assert req.headers["content-type"] == "image/png"
        assert req.headers["authorization"] == f"Bearer {TEST_STORAGE_KEY}"
        assert req.headers["apikey"] == TEST_STORAGE_KEY
        assert req.content == b"PNG"

    def test_non_json_success_falls_back_to_bucket_path(self) -> None:
        gateway = _gateway(lambda request: httpx.Response(200, content=b""))
        assert gateway.upload("branding", "settings/logo/x.png", b"x", "image/png") == (
            "branding/settings/logo/x.png"
        )

    def test_rejection_raises_upload_error_with_store_message(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                403,
                content=json.dumps({"statusCode": "403", "message": "signature verification failed"}),
                headers={"content-type": "application/json"},
            )

        with pytest.raises(UploadError) as exc_info:
            _gateway(handler).upload("branding", "settings/logo/x.png", b"x", "image/png")

        assert str(exc_info.value) == "signature verification failed"
        assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)
        assert exc_info.value.slot is None

    def test_rejection_without_body_reports_status(self) -> None:
        with pytest.raises(UploadError, match="HTTP 507"):
            _gateway(lambda request: httpx.Response(507)).upload("b", "p.png", b"x", "image/png")

    def test_transport_error_raises_upload_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UploadError, match="connection refused") as exc_info:
            _gateway(handler).upload("branding", "settings/logo/x.png", b"x", "image/png")
        assert isinstance(exc_info.value.cause, httpx.ConnectError)


class TestPublicUrl:
    """Tests for AssetStoreGateway.public_url()."""

    def test_derives_public_url(self) -> None:
        gateway = AssetStoreGateway(TEST_STORAGE_URL, TEST_STORAGE_KEY, client=httpx.Client())
        assert gateway.public_url("branding", "settings/logo/1-a-logo.png") == (
            f"{TEST_STORAGE_URL}/storage/v1/object/public/branding/settings/logo/1-a-logo.png"
        )

    def test_quotes_unsafe_characters(self) -> None:
        gateway = AssetStoreGateway(TEST_STORAGE_URL, TEST_STORAGE_KEY, client=httpx.Client())
        url = gateway.public_url("branding", "settings/logo/1-a-my logo.png")
        assert url.endswith("/settings/logo/1-a-my%20logo.png")


class TestClose:
    """Tests for AssetStoreGateway.close()."""

    def test_injected_client_is_not_closed(self) -> None:
        client = httpx.Client()
        AssetStoreGateway(TEST_STORAGE_URL, TEST_STORAGE_KEY, client=client).close()
        assert not client.is_closed
        client.close()

    def test_owned_client_is_closed(self) -> None:
        gateway = AssetStoreGateway(TEST_STORAGE_URL, TEST_STORAGE_KEY)
        gateway.close()
        assert gateway._client.is_closed
