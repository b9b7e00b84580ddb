"""
Tests for providers/google_vision_provider.py.

Covers:
  - build_request(): base64 image + the four requested features
  - constructor: missing key → ConfigurationError
  - annotate(): HTTP success, HTTP error with provider message,
    non-JSON error body, embedded error in a 200 response
"""
from __future__ import annotations

import base64
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio

from providers.base import ConfigurationError, ExternalServiceError
from providers.google_vision_provider import GoogleVisionProvider, build_request


@pytest.fixture
def provider():
    return GoogleVisionProvider(api_key="test_vision_key")


def fake_session(resp) -> MagicMock:
    session = MagicMock()
    session.post = MagicMock(return_value=resp)
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=False)
    return session


def fake_response(body, status: int = 200, text: str = "error text") -> MagicMock:
    resp = MagicMock()
    resp.status = status
    if isinstance(body, Exception):
        resp.json = AsyncMock(side_effect=body)
    else:
        resp.json = AsyncMock(return_value=body)
    resp.text = AsyncMock(return_value=text)
    resp.__aenter__ = AsyncMock(return_value=resp)
    resp.__aexit__ = AsyncMock(return_value=False)
    return resp


# ── build_request() ───────────────────────────────────────────────────────────

class TestBuildRequest:
    def test_image_is_base64(self):
        body = build_request(b"\x89PNG fake")
        content = body["requests"][0]["image"]["content"]
        assert base64.b64decode(content) == b"\x89PNG fake"

    def test_features_and_limits(self):
        features = build_request(b"x")["requests"][0]["features"]
        assert {f["type"]: f["maxResults"] for f in features} == {
            "LABEL_DETECTION": 10,
            "IMAGE_PROPERTIES": 1,
            "TEXT_DETECTION": 5,
            "LOGO_DETECTION": 5,
        }


class TestConstructor:
    def test_missing_key_raises_configuration_error(self):
        with pytest.raises(ConfigurationError):
            GoogleVisionProvider(api_key="")


# ── annotate() HTTP call ──────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestAnnotate:
    async def test_success_returns_payload(self, provider, vision_response):
        session = fake_session(fake_response(vision_response))
        with patch("providers.google_vision_provider.aiohttp.ClientSession", return_value=session):
            payload = await provider.annotate(b"image")

        assert payload.labels[0] == "Hoodie"
        assert payload.logos[0].name == "Nike"

    async def test_key_sent_as_query_param(self, provider, vision_response):
        session = fake_session(fake_response(vision_response))
        with patch("providers.google_vision_provider.aiohttp.ClientSession", return_value=session):
            await provider.annotate(b"image")

        _, kwargs = session.post.call_args
        assert kwargs["params"] == {"key": "test_vision_key"}
        assert kwargs["json"]["requests"][0]["features"]

    async def test_http_error_carries_provider_message(self, provider):
        body = {"error": {"code": 403, "message": "API key not valid."}}
        session = fake_session(fake_response(body, status=403))
        with patch("providers.google_vision_provider.aiohttp.ClientSession", return_value=session):
            with pytest.raises(ExternalServiceError, match="API key not valid") as info:
                await provider.annotate(b"image")
        assert info.value.status == 403

    async def test_http_error_with_non_json_body(self, provider):
        session = fake_session(fake_response(ValueError("no json"), status=502, text="Bad Gateway"))
        with patch("providers.google_vision_provider.aiohttp.ClientSession", return_value=session):
            with pytest.raises(ExternalServiceError, match="Bad Gateway"):
                await provider.annotate(b"image")

    async def test_embedded_error_in_200_response(self, provider):
        body = {"responses": [{"error": {"message": "Image too small."}}]}
        session = fake_session(fake_response(body))
        with patch("providers.google_vision_provider.aiohttp.ClientSession", return_value=session):
            with pytest.raises(ExternalServiceError, match="Image too small"):
                await provider.annotate(b"image")
