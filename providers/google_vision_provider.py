"""
Google Cloud Vision provider — one images:annotate REST call per photo.

Requested features (maxResults):
  LABEL_DETECTION   10   generic labels with scores
  IMAGE_PROPERTIES   1   dominant colour set
  TEXT_DETECTION     5   OCR; first annotation is the full text
  LOGO_DETECTION     5   logo name + score

Authentication is an API key passed as ?key=…; it is never logged.
"""
from __future__ import annotations

import base64
import logging
import time

import aiohttp

import config
from providers.base import (
    AnnotationPayload,
    AnnotationProvider,
    ConfigurationError,
    ExternalServiceError,
    parse_annotate_response,
)

logger = logging.getLogger(__name__)

VISION_ANNOTATE_URL = "https://vision.googleapis.com/v1/images:annotate"


def build_request(image_bytes: bytes) -> dict:
    """JSON body for a single-image annotate request."""
    return {
        "requests": [
            {
                "image": {"content": base64.b64encode(image_bytes).decode()},
                "features": [
                    {"type": "LABEL_DETECTION",  "maxResults": config.VISION_MAX_LABELS},
                    {"type": "IMAGE_PROPERTIES", "maxResults": config.VISION_MAX_COLORS},
                    {"type": "TEXT_DETECTION",   "maxResults": config.VISION_MAX_TEXT},
                    {"type": "LOGO_DETECTION",   "maxResults": config.VISION_MAX_LOGOS},
                ],
            }
        ]
    }


class GoogleVisionProvider(AnnotationProvider):

    def __init__(
        self,
        api_key: str,
        url: str = VISION_ANNOTATE_URL,
        timeout_seconds: float = 30.0,
    ) -> None:
        if not api_key:
            raise ConfigurationError(
                "Google Vision API key not configured. "
                "Add GOOGLE_VISION_API_KEY to your .env file."
            )
        self.name = "google-vision"
        self._key = api_key
        self._url = url
        self._timeout = timeout_seconds

    async def annotate(self, image_bytes: bytes) -> AnnotationPayload:
        logger.info("[%s] Annotating image (%d bytes)", self.name, len(image_bytes))
        t0 = time.monotonic()

        async with aiohttp.ClientSession() as session:
            async with session.post(
                self._url,
                params={"key": self._key},
                json=build_request(image_bytes),
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                if resp.status != 200:
                    message = await self._error_message(resp)
                    logger.error("[%s] HTTP %d: %s", self.name, resp.status, message)
                    raise ExternalServiceError(
                        f"Vision API error: {message}", status=resp.status,
                    )
                data = await resp.json()

        latency_ms = int((time.monotonic() - t0) * 1000)
        payload = parse_annotate_response(data, self.name)
        logger.info(
            "[%s] OK — labels=%d text_blocks=%d logos=%d colors=%d latency=%dms",
            self.name, len(payload.labels), len(payload.text_blocks),
            len(payload.logos), len(payload.dominant_colors), latency_ms,
        )
        return payload

    @staticmethod
    async def _error_message(resp: aiohttp.ClientResponse) -> str:
        """Pull error.message out of an error body; fall back to the raw text."""
        try:
            body = await resp.json(content_type=None)
        except (aiohttp.ContentTypeError, ValueError):
            text = await resp.text()
            return text[:200] or "Unknown error"
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        return "Unknown error"
