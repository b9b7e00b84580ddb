"""
Provider Manager — builds and caches the configured annotation provider.

The key is read from config on first use, so a missing key surfaces as a
ConfigurationError on the first analysis call rather than at import time.
Call reset_provider() after changing configuration.
"""
from __future__ import annotations

import logging
from typing import Optional

import config
from providers.base import AnnotationPayload, AnnotationProvider, ConfigurationError

logger = logging.getLogger(__name__)

# Module-level cache
_provider: Optional[AnnotationProvider] = None


def _build_provider() -> AnnotationProvider:
    if not config.GOOGLE_VISION_API_KEY:
        raise ConfigurationError(
            "No annotation provider available.\n"
            "Set GOOGLE_VISION_API_KEY in the environment or .env file."
        )
    from providers.google_vision_provider import GoogleVisionProvider
    provider = GoogleVisionProvider(
        config.GOOGLE_VISION_API_KEY,
        url=config.VISION_API_URL,
        timeout_seconds=config.VISION_TIMEOUT_SECONDS,
    )
    logger.info("Loaded provider: %s", provider.name)
    return provider


def get_provider() -> AnnotationProvider:
    global _provider
    if _provider is None:
        _provider = _build_provider()
    return _provider


def reset_provider() -> None:
    global _provider
    _provider = None


async def annotate_image(
    image_bytes: bytes,
    provider: Optional[AnnotationProvider] = None,
) -> AnnotationPayload:
    """Run the single outbound annotation call. Errors propagate unchanged."""
    return await (provider or get_provider()).annotate(image_bytes)
