"""
Shared types and base class for annotation providers.

A provider turns one image into an AnnotationPayload — the four signal
families the inference engine works from:
  labels            generic object/scene labels, most confident first
  text_blocks       OCR segments, the first one is the full concatenated text
  logos             logo detections (name, score)
  dominant_colors   colour swatches, most dominant first
"""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)


# ── Errors ─────────────────────────────────────────────────────────────────────

class ConfigurationError(RuntimeError):
    """Provider credentials or settings are missing. Raised before any network call."""


class ExternalServiceError(RuntimeError):
    """The provider answered with an error status or an embedded error object."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


# ── Payload ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LogoDetection:
    name: str
    score: float


@dataclass(frozen=True)
class ColorSwatch:
    red: int
    green: int
    blue: int
    score: float
    pixel_fraction: float = 0.0


@dataclass(frozen=True)
class AnnotationPayload:
    """Raw provider output for one image. Owned by a single analysis call."""
    labels: tuple[str, ...] = ()
    label_scores: tuple[float, ...] = ()     # parallel to labels
    text_blocks: tuple[str, ...] = ()
    logos: tuple[LogoDetection, ...] = ()
    dominant_colors: tuple[ColorSwatch, ...] = field(default_factory=tuple)

    @property
    def top_label_score(self) -> float:
        return self.label_scores[0] if self.label_scores else 0.0

    @property
    def full_text(self) -> Optional[str]:
        return self.text_blocks[0] if self.text_blocks and self.text_blocks[0] else None


# ── Vision response parsing ────────────────────────────────────────────────────

def _channel(value: Any) -> int:
    # Vision omits zero-valued channels entirely
    return int(round(float(value or 0)))


def _objects(value: Any) -> list[dict]:
    """Annotation list entries that are JSON objects; anything else is skipped."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _malformed(provider_name: str, reason: str) -> ExternalServiceError:
    logger.error("[%s] Malformed annotate response: %s", provider_name, reason)
    return ExternalServiceError(f"Vision API error: malformed response ({reason})")


def parse_annotate_response(data: dict, provider_name: str = "vision") -> AnnotationPayload:
    """
    Convert one entry of an images:annotate "responses" list into a payload.

    Accepts either the full body ({"responses": [...]}) or the single entry.
    Raises ExternalServiceError if the entry carries an "error" object or the
    body is not shaped like an annotate response.
    Missing sections simply produce empty sequences.
    """
    if not isinstance(data, dict):
        raise _malformed(provider_name, "body is not a JSON object")
    if "responses" in data:
        responses = data.get("responses") or [{}]
        if not isinstance(responses, list):
            raise _malformed(provider_name, "\"responses\" is not a list")
        data = responses[0] or {}
        if not isinstance(data, dict):
            raise _malformed(provider_name, "response entry is not a JSON object")

    error = data.get("error")
    if error:
        message = error.get("message", "Unknown error") if isinstance(error, dict) else str(error)
        logger.error("[%s] Embedded error in response: %s", provider_name, message)
        raise ExternalServiceError(f"Vision API error: {message}")

    label_annotations = _objects(data.get("labelAnnotations"))
    labels = tuple(a["description"] for a in label_annotations if a.get("description"))
    label_scores = tuple(
        float(a.get("score") or 0.0) for a in label_annotations if a.get("description")
    )

    text_blocks = tuple(a.get("description") or "" for a in _objects(data.get("textAnnotations")))

    logos = tuple(
        LogoDetection(name=a.get("description") or "", score=float(a.get("score") or 0.0))
        for a in _objects(data.get("logoAnnotations"))
    )

    colors = (
        ((data.get("imagePropertiesAnnotation") or {}).get("dominantColors") or {}).get("colors")
        or []
    )
    swatches = tuple(
        ColorSwatch(
            red=_channel((c.get("color") or {}).get("red")),
            green=_channel((c.get("color") or {}).get("green")),
            blue=_channel((c.get("color") or {}).get("blue")),
            score=float(c.get("score") or 0.0),
            pixel_fraction=float(c.get("pixelFraction") or 0.0),
        )
        for c in _objects(colors)
    )

    return AnnotationPayload(
        labels=labels,
        label_scores=label_scores,
        text_blocks=text_blocks,
        logos=logos,
        dominant_colors=swatches,
    )


def parse_json_response(raw: str, provider_name: str) -> dict:
    """
    Parse a saved or streamed JSON body.
    Raises ValueError on parse failure.
    """
    try:
        return json.loads(raw.strip())
    except json.JSONDecodeError as exc:
        logger.error("[%s] Non-JSON response: %s", provider_name, raw[:300])
        raise ValueError(f"[{provider_name}] JSON parse error: {exc}") from exc


# ── Abstract base ──────────────────────────────────────────────────────────────

class AnnotationProvider(ABC):
    """Base class all annotation providers must implement."""

    name: str           # e.g. "google-vision"

    @abstractmethod
    async def annotate(self, image_bytes: bytes) -> AnnotationPayload:
        """Annotate image_bytes. Must return an AnnotationPayload."""
        ...
