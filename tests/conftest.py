"""
Shared pytest fixtures.

Every test starts without a cached provider and without a Vision API key, so
nothing can reach the network by accident. Tests that need a key set it via
monkeypatch on the config module.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# ── Make the project root importable without installing the package ────────────
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from providers.base import AnnotationPayload, ColorSwatch, LogoDetection  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    import config
    import providers.manager as manager_mod
    monkeypatch.setattr(config, "GOOGLE_VISION_API_KEY", None)
    manager_mod.reset_provider()
    yield
    manager_mod.reset_provider()


def make_payload(
    labels=(),
    label_scores=None,
    text_blocks=(),
    logos=(),
    colors=(),
) -> AnnotationPayload:
    """
    Build a payload from plain values:
      logos  → [("Nike", 0.9), …]
      colors → [((r, g, b), score), …]
    """
    labels = tuple(labels)
    if label_scores is None:
        label_scores = tuple(round(0.95 - i * 0.05, 2) for i in range(len(labels)))
    return AnnotationPayload(
        labels=labels,
        label_scores=tuple(label_scores),
        text_blocks=tuple(text_blocks),
        logos=tuple(LogoDetection(name, score) for name, score in logos),
        dominant_colors=tuple(
            ColorSwatch(red=r, green=g, blue=b, score=score) for (r, g, b), score in colors
        ),
    )


@pytest.fixture
def vision_response() -> dict:
    """A realistic images:annotate body for a branded black hoodie."""
    return {
        "responses": [
            {
                "labelAnnotations": [
                    {"description": "Hoodie", "score": 0.97},
                    {"description": "Sleeve", "score": 0.91},
                    {"description": "Black", "score": 0.88},
                    {"description": "Outerwear", "score": 0.80},
                ],
                "textAnnotations": [
                    {"description": "NIKE\nJUST DO IT"},
                    {"description": "NIKE"},
                    {"description": "JUST"},
                    {"description": "DO"},
                    {"description": "IT"},
                ],
                "logoAnnotations": [
                    {"description": "Nike", "score": 0.93},
                ],
                "imagePropertiesAnnotation": {
                    "dominantColors": {
                        "colors": [
                            {"color": {"red": 20, "green": 21, "blue": 25},
                             "score": 0.62, "pixelFraction": 0.48},
                            {"color": {"red": 240, "green": 240, "blue": 240},
                             "score": 0.11, "pixelFraction": 0.09},
                        ]
                    }
                },
            }
        ]
    }
