"""
Colour resolution from two independent signals:

  1. Label keywords   — "navy", "grey", … found in the generic labels
  2. RGB heuristic    — a fixed rule cascade over the most dominant swatch

Label colours come first and are never re-added by the RGB cascade.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from providers.base import ColorSwatch
from reference_data import COLOR_KEYWORDS, ColorKeyword
from resolvers.base import Candidate, CandidatePool, SourceTag, rank_candidates

logger = logging.getLogger(__name__)

LABEL_COLOR_SCORE = 0.9
# Used when the provider reports the dominant swatch without a score
RGB_DEFAULT_SCORE = 0.7


def _is_navy(r: int, g: int, b: int) -> bool:
    return _blue_dominant(r, g, b) and b < 100 and r < 50 and g < 50


def _blue_dominant(r: int, g: int, b: int) -> bool:
    return b > r + 30 and b > g + 30


# (colour, rule) in cascade order. Navy must stay ahead of Blue.
RGB_RULES: tuple[tuple[str, Callable[[int, int, int], bool]], ...] = (
    ("Black",  lambda r, g, b: r < 50 and g < 50 and b < 50),
    ("White",  lambda r, g, b: r > 200 and g > 200 and b > 200),
    ("Gray",   lambda r, g, b: abs(r - g) < 30 and abs(g - b) < 30 and 50 < r < 200),
    ("Red",    lambda r, g, b: r > g + 50 and r > b + 50),
    ("Navy",   _is_navy),
    ("Blue",   lambda r, g, b: _blue_dominant(r, g, b) and not _is_navy(r, g, b)),
    ("Green",  lambda r, g, b: g > r + 30 and g > b + 30),
    ("Yellow", lambda r, g, b: r > 150 and g > 150 and b < 100),
    ("Orange", lambda r, g, b: r > g > b and r > 150 and b < 100),
    ("Pink",   lambda r, g, b: r > 150 and g > 100 and b > 100 and r > g),
    ("Purple", lambda r, g, b: r > 100 and b > 100 and g < r and g < b),
    ("Brown",  lambda r, g, b: r > 80 and g > 60 and b < 60 and r > b and g > b),
)


def rgb_colors(red: int, green: int, blue: int) -> list[str]:
    """Every colour whose rule fires for this RGB triple, in cascade order."""
    return [color for color, rule in RGB_RULES if rule(red, green, blue)]


def resolve_colors(
    labels: Sequence[str],
    swatches: Sequence[ColorSwatch],
    keywords: Sequence[ColorKeyword] = COLOR_KEYWORDS,
    label_score: float = LABEL_COLOR_SCORE,
    default_swatch_score: float = RGB_DEFAULT_SCORE,
) -> list[Candidate]:
    pool = CandidatePool()

    for label in labels:
        lower_label = label.lower()
        for entry in keywords:
            if entry.keyword in lower_label and entry.color not in pool:
                pool.offer(entry.color, label_score, SourceTag.LABEL_DETECTION)

    dominant: Optional[ColorSwatch] = swatches[0] if swatches else None
    if dominant is not None:
        score = dominant.score or default_swatch_score
        for color in rgb_colors(dominant.red, dominant.green, dominant.blue):
            if color not in pool:
                pool.offer(color, score, SourceTag.RGB_HEURISTIC)

    ranked = rank_candidates(pool.candidates())
    logger.debug("Colour candidates: %s", [(c.value, c.score, c.source.value) for c in ranked])
    return ranked
