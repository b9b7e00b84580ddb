"""
image_analyzer.py — the analysis orchestrator and canonical home of
ClothingAnalysisResult.

analyse_payload() is the pure engine: it runs the four resolvers over an
already-fetched AnnotationPayload and assembles one immutable result.
analyse_image() adds the single outbound provider call in front of it.

Results are proposals for a human to confirm; an attribute with no signal is
simply None, never an error.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from providers.base import AnnotationPayload, AnnotationProvider
from providers.manager import annotate_image
from reference_data import DEFAULT_PATTERN, DEFAULT_REFERENCE, ReferenceData
from resolvers.base import Candidate
from resolvers.brand_resolver import BrandThresholds, resolve_brands
from resolvers.color_resolver import resolve_colors
from resolvers.pattern_detector import detect_pattern
from resolvers.type_classifier import classify_type, type_to_category

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClothingAnalysisResult:
    """Everything the engine proposes for one photo."""
    category: Optional[str] = None
    type: Optional[str] = None
    color: Optional[str] = None          # best colour
    brand: Optional[str] = None          # best brand
    pattern: Optional[str] = None        # None → caller shows DEFAULT_PATTERN
    brand_candidates: tuple[Candidate, ...] = ()
    color_candidates: tuple[Candidate, ...] = ()
    confidence: float = 0.0
    labels: tuple[str, ...] = ()
    detected_text: Optional[str] = None

    @property
    def pattern_or_default(self) -> str:
        return self.pattern or DEFAULT_PATTERN

    def to_dict(self) -> dict:
        return {
            "category":         self.category,
            "type":             self.type,
            "color":            self.color,
            "brand":            self.brand,
            "pattern":          self.pattern,
            "brand_candidates": [c.to_dict() for c in self.brand_candidates],
            "color_candidates": [c.to_dict() for c in self.color_candidates],
            "confidence":       self.confidence,
            "labels":           list(self.labels),
            "detected_text":    self.detected_text,
        }


def analyse_payload(
    payload: AnnotationPayload,
    reference: ReferenceData = DEFAULT_REFERENCE,
    thresholds: Optional[BrandThresholds] = None,
) -> ClothingAnalysisResult:
    """Run every resolver over payload. Deterministic and side-effect free."""
    labels = payload.labels

    type_match = classify_type(labels, reference.type_rules)
    clothing_type = type_match.type if type_match else None
    category = (
        type_to_category(clothing_type, reference.category_by_type)
        if clothing_type else None
    )

    pattern = detect_pattern(labels, reference.pattern_rules)

    color_candidates = resolve_colors(
        labels, payload.dominant_colors, reference.color_keywords,
    )

    brand_candidates = resolve_brands(
        labels,
        payload.text_blocks,
        payload.logos,
        brand_list=reference.brand_list,
        stop_words=reference.stop_words,
        thresholds=thresholds,
    )

    result = ClothingAnalysisResult(
        category=category,
        type=clothing_type,
        color=color_candidates[0].value if color_candidates else None,
        brand=brand_candidates[0].value if brand_candidates else None,
        pattern=pattern,
        brand_candidates=tuple(brand_candidates),
        color_candidates=tuple(color_candidates),
        confidence=payload.top_label_score,
        labels=tuple(labels),
        detected_text=payload.full_text,
    )
    logger.info(
        "Analysis: type=%s category=%s color=%s brand=%s pattern=%s",
        result.type, result.category, result.color, result.brand, result.pattern,
    )
    return result


async def analyse_image(
    image_bytes: bytes,
    provider: Optional[AnnotationProvider] = None,
    reference: ReferenceData = DEFAULT_REFERENCE,
    thresholds: Optional[BrandThresholds] = None,
) -> ClothingAnalysisResult:
    """
    Annotate image_bytes with the provider, then analyse the payload.

    ConfigurationError and ExternalServiceError from the provider propagate
    unchanged; the engine never runs on a failed call.
    """
    if not image_bytes:
        raise ValueError("image_bytes is empty")
    payload = await annotate_image(image_bytes, provider)
    return analyse_payload(
        payload,
        reference=reference,
        thresholds=thresholds if thresholds is not None else BrandThresholds.from_config(),
    )
