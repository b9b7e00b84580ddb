"""
Brand resolution — fuses three independent evidence sources against a static
brand list:

  1. Logo detections   (most trusted)
  2. OCR text          exact word match → extracted brand string → fuzzy
  3. Generic labels    (least trusted)

Every source offers candidates into one pool (max score per brand). Weak
candidates are dropped and the rest ranked by score, with near-ties resolved
in favour of the more trusted source.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from providers.base import LogoDetection
from reference_data import BRAND_LIST, STOP_WORDS
from resolvers.base import Candidate, CandidatePool, SourceTag, rank_candidates
from resolvers.similarity import similarity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrandThresholds:
    """Every numeric knob of the brand resolver."""
    min_score: float = 0.70             # candidates below this are discarded
    tie_epsilon: float = 0.05           # closer than this → source priority decides

    logo_exact_floor: float = 0.80
    logo_fuzzy_similarity: float = 0.75
    logo_fuzzy_floor: float = 0.75

    text_exact_score: float = 1.0
    text_extracted_score: float = 0.95
    text_fuzzy_similarity: float = 0.70
    text_fuzzy_low: float = 0.85
    text_fuzzy_high: float = 0.95
    fallback_similarity: float = 0.65
    fallback_word_count: int = 5

    label_exact_score: float = 0.90
    label_fuzzy_similarity: float = 0.70
    label_fuzzy_weight: float = 0.80
    label_word_min_length: int = 4

    min_token_length: int = 3

    @classmethod
    def from_config(cls) -> "BrandThresholds":
        import config
        return cls(min_score=config.BRAND_MIN_SCORE, tie_epsilon=config.BRAND_TIE_EPSILON)


DEFAULT_THRESHOLDS = BrandThresholds()


# ── Text helpers ──────────────────────────────────────────────────────────────

_TOKEN_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9&'.\-]*")
# Runs of capitalised words on one line: "NIKE AIR MAX", "Jack & Jones"
_CAPITALISED_RUN_RE = re.compile(
    r"[A-Z][A-Za-z0-9&'.\-]*(?:[ \t]+(?:&[ \t]+)?[A-Z][A-Za-z0-9&'.\-]*)*"
)
_EDGE_PUNCT = ".'-&"
_CONNECTOR = "&"
_MAX_RUN_WORDS = 4


def contains_word(haystack: str, needle: str) -> bool:
    """Case-insensitive match of needle not glued to other letters/digits."""
    if not needle:
        return False
    pattern = r"(?<![a-z0-9])" + re.escape(needle.lower()) + r"(?![a-z0-9])"
    return re.search(pattern, haystack.lower()) is not None


def _is_noise_token(token: str, stop_words: frozenset[str], min_length: int) -> bool:
    lower = token.lower()
    if len(lower) < min_length or lower in stop_words:
        return True
    # Sizes, style numbers, percentages: "42", "32x34", "100%"
    return lower[0].isdigit() or not any(ch.isalpha() for ch in lower)


def extract_potential_brands(
    text: str,
    stop_words: frozenset[str] = STOP_WORDS,
    min_length: int = DEFAULT_THRESHOLDS.min_token_length,
) -> list[str]:
    """
    Pull strings that could be brand names out of free OCR text.

    Candidates are multi-word capitalised runs (trimmed of noise words at both
    ends) and single tokens, minus anything too short, numeric or in the
    stop-word set. Order of first appearance is kept; duplicates are dropped
    case-insensitively.
    """
    found: list[str] = []
    seen: set[str] = set()

    def add(value: str) -> None:
        key = value.lower()
        if key not in seen:
            seen.add(key)
            found.append(value)

    for match in _CAPITALISED_RUN_RE.finditer(text):
        words = [w if w == _CONNECTOR else w.strip(_EDGE_PUNCT) for w in match.group(0).split()]
        words = [w for w in words if w]
        while words and _is_noise_token(words[0], stop_words, min_length):
            words.pop(0)
        while words and _is_noise_token(words[-1], stop_words, min_length):
            words.pop()
        if 2 <= sum(1 for w in words if w != _CONNECTOR) <= _MAX_RUN_WORDS:
            add(" ".join(words))

    for raw in _TOKEN_RE.findall(text):
        token = raw.strip(_EDGE_PUNCT)
        if token and not _is_noise_token(token, stop_words, min_length):
            add(token)

    return found


# ── Evidence sources ──────────────────────────────────────────────────────────

def _offer_logo_evidence(
    pool: CandidatePool,
    logos: Sequence[LogoDetection],
    brand_list: Sequence[str],
    t: BrandThresholds,
) -> None:
    for logo in logos:
        name = (logo.name or "").strip().lower()
        if not name:
            continue
        for brand in brand_list:
            lower_brand = brand.lower()
            if name == lower_brand or lower_brand in name or name in lower_brand:
                pool.offer(brand, max(logo.score, t.logo_exact_floor), SourceTag.LOGO_EXACT)
                logger.debug("Logo %r matched %s", logo.name, brand)
                continue
            sim = similarity(name, lower_brand)
            if sim > t.logo_fuzzy_similarity:
                pool.offer(brand, max(logo.score * sim, t.logo_fuzzy_floor), SourceTag.LOGO_FUZZY)
                logger.debug("Logo %r fuzzy-matched %s (sim=%.2f)", logo.name, brand, sim)


def _fuzzy_extracted_score(sim: float, t: BrandThresholds) -> float:
    span = 1.0 - t.text_fuzzy_similarity
    weight = (sim - t.text_fuzzy_similarity) / span if span > 0 else 1.0
    score = t.text_fuzzy_low + (t.text_fuzzy_high - t.text_fuzzy_low) * weight
    return min(max(score, t.text_fuzzy_low), t.text_fuzzy_high)


def _offer_text_evidence(
    pool: CandidatePool,
    text_blocks: Sequence[str],
    brand_list: Sequence[str],
    stop_words: frozenset[str],
    t: BrandThresholds,
) -> None:
    full_text = "\n".join(block for block in text_blocks if block)
    if not full_text.strip():
        return

    potentials = extract_potential_brands(full_text, stop_words, t.min_token_length)
    potentials_lower = {p.lower() for p in potentials}
    leading_words = [w for w in full_text.split()[: t.fallback_word_count] if len(w) > 2]
    logger.debug("Potential brand strings: %s", potentials)

    for brand in brand_list:
        lower_brand = brand.lower()

        if contains_word(full_text, brand):
            pool.offer(brand, t.text_exact_score, SourceTag.TEXT_EXACT)
            continue

        if lower_brand in potentials_lower:
            pool.offer(brand, t.text_extracted_score, SourceTag.TEXT_EXTRACTED)
            continue

        best_sim = max((similarity(p, brand) for p in potentials), default=0.0)
        if best_sim > t.text_fuzzy_similarity:
            pool.offer(brand, _fuzzy_extracted_score(best_sim, t), SourceTag.TEXT_EXTRACTED_FUZZY)
            continue

        best_sim = max((similarity(w, brand) for w in leading_words), default=0.0)
        if best_sim > t.fallback_similarity:
            pool.offer(brand, best_sim, SourceTag.TEXT_FUZZY)


def _offer_label_evidence(
    pool: CandidatePool,
    labels: Sequence[str],
    brand_list: Sequence[str],
    t: BrandThresholds,
) -> None:
    lower_labels = [label.lower() for label in labels]
    for brand in brand_list:
        lower_brand = brand.lower()
        brand_words = [w for w in lower_brand.split() if len(w) >= t.label_word_min_length]
        for label in lower_labels:
            if contains_word(label, lower_brand):
                pool.offer(brand, t.label_exact_score, SourceTag.LABEL_EXACT)
                continue
            if any(word in label for word in brand_words):
                sim = similarity(label, lower_brand)
                if sim > t.label_fuzzy_similarity:
                    pool.offer(brand, sim * t.label_fuzzy_weight, SourceTag.LABEL_FUZZY)


# ── Public API ────────────────────────────────────────────────────────────────

def resolve_brands(
    labels: Sequence[str],
    text_blocks: Sequence[str],
    logos: Sequence[LogoDetection],
    brand_list: Sequence[str] = BRAND_LIST,
    stop_words: frozenset[str] = STOP_WORDS,
    thresholds: Optional[BrandThresholds] = None,
) -> list[Candidate]:
    t = thresholds or DEFAULT_THRESHOLDS
    pool = CandidatePool()

    _offer_logo_evidence(pool, logos, brand_list, t)
    _offer_text_evidence(pool, text_blocks, brand_list, stop_words, t)
    _offer_label_evidence(pool, labels, brand_list, t)

    kept = [c for c in pool.candidates() if c.score >= t.min_score]
    ranked = rank_candidates(kept, tie_epsilon=t.tie_epsilon)
    logger.debug("Brand candidates: %s", [(c.value, round(c.score, 3), c.source.value) for c in ranked[:5]])
    return ranked
