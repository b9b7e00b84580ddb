"""
Tests for style.py — plain-text rendering helpers.

Covers:
  - confidence_bar(): cell counts, clamping, None
  - candidate_line(): score, value and source tag present
  - result_card(): best guesses, "Solid" default, "—" for missing fields,
    alternatives capped with an overflow line, long OCR text truncated
  - error_card(): carries the exception message
"""
from __future__ import annotations

import pytest

import style
from image_analyzer import ClothingAnalysisResult
from resolvers.base import Candidate, SourceTag


# ── confidence_bar() ──────────────────────────────────────────────────────────

class TestConfidenceBar:
    def test_full(self):
        assert style.confidence_bar(1.0) == "█" * 10

    def test_empty(self):
        assert style.confidence_bar(0.0) == "░" * 10

    def test_partial(self):
        assert style.confidence_bar(0.7) == "███████░░░"

    def test_none_gives_all_empty(self):
        assert style.confidence_bar(None) == "░" * 10

    @pytest.mark.parametrize("score", [-0.5, 1.7])
    def test_clamped(self, score):
        assert len(style.confidence_bar(score)) == style.BAR_CELLS


# ── candidate_line() ──────────────────────────────────────────────────────────

class TestCandidateLine:
    def test_contains_fields(self):
        line = style.candidate_line(Candidate("Nike", 0.93, SourceTag.LOGO_EXACT))
        assert "Nike" in line
        assert "0.93" in line
        assert "(logo-exact)" in line


# ── result_card() ─────────────────────────────────────────────────────────────

class TestResultCard:
    def test_best_guesses_shown(self):
        result = ClothingAnalysisResult(
            category="Tops", type="Hoodie", color="Black", brand="Nike",
            color_candidates=(Candidate("Black", 0.9, SourceTag.LABEL_DETECTION),),
            brand_candidates=(Candidate("Nike", 1.0, SourceTag.TEXT_EXACT),),
            confidence=0.97, labels=("Hoodie", "Black"),
        )
        card = style.result_card(result)
        assert "Hoodie" in card
        assert "Tops" in card
        assert "(text-exact)" in card
        assert "Labels: Hoodie, Black" in card

    def test_pattern_defaults_to_solid(self):
        card = style.result_card(ClothingAnalysisResult())
        assert "Pattern   Solid" in card

    def test_missing_fields_marked(self):
        card = style.result_card(ClothingAnalysisResult())
        assert f"Brand     {style.NOT_DETECTED}" in card
        assert "Brand options: none" in card
        assert "Labels: none" in card
        assert "Text:" not in card

    def test_alternatives_capped(self):
        brands = tuple(
            Candidate(f"Brand{i}", 0.9 - i * 0.01, SourceTag.TEXT_FUZZY) for i in range(8)
        )
        card = style.result_card(ClothingAnalysisResult(brand_candidates=brands))
        assert "Brand4" in card
        assert "Brand5" not in card
        assert "… 3 more" in card

    def test_long_text_truncated(self):
        card = style.result_card(ClothingAnalysisResult(detected_text="A" * 300))
        text_line = next(line for line in card.splitlines() if line.startswith("Text:"))
        assert text_line.endswith("…")
        assert text_line.count("A") == 120


# ── error_card() ──────────────────────────────────────────────────────────────

class TestErrorCard:
    def test_contains_message(self):
        card = style.error_card(RuntimeError("Vision API error: quota exceeded"))
        assert "Analysis failed" in card
        assert "quota exceeded" in card
