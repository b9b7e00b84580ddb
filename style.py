"""
style.py — plain-text rendering of analysis results for the command line.

Design language:
  • One card per photo: header → best guesses → ranked alternatives
  • Unicode box-drawing dividers
  • Ten-cell confidence bars so scores compare at a glance
"""
from __future__ import annotations

from typing import Optional, Sequence

from image_analyzer import ClothingAnalysisResult
from resolvers.base import Candidate

# ── Visual constants ──────────────────────────────────────────────────────────

DIV   = "━━━━━━━━━━━━━━━━━━━━━━━━━━"    # thick divider
SDIV  = "┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄"    # subtle divider

BAR_CELLS = 10
MAX_ALTERNATIVES = 5
NOT_DETECTED = "—"


def confidence_bar(score: Optional[float]) -> str:
    if score is None:
        return "░" * BAR_CELLS
    filled = round(max(0.0, min(1.0, score)) * BAR_CELLS)
    return "█" * filled + "░" * (BAR_CELLS - filled)


def candidate_line(candidate: Candidate) -> str:
    return (
        f"{confidence_bar(candidate.score)} {candidate.score:.2f}  "
        f"{candidate.value}  ({candidate.source.value})"
    )


def _field(name: str, value: Optional[str]) -> str:
    return f"{name:<10}{value or NOT_DETECTED}"


def _section(title: str, candidates: Sequence[Candidate]) -> list[str]:
    if not candidates:
        return [f"{title}: none"]
    lines = [f"{title}:"]
    lines += [f"  {candidate_line(c)}" for c in candidates[:MAX_ALTERNATIVES]]
    hidden = len(candidates) - MAX_ALTERNATIVES
    if hidden > 0:
        lines.append(f"  … {hidden} more")
    return lines


def result_card(result: ClothingAnalysisResult) -> str:
    """Full text card for one analysed photo."""
    lines = [
        DIV,
        f"Clothing analysis   {confidence_bar(result.confidence)} {result.confidence:.2f}",
        DIV,
        _field("Type", result.type),
        _field("Category", result.category),
        _field("Color", result.color),
        _field("Brand", result.brand),
        _field("Pattern", result.pattern_or_default),
        SDIV,
    ]
    lines += _section("Color options", result.color_candidates)
    lines += _section("Brand options", result.brand_candidates)
    lines.append(SDIV)
    lines.append("Labels: " + (", ".join(result.labels) if result.labels else "none"))
    if result.detected_text:
        text = " ".join(result.detected_text.split())
        lines.append(f"Text:   {text[:120]}{'…' if len(text) > 120 else ''}")
    return "\n".join(lines)


def error_card(exc: Exception) -> str:
    return "\n".join([
        DIV,
        "Analysis failed",
        DIV,
        str(exc),
        "Enter the item details manually.",
    ])
