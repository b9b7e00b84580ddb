"""
Shared candidate types for all resolvers.

A Candidate is one scored, sourced guess for an attribute value. Resolvers
collect candidates into a CandidatePool (one entry per value, highest score
kept) and return the ranked list.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class SourceTag(str, Enum):
    """Provenance of a candidate. Declaration order is the trust order."""
    LOGO_EXACT           = "logo-exact"
    LOGO_FUZZY           = "logo-fuzzy"
    TEXT_EXACT           = "text-exact"
    TEXT_EXTRACTED       = "text-extracted"
    TEXT_EXTRACTED_FUZZY = "text-extracted-fuzzy"
    TEXT_FUZZY           = "text-fuzzy"
    LABEL_EXACT          = "label-exact"
    LABEL_FUZZY          = "label-fuzzy"
    LABEL_DETECTION      = "label-detection"
    RGB_HEURISTIC        = "rgb-heuristic"

    @property
    def rank(self) -> int:
        """0 is the most trusted source."""
        return _SOURCE_RANK[self]


_SOURCE_RANK = {tag: i for i, tag in enumerate(SourceTag)}


@dataclass(frozen=True)
class Candidate:
    value: str
    score: float
    source: SourceTag

    def to_dict(self) -> dict:
        return {"value": self.value, "score": self.score, "source": self.source.value}


class CandidatePool:
    """
    Deduplicating collector: keeps the best-scoring candidate per value.

    A later candidate replaces an earlier one only when its score is strictly
    greater, so on equal scores the first (more trusted) source is kept.
    """

    def __init__(self) -> None:
        self._best: dict[str, Candidate] = {}

    def offer(self, value: str, score: float, source: SourceTag) -> bool:
        """Add a candidate. Returns True if it became the best for its value."""
        existing = self._best.get(value)
        if existing is not None and score <= existing.score:
            return False
        self._best[value] = Candidate(value=value, score=score, source=source)
        return True

    def __contains__(self, value: object) -> bool:
        return value in self._best

    def __len__(self) -> int:
        return len(self._best)

    def get(self, value: str) -> Optional[Candidate]:
        return self._best.get(value)

    def candidates(self) -> list[Candidate]:
        """Candidates in first-offered order."""
        return list(self._best.values())


def rank_candidates(
    candidates: Iterable[Candidate],
    tie_epsilon: float = 0.0,
) -> list[Candidate]:
    """
    Sort by score descending, then let source trust reorder near-ties.

    Candidates are grouped into runs whose scores lie within tie_epsilon of
    the run's top score (with tie_epsilon=0 only exact ties group). Each run
    is ordered by source rank; Python's sort is stable, so equal ranks keep
    their score order. Only candidates with the same score and source keep
    their input order.
    """
    by_score = sorted(candidates, key=lambda c: (-c.score, c.source.rank))

    ranked: list[Candidate] = []
    i = 0
    while i < len(by_score):
        head = by_score[i].score
        j = i + 1
        while j < len(by_score) and (
            head - by_score[j].score < tie_epsilon or by_score[j].score == head
        ):
            j += 1
        ranked.extend(sorted(by_score[i:j], key=lambda c: c.source.rank))
        i = j
    return ranked
