"""
Clothing type classification from generic labels, plus the type → category
lookup.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from reference_data import CATEGORY_BY_TYPE, DEFAULT_CATEGORY, TYPE_RULES, TypeRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeMatch:
    type: str
    priority: int
    rule_index: int     # position in the rule table, earlier wins on equal priority


def find_type_matches(
    labels: Sequence[str],
    rules: Sequence[TypeRule] = TYPE_RULES,
) -> list[TypeMatch]:
    """
    Every rule that any label hits, at most once per rule, in discovery order.
    Matching is lowercase substring containment of a keyword in the label.
    """
    matches: list[TypeMatch] = []
    matched: set[int] = set()
    for label in labels:
        lower_label = label.lower()
        for index, rule in enumerate(rules):
            if index in matched:
                continue
            if any(keyword in lower_label for keyword in rule.keywords):
                matched.add(index)
                matches.append(TypeMatch(rule.type, rule.priority, index))
    return matches


def classify_type(
    labels: Sequence[str],
    rules: Sequence[TypeRule] = TYPE_RULES,
) -> Optional[TypeMatch]:
    """Highest-priority match; the earlier table rule wins a priority tie."""
    matches = find_type_matches(labels, rules)
    if not matches:
        return None
    best = min(matches, key=lambda m: (-m.priority, m.rule_index))
    logger.debug("Type matches %s → %s (priority %d)",
                 [m.type for m in matches], best.type, best.priority)
    return best


def type_to_category(
    clothing_type: str,
    category_by_type: Optional[Mapping[str, str]] = None,
    default: str = DEFAULT_CATEGORY,
) -> str:
    """Total lookup — unknown types land in the default category."""
    table = CATEGORY_BY_TYPE if category_by_type is None else category_by_type
    return table.get(clothing_type, default)
