"""
Pattern detection: first keyword hit in pattern-priority order wins.
"Solid" is never detected here; it is what the caller uses when this
returns None.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from reference_data import PATTERN_RULES, PatternRule

logger = logging.getLogger(__name__)


def detect_pattern(
    labels: Sequence[str],
    rules: Sequence[PatternRule] = PATTERN_RULES,
) -> Optional[str]:
    lower_labels = [label.lower() for label in labels]
    for rule in rules:
        for label in lower_labels:
            for keyword in rule.keywords:
                if keyword in label:
                    logger.debug("Pattern %s from label %r (keyword %r)",
                                 rule.pattern, label, keyword)
                    return rule.pattern
    return None
