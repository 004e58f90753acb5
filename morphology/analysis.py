"""
morphology/analysis.py

Estimates of the typology indices recorded in `TypologyConfig`.

- synthesis index (1.0 - 5.0): average morphemes per word form. Each
  sense whose part of speech has active rules counts as one root plus one
  affix per inflection dimension of that POS (capped by the rule count).
- fusion index (1.0 - 3.0): average number of dimension values carried by
  one active rule.

Both are approximations from rule density; they never affect dispatch.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from morphology.models import GrammarConfig, TypologyEstimation

SYNTHESIS_RANGE = (1.0, 5.0)
FUSION_RANGE = (1.0, 3.0)


def _clamp(value: float, bounds) -> float:
    low, high = bounds
    return min(high, max(low, value))


def estimate_synthesis_index(
    lexicon_pos_ids: Sequence[Sequence[str]],
    grammar: GrammarConfig,
) -> float:
    """
    Args:
        lexicon_pos_ids:
            One entry per lexicon word, listing the POS id of each sense.
        grammar:
            Grammar whose active rules and dimensions are counted.
    """
    if not lexicon_pos_ids:
        return 1.0
    rule_counts = Counter(r.pos_id for r in grammar.inflection_rules if not r.disabled)
    if not rule_counts:
        return 1.0

    total = 0
    counted = 0
    for senses in lexicon_pos_ids:
        for pos_id in senses:
            rule_count = rule_counts.get(pos_id, 0)
            if not rule_count:
                continue
            dims = [d for d in grammar.inflection_dimensions if pos_id in d.applies_to_pos]
            total += 1 + min(len(dims), rule_count)
            counted += 1

    if not counted:
        return 1.0
    return _clamp(total / counted, SYNTHESIS_RANGE)


def estimate_fusion_index(grammar: GrammarConfig) -> float:
    active = [r for r in grammar.inflection_rules if not r.disabled]
    if not active:
        return 1.0
    total = sum(max(1, len(r.dimension_values)) for r in active)
    return _clamp(total / len(active), FUSION_RANGE)


def analyze_typology(
    lexicon_pos_ids: Sequence[Sequence[str]],
    grammar: GrammarConfig,
) -> TypologyEstimation:
    return TypologyEstimation(
        synthesis_index=estimate_synthesis_index(lexicon_pos_ids, grammar),
        fusion_index=estimate_fusion_index(grammar),
        word_count=len(lexicon_pos_ids),
        rules_analyzed=sum(1 for r in grammar.inflection_rules if not r.disabled),
    )


__all__ = [
    "estimate_synthesis_index",
    "estimate_fusion_index",
    "analyze_typology",
]
