"""
morphology/derivation.py

Derivational morphology reuses the inflection machinery: a derivation rule
is turned into a dimensionless inflection rule with a universal gate and
run through `apply_inflection`.
"""

from __future__ import annotations

from typing import List, Sequence

from morphology.models import (
    MATCH_ALL,
    DerivationRule,
    DerivedWord,
    InflectionResult,
    InflectionRule,
    PhonemeInventory,
)
from morphology.rules import apply_inflection


def to_inflection_rule(rule: DerivationRule) -> InflectionRule:
    return InflectionRule(
        rule_id=rule.rule_id,
        pos_id=rule.source_pos_id,
        dimension_values={},
        type=rule.type,
        affix=rule.affix,
        tag="",
        match_regex=MATCH_ALL,
        disabled=False,
        condition=rule.condition,
        config=rule.config,
    )


def derive(word: str, rule: DerivationRule, inventory: PhonemeInventory) -> InflectionResult:
    return apply_inflection(word, to_inflection_rule(rule), inventory)


def generate_derived_words(
    words: Sequence[str],
    rule: DerivationRule,
    inventory: PhonemeInventory,
) -> List[DerivedWord]:
    """Preview of `rule` applied to each source word, in input order."""
    converted = to_inflection_rule(rule)
    previews = []
    for word in words:
        outcome = apply_inflection(word, converted, inventory)
        previews.append(
            DerivedWord(
                source=word,
                derived=outcome.result,
                applied=outcome.applied,
                trace=outcome.trace,
            )
        )
    return previews


__all__ = ["to_inflection_rule", "derive", "generate_derived_words"]
