"""
morphology/tags.py

Gloss-tag driven inflection, as used by the translation sandbox:
"dog PL ACC" -> apply the rule tagged PL, then the rule tagged ACC.

Tags compare case-insensitively. A rule of the word's own part of speech
is preferred; any enabled rule with the tag is the fallback. Unknown tags
are skipped.
"""

from __future__ import annotations

from typing import Optional, Sequence

from morphology.models import InflectionRule, PhonemeInventory, TagChainResult
from morphology.rules import apply_inflection
from morphology.typology import CHAIN_SEPARATOR


def find_tagged_rule(
    tag: str,
    pos_id: str,
    rules: Sequence[InflectionRule],
) -> Optional[InflectionRule]:
    wanted = tag.upper()
    tagged = [r for r in rules if not r.disabled and r.tag.upper() == wanted]
    for rule in tagged:
        if rule.pos_id == pos_id:
            return rule
    return tagged[0] if tagged else None


def apply_tags(
    word: str,
    tags: Sequence[str],
    pos_id: str,
    rules: Sequence[InflectionRule],
    inventory: PhonemeInventory,
) -> TagChainResult:
    current = word
    applied_tags = []
    steps = []
    for tag in tags:
        rule = find_tagged_rule(tag, pos_id, rules)
        if rule is None:
            steps.append(f"{tag}: no rule")
            continue
        outcome = apply_inflection(current, rule, inventory)
        steps.append(f"{tag}: {outcome.trace}")
        if outcome.applied:
            current = outcome.result
            applied_tags.append(tag)
    return TagChainResult(
        result=current,
        applied_tags=applied_tags,
        trace=CHAIN_SEPARATOR.join(steps),
    )


__all__ = ["find_tagged_rule", "apply_tags"]
