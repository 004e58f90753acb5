"""
morphology/conditions.py

Conditional allomorphy: pick one of two affixes depending on the word.

Three tests are supported:

- ends_with_phoneme_class:   last phoneme is a vowel / consonant
- starts_with_phoneme_class: first phoneme is a vowel / consonant
- matches_regex:             free-form regex searched in the whole word

An invalid regex is not fatal: the clause resolves to "not matched" and the
trace says why.
"""

from __future__ import annotations

from typing import NamedTuple

from morphology.errors import MalformedPattern
from morphology.models import ConditionClause, ConditionType, PhonemeInventory
from morphology.patterns import search
from morphology.phonemes import ends_with_class, starts_with_class


class ConditionOutcome(NamedTuple):
    affix: str
    matched: bool
    trace: str


def _evaluate(word: str, clause: ConditionClause, inventory: PhonemeInventory):
    cls = clause.phoneme_class.value

    if clause.type == ConditionType.ENDS_WITH_PHONEME_CLASS:
        matched = ends_with_class(word, clause.phoneme_class, inventory)
        return matched, f"ends_with {cls}: {matched}"

    if clause.type == ConditionType.STARTS_WITH_PHONEME_CLASS:
        matched = starts_with_class(word, clause.phoneme_class, inventory)
        return matched, f"starts_with {cls}: {matched}"

    try:
        matched = search(clause.regex, word)
    except MalformedPattern as exc:
        return False, exc.to_trace()
    return matched, f"regex /{clause.regex}/: {matched}"


def resolve_condition(
    word: str,
    clause: ConditionClause,
    inventory: PhonemeInventory,
) -> ConditionOutcome:
    """
    Evaluate `clause` against `word`.

    Returns the `then_affix` when the test holds, the `else_affix`
    otherwise, plus a trace naming the test and its outcome.
    """
    matched, detail = _evaluate(word, clause, inventory)
    affix = clause.then_affix if matched else clause.else_affix
    return ConditionOutcome(
        affix=affix,
        matched=matched,
        trace=f'condition({detail}) → "{affix}"',
    )


__all__ = ["ConditionOutcome", "resolve_condition"]
