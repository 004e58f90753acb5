"""
morphology/rules.py

Single-rule application: gate -> condition -> operation -> trace.

    apply_inflection(word, rule, inventory) -> InflectionResult

1. Gate: a non-universal `match_regex` must be found in the word. A miss or
   an invalid pattern returns the word unchanged with applied=False.
2. Conditioning: a `condition` clause picks the effective affix; otherwise
   the rule's literal `affix` is used.
3. Dispatch to the operation named by the rule's type.
4. Trace: condition trace and operation trace joined with " | ". A failing
   operation keeps the condition step in front of the failure.

applied=False only ever means a recovered failure (gate rejected,
malformed pattern, missing payload). An operation that happens to be a
no-op (ablaut with an absent target vowel) still reports applied=True.
"""

from __future__ import annotations

from typing import Sequence

import structlog

from morphology.conditions import resolve_condition
from morphology.errors import GateRejected, MorphologyError
from morphology.models import InflectionResult, InflectionRule, PhonemeInventory
from morphology.operations import execute
from morphology.patterns import is_universal, search

logger = structlog.get_logger(__name__)

TRACE_SEPARATOR = " | "


def _check_gate(word: str, rule: InflectionRule) -> None:
    pattern = rule.match_regex
    if is_universal(pattern):
        return
    if not search(pattern, word):
        raise GateRejected(f"regex /{pattern}/ did not match")


def _unchanged(
    word: str,
    rule: InflectionRule,
    exc: MorphologyError,
    steps: Sequence[str] = (),
) -> InflectionResult:
    logger.debug(
        "rule_not_applied",
        rule_id=rule.rule_id,
        word=word,
        reason=exc.label,
        detail=exc.message,
    )
    return InflectionResult(
        result=word,
        applied=False,
        trace=TRACE_SEPARATOR.join([*steps, exc.to_trace()]),
    )


def apply_inflection(
    word: str,
    rule: InflectionRule,
    inventory: PhonemeInventory,
) -> InflectionResult:
    """
    Apply exactly one rule to `word`. Never raises for bad rule data.
    """
    try:
        _check_gate(word, rule)
    except MorphologyError as exc:
        return _unchanged(word, rule, exc)

    affix = rule.affix
    parts = []
    if rule.condition is not None:
        outcome = resolve_condition(word, rule.condition, inventory)
        affix = outcome.affix
        parts.append(outcome.trace)

    try:
        result, op_trace = execute(word, rule.type, affix, rule.config, inventory)
    except MorphologyError as exc:
        return _unchanged(word, rule, exc, parts)

    parts.append(op_trace)
    return InflectionResult(result=result, applied=True, trace=TRACE_SEPARATOR.join(parts))


__all__ = ["TRACE_SEPARATOR", "apply_inflection"]
