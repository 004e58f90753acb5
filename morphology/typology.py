"""
morphology/typology.py

Typology-aware inflection: choose how grammatical meanings are layered onto
a root according to the language's morphological type.

----------------------------------------------------------------------
STRATEGIES
----------------------------------------------------------------------

isolating      Marking is optional. One enabled rule whose dimension map
               equals the request is applied; otherwise the word comes back
               unchanged ("no inflection expected"), which is not an error.

agglutinative  Affix slots are sorted by signed position (most negative
               prefix first) and walked in order. Each slot applies the
               rule bound to it whose value for the slot's dimension equals
               the requested one, feeding its output to the next slot.
               Missing obligatory slots are traced, not fatal.

fusional       An irregular override for the entry wins outright. Otherwise
               a single fused rule encoding the whole request is looked up,
               first among the conjugation classes whose stem pattern fits
               the word, then among the rules of the part of speech that are
               not bound to a class the stem was rejected by.

polysynthetic  Same chain as agglutinative, with more slots.

Unrecognised typology values fall back to a plain single-rule search.

The slot collection is re-sorted on every call: callers own its order and
may hand it over in any sequence.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple, Optional

import structlog

from morphology.errors import MalformedPattern, NoApplicableRule
from morphology.models import (
    AffixSlot,
    ConjugationClass,
    GrammarConfig,
    InflectionResult,
    InflectionRule,
    IrregularOverride,
    PhonemeInventory,
    Typology,
)
from morphology.patterns import is_universal, search
from morphology.rules import apply_inflection

logger = structlog.get_logger(__name__)

CHAIN_SEPARATOR = " → "


class InflectionRequest(NamedTuple):
    word: str
    entry_id: str
    pos_id: str
    dimension_values: Dict[str, str]
    grammar: GrammarConfig
    inventory: PhonemeInventory


# -------------------------------------------------------------------
# Rule selection helpers
# -------------------------------------------------------------------


def enabled_rules(rules: Iterable[InflectionRule], pos_id: str) -> List[InflectionRule]:
    """Enabled rules for one part of speech, declaration order kept."""
    return [r for r in rules if r.pos_id == pos_id and not r.disabled]


def dimensions_equal(encoded: Dict[str, str], requested: Dict[str, str]) -> bool:
    """
    Exact equality of two dimension-value maps. A rule carrying extra,
    unrequested dimensions does not match.
    """
    return dict(encoded) == dict(requested)


def find_exact_rule(
    rules: Iterable[InflectionRule],
    requested: Dict[str, str],
    *,
    include_fused: bool = False,
) -> InflectionRule:
    for rule in rules:
        if dimensions_equal(rule.dimension_values, requested):
            return rule
        if include_fused and any(dimensions_equal(m, requested) for m in rule.fused_dimensions):
            return rule
    raise NoApplicableRule(f"no rule for {_format_dims(requested)}")


def find_irregular_override(
    entry_id: str,
    requested: Dict[str, str],
    overrides: Iterable[IrregularOverride],
) -> Optional[IrregularOverride]:
    """First override for the entry whose dimension values are all requested."""
    if not entry_id:
        return None
    for override in overrides:
        if override.entry_id != entry_id:
            continue
        if all(requested.get(k) == v for k, v in override.dimension_values.items()):
            return override
    return None


def _format_dims(values: Dict[str, str]) -> str:
    if not values:
        return "{}"
    return "{" + ", ".join(f"{k}={v}" for k, v in sorted(values.items())) + "}"


# -------------------------------------------------------------------
# Strategies
# -------------------------------------------------------------------


class TypologyStrategy:
    """One morphological combination algorithm."""

    name = "base"

    def inflect(self, request: InflectionRequest) -> InflectionResult:
        raise NotImplementedError


class SingleRuleStrategy(TypologyStrategy):
    """Fallback for unrecognised typologies: one exact rule, no overrides."""

    name = "default"

    def inflect(self, request: InflectionRequest) -> InflectionResult:
        rules = enabled_rules(request.grammar.inflection_rules, request.pos_id)
        try:
            rule = find_exact_rule(rules, request.dimension_values)
        except NoApplicableRule:
            return InflectionResult(result=request.word, applied=False, trace="no matching rule")
        return apply_inflection(request.word, rule, request.inventory)


class IsolatingStrategy(TypologyStrategy):
    name = Typology.ISOLATING.value

    def inflect(self, request: InflectionRequest) -> InflectionResult:
        rules = enabled_rules(request.grammar.inflection_rules, request.pos_id)
        try:
            rule = find_exact_rule(rules, request.dimension_values)
        except NoApplicableRule:
            return InflectionResult(
                result=request.word,
                applied=False,
                trace="isolating: no inflection expected",
            )
        return apply_inflection(request.word, rule, request.inventory)


class AgglutinativeStrategy(TypologyStrategy):
    name = Typology.AGGLUTINATIVE.value

    @staticmethod
    def ordered_slots(slots: Iterable[AffixSlot]) -> List[AffixSlot]:
        return sorted(slots, key=lambda s: s.position)

    @staticmethod
    def _slot_rule(
        slot: AffixSlot,
        rules: List[InflectionRule],
        requested: Dict[str, str],
    ) -> Optional[InflectionRule]:
        wanted = requested.get(slot.dimension_id)
        if not wanted:
            return None
        for rule in rules:
            if rule.slot_id == slot.slot_id and rule.dimension_values.get(slot.dimension_id) == wanted:
                return rule
        return None

    def inflect(self, request: InflectionRequest) -> InflectionResult:
        rules = enabled_rules(request.grammar.inflection_rules, request.pos_id)
        current = request.word
        steps: List[str] = []
        any_applied = False

        for slot in self.ordered_slots(request.grammar.affix_slots):
            rule = self._slot_rule(slot, rules, request.dimension_values)
            if rule is None:
                if slot.is_obligatory:
                    steps.append(f"slot[{slot.display_name}]: no rule (obligatory)")
                continue

            outcome = apply_inflection(current, rule, request.inventory)
            if outcome.applied:
                current = outcome.result
                any_applied = True
                steps.append(f"slot[{slot.display_name}]: {outcome.trace}")
            else:
                steps.append(f"slot[{slot.display_name}]: skipped ({outcome.trace})")

        logger.debug(
            "slot_chain_complete",
            typology=self.name,
            word=request.word,
            result=current,
            applied=any_applied,
        )
        return InflectionResult(
            result=current,
            applied=any_applied,
            trace=CHAIN_SEPARATOR.join(steps) if steps else "no slots matched",
        )


class PolysyntheticStrategy(AgglutinativeStrategy):
    name = Typology.POLYSYNTHETIC.value


class FusionalStrategy(TypologyStrategy):
    name = Typology.FUSIONAL.value

    @staticmethod
    def matching_classes(
        word: str,
        pos_id: str,
        classes: Iterable[ConjugationClass],
        notes: List[str],
    ) -> List[ConjugationClass]:
        """Conjugation classes of the POS whose stem pattern fits `word`."""
        found = []
        for cls in classes:
            if cls.applies_to_pos and cls.applies_to_pos != pos_id:
                continue
            if not is_universal(cls.stem_pattern):
                try:
                    if not search(cls.stem_pattern, word):
                        continue
                except MalformedPattern as exc:
                    notes.append(f"class[{cls.name or cls.class_id}]: {exc.to_trace()}")
                    continue
            found.append(cls)
        return found

    @staticmethod
    def _class_rules(cls: ConjugationClass, rules: List[InflectionRule]) -> List[InflectionRule]:
        members = set(cls.rule_ids)
        return [r for r in rules if r.rule_id in members or r.conjugation_class_id == cls.class_id]

    @classmethod
    def _unbound_or_matching(
        cls,
        rules: List[InflectionRule],
        matched: List[ConjugationClass],
        rejected: List[ConjugationClass],
    ) -> List[InflectionRule]:
        """Drop rules that belong to a rejected class and to no matching one."""
        excluded = {id(r) for c in rejected for r in cls._class_rules(c, rules)}
        excluded -= {id(r) for c in matched for r in cls._class_rules(c, rules)}
        return [r for r in rules if id(r) not in excluded]

    def inflect(self, request: InflectionRequest) -> InflectionResult:
        grammar = request.grammar
        override = find_irregular_override(
            request.entry_id, request.dimension_values, grammar.irregular_overrides
        )
        if override is not None:
            return InflectionResult(
                result=override.surface_form,
                applied=True,
                trace=f'irregular override → "{override.surface_form}"',
            )

        rules = enabled_rules(grammar.inflection_rules, request.pos_id)
        notes: List[str] = []
        matched = self.matching_classes(request.word, request.pos_id, grammar.conjugation_classes, notes)
        for cls in matched:
            try:
                rule = find_exact_rule(self._class_rules(cls, rules), request.dimension_values, include_fused=True)
            except NoApplicableRule:
                continue
            outcome = apply_inflection(request.word, rule, request.inventory)
            return self._prefixed(outcome, f"fusional[{cls.name or cls.class_id}]", notes)

        # Rules bound only to classes the stem was rejected by stay out.
        matched_ids = {m.class_id for m in matched}
        rejected = [
            c
            for c in grammar.conjugation_classes
            if (not c.applies_to_pos or c.applies_to_pos == request.pos_id)
            and c.class_id not in matched_ids
        ]
        rules = self._unbound_or_matching(rules, matched, rejected)
        try:
            rule = find_exact_rule(rules, request.dimension_values, include_fused=True)
        except NoApplicableRule as exc:
            return self._prefixed(
                InflectionResult(result=request.word, applied=False, trace=exc.to_trace()),
                "fusional",
                notes,
            )
        return self._prefixed(apply_inflection(request.word, rule, request.inventory), "fusional", notes)

    @staticmethod
    def _prefixed(outcome: InflectionResult, label: str, notes: List[str]) -> InflectionResult:
        trace = f"{label}: {outcome.trace}"
        if notes:
            trace = " | ".join(notes + [trace])
        return outcome.model_copy(update={"trace": trace})


STRATEGIES: Dict[Typology, TypologyStrategy] = {
    Typology.ISOLATING: IsolatingStrategy(),
    Typology.AGGLUTINATIVE: AgglutinativeStrategy(),
    Typology.FUSIONAL: FusionalStrategy(),
    Typology.POLYSYNTHETIC: PolysyntheticStrategy(),
}
DEFAULT_STRATEGY: TypologyStrategy = SingleRuleStrategy()

if set(STRATEGIES) != set(Typology):
    raise RuntimeError(f"typology strategies missing for {set(Typology) - set(STRATEGIES)}")


def strategy_for(grammar: GrammarConfig) -> TypologyStrategy:
    typology = grammar.typology.typology
    if typology is None:
        return DEFAULT_STRATEGY
    return STRATEGIES[typology]


def apply_inflection_typology_aware(
    word: str,
    entry_id: str,
    pos_id: str,
    dimension_values: Dict[str, str],
    grammar: GrammarConfig,
    inventory: PhonemeInventory,
) -> InflectionResult:
    """
    Produce the form of `word` for `dimension_values` under the grammar's
    typology. Never raises for bad grammar data.
    """
    strategy = strategy_for(grammar)
    request = InflectionRequest(
        word=word,
        entry_id=entry_id,
        pos_id=pos_id,
        dimension_values=dict(dimension_values or {}),
        grammar=grammar,
        inventory=inventory,
    )
    outcome = strategy.inflect(request)
    logger.debug(
        "typology_inflection",
        typology=strategy.name,
        entry_id=entry_id,
        pos_id=pos_id,
        applied=outcome.applied,
    )
    return outcome


__all__ = [
    "InflectionRequest",
    "TypologyStrategy",
    "SingleRuleStrategy",
    "IsolatingStrategy",
    "AgglutinativeStrategy",
    "PolysyntheticStrategy",
    "FusionalStrategy",
    "STRATEGIES",
    "DEFAULT_STRATEGY",
    "enabled_rules",
    "dimensions_equal",
    "find_exact_rule",
    "find_irregular_override",
    "strategy_for",
    "apply_inflection_typology_aware",
]
