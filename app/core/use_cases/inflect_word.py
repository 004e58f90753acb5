# app/core/use_cases/inflect_word.py
from typing import Dict, List, Sequence

import structlog

from app.core.domain.exceptions import InvalidRequestError
from morphology import (
    analyze_typology,
    apply_inflection,
    apply_inflection_typology_aware,
    generate_derived_words,
    generate_paradigm,
    generate_paradigms,
)
from morphology.models import (
    DerivationRule,
    DerivedWord,
    GrammarConfig,
    InflectionResult,
    InflectionRule,
    ParadigmCell,
    PhonemeInventory,
    TypologyEstimation,
)

logger = structlog.get_logger()


class InflectWord:
    """
    Use Case: produce word forms for the lexicon, sandbox and export
    collaborators.

    Thin orchestration over the `morphology` engine:
    1. Enforces request-size limits.
    2. Delegates to the pure engine functions.
    3. Logs outcomes for observability.
    """

    def __init__(self, max_workers: int = 4, max_bulk_words: int = 5000):
        self.max_workers = max_workers
        self.max_bulk_words = max_bulk_words

    def apply_rule(self, word: str, rule: InflectionRule, phonology: PhonemeInventory) -> InflectionResult:
        outcome = apply_inflection(word, rule, phonology)
        logger.info("rule_applied", rule_id=rule.rule_id, applied=outcome.applied)
        return outcome

    def inflect(
        self,
        word: str,
        entry_id: str,
        pos_id: str,
        dimension_values: Dict[str, str],
        grammar: GrammarConfig,
        phonology: PhonemeInventory,
    ) -> InflectionResult:
        outcome = apply_inflection_typology_aware(
            word, entry_id, pos_id, dimension_values, grammar, phonology
        )
        logger.info(
            "inflection_generated",
            language=grammar.language_id,
            typology=grammar.typology.morphological_type,
            pos_id=pos_id,
            applied=outcome.applied,
        )
        return outcome

    def paradigm(
        self,
        word: str,
        pos_id: str,
        rules: Sequence[InflectionRule],
        phonology: PhonemeInventory,
    ) -> List[ParadigmCell]:
        return generate_paradigm(word, pos_id, rules, phonology)

    def bulk_paradigms(
        self,
        words: Sequence[str],
        pos_id: str,
        rules: Sequence[InflectionRule],
        phonology: PhonemeInventory,
    ) -> Dict[str, List[ParadigmCell]]:
        self._check_size(words)
        return generate_paradigms(words, pos_id, rules, phonology, max_workers=self.max_workers)

    def derive(
        self,
        words: Sequence[str],
        rule: DerivationRule,
        phonology: PhonemeInventory,
    ) -> List[DerivedWord]:
        self._check_size(words)
        previews = generate_derived_words(words, rule, phonology)
        logger.info(
            "derivation_preview",
            rule_id=rule.rule_id,
            words=len(previews),
            applied=sum(1 for p in previews if p.applied),
        )
        return previews

    def estimate_typology(self, lexicon: Sequence[Sequence[str]], grammar: GrammarConfig) -> TypologyEstimation:
        return analyze_typology(lexicon, grammar)

    def _check_size(self, words: Sequence[str]) -> None:
        if len(words) > self.max_bulk_words:
            logger.warning("bulk_request_too_large", words=len(words), limit=self.max_bulk_words)
            raise InvalidRequestError(
                f"Too many words in one request ({len(words)} > {self.max_bulk_words})."
            )
