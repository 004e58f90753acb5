"""
Morphology rule engine.

Deterministic word-form generation from a root, a declarative rule set and
a typology policy. Pure and stateless: every call is a function of its
arguments, so callers may fan out across threads freely.

    from morphology import apply_inflection, PhonemeInventory, InflectionRule

    inv = PhonemeInventory(consonants=["k", "t", "s"], vowels=["a"])
    rule = InflectionRule(type="suffix", affix="-s", pos_id="noun")
    apply_inflection("kat", rule, inv).result   # "kats"
"""

from morphology.analysis import analyze_typology
from morphology.derivation import derive, generate_derived_words
from morphology.models import (
    AffixSlot,
    ConditionClause,
    ConjugationClass,
    DerivationRule,
    GrammarConfig,
    InflectionResult,
    InflectionRule,
    IrregularOverride,
    ParadigmCell,
    PhonemeInventory,
    Typology,
    TypologyConfig,
)
from morphology.paradigm import generate_paradigm, generate_paradigms
from morphology.rules import apply_inflection
from morphology.tags import apply_tags
from morphology.typology import apply_inflection_typology_aware

__all__ = [
    "apply_inflection",
    "apply_inflection_typology_aware",
    "generate_paradigm",
    "generate_paradigms",
    "derive",
    "generate_derived_words",
    "apply_tags",
    "analyze_typology",
    "AffixSlot",
    "ConditionClause",
    "ConjugationClass",
    "DerivationRule",
    "GrammarConfig",
    "InflectionResult",
    "InflectionRule",
    "IrregularOverride",
    "ParadigmCell",
    "PhonemeInventory",
    "Typology",
    "TypologyConfig",
]
