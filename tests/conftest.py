# tests/conftest.py
import pytest

from morphology.models import (
    AffixSlot,
    GrammarConfig,
    InflectionRule,
    IrregularOverride,
    PhonemeInventory,
    TypologyConfig,
)


@pytest.fixture
def inventory() -> PhonemeInventory:
    """Small inventory with multi-character phonemes on both sides."""
    return PhonemeInventory(
        consonants=["p", "t", "k", "b", "d", "g", "s", "m", "n", "l", "r", "w", "h", "ŋ", "tʃ", "ng"],
        vowels=["a", "e", "i", "o", "u", "aː", "ai"],
    )


@pytest.fixture
def plural_suffix() -> InflectionRule:
    return InflectionRule(
        rule_id="noun-pl",
        pos_id="noun",
        dimension_values={"number": "plural"},
        type="suffix",
        affix="-s",
        tag="PL",
    )


@pytest.fixture
def agglutinative_grammar() -> GrammarConfig:
    """
    Two slots declared suffix-first so tests can check that the chain is
    ordered by position, not by declaration.
    """
    return GrammarConfig(
        language_id="agg",
        typology=TypologyConfig(morphological_type="agglutinative"),
        affix_slots=[
            AffixSlot(slot_id="s-case", position=1, dimension_id="case", label="CASE"),
            AffixSlot(slot_id="s-poss", position=-1, dimension_id="possessor", label="POSS"),
        ],
        inflection_rules=[
            InflectionRule(
                rule_id="acc",
                pos_id="noun",
                dimension_values={"case": "acc"},
                type="suffix",
                affix="-ka",
                slot_id="s-case",
            ),
            InflectionRule(
                rule_id="my",
                pos_id="noun",
                dimension_values={"possessor": "1sg"},
                type="prefix",
                affix="ni-",
                slot_id="s-poss",
            ),
        ],
    )


@pytest.fixture
def fusional_grammar() -> GrammarConfig:
    return GrammarConfig(
        language_id="fus",
        typology=TypologyConfig(morphological_type="fusional"),
        inflection_rules=[
            InflectionRule(
                rule_id="1sg-pres",
                pos_id="verb",
                dimension_values={"person": "1", "number": "sg", "tense": "pres"},
                type="suffix",
                affix="-o",
            ),
            InflectionRule(
                rule_id="past",
                pos_id="verb",
                dimension_values={"tense": "past"},
                type="ablaut",
                config={"kind": "ablaut", "target_vowel": "i", "replacement_vowel": "a"},
            ),
        ],
        irregular_overrides=[
            IrregularOverride(entry_id="w-be", dimension_values={"tense": "past"}, surface_form="was"),
        ],
    )
