# tests/engine/test_models_and_analysis.py
import pytest
from pydantic import ValidationError

from morphology.analysis import analyze_typology, estimate_fusion_index
from morphology.models import (
    AblautConfig,
    GrammarConfig,
    InflectionDimension,
    InflectionRule,
    InfixConfig,
    Typology,
    TypologyConfig,
)


def test_legacy_payload_keys_are_lifted() -> None:
    rule = InflectionRule.model_validate(
        {
            "rule_id": "r1",
            "type": "infix",
            "infix_config": {"position_regex": "^.", "morpheme": "um"},
            "ablaut_config": {"target_vowel": "a", "replacement_vowel": "o"},
        }
    )
    assert isinstance(rule.config, InfixConfig)
    assert rule.config.morpheme == "um"


def test_tagged_payload_is_discriminated() -> None:
    rule = InflectionRule(type="ablaut", config={"kind": "ablaut", "target_vowel": "i", "replacement_vowel": "a"})
    assert isinstance(rule.config, AblautConfig)
    with pytest.raises(ValidationError):
        InflectionRule(type="ablaut", config={"kind": "umlaut"})


def test_rules_are_immutable() -> None:
    rule = InflectionRule(type="suffix", affix="-s")
    with pytest.raises(ValidationError):
        rule.affix = "-es"


def test_unknown_typology_string_is_accepted() -> None:
    config = TypologyConfig(morphological_type="mystery")
    assert config.typology is None
    assert TypologyConfig(morphological_type="isolating").typology is Typology.ISOLATING


def test_fusion_index_counts_dimensions_per_rule() -> None:
    grammar = GrammarConfig(
        inflection_rules=[
            InflectionRule(type="suffix", dimension_values={"person": "1", "number": "sg", "tense": "pres"}),
            InflectionRule(type="suffix", dimension_values={"tense": "past"}),
            InflectionRule(type="suffix", dimension_values={"a": "1", "b": "2"}, disabled=True),
        ]
    )
    assert estimate_fusion_index(grammar) == pytest.approx(2.0)


def test_typology_estimation() -> None:
    grammar = GrammarConfig(
        inflection_dimensions=[
            InflectionDimension(dim_id="number", applies_to_pos=["noun"]),
            InflectionDimension(dim_id="case", applies_to_pos=["noun"]),
        ],
        inflection_rules=[
            InflectionRule(pos_id="noun", type="suffix", dimension_values={"number": "pl"}),
            InflectionRule(pos_id="noun", type="suffix", dimension_values={"case": "acc"}),
            InflectionRule(pos_id="noun", type="suffix", dimension_values={"case": "gen"}),
        ],
    )
    estimate = analyze_typology([["noun"], ["noun", "verb"], []], grammar)
    assert estimate.synthesis_index == pytest.approx(3.0)
    assert estimate.fusion_index == pytest.approx(1.0)
    assert estimate.word_count == 3
    assert estimate.rules_analyzed == 3


def test_typology_estimation_defaults_without_data() -> None:
    estimate = analyze_typology([], GrammarConfig())
    assert estimate.synthesis_index == 1.0
    assert estimate.fusion_index == 1.0
