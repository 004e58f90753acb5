# tests/engine/test_derivation_and_tags.py
from morphology.derivation import derive, generate_derived_words, to_inflection_rule
from morphology.models import MATCH_ALL, DerivationRule, InflectionRule
from morphology.tags import apply_tags


def _agent_rule() -> DerivationRule:
    return DerivationRule(
        rule_id="agent",
        name="Agent noun",
        source_pos_id="verb",
        target_pos_id="noun",
        type="suffix",
        affix="-er",
        condition={"type": "ends_with_phoneme_class", "class": "vowel", "then_affix": "-r", "else_affix": "-er"},
    )


def test_derivation_rule_becomes_universal_inflection_rule() -> None:
    converted = to_inflection_rule(_agent_rule())
    assert converted.pos_id == "verb"
    assert converted.dimension_values == {}
    assert converted.match_regex == MATCH_ALL
    assert converted.disabled is False
    assert converted.condition is not None


def test_derive_uses_conditions(inventory) -> None:
    assert derive("bake", _agent_rule(), inventory).result == "baker"
    assert derive("sing", _agent_rule(), inventory).result == "singer"


def test_derived_word_preview(inventory) -> None:
    rule = DerivationRule(
        rule_id="nmlz",
        type="circumfix",
        circumfix_config={"prefix_part": "ka-", "suffix_part": "-an"},
    )
    previews = generate_derived_words(["sulat", "basa"], rule, inventory)
    assert [p.derived for p in previews] == ["kasulatan", "kabasaan"]
    assert all(p.applied for p in previews)


def test_derivation_with_missing_payload_is_recovered(inventory) -> None:
    rule = DerivationRule(rule_id="x", type="ablaut")
    previews = generate_derived_words(["sing"], rule, inventory)
    assert previews[0].derived == "sing"
    assert previews[0].applied is False


def test_tag_chain_prefers_same_pos(inventory) -> None:
    rules = [
        InflectionRule(pos_id="verb", tag="PL", type="suffix", affix="-n"),
        InflectionRule(pos_id="noun", tag="PL", type="suffix", affix="-s"),
        InflectionRule(pos_id="noun", tag="ACC", type="suffix", affix="-a"),
    ]
    chain = apply_tags("kat", ["pl", "ACC", "ERG"], "noun", rules, inventory)
    assert chain.result == "katsa"
    assert chain.applied_tags == ["pl", "ACC"]
    assert "ERG: no rule" in chain.trace


def test_tag_chain_falls_back_to_any_pos(inventory) -> None:
    rules = [InflectionRule(pos_id="verb", tag="NEG", type="prefix", affix="ma-")]
    assert apply_tags("kat", ["NEG"], "noun", rules, inventory).result == "makat"


def test_tag_chain_skips_disabled_rules(inventory) -> None:
    rules = [InflectionRule(pos_id="noun", tag="PL", type="suffix", affix="-s", disabled=True)]
    chain = apply_tags("kat", ["PL"], "noun", rules, inventory)
    assert chain.result == "kat"
    assert chain.applied_tags == []
