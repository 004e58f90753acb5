# tests/engine/test_conditions.py
from morphology.conditions import resolve_condition
from morphology.models import ConditionClause


def _clause(**kwargs) -> ConditionClause:
    base = {"then_affix": "-n", "else_affix": "-en"}
    base.update(kwargs)
    return ConditionClause(**base)


def test_trailing_vowel_selects_then_affix(inventory) -> None:
    clause = _clause(type="ends_with_phoneme_class", phoneme_class="vowel")
    outcome = resolve_condition("bula", clause, inventory)
    assert outcome.affix == "-n"
    assert outcome.matched is True
    assert "ends_with vowel: True" in outcome.trace


def test_trailing_consonant_selects_else_affix(inventory) -> None:
    clause = _clause(type="ends_with_phoneme_class", phoneme_class="vowel")
    outcome = resolve_condition("kat", clause, inventory)
    assert outcome.affix == "-en"
    assert outcome.matched is False


def test_leading_class_accepts_json_alias(inventory) -> None:
    clause = ConditionClause.model_validate(
        {"type": "starts_with_phoneme_class", "class": "consonant", "then_affix": "m-", "else_affix": "n-"}
    )
    assert resolve_condition("tʃuka", clause, inventory).affix == "m-"
    assert resolve_condition("ama", clause, inventory).affix == "n-"


def test_regex_condition(inventory) -> None:
    clause = _clause(type="matches_regex", regex="[aeiou]{2}")
    assert resolve_condition("kaila", clause, inventory).matched is True
    assert resolve_condition("kala", clause, inventory).matched is False


def test_invalid_regex_is_not_fatal(inventory) -> None:
    clause = _clause(type="matches_regex", regex="([")
    outcome = resolve_condition("kat", clause, inventory)
    assert outcome.matched is False
    assert outcome.affix == "-en"
    assert "malformed pattern" in outcome.trace
