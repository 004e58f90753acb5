# tests/engine/test_operations.py
import pytest

from morphology.errors import MalformedPattern, MissingOperationConfig
from morphology.models import (
    AblautConfig,
    CircumfixConfig,
    InfixConfig,
    MorphologyType,
    PhonemeInventory,
    ReduplicationConfig,
)
from morphology import operations
from morphology.operations import (
    ablaut,
    circumfix,
    execute,
    infix,
    prefix,
    reduplicate,
    suffix,
)


def test_prefix_and_suffix_strip_boundary_markers() -> None:
    assert prefix("walk", "ge-").result == "gewalk"
    assert suffix("kat", "-s").result == "kats"
    assert suffix("kat", "s").result == "kats"


def test_circumfix() -> None:
    outcome = circumfix("walk", CircumfixConfig(prefix_part="ge-", suffix_part="-t"))
    assert outcome.result == "gewalkt"
    assert outcome.trace == 'circumfix "ge-...-t"'


def test_infix_after_first_match() -> None:
    outcome = infix("sulat", InfixConfig(position_regex="^[^aeiou]", morpheme="um"))
    assert outcome.result == "sumulat"
    assert "at pos 1" in outcome.trace


def test_infix_without_match_appends() -> None:
    outcome = infix("aaa", InfixConfig(position_regex="k", morpheme="um"))
    assert outcome.result == "aaaum"
    assert "appended" in outcome.trace


def test_infix_invalid_pattern_raises_inside_executor() -> None:
    with pytest.raises(MalformedPattern):
        infix("sulat", InfixConfig(position_regex="(", morpheme="um"))


@pytest.mark.parametrize(
    "mode, word, expected",
    [
        ("full", "bula", "bulabula"),
        ("partial_onset", "bula", "bubula"),
        ("partial_onset", "kaila", "kaikaila"),
        ("partial_onset", "pst", "pspst"),
        ("partial_onset", "p", "pp"),
        ("partial_coda", "bula", "bulaa"),
        ("partial_coda", "kat", "katat"),
        ("partial_coda", "pst", "pstst"),
    ],
)
def test_reduplication_modes(inventory, mode, word, expected) -> None:
    outcome = reduplicate(word, ReduplicationConfig(mode=mode), inventory)
    assert outcome.result == expected


def test_partial_onset_prefers_long_vowels() -> None:
    inv = PhonemeInventory(consonants=["k", "t"], vowels=["a", "aː"])
    assert reduplicate("kaːta", ReduplicationConfig(mode="partial_onset"), inv).result == "kaːkaːta"


def test_ablaut_first_occurrence_only() -> None:
    assert ablaut("sing", AblautConfig(target_vowel="i", replacement_vowel="a")).result == "sang"
    assert ablaut("mimi", AblautConfig(target_vowel="i", replacement_vowel="a")).result == "mami"


def test_ablaut_absent_target_is_noop() -> None:
    outcome = ablaut("walk", AblautConfig(target_vowel="i", replacement_vowel="a"))
    assert outcome.result == "walk"
    assert "not found" in outcome.trace


@pytest.mark.parametrize(
    "rule_type, config",
    [
        (MorphologyType.INFIX, None),
        (MorphologyType.CIRCUMFIX, CircumfixConfig()),
        (MorphologyType.ABLAUT, AblautConfig(target_vowel="", replacement_vowel="a")),
        (MorphologyType.REDUPLICATION, AblautConfig(target_vowel="i", replacement_vowel="a")),
    ],
)
def test_execute_requires_matching_payload(inventory, rule_type, config) -> None:
    with pytest.raises(MissingOperationConfig):
        execute("sing", rule_type, "", config, inventory)


def test_execute_dispatches_by_type(inventory) -> None:
    assert execute("kat", MorphologyType.SUFFIX, "-s", None, inventory).result == "kats"
    assert execute("kat", "prefix", "a-", None, inventory).result == "akat"
    cfg = ReduplicationConfig(mode="full")
    assert execute("bula", MorphologyType.REDUPLICATION, "", cfg, inventory).result == "bulabula"


def test_every_operation_kind_is_handled() -> None:
    assert operations._HANDLED == set(MorphologyType)
