# tests/engine/test_phonemes.py
from morphology.models import PhonemeClass, PhonemeInventory
from morphology.phonemes import classifies, phoneme_at, phoneme_ending_at


def test_trailing_vowel_and_consonant(inventory) -> None:
    assert classifies("bula", PhonemeClass.VOWEL, inventory)
    assert not classifies("bula", PhonemeClass.CONSONANT, inventory)
    assert classifies("kat", PhonemeClass.CONSONANT, inventory)


def test_leading_edge(inventory) -> None:
    assert classifies("ama", PhonemeClass.VOWEL, inventory, edge="start")
    assert classifies("tʃuka", PhonemeClass.CONSONANT, inventory, edge="start")
    assert not classifies("kat", PhonemeClass.VOWEL, inventory, edge="start")


def test_multi_character_phoneme_at_edge(inventory) -> None:
    """Only the full affricate counts; a lone 'ʃ' is not a consonant here."""
    assert classifies("katʃ", PhonemeClass.CONSONANT, inventory)
    only_affricate = PhonemeInventory(consonants=["tʃ"], vowels=["a"])
    assert classifies("matʃ", PhonemeClass.CONSONANT, only_affricate)
    assert not classifies("maʃ", PhonemeClass.CONSONANT, only_affricate)


def test_empty_inputs_are_false(inventory) -> None:
    assert not classifies("", PhonemeClass.VOWEL, inventory)
    assert not classifies("kat", PhonemeClass.VOWEL, PhonemeInventory())
    assert not classifies("kat", PhonemeClass.CONSONANT, PhonemeInventory(consonants=[""]))


def test_longest_phoneme_lengths(inventory) -> None:
    assert phoneme_at("kaːt", 1, inventory.vowels) == 2
    assert phoneme_at("kat", 1, inventory.vowels) == 1
    assert phoneme_at("kat", 0, inventory.vowels) == 0
    assert phoneme_ending_at("kaːt", 3, inventory.vowels) == 2
    assert phoneme_ending_at("kaːt", 4, inventory.vowels) == 0
