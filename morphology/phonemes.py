"""
morphology/phonemes.py

Phoneme classification at word edges.

Phoneme lists may contain multi-character phonemes ("tʃ", "aː", "ng").
Candidates are always tried longest-first so that "tʃ" wins over "t".
All functions here are total: empty words or empty lists simply yield
False / 0.
"""

from __future__ import annotations

from typing import Iterable, List, Literal

from morphology.models import PhonemeClass, PhonemeInventory

Edge = Literal["start", "end"]


def _longest_first(pool: Iterable[str]) -> List[str]:
    # Empty strings would match everywhere.
    return sorted((p for p in pool if p), key=len, reverse=True)


def classifies(
    word: str,
    phoneme_class: PhonemeClass,
    inventory: PhonemeInventory,
    edge: Edge = "end",
) -> bool:
    """
    Whether `word` begins (edge="start") or ends (edge="end") with a
    phoneme of `phoneme_class`.
    """
    if not word:
        return False
    pool = _longest_first(inventory.pool(PhonemeClass(phoneme_class)))
    if not pool:
        return False
    if edge == "start":
        return any(word.startswith(p) for p in pool)
    return any(word.endswith(p) for p in pool)


def ends_with_class(word: str, phoneme_class: PhonemeClass, inventory: PhonemeInventory) -> bool:
    return classifies(word, phoneme_class, inventory, edge="end")


def starts_with_class(word: str, phoneme_class: PhonemeClass, inventory: PhonemeInventory) -> bool:
    return classifies(word, phoneme_class, inventory, edge="start")


def phoneme_at(word: str, index: int, pool: Iterable[str]) -> int:
    """
    Length of the longest phoneme in `pool` starting at `word[index]`,
    or 0 if none does.
    """
    for phoneme in _longest_first(pool):
        if word.startswith(phoneme, index):
            return len(phoneme)
    return 0


def phoneme_ending_at(word: str, index: int, pool: Iterable[str]) -> int:
    """
    Length of the longest phoneme in `pool` that ends just before
    `word[index]` (i.e. occupies `word[index - n:index]`), or 0.
    """
    head = word[:index]
    for phoneme in _longest_first(pool):
        if head.endswith(phoneme):
            return len(phoneme)
    return 0


__all__ = [
    "classifies",
    "ends_with_class",
    "starts_with_class",
    "phoneme_at",
    "phoneme_ending_at",
]
