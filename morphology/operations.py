"""
morphology/operations.py

The six primitive morphological operations as pure string transforms.

    prefix         affix + word
    suffix         word + affix
    infix          morpheme inserted right after the first match of a
                   position regex (appended when the regex never matches)
    circumfix      prefix_part + word + suffix_part
    reduplication  full copy, first-syllable copy (partial_onset) or
                   last-syllable copy (partial_coda)
    ablaut         first occurrence of a vowel replaced by another

Each operation returns an `OperationOutcome(result, trace)`. `execute` is
the single dispatcher used by the rule applicator; it raises
`MissingOperationConfig` when a rule's payload is absent, empty or of the
wrong kind, and `MalformedPattern` when an infix position regex is invalid.

Affix notation: grammar authors write boundary hyphens ("-s", "ge-").
They are stripped before concatenation.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Type

from morphology.errors import MissingOperationConfig
from morphology.models import (
    AblautConfig,
    CircumfixConfig,
    InfixConfig,
    MorphologyType,
    OperationConfig,
    PhonemeInventory,
    ReduplicationConfig,
    ReduplicationMode,
)
from morphology.patterns import compile_pattern
from morphology.phonemes import phoneme_at, phoneme_ending_at

BOUNDARY_MARKER = "-"


class OperationOutcome(NamedTuple):
    result: str
    trace: str


def strip_boundary(affix: str) -> str:
    return affix.strip(BOUNDARY_MARKER)


# -------------------------------------------------------------------
# Concatenative operations
# -------------------------------------------------------------------


def prefix(word: str, affix: str) -> OperationOutcome:
    affix = strip_boundary(affix)
    return OperationOutcome(affix + word, f'prefix "{affix}"')


def suffix(word: str, affix: str) -> OperationOutcome:
    affix = strip_boundary(affix)
    return OperationOutcome(word + affix, f'suffix "{affix}"')


def circumfix(word: str, config: CircumfixConfig) -> OperationOutcome:
    before = strip_boundary(config.prefix_part)
    after = strip_boundary(config.suffix_part)
    return OperationOutcome(before + word + after, f'circumfix "{before}-...-{after}"')


def infix(word: str, config: InfixConfig) -> OperationOutcome:
    morpheme = strip_boundary(config.morpheme)
    match = compile_pattern(config.position_regex).search(word)
    if match is None:
        return OperationOutcome(word + morpheme, "infix regex no match, appended")
    at = match.end()
    return OperationOutcome(word[:at] + morpheme + word[at:], f'infix "{morpheme}" at pos {at}')


# -------------------------------------------------------------------
# Reduplication
# -------------------------------------------------------------------


def _first_syllable_end(word: str, inventory: PhonemeInventory) -> int:
    """
    End index of the first syllable: everything up to and including the
    first run of vowels. Falls back to two characters when the word has
    no vowel at all.
    """
    vowels = inventory.vowels
    end = 0
    in_vowels = False
    i = 0
    while i < len(word):
        size = phoneme_at(word, i, vowels)
        if size:
            in_vowels = True
            i += size
            end = i
        elif in_vowels:
            break
        else:
            i += 1
    if end == 0:
        end = min(2, len(word))
    return end


def _last_syllable_start(word: str, inventory: PhonemeInventory) -> int:
    """
    Start index of the last syllable's vowel-onward span: the beginning of
    the last run of vowels. Falls back to the last two characters.
    """
    vowels = inventory.vowels
    start = len(word)
    in_vowels = False
    j = len(word)
    while j > 0:
        size = phoneme_ending_at(word, j, vowels)
        if size:
            in_vowels = True
            j -= size
            start = j
        elif in_vowels:
            break
        else:
            j -= 1
    if start >= len(word):
        start = max(0, len(word) - 2)
    return start


def reduplicate(
    word: str,
    config: ReduplicationConfig,
    inventory: PhonemeInventory,
) -> OperationOutcome:
    if config.mode == ReduplicationMode.FULL:
        return OperationOutcome(word + word, "full reduplication")

    if config.mode == ReduplicationMode.PARTIAL_ONSET:
        onset = word[: _first_syllable_end(word, inventory)]
        return OperationOutcome(onset + word, f'partial onset "{onset}" + word')

    coda = word[_last_syllable_start(word, inventory):]
    return OperationOutcome(word + coda, f'word + partial coda "{coda}"')


# -------------------------------------------------------------------
# Ablaut
# -------------------------------------------------------------------


def ablaut(word: str, config: AblautConfig) -> OperationOutcome:
    target, replacement = config.target_vowel, config.replacement_vowel
    if target not in word:
        return OperationOutcome(word, f'ablaut: "{target}" not found')
    return OperationOutcome(
        word.replace(target, replacement, 1),
        f'ablaut: "{target}" → "{replacement}"',
    )


# -------------------------------------------------------------------
# Dispatcher
# -------------------------------------------------------------------

_PAYLOAD_TYPES = {
    MorphologyType.INFIX: InfixConfig,
    MorphologyType.CIRCUMFIX: CircumfixConfig,
    MorphologyType.REDUPLICATION: ReduplicationConfig,
    MorphologyType.ABLAUT: AblautConfig,
}


def _require(
    rule_type: MorphologyType,
    config: Optional[OperationConfig],
    expected: Type,
):
    if config is None:
        raise MissingOperationConfig(f"{rule_type.value}: missing config")
    if not isinstance(config, expected):
        raise MissingOperationConfig(
            f"{rule_type.value}: got {config.kind} config instead"
        )
    if config.is_empty():
        raise MissingOperationConfig(f"{rule_type.value}: empty config")
    return config


def execute(
    word: str,
    rule_type: MorphologyType,
    affix: str,
    config: Optional[OperationConfig],
    inventory: PhonemeInventory,
) -> OperationOutcome:
    """
    Run the operation named by `rule_type`.

    `affix` is used by prefix/suffix; the other four read their payload
    from `config`.
    """
    rule_type = MorphologyType(rule_type)

    if rule_type == MorphologyType.PREFIX:
        return prefix(word, affix)
    if rule_type == MorphologyType.SUFFIX:
        return suffix(word, affix)

    payload = _require(rule_type, config, _PAYLOAD_TYPES[rule_type])
    if rule_type == MorphologyType.INFIX:
        return infix(word, payload)
    if rule_type == MorphologyType.CIRCUMFIX:
        return circumfix(word, payload)
    if rule_type == MorphologyType.REDUPLICATION:
        return reduplicate(word, payload, inventory)
    return ablaut(word, payload)


_HANDLED = set(_PAYLOAD_TYPES) | {MorphologyType.PREFIX, MorphologyType.SUFFIX}
if _HANDLED != set(MorphologyType):
    raise RuntimeError(f"operations missing for {set(MorphologyType) - _HANDLED}")


__all__ = [
    "BOUNDARY_MARKER",
    "OperationOutcome",
    "strip_boundary",
    "prefix",
    "suffix",
    "infix",
    "circumfix",
    "reduplicate",
    "ablaut",
    "execute",
]
