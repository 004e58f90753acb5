# morphology/models.py
"""
Domain models consumed and produced by the morphology engine.

Everything here is supplied fresh per call by the grammar / phonology /
lexicon collaborators. Models are frozen: the engine reads them and never
writes back.

The operation-specific payload of a rule is a tagged union keyed by
``kind``. Older grammar documents store the payload in four sibling keys
(``infix_config``, ``circumfix_config``, ...); those are lifted into
``config`` on validation so both shapes load.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Pattern that means "apply to every word"; the gate is skipped for it.
MATCH_ALL = ".*"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


# --- Enums ---

class PhonemeClass(str, Enum):
    VOWEL = "vowel"
    CONSONANT = "consonant"


class MorphologyType(str, Enum):
    """The six primitive morphological operations."""
    PREFIX = "prefix"
    SUFFIX = "suffix"
    INFIX = "infix"
    CIRCUMFIX = "circumfix"
    REDUPLICATION = "reduplication"
    ABLAUT = "ablaut"


class ConditionType(str, Enum):
    ENDS_WITH_PHONEME_CLASS = "ends_with_phoneme_class"
    STARTS_WITH_PHONEME_CLASS = "starts_with_phoneme_class"
    MATCHES_REGEX = "matches_regex"


class ReduplicationMode(str, Enum):
    FULL = "full"
    PARTIAL_ONSET = "partial_onset"
    PARTIAL_CODA = "partial_coda"


class Typology(str, Enum):
    """Morphological combination strategies understood by the dispatcher."""
    ISOLATING = "isolating"
    AGGLUTINATIVE = "agglutinative"
    FUSIONAL = "fusional"
    POLYSYNTHETIC = "polysynthetic"


class HeadMarking(str, Enum):
    HEAD = "head"
    DEPENDENT = "dependent"
    DOUBLE = "double"
    NONE = "none"


# --- Phonology ---

class PhonemeInventory(_Frozen):
    """
    Consonant and vowel lists from the phonology editor.
    Multi-character phonemes (e.g. "tʃ", "aː") are legal.
    """
    consonants: List[str] = Field(default_factory=list)
    vowels: List[str] = Field(default_factory=list)

    def pool(self, phoneme_class: PhonemeClass) -> List[str]:
        if phoneme_class == PhonemeClass.VOWEL:
            return list(self.vowels)
        return list(self.consonants)


# --- Conditions ---

class ConditionClause(_Frozen):
    """IF/ELSE allomorphy: pick `then_affix` when the test holds."""
    type: ConditionType
    phoneme_class: PhonemeClass = Field(PhonemeClass.VOWEL, alias="class")
    regex: str = ""
    then_affix: str = ""
    else_affix: str = ""


# --- Operation payloads (tagged union) ---

class InfixConfig(_Frozen):
    kind: Literal["infix"] = "infix"
    position_regex: str = ""
    morpheme: str = ""

    def is_empty(self) -> bool:
        return not self.morpheme


class CircumfixConfig(_Frozen):
    kind: Literal["circumfix"] = "circumfix"
    prefix_part: str = ""
    suffix_part: str = ""

    def is_empty(self) -> bool:
        return not (self.prefix_part or self.suffix_part)


class ReduplicationConfig(_Frozen):
    kind: Literal["reduplication"] = "reduplication"
    mode: ReduplicationMode = ReduplicationMode.FULL

    def is_empty(self) -> bool:
        return False


class AblautConfig(_Frozen):
    kind: Literal["ablaut"] = "ablaut"
    target_vowel: str = ""
    replacement_vowel: str = ""

    def is_empty(self) -> bool:
        return not self.target_vowel


OperationConfig = Annotated[
    Union[InfixConfig, CircumfixConfig, ReduplicationConfig, AblautConfig],
    Field(discriminator="kind"),
]

_LEGACY_CONFIG_KEYS = {
    "infix_config": "infix",
    "circumfix_config": "circumfix",
    "reduplication_config": "reduplication",
    "ablaut_config": "ablaut",
}


def _lift_legacy_config(data: Any) -> Any:
    """
    Move a flat `<kind>_config` payload into `config`.

    When several legacy keys are present, the one matching the rule's
    `type` wins; the others are dropped.
    """
    if not isinstance(data, dict) or data.get("config") is not None:
        return data
    found = {k: v for k, v in data.items() if k in _LEGACY_CONFIG_KEYS and v}
    if not found:
        return data

    data = {k: v for k, v in data.items() if k not in _LEGACY_CONFIG_KEYS}
    rule_type = data.get("type")
    rule_type = getattr(rule_type, "value", rule_type)
    chosen_key = next(
        (k for k in found if _LEGACY_CONFIG_KEYS[k] == rule_type),
        next(iter(found)),
    )
    payload = found[chosen_key]
    if isinstance(payload, dict):
        payload = {**payload, "kind": _LEGACY_CONFIG_KEYS[chosen_key]}
    data["config"] = payload
    return data


# --- Rules ---

class InflectionRule(_Frozen):
    """
    One morphological rule for one part of speech.

    `dimension_values` maps dimension id -> value id (the grammatical
    meaning encoded). `slot_id` binds the rule to an agglutinative slot,
    `conjugation_class_id` to a fusional class, and `fused_dimensions`
    lists further dimension-value combinations a fused rule also realizes.
    """
    rule_id: str = ""
    pos_id: str = ""
    dimension_values: Dict[str, str] = Field(default_factory=dict)
    type: MorphologyType
    affix: str = ""
    tag: str = ""
    match_regex: str = MATCH_ALL
    disabled: bool = False
    condition: Optional[ConditionClause] = None
    config: Optional[OperationConfig] = None

    # Typology bindings
    slot_id: Optional[str] = None
    conjugation_class_id: Optional[str] = None
    fused_dimensions: List[Dict[str, str]] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _legacy_payload(cls, data: Any) -> Any:
        return _lift_legacy_config(data)

    @property
    def enabled(self) -> bool:
        return not self.disabled


class DerivationRule(_Frozen):
    """Word-formation rule moving a root from one POS to another."""
    rule_id: str = ""
    name: str = ""
    source_pos_id: str = ""
    target_pos_id: str = ""
    type: MorphologyType
    affix: str = ""
    condition: Optional[ConditionClause] = None
    config: Optional[OperationConfig] = None
    semantic_note: str = ""

    @model_validator(mode="before")
    @classmethod
    def _legacy_payload(cls, data: Any) -> Any:
        return _lift_legacy_config(data)


# --- Typology bindings ---

class AffixSlot(_Frozen):
    """Position < 0 is the prefix side, >= 0 the suffix side."""
    slot_id: str
    position: int
    dimension_id: str
    is_obligatory: bool = False
    label: str = ""

    @property
    def display_name(self) -> str:
        return self.label or self.slot_id


class ConjugationClass(_Frozen):
    class_id: str
    name: str = ""
    applies_to_pos: str = ""
    stem_pattern: str = ""
    rule_ids: List[str] = Field(default_factory=list)


class IrregularOverride(_Frozen):
    entry_id: str
    dimension_values: Dict[str, str] = Field(default_factory=dict)
    surface_form: str


class TypologyConfig(_Frozen):
    """
    `morphological_type` stays a plain string: unrecognised values must
    reach the dispatcher fallback rather than fail validation.
    The indices are informational and do not affect dispatch.
    """
    morphological_type: str = Typology.FUSIONAL.value
    synthesis_index: float = Field(1.0, ge=1.0, le=5.0)
    fusion_index: float = Field(1.0, ge=1.0, le=3.0)
    head_marking: HeadMarking = HeadMarking.NONE
    auto_estimated: bool = False

    @property
    def typology(self) -> Optional[Typology]:
        try:
            return Typology(self.morphological_type)
        except ValueError:
            return None


class DimensionValue(_Frozen):
    val_id: str
    name: str = ""
    gloss: str = ""


class InflectionDimension(_Frozen):
    dim_id: str
    name: str = ""
    applies_to_pos: List[str] = Field(default_factory=list)
    values: List[DimensionValue] = Field(default_factory=list)


class GrammarConfig(_Frozen):
    """The slice of a language's grammar the engine reads."""
    language_id: str = ""
    inflection_rules: List[InflectionRule] = Field(default_factory=list)
    derivation_rules: List[DerivationRule] = Field(default_factory=list)
    inflection_dimensions: List[InflectionDimension] = Field(default_factory=list)
    typology: TypologyConfig = Field(default_factory=TypologyConfig)
    affix_slots: List[AffixSlot] = Field(default_factory=list)
    conjugation_classes: List[ConjugationClass] = Field(default_factory=list)
    irregular_overrides: List[IrregularOverride] = Field(default_factory=list)


# --- Results ---

class InflectionResult(_Frozen):
    """Outcome of one engine call. `trace` is a human-readable diagnostic."""
    result: str
    applied: bool
    trace: str = ""


class ParadigmCell(_Frozen):
    rule_id: str = ""
    dimension_values: Dict[str, str] = Field(default_factory=dict)
    tag: str = ""
    result: str
    applied: bool = True
    trace: str = ""


class DerivedWord(_Frozen):
    source: str
    derived: str
    applied: bool
    trace: str = ""


class TagChainResult(_Frozen):
    result: str
    applied_tags: List[str] = Field(default_factory=list)
    trace: str = ""


class TypologyEstimation(_Frozen):
    synthesis_index: float
    fusion_index: float
    word_count: int
    rules_analyzed: int


__all__ = [
    "MATCH_ALL",
    "PhonemeClass",
    "MorphologyType",
    "ConditionType",
    "ReduplicationMode",
    "Typology",
    "HeadMarking",
    "PhonemeInventory",
    "ConditionClause",
    "InfixConfig",
    "CircumfixConfig",
    "ReduplicationConfig",
    "AblautConfig",
    "OperationConfig",
    "InflectionRule",
    "DerivationRule",
    "AffixSlot",
    "ConjugationClass",
    "IrregularOverride",
    "TypologyConfig",
    "DimensionValue",
    "InflectionDimension",
    "GrammarConfig",
    "InflectionResult",
    "ParadigmCell",
    "DerivedWord",
    "TagChainResult",
    "TypologyEstimation",
]
