# app/core/domain/models.py
"""
API payloads for the inflection service.

The engine's own entities (rules, slots, overrides, inventories) live in
`morphology.models`; the request models here only bundle them for one call.
"""
from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from morphology.models import (
    DerivationRule,
    GrammarConfig,
    InflectionRule,
    ParadigmCell,
    PhonemeInventory,
)


class RuleApplicationRequest(BaseModel):
    """Single-rule application (rule tester, derivation preview)."""
    word: str
    rule: InflectionRule
    phonology: PhonemeInventory = Field(default_factory=PhonemeInventory)


class TypologyInflectionRequest(BaseModel):
    """Typology-aware form generation for one lexicon entry."""
    word: str
    entry_id: str = ""
    pos_id: str
    dimension_values: Dict[str, str] = Field(default_factory=dict)
    grammar: GrammarConfig
    phonology: PhonemeInventory = Field(default_factory=PhonemeInventory)


class ParadigmRequest(BaseModel):
    word: str
    pos_id: str
    rules: List[InflectionRule] = Field(default_factory=list)
    phonology: PhonemeInventory = Field(default_factory=PhonemeInventory)


class BulkParadigmRequest(BaseModel):
    words: List[str] = Field(..., min_length=1)
    pos_id: str
    rules: List[InflectionRule] = Field(default_factory=list)
    phonology: PhonemeInventory = Field(default_factory=PhonemeInventory)


class ParadigmTable(BaseModel):
    word: str
    cells: List[ParadigmCell] = Field(default_factory=list)


class DerivationRequest(BaseModel):
    words: List[str] = Field(..., min_length=1)
    rule: DerivationRule
    phonology: PhonemeInventory = Field(default_factory=PhonemeInventory)


class TypologyEstimateRequest(BaseModel):
    """`lexicon` holds, per word, the POS ids of its senses."""
    lexicon: List[List[str]] = Field(default_factory=list)
    grammar: GrammarConfig
