"""
morphology/paradigm.py

Paradigm tables: every enabled rule of a part of speech applied to the
same root, independently (not chained), in declaration order.

`generate_paradigms` runs the same table for many roots on a fixed-size
thread pool. The rule list is deep-copied once before any task starts, so
an edit made by the grammar editor mid-batch is never half-observed.
"""

from __future__ import annotations

import copy
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

import structlog

from morphology.models import InflectionRule, ParadigmCell, PhonemeInventory
from morphology.rules import apply_inflection
from morphology.typology import enabled_rules

logger = structlog.get_logger(__name__)

DEFAULT_MAX_WORKERS = 4


def generate_paradigm(
    word: str,
    pos_id: str,
    rules: Sequence[InflectionRule],
    inventory: PhonemeInventory,
) -> List[ParadigmCell]:
    """
    One row per enabled rule of `pos_id`. A failing rule yields a cell
    with the root unchanged and applied=False; the table is never cut short.
    """
    cells = []
    for rule in enabled_rules(rules, pos_id):
        outcome = apply_inflection(word, rule, inventory)
        cells.append(
            ParadigmCell(
                rule_id=rule.rule_id,
                dimension_values=dict(rule.dimension_values),
                tag=rule.tag,
                result=outcome.result,
                applied=outcome.applied,
                trace=outcome.trace,
            )
        )
    return cells


def generate_paradigms(
    words: Sequence[str],
    pos_id: str,
    rules: Sequence[InflectionRule],
    inventory: PhonemeInventory,
    max_workers: Optional[int] = None,
) -> Dict[str, List[ParadigmCell]]:
    """
    Paradigm tables for many roots. Keys follow the order of `words`;
    duplicate roots collapse into one entry.
    """
    snapshot = copy.deepcopy(list(rules))
    inventory = inventory.model_copy(deep=True)
    unique = list(dict.fromkeys(words))
    workers = max(1, max_workers or DEFAULT_MAX_WORKERS)

    logger.info("bulk_paradigm_started", words=len(unique), rules=len(snapshot), workers=workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        tables = list(
            executor.map(lambda w: generate_paradigm(w, pos_id, snapshot, inventory), unique)
        )
    logger.info("bulk_paradigm_finished", words=len(unique))
    return dict(zip(unique, tables))


__all__ = ["DEFAULT_MAX_WORKERS", "generate_paradigm", "generate_paradigms"]
