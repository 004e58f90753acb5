"""
morphology/patterns.py

Regex handling shared by the rule gate, regex conditions, infix positions
and conjugation-class stem patterns.

Patterns come from grammar authors and may be invalid; compiling them goes
through `compile_pattern`, which raises `MalformedPattern` instead of
`re.error`. Tests use search semantics (a match anywhere in the word).
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Pattern

from morphology.errors import MalformedPattern
from morphology.models import MATCH_ALL


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise MalformedPattern(pattern, str(exc)) from exc


def is_universal(pattern: str) -> bool:
    """Empty or `.*` patterns accept every word."""
    return not pattern or pattern == MATCH_ALL


def search(pattern: str, word: str) -> bool:
    return compile_pattern(pattern).search(word) is not None


__all__ = ["compile_pattern", "is_universal", "search"]
