# app/adapters/api/routers/__init__.py
"""
API Route Definitions.

- `inflection`: Word-form generation (single rule, typology-aware, paradigms,
  derivation previews, typology estimation).
- `health`: System health checks.
"""

from . import health
from . import inflection

__all__ = [
    "health",
    "inflection",
]
