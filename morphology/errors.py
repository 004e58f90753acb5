# morphology/errors.py
"""
Failure taxonomy of the morphology engine.

These are raised inside the engine and always caught at the public entry
points (`apply_inflection`, the typology dispatcher, the paradigm
generator), where they turn into an unchanged word, ``applied=False`` and a
trace naming the failure. Callers of the public API never see them.
"""


class MorphologyError(Exception):
    """Base class for recoverable engine failures."""

    label = "morphology error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_trace(self) -> str:
        return f"{self.label}: {self.message}"


class MalformedPattern(MorphologyError):
    """A match / condition / infix-position regex failed to compile."""

    label = "malformed pattern"

    def __init__(self, pattern: str, reason: str = ""):
        detail = f"/{pattern}/" + (f" ({reason})" if reason else "")
        super().__init__(detail)
        self.pattern = pattern


class MissingOperationConfig(MorphologyError):
    """An infix/circumfix/reduplication/ablaut rule lacks its payload."""

    label = "missing operation config"


class GateRejected(MorphologyError):
    """The rule's match pattern did not match the word."""

    label = "gate rejected"


class NoApplicableRule(MorphologyError):
    """The dispatcher found no rule for the requested combination."""

    label = "no applicable rule"


__all__ = [
    "MorphologyError",
    "MalformedPattern",
    "MissingOperationConfig",
    "GateRejected",
    "NoApplicableRule",
]
