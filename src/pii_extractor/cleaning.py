"""Normalizer and safety filter applied to every raw match.

The safety filter is a denylist heuristic.  It keeps obvious markup,
script and SQL payloads out of the report; it is not a sanitizer and
will miss anything it has no pattern for.
"""

from __future__ import annotations
import re

# Trailing punctuation run; blanks inside the run go with it.
_TRAILING = re.compile(r"[.,;:!?\s]+\Z")

DENYLIST: tuple[re.Pattern, ...] = (
    re.compile(r"<\s*script\b", re.IGNORECASE),
    re.compile(r"<\s*iframe\b", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"on\w+\s*=", re.IGNORECASE),     # inline event handler
    re.compile(r"drop\s+table", re.IGNORECASE),
    re.compile(r"delete\s+from", re.IGNORECASE),
)


def normalize(value: str) -> str:
    """Strip trailing ``.,;:!?`` and surrounding whitespace."""
    return _TRAILING.sub("", value).strip()


def is_safe(value: str) -> bool:
    """False if the value hits any denylist entry."""
    return not any(p.search(value) for p in DENYLIST)
