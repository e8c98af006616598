"""Pattern registry — one compiled regex per category.

Patterns only decide "this looks like an X".  They do not validate: a card
number is not Luhn-checked and the phone pattern will happily match other
digit runs.  Matches are not deduplicated across categories, so the same
region of text can show up under more than one.
"""

from __future__ import annotations
import re
from types import MappingProxyType
from typing import Iterator, Mapping

from .types import Category

# Digit/word classes are ASCII-only so "\d" means 0-9, as documented.
_A = re.ASCII

PATTERNS: Mapping[Category, re.Pattern] = MappingProxyType({
    Category.EMAIL: re.compile(
        r"\b[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}\b", _A
    ),

    # Anything non-blank after the scheme, stopping at ")"
    Category.URL: re.compile(r"https?://[^\s)]+"),

    # Optional country code, optional (area), then 3/3/3-4 digit groups
    Category.PHONE: re.compile(
        r"(?:\+?\d{1,3}[\-.\s]?)?"
        r"\(?\d{3}\)?[\-.\s]?"
        r"\d{3}[\-.\s]?\d{3,4}", _A,
    ),

    # 16 digits in groups of four, optionally separated
    Category.CARD: re.compile(r"\b(?:\d{4}[\-\s]?){3}\d{4}\b", _A),

    Category.TIME: re.compile(
        r"\b(?:[01]?\d|2[0-3]):[0-5]\d(?:\s?[AP]M)?\b", _A | re.IGNORECASE,
    ),

    Category.HASHTAG: re.compile(r"#[A-Za-z0-9_]+"),
})


def pattern_for(category: Category) -> re.Pattern:
    return PATTERNS[category]


def scan(category: Category, text: str) -> Iterator[str]:
    """Yield raw matches for one category, leftmost first, non-overlapping."""
    for m in pattern_for(category).finditer(text):
        yield m.group()
