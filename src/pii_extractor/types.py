"""Core types."""

from __future__ import annotations
import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping


class Category(Enum):
    """A recognised class of substring.  The value is its report key."""
    EMAIL = "emails"
    URL = "urls"
    PHONE = "phones"
    CARD = "credit_cards"
    TIME = "times"
    HASHTAG = "hashtags"

    @property
    def key(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Category:
        """Resolve ``card``, ``CARD`` or ``credit_cards`` to a member."""
        wanted = name.strip().lower()
        for member in cls:
            if wanted in (member.name.lower(), member.value):
                return member
        raise ValueError(f"unknown category: {name!r}")


@dataclass(frozen=True, slots=True)
class Report:
    """Result of one extraction run."""
    extracted_at: str                           # ISO-8601, UTC
    notes: str
    data: Mapping[Category, tuple[str, ...]]

    @property
    def counts(self) -> dict[Category, int]:
        return {c: len(self.data[c]) for c in Category}

    def to_dict(self) -> dict[str, Any]:
        """Wire structure: metadata / data / counts, keyed by report key."""
        return {
            "metadata": {
                "extractedAt": self.extracted_at,
                "notes": self.notes,
            },
            "data": {c.key: list(self.data[c]) for c in Category},
            "counts": {c.key: n for c, n in self.counts.items()},
        }

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


# ── Errors ───────────────────────────────────────────────────────────

class ExtractionError(Exception):
    """Base class for failures that abort a run."""


class InputUnavailable(ExtractionError):
    """The source text could not be read or decoded."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"cannot read {self.path}: {reason}")


class OutputWriteFailure(ExtractionError):
    """The report could not be published to its destination."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"cannot write {self.path}: {reason}")
