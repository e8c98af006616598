"""Extractor — the main API.

Usage:
    from pii_extractor import Extractor

    extractor = Extractor()
    report = extractor.run("Mail john@acme.com, card 4111 1111 1111 1111")
    report.to_dict()["data"]["emails"]        # ["j***@acme.com"]
    report.to_dict()["data"]["credit_cards"]  # ["4111 **** **** 1111"]

Each category is scanned independently: raw match → normalize → drop if
empty → drop if it trips the safety filter.  Order of appearance and
duplicates are kept.  Masking runs afterwards, on emails and cards only.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import datetime

from .cleaning import is_safe, normalize
from .masking import mask
from .patterns import scan
from .report import build_report
from .types import Category, Report

logger = logging.getLogger(__name__)


@dataclass
class ExtractorConfig:
    """Configuration for the Extractor."""
    mask: bool = True                 # apply email/card redaction
    # Categories to leave out (still reported, as empty lists)
    skip_categories: set[Category] = field(default_factory=set)
    # Clean values that are reported as-is, never masked
    allow_list: set[str] = field(default_factory=set)


def extract(text: str, category: Category) -> list[str]:
    """Clean matches for one category, in order of appearance."""
    found: list[str] = []
    rejected = 0
    for raw in scan(category, text):
        value = normalize(raw)
        if not value:
            continue
        if not is_safe(value):
            rejected += 1
            continue
        found.append(value)
    if rejected:
        logger.debug("%s: dropped %d unsafe candidate(s)", category.key, rejected)
    return found


class Extractor:
    """Runs the extract → mask → report pipeline over a block of text."""

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()

    def extract(self, text: str, category: Category) -> list[str]:
        if category in self.config.skip_categories:
            return []
        return extract(text, category)

    def extract_all(self, text: str) -> dict[Category, list[str]]:
        return {c: self.extract(text, c) for c in Category}

    def mask(self, category: Category, values: list[str]) -> list[str]:
        if not self.config.mask:
            return list(values)
        allow = self.config.allow_list
        return [v if v in allow else mask(category, v) for v in values]

    def run(self, text: str, *, now: datetime | None = None) -> Report:
        """Extract every category, mask, and build the report."""
        masked = {c: self.mask(c, found) for c, found in self.extract_all(text).items()}
        report = build_report(masked, now)
        logger.debug(
            "extracted %s",
            ", ".join(f"{c.key}={n}" for c, n in report.counts.items()),
        )
        return report
