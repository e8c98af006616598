"""Report builder."""

from __future__ import annotations
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Mapping, Sequence

from .types import Category, Report

NOTES = "Malicious and unsafe inputs have been filtered and masked."


def format_timestamp(moment: datetime) -> str:
    """UTC, millisecond precision, ``Z`` suffix.  Naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_report(
    values: Mapping[Category, Sequence[str]],
    extracted_at: datetime | None = None,
) -> Report:
    """Assemble a Report.  Categories missing from ``values`` are reported empty."""
    moment = extracted_at or datetime.now(timezone.utc)
    data = MappingProxyType({c: tuple(values.get(c, ())) for c in Category})
    return Report(extracted_at=format_timestamp(moment), notes=NOTES, data=data)
