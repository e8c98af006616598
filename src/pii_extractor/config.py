"""YAML/dict config loader for pii-extractor.

Supports loading from a YAML file or a plain dict (for embedding in a
larger config file).

Example YAML:

    pii_extractor:
      input: notes/today.txt
      output: out/report.json
      echo: false
      mask: true
      skip_categories:
        - hashtags
      allow_list:
        - support@example.com
      log_level: INFO
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Iterable

from .extractor import ExtractorConfig
from .types import Category

DEFAULT_INPUT = os.environ.get("PII_EXTRACTOR_INPUT", "sample_input.txt")
DEFAULT_OUTPUT = os.environ.get("PII_EXTRACTOR_OUTPUT", "sample_output.json")


def parse_categories(names: Iterable[str]) -> set[Category]:
    """Category names or report keys → members.  Blank entries are ignored."""
    return {Category.from_name(n) for n in names if n and n.strip()}


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "pii_extractor" key or flat
    if "pii_extractor" in data:
        data = data["pii_extractor"] or {}

    return {
        "input": data.get("input", DEFAULT_INPUT),
        "output": data.get("output", DEFAULT_OUTPUT),
        "echo": data.get("echo", True),
        "mask": data.get("mask", True),
        "skip_categories": parse_categories(data.get("skip_categories") or []),
        "allow_list": set(data.get("allow_list") or []),
        "log_level": str(data.get("log_level", "INFO")).upper(),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml  # optional dependency
    with open(Path(path).expanduser(), encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid YAML in {path}: {exc}") from exc
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return load_config(data)


def build_config(cfg: dict[str, Any]) -> ExtractorConfig:
    """ExtractorConfig from a normalized config dict."""
    return ExtractorConfig(
        mask=cfg["mask"],
        skip_categories=set(cfg["skip_categories"]),
        allow_list=set(cfg["allow_list"]),
    )
