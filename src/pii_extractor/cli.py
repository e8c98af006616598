"""CLI interface for pii-extractor.

Usage:
    # Extract from a file, write the JSON report, echo it to stdout
    python -m pii_extractor.cli extract --input notes.txt --output report.json

    # Extract from stdin, print the report only
    echo 'Ping john@x.com at 10:30 AM #standup' | \
        python -m pii_extractor.cli extract-text

    # Settings from YAML, overridden by flags
    python -m pii_extractor.cli --config extractor.yaml --quiet extract

Exit status: 0 on success, 1 when the input cannot be read or the report
cannot be written, 2 on a bad configuration.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Any

from .config import build_config, load_config, load_from_yaml, parse_categories
from .extractor import Extractor
from .storage import read_source, write_report
from .types import ExtractionError, InputUnavailable, Report

logger = logging.getLogger("pii_extractor")


def setup_logging(level: str, verbose: bool) -> None:
    """Log to stderr; stdout is reserved for the report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _load_settings(args: argparse.Namespace) -> dict[str, Any]:
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    if args.no_mask:
        cfg["mask"] = False
    if args.quiet:
        cfg["echo"] = False
    if args.skip_categories:
        cfg["skip_categories"] |= parse_categories(args.skip_categories.split(","))
    if args.allow_list:
        cfg["allow_list"] |= set(args.allow_list.split(","))
    if getattr(args, "input", None):
        cfg["input"] = args.input
    if getattr(args, "output", None):
        cfg["output"] = args.output
    return cfg


def _echo(report: Report) -> None:
    sys.stdout.write(report.to_json())
    sys.stdout.write("\n")


def cmd_extract(cfg: dict[str, Any]) -> None:
    """Extract from the input file and publish the report."""
    text = read_source(cfg["input"])
    report = Extractor(build_config(cfg)).run(text)
    path = write_report(report, cfg["output"])
    logger.info("Extraction complete. Results saved to %s.", path)
    if cfg["echo"]:
        _echo(report)


def cmd_extract_text(cfg: dict[str, Any]) -> None:
    """Extract from stdin, report on stdout."""
    try:
        text = sys.stdin.read().strip()
    except UnicodeDecodeError as exc:
        raise InputUnavailable("<stdin>", "not valid UTF-8") from exc
    except OSError as exc:
        raise InputUnavailable("<stdin>", exc.strerror or str(exc)) from exc
    report = Extractor(build_config(cfg)).run(text)
    _echo(report)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pii-extractor",
        description="Extract, filter and mask emails, URLs, phones, cards, times and hashtags",
    )
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--no-mask", action="store_true", help="Report emails/cards unmasked")
    parser.add_argument("--skip-categories", default="", help="Comma-separated categories to skip")
    parser.add_argument("--allow-list", default="", help="Comma-separated values to never mask")
    parser.add_argument("--quiet", action="store_true", help="Don't echo the report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    p = sub.add_parser("extract", help="Extract from a file into a JSON report")
    p.add_argument("--input", help="Source text file")
    p.add_argument("--output", help="Report destination")
    sub.add_parser("extract-text", help="Extract from stdin, report on stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = _load_settings(args)
    except ImportError:
        setup_logging("INFO", args.verbose)
        logger.error("Bad configuration: --config needs PyYAML (pip install pii-extractor[yaml])")
        return 2
    except (OSError, ValueError) as e:
        setup_logging("INFO", args.verbose)
        logger.error("Bad configuration: %s", e)
        return 2
    setup_logging(cfg["log_level"], args.verbose)

    cmds = {
        "extract": cmd_extract,
        "extract-text": cmd_extract_text,
    }
    try:
        cmds[args.command](cfg)
    except ExtractionError as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
