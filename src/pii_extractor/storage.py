"""Reading source text and publishing reports.

Reports are written to a temp file next to the target and moved into
place with ``os.replace``, so a reader never sees a half-written report.
"""

from __future__ import annotations
import logging
import os
import tempfile
from pathlib import Path

from .types import InputUnavailable, OutputWriteFailure, Report

logger = logging.getLogger(__name__)


def read_source(path: str | Path) -> str:
    """Read UTF-8 source text, trimmed."""
    path = Path(path).expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputUnavailable(path, "not valid UTF-8") from exc
    except OSError as exc:
        raise InputUnavailable(path, exc.strerror or str(exc)) from exc
    logger.debug("read %d chars from %s", len(text), path)
    return text.strip()


def write_report(report: Report, path: str | Path) -> Path:
    """Atomically write the serialized report to ``path``."""
    path = Path(path).expanduser()
    payload = report.to_json() + "\n"
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        raise OutputWriteFailure(path, exc.strerror or str(exc)) from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.warning("could not remove temp file %s", tmp_name)
    logger.debug("wrote report to %s", path)
    return path
