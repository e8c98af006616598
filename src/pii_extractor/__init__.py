"""PII Extractor — pull emails, URLs, phones, cards, times and hashtags out of text."""

from .extractor import Extractor, ExtractorConfig, extract
from .cleaning import is_safe, normalize
from .masking import mask_card, mask_email
from .report import NOTES, build_report
from .storage import read_source, write_report
from .config import load_config, load_from_yaml
from .types import (
    Category, Report,
    ExtractionError, InputUnavailable, OutputWriteFailure,
)

__all__ = [
    "Extractor", "ExtractorConfig", "extract",
    "normalize", "is_safe",
    "mask_email", "mask_card",
    "NOTES", "build_report",
    "read_source", "write_report",
    "load_config", "load_from_yaml",
    "Category", "Report",
    "ExtractionError", "InputUnavailable", "OutputWriteFailure",
]
__version__ = "0.1.0"
