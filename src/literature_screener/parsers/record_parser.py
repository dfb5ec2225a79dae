"""
Entry point for parsing PubMed text exports.

Two export layouts are supported:
  1. tagged   — "Format: PubMed" (PMID-, TI  -, AB  - ... field lines)
  2. abstract — "Format: Abstract" (numbered, paragraph-separated entries)

The layout is sniffed from the content and the matching parser is used.
Parsing is pure: no I/O, no shared state, same input gives the same
records. Malformed entries are dropped; only a None input is an error.
"""

import logging
from enum import Enum
from pathlib import Path

from literature_screener.constants import TAGGED_FORMAT_MARKERS
from literature_screener.models.model_record import BibliographicRecord
from literature_screener.parsers.abstract import AbstractFormatParser
from literature_screener.parsers.base import BaseFormatParser
from literature_screener.parsers.tagged import TaggedFormatParser

logger = logging.getLogger(__name__)


class RecordFormat(str, Enum):
    TAGGED = "tagged"
    ABSTRACT = "abstract"


def detect_format(content: str) -> RecordFormat:
    """Tagged if any tag marker occurs anywhere in the content, else abstract."""
    if any(marker in content for marker in TAGGED_FORMAT_MARKERS):
        return RecordFormat.TAGGED
    return RecordFormat.ABSTRACT


class RecordParser:
    """Sniffs the export layout and dispatches to the matching parser."""

    def __init__(self) -> None:
        self._parsers: dict[RecordFormat, BaseFormatParser] = {
            RecordFormat.TAGGED: TaggedFormatParser(),
            RecordFormat.ABSTRACT: AbstractFormatParser(),
        }

    def parse(
        self, content: str, format_hint: RecordFormat | None = None
    ) -> list[BibliographicRecord]:
        """
        Parse export text into records.

        Args:
            content: Decoded file content, ``\\n`` or ``\\r\\n`` line endings
            format_hint: Skip sniffing and use this layout

        Returns:
            Records in input order, sequence indexes "1".."N". Empty list
            when nothing usable is found.
        """
        if not isinstance(content, str):
            raise TypeError(f"content must be a string, got {type(content).__name__}")
        if not content.strip():
            return []

        record_format = format_hint or detect_format(content)
        logger.debug("Parsing %d chars as %s", len(content), record_format.value)
        return self._parsers[record_format].parse(content)

    def parse_file(
        self, path: Path, format_hint: RecordFormat | None = None
    ) -> list[BibliographicRecord]:
        """Read an export file (UTF-8, BOM tolerated) and parse it."""
        content = Path(path).read_text(encoding="utf-8-sig", errors="replace")
        return self.parse(content, format_hint)


_default_parser = RecordParser()


def parse_records(content: str) -> list[BibliographicRecord]:
    """Parse export text with a shared parser instance."""
    return _default_parser.parse(content)
