"""PubMed text export parsers."""

from literature_screener.parsers.record_parser import (
    RecordFormat,
    RecordParser,
    detect_format,
    parse_records,
)

__all__ = ["RecordFormat", "RecordParser", "detect_format", "parse_records"]
