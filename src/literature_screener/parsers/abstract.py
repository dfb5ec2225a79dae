"""
Parser for the PubMed "Format: Abstract" text export.

Entries are numbered and made of blank-line separated paragraphs::

    1. Journal Name. 2020 Jan;5(2):100-110. doi: 10.1000/xyz.

    Title of the article.

    Smith J, Doe A.

    Author information: ...

    Abstract paragraph(s)...

    DOI: 10.1000/xyz
    PMID: 12345678

There are no field tags, so fields come from paragraph position: meta line,
title, authors, then abstract candidates. PMID and DOI are searched for in
the whole entry.
"""

import re

from literature_screener.constants import (
    ABSTRACT_ID_PREFIX,
    MIN_ABSTRACT_PARAGRAPH_LENGTH,
    NON_ABSTRACT_PREFIXES,
    UNKNOWN_AUTHORS,
    UNKNOWN_JOURNAL,
    UNKNOWN_YEAR,
)
from literature_screener.models.model_record import BibliographicRecord
from literature_screener.parsers.base import BaseFormatParser

ENTRY_SPLIT = re.compile(r"\r?\n(?=\d+\.\s+)")
ENTRY_START = re.compile(r"^\d+\.\s+")
PARAGRAPH_SPLIT = re.compile(r"(?:\r?\n[ \t]*){2,}")
META_LINE = re.compile(r"\d+\.\s+(.*?)\.\s+(\d{4})")
PMID_PATTERN = re.compile(r"PMID:\s*(\d+)")
DOI_PATTERN = re.compile(r"DOI:\s*(\S+)")


def split_paragraphs(entry: str) -> list[str]:
    """Trimmed, non-empty paragraphs of an entry."""
    paragraphs = (p.strip() for p in PARAGRAPH_SPLIT.split(entry))
    return [p for p in paragraphs if p]


def is_abstract_paragraph(paragraph: str) -> bool:
    """True for paragraphs that read like abstract prose rather than metadata."""
    lower = paragraph.lower()
    if lower.startswith(NON_ABSTRACT_PREFIXES):
        return False
    return len(paragraph) > MIN_ABSTRACT_PARAGRAPH_LENGTH


def parse_meta_line(meta: str) -> tuple[str, str]:
    """Return (journal, year) from the numbered citation line."""
    match = META_LINE.search(meta)
    if match is None:
        return UNKNOWN_JOURNAL, UNKNOWN_YEAR
    return match.group(1), match.group(2)


class AbstractFormatParser(BaseFormatParser):
    """Parser for numbered, paragraph-separated abstract exports."""

    @property
    def _format_name(self) -> str:
        return "abstract"

    def _split(self, content: str) -> list[str]:
        # Text before the first numbered entry is a preamble, not a record.
        # A preamble line that itself starts with "N. " (e.g. "2023. Search")
        # is indistinguishable from an entry and is parsed as one.
        return [
            entry
            for entry in ENTRY_SPLIT.split(content)
            if entry.strip() and ENTRY_START.match(entry.strip())
        ]

    def _parse_block(
        self, block: str, position: int, sequence_index: str
    ) -> BibliographicRecord | None:
        entry = block.strip()
        paragraphs = split_paragraphs(entry)
        if len(paragraphs) < 2:
            return None

        journal, year = parse_meta_line(paragraphs[0])
        title = paragraphs[1]

        pmid_match = PMID_PATTERN.search(entry)
        doi_match = DOI_PATTERN.search(entry)
        pmid = pmid_match.group(1) if pmid_match else ""
        doi = doi_match.group(1).removesuffix(".") if doi_match else ""

        authors = UNKNOWN_AUTHORS
        abstract = ""
        if len(paragraphs) > 2:
            authors = paragraphs[2]
            abstract = "\n\n".join(
                p for p in paragraphs[3:] if is_abstract_paragraph(p)
            )

        return BibliographicRecord(
            id=pmid or f"{ABSTRACT_ID_PREFIX}-{position}",
            sequence_index=sequence_index,
            title=title,
            authors=authors,
            journal=journal,
            year=year,
            abstract=abstract.strip(),
            doi=doi,
            pmid=pmid,
            raw_text=entry,
        )
