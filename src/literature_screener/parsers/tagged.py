"""
Parser for the PubMed/MEDLINE tagged export ("Format: PubMed").

Each record starts with a ``PMID-`` line and every field line carries a
short tag::

    PMID- 12345678
    TI  - Title of the article that wraps
          onto a second line
    AB  - Abstract text...
    AU  - Smith J
    AID - 10.1000/xyz [doi]

Field lines are dispatched through ``TAG_HANDLERS``. The tag seen last is
tracked as a ``TagState`` so that indented continuation lines extend the
title or abstract and are ignored for every other tag.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from literature_screener.constants import (
    CONTINUATION_INDENT,
    DOI_MARKER,
    NO_TITLE,
    TAGGED_ID_PREFIX,
    UNKNOWN_AUTHORS,
    UNKNOWN_JOURNAL,
    UNKNOWN_YEAR,
)
from literature_screener.models.model_record import BibliographicRecord
from literature_screener.parsers.base import BaseFormatParser

RECORD_SPLIT = re.compile(r"\r?\n(?=PMID-)")
LINE_SPLIT = re.compile(r"\r?\n")
TAG_LINE = re.compile(r"^([A-Z]{2,4})\s*-\s?(.*)")


class TagState(Enum):
    NONE = "none"  # no tag seen yet in this block
    TITLE = "title"
    ABSTRACT = "abstract"
    OTHER = "other"  # any tag without continuation lines


@dataclass
class TaggedFields:
    """Field values collected while walking one block."""

    pmid: str = ""
    title: str = ""
    abstract: str = ""
    journal: str = ""
    year: str = ""
    doi: str = ""
    authors: list[str] = field(default_factory=list)


# -- Field updates ------------------------------------------------------------


def _set_pmid(fields: TaggedFields, value: str) -> None:
    fields.pmid = value.strip()


def _set_title(fields: TaggedFields, value: str) -> None:
    fields.title = value


def _set_abstract(fields: TaggedFields, value: str) -> None:
    fields.abstract = value


def _set_journal(fields: TaggedFields, value: str) -> None:
    fields.journal = value


def _set_year(fields: TaggedFields, value: str) -> None:
    # DP carries a full date ("2021 Mar 4"); only the year is kept
    fields.year = value[:4]


def _append_author(fields: TaggedFields, value: str) -> None:
    fields.authors.append(value)


def _set_doi(fields: TaggedFields, value: str) -> None:
    # Only AID values marked [doi]; the first one found wins
    if DOI_MARKER in value and not fields.doi:
        fields.doi = value.replace(DOI_MARKER, "").strip()


def _continue_title(fields: TaggedFields, text: str) -> None:
    fields.title += " " + text


def _continue_abstract(fields: TaggedFields, text: str) -> None:
    fields.abstract += " " + text


FieldUpdate = Callable[[TaggedFields, str], None]

TAG_HANDLERS: dict[str, tuple[FieldUpdate, TagState]] = {
    "PMID": (_set_pmid, TagState.OTHER),
    "TI": (_set_title, TagState.TITLE),
    "AB": (_set_abstract, TagState.ABSTRACT),
    "JT": (_set_journal, TagState.OTHER),
    "DP": (_set_year, TagState.OTHER),
    "AU": (_append_author, TagState.OTHER),
    "AID": (_set_doi, TagState.OTHER),
}

CONTINUATION_HANDLERS: dict[TagState, FieldUpdate] = {
    TagState.TITLE: _continue_title,
    TagState.ABSTRACT: _continue_abstract,
}


def collect_fields(block: str) -> TaggedFields:
    """Walk the lines of one tagged block and collect its field values."""
    fields = TaggedFields()
    state = TagState.NONE

    for line in LINE_SPLIT.split(block):
        match = TAG_LINE.match(line)
        if match:
            tag, value = match.group(1), match.group(2)
            handler, state = TAG_HANDLERS.get(tag, (None, TagState.OTHER))
            if handler is not None:
                handler(fields, value)
        elif line.startswith(CONTINUATION_INDENT):
            extend = CONTINUATION_HANDLERS.get(state)
            if extend is not None:
                extend(fields, line.strip())

    return fields


class TaggedFormatParser(BaseFormatParser):
    """Parser for PMID-/TI  - tagged exports."""

    @property
    def _format_name(self) -> str:
        return "tagged"

    def _split(self, content: str) -> list[str]:
        return [block for block in RECORD_SPLIT.split(content) if block.strip()]

    def _parse_block(
        self, block: str, position: int, sequence_index: str
    ) -> BibliographicRecord | None:
        fields = collect_fields(block)
        title = fields.title.strip()
        if not title and not fields.pmid:
            return None

        return BibliographicRecord(
            id=fields.pmid or f"{TAGGED_ID_PREFIX}-{position}",
            sequence_index=sequence_index,
            title=title or NO_TITLE,
            authors=", ".join(fields.authors) or UNKNOWN_AUTHORS,
            journal=fields.journal or UNKNOWN_JOURNAL,
            year=fields.year or UNKNOWN_YEAR,
            abstract=fields.abstract.strip(),
            doi=fields.doi,
            pmid=fields.pmid,
            raw_text=block,
        )
