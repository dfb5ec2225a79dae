"""
Bibliographic record model.

This is the data contract between the record parsers and everything
downstream (screening, export, CLI). Parsers build records once; nothing
mutates them afterwards.
"""

from pydantic import BaseModel, ConfigDict, Field


class BibliographicRecord(BaseModel):
    """One citation extracted from a PubMed text export."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str  # PMID if present, else "entry-{n}" / "tag-{n}"
    sequence_index: str = Field(alias="sequenceIndex")  # 1-based, decimal string
    title: str
    authors: str  # comma-joined, or a placeholder
    journal: str
    year: str  # 4-digit year or a placeholder
    abstract: str = ""
    doi: str = ""
    pmid: str = ""
    pmcid: str = ""  # not populated by either export format
    raw_text: str = Field(default="", alias="rawText")  # source text of the record
