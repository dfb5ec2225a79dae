"""Unit tests for BibliographicRecord."""

import pytest
from pydantic import ValidationError

from literature_screener.models.model_record import BibliographicRecord


class TestBibliographicRecord:
    """Tests for BibliographicRecord model."""

    def test_accepts_snake_case_names(self):
        record = BibliographicRecord(
            id="1",
            sequence_index="3",
            title="T",
            authors="A",
            journal="J",
            year="2020",
            raw_text="PMID- 1",
        )

        assert record.sequence_index == "3"
        assert record.raw_text == "PMID- 1"

    def test_accepts_camel_case_aliases(self):
        record = BibliographicRecord(
            id="1",
            sequenceIndex="1",
            title="T",
            authors="A",
            journal="J",
            year="2020",
            rawText="raw",
        )

        assert record.sequence_index == "1"
        assert record.raw_text == "raw"

    def test_optional_fields_default_to_empty(self):
        record = BibliographicRecord(
            id="entry-0", sequence_index="1", title="T", authors="A", journal="J", year="Y"
        )

        assert record.abstract == ""
        assert record.doi == ""
        assert record.pmid == ""
        assert record.pmcid == ""
        assert record.raw_text == ""

    def test_dump_by_alias_uses_camel_case(self, sample_record):
        data = sample_record.model_dump(by_alias=True)

        assert data["sequenceIndex"] == "1"
        assert data["rawText"] == "PMID- 31000001"
        assert "sequence_index" not in data

    def test_title_is_required(self):
        with pytest.raises(ValidationError):
            BibliographicRecord(
                id="1", sequence_index="1", authors="A", journal="J", year="Y"
            )

    def test_frozen(self, sample_record):
        with pytest.raises(ValidationError):
            sample_record.doi = "10.1/x"
