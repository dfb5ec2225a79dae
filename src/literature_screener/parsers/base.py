"""Base class shared by the export format parsers."""

import logging
from abc import ABC, abstractmethod

from literature_screener.models.model_record import BibliographicRecord

logger = logging.getLogger("literature_screener.parsers")


class BaseFormatParser(ABC):
    """
    Turns one export format into an ordered list of records.

    Subclasses split the content into blocks and convert each block with
    `_parse_block()`; a block that returns None is dropped. Sequence
    indexes are assigned to the surviving records, 1..N in input order.
    """

    @property
    @abstractmethod
    def _format_name(self) -> str:
        """Identifier used in log lines, e.g. 'tagged'."""
        ...

    @abstractmethod
    def _split(self, content: str) -> list[str]:
        """Split content into candidate record blocks (whitespace-only dropped)."""
        ...

    @abstractmethod
    def _parse_block(
        self, block: str, position: int, sequence_index: str
    ) -> BibliographicRecord | None:
        """Build a record from one block, or None if it lacks minimum content."""
        ...

    def parse(self, content: str) -> list[BibliographicRecord]:
        records: list[BibliographicRecord] = []
        for position, block in enumerate(self._split(content)):
            record = self._parse_block(block, position, str(len(records) + 1))
            if record is None:
                logger.debug(
                    "Dropped %s block at position %d (%d chars)",
                    self._format_name,
                    position,
                    len(block),
                )
                continue
            records.append(record)

        logger.info("Parsed %d %s record(s)", len(records), self._format_name)
        return records
