"""
Sequential batch screening.

Records are screened one at a time in input order. A failure on one record
is logged and recorded on its ScreenedRecord; the batch carries on and the
record stays pending.
"""

import logging
from typing import Awaitable, Callable

from literature_screener.models.model_record import BibliographicRecord
from literature_screener.models.model_screening import (
    Criterion,
    ScreenedRecord,
    ScreeningDecision,
    ScreeningOptions,
)
from literature_screener.services.screening import evaluate

logger = logging.getLogger(__name__)

Evaluator = Callable[
    [BibliographicRecord, list[Criterion], ScreeningOptions],
    Awaitable[ScreeningDecision],
]
ProgressCallback = Callable[[int, int], None]


def progress_percent(done: int, total: int) -> int:
    if total <= 0:
        return 0
    return round(done / total * 100)


async def screen_records(
    records: list[BibliographicRecord],
    criteria: list[Criterion],
    options: ScreeningOptions | None = None,
    evaluator: Evaluator = evaluate,
    on_progress: ProgressCallback | None = None,
) -> list[ScreenedRecord]:
    """Screen every record, isolating per-record failures."""
    options = options or ScreeningOptions()
    total = len(records)
    results: list[ScreenedRecord] = []

    for done, record in enumerate(records, start=1):
        try:
            decision = await evaluator(record, criteria, options)
            results.append(ScreenedRecord(record=record, decision=decision))
        except Exception as e:
            logger.exception(
                "Failed to screen record %s (#%s)", record.id, record.sequence_index
            )
            results.append(ScreenedRecord(record=record, error=str(e)))

        if on_progress is not None:
            on_progress(done, total)

    failed = sum(1 for r in results if r.error)
    logger.info("Screened %d record(s), %d failed", total, failed)
    return results
