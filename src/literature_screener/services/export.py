"""CSV export of screening results."""

import csv
import io
from datetime import date

from literature_screener.constants import EXPORT_HEADERS, NOT_SCREENED
from literature_screener.models.model_screening import ScreenedRecord


def export_row(result: ScreenedRecord) -> list[str]:
    record = result.record
    decision = result.decision
    return [
        record.pmid,
        record.doi,
        record.title,
        record.journal,
        record.year,
        decision.decision.value if decision else NOT_SCREENED,
        decision.reasoning if decision else "",
    ]


def records_to_csv(results: list[ScreenedRecord], delimiter: str = ",") -> str:
    """
    Serialize results as delimited text with a header row.

    Values containing the delimiter, a quote or a line break are quoted,
    embedded quotes doubled.
    """
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=delimiter,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    writer.writerow(EXPORT_HEADERS)
    writer.writerows(export_row(result) for result in results)
    return buffer.getvalue()


def export_filename(today: date | None = None) -> str:
    return f"screening_results_{(today or date.today()).isoformat()}.csv"
