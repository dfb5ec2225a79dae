"""Command-line interface for the literature screener."""

import asyncio
import json
import logging
from pathlib import Path

import click

from literature_screener.config import get_settings
from literature_screener.helpers.criteria_helpers import build_criteria, default_criteria
from literature_screener.models.model_record import BibliographicRecord
from literature_screener.models.model_screening import (
    ModelVariant,
    ScreeningOptions,
    ScreeningStats,
)
from literature_screener.parsers.record_parser import RecordParser
from literature_screener.services.batch import progress_percent, screen_records
from literature_screener.services.export import export_filename, records_to_csv

NO_RECORDS_MESSAGE = (
    "No valid records found in {path}. Export from PubMed as .txt with "
    "'Format: Abstract' or 'Format: PubMed'."
)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def _load_records(file: str) -> list[BibliographicRecord]:
    records = RecordParser().parse_file(Path(file))
    if not records:
        raise click.ClickException(NO_RECORDS_MESSAGE.format(path=file))
    return records


@click.group()
@click.version_option(package_name="literature-screener")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Literature screener: parse PubMed exports and screen them with an LLM."""
    _configure_logging(verbose)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
)
@click.option("-o", "--output", type=click.Path(), help="Output file path (JSON)")
def parse(file: str, output_format: str, output: str | None):
    """Parse a PubMed .txt export and list its records."""
    records = _load_records(file)

    if output or output_format == "json":
        payload = json.dumps(
            [r.model_dump(by_alias=True) for r in records], indent=2, ensure_ascii=False
        )
        if output:
            Path(output).write_text(payload, encoding="utf-8")
            click.echo(f"{len(records)} records saved to: {output}")
        else:
            click.echo(payload)
        return

    click.echo(f"Found {len(records)} records:")
    for r in records:
        click.echo(f"  {r.sequence_index}. [{r.id}] {r.title[:80]} ({r.journal}, {r.year})")


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("-i", "--include", "inclusion", multiple=True, help="Inclusion criterion")
@click.option("-e", "--exclude", "exclusion", multiple=True, help="Exclusion criterion")
@click.option("--thorough", is_flag=True, help="Use the larger model")
@click.option("--web-search", is_flag=True, help="Let the model verify papers online")
@click.option("-o", "--output", type=click.Path(), help="Output file path (CSV)")
def screen(
    file: str,
    inclusion: tuple[str, ...],
    exclusion: tuple[str, ...],
    thorough: bool,
    web_search: bool,
    output: str | None,
):
    """Screen every record in a PubMed .txt export and write a CSV."""
    records = _load_records(file)
    criteria = build_criteria(list(inclusion), list(exclusion)) or default_criteria()
    options = ScreeningOptions(
        model_variant=ModelVariant.THOROUGH if thorough else ModelVariant.FAST,
        enable_web_search=web_search,
    )

    click.echo(f"Screening {len(records)} records against {len(criteria)} criteria")

    def report(done: int, total: int) -> None:
        click.echo(f"  [{progress_percent(done, total):3d}%] {done}/{total}")

    results = asyncio.run(
        screen_records(records, criteria, options, on_progress=report)
    )

    stats = ScreeningStats.from_results(results)
    click.echo(
        f"Total: {stats.total}  Included: {stats.included}  Excluded: {stats.excluded}"
        f"  Unsure: {stats.unsure}  Pending: {stats.pending}"
    )

    out_path = Path(output or export_filename())
    out_path.write_text(records_to_csv(results), encoding="utf-8")
    click.echo(f"\nResults saved to: {out_path}")


if __name__ == "__main__":
    main()
