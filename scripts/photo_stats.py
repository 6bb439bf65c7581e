#!/usr/bin/env python3
"""
Statistics report for a photo feed JSON file.

Reports photo count, average title length, the most common tags,
alphanumeric and non-alphanumeric tag words and the oldest/newest photo.

Usage:
    # Print report to stdout
    python scripts/photo_stats.py data/fixtures/dogs.json

    # Save report (relative paths land under LOGS_PATH)
    python scripts/photo_stats.py data/fixtures/dogs.json --top 5 -o dogs_stats.txt
"""

import os
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

import typer
from dotenv import load_dotenv

from photostats.contexts.analysis import DatasetSummary, summarize
from photostats.contexts.analysis.logger import _log_info, setup_analysis_logger
from photostats.contexts.extraction.exceptions import PhotoStatsError
from photostats.contexts.extraction.loader import load_dataset
from photostats.utils.report_formatter import Column, TableFormatter, format_percentage

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
)


def format_summary_report(summary: DatasetSummary, source: Path) -> str:
    """Render a DatasetSummary as a text report."""
    total_words = sum(ranked.count for ranked in summary.top_tags)

    table = TableFormatter(
        [Column("Rank", 6, ">"), Column("Tag", 30), Column("Count", 8, ">"), Column("Share", 8, ">")],
        total_width=80,
    )
    table.add_section_header(f"PHOTO FEED STATISTICS: {source}")
    table.add_field("Photos", summary.image_count)
    table.add_field("Average title length", f"{summary.avg_title_length:.2f}")
    table.add_field("Oldest photo", summary.oldest_photo_title)
    table.add_field("Newest photo", summary.newest_photo_title)
    table.add_field("Unique alphanumeric tags", len(summary.alpha_numeric_tags))
    table.add_field("Non-alphanumeric tags", ", ".join(summary.non_alpha_numeric_tags) or "(none)")
    table.add_blank_line()

    table.add_text(f"Top {len(summary.top_tags)} tags (share of listed occurrences)")
    table.add_table_header()
    for rank, ranked in enumerate(summary.top_tags):
        table.add_row([rank, ranked.word, ranked.count, format_percentage(ranked.count, total_words)])

    table.add_blank_line()
    table.add_text("Alphanumeric tags:")
    table.add_text(" ".join(summary.alpha_numeric_tags))
    return table.render()


@app.command()
def main(
    dataset_file: Annotated[
        Path,
        typer.Argument(help="Photo feed JSON file", exists=True, dir_okay=False),
    ],
    top: Annotated[
        int,
        typer.Option("--top", "-n", help="Number of ranked tags to show", min=1),
    ] = 10,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Save report to file (prints to stdout if not specified)",
            dir_okay=False,
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for stats.log (default: LOGS_PATH/stats)"),
    ] = None,
):
    """
    Compute and report statistics for one photo feed.
    """
    setup_analysis_logger(log_dir or LOGS_PATH / "stats", dataset_file)

    try:
        summary = summarize(load_dataset(dataset_file), top=top)
    except PhotoStatsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _log_info(f"Summarized {summary.image_count} photos from {dataset_file.name}")
    report = format_summary_report(summary, dataset_file)

    if output:
        # If output is not absolute, treat it as relative to LOGS_PATH
        if not output.is_absolute():
            output = LOGS_PATH / output

        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report, encoding="utf-8")
        typer.echo(f"✓ Statistics report saved to {output}")
    else:
        typer.echo(report)


if __name__ == "__main__":
    app()
