#!/usr/bin/env python3
"""
Run the fixture assertion suites.

Loads the dogs and landscapes feed fixtures, checks each configured
statistic against its expected value, prints a results table and exits
with status 1 if any assertion failed.

Usage:
    # Run with fixtures from FIXTURES_PATH
    python scripts/run_fixture_suites.py

    # Point at other fixture files
    python scripts/run_fixture_suites.py --dogs dogs.json --landscapes landscapes.json
"""

import os
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

import typer
from dotenv import load_dotenv

from photostats.contexts.extraction.exceptions import PhotoStatsError
from photostats.contexts.harness import default_fixture_paths, exit_code, run_fixture_suites
from photostats.contexts.harness.logger import setup_suite_logger
from photostats.utils.report_formatter import Column, TableFormatter

load_dotenv()
FIXTURES_PATH = Path(os.getenv("FIXTURES_PATH", "data/fixtures"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
)


def format_results_report(results) -> str:
    """Render suite outcomes as a text table."""
    table = TableFormatter(
        [Column("Suite", 12), Column("Result", 6), Column("Assertion", 60)],
        total_width=80,
    )
    table.add_section_header("FIXTURE SUITES").add_table_header()

    for result in results:
        for outcome in result.outcomes:
            table.add_row([result.name, "PASS" if outcome.passed else "FAIL", outcome.name])

    table.add_blank_line()
    for result in results:
        for outcome in result.failures:
            table.add_text(f"{result.name}: {outcome.describe()}")

    total = sum(len(result.outcomes) for result in results)
    failed = sum(len(result.failures) for result in results)
    table.add_text(f"{total - failed} passed, {failed} failed")
    return table.render()


@app.command()
def main(
    dogs: Annotated[
        Optional[Path],
        typer.Option("--dogs", help="Dogs fixture (default: FIXTURES_PATH/dogs.json)", dir_okay=False),
    ] = None,
    landscapes: Annotated[
        Optional[Path],
        typer.Option(
            "--landscapes",
            help="Landscapes fixture (default: FIXTURES_PATH/landscapes.json)",
            dir_okay=False,
        ),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Suite config YAML", exists=True, dir_okay=False),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for suite.log (default: LOGS_PATH/suites)"),
    ] = None,
):
    """
    Check feed statistics against the expected values of each suite.

    Exits with status 1 if any assertion fails or a fixture cannot be read.
    """
    setup_suite_logger(log_dir or LOGS_PATH / "suites", FIXTURES_PATH)

    try:
        defaults = default_fixture_paths(FIXTURES_PATH, config)
        results = run_fixture_suites(
            dogs or defaults["dogs"],
            landscapes or defaults["landscapes"],
            config,
        )
    except (PhotoStatsError, FileNotFoundError, KeyError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(format_results_report(results))
    raise typer.Exit(code=exit_code(results))


if __name__ == "__main__":
    app()
