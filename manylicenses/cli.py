"""CLI entry point for manylicenses."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.logging import RichHandler

from manylicenses import __version__
from manylicenses.config import load_config
from manylicenses.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_VIOLATIONS
from manylicenses.exceptions import ManyLicensesError
from manylicenses.inventory import read_inventory
from manylicenses.models.policy import Policy
from manylicenses.models.report import ReportOptions, ReportResult
from manylicenses.output.counts_json import CountsJsonFormatter
from manylicenses.output.report_csv import CsvFormatter
from manylicenses.output.terminal import TerminalFormatter
from manylicenses.reporter import run_check
from manylicenses.resolvers.node_modules import NodeModulesManifestResolver

# Console for errors, violations and log records (writes to stderr)
_error_console = Console(stderr=True)

_PACKAGE_LOGGER = "manylicenses"


def _configure_logging(verbose: bool) -> None:
    """Route package log records to the error console.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(
            RichHandler(console=_error_console, show_time=False, show_path=False)
        )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option(
    "--counts",
    "print_counts",
    is_flag=True,
    default=False,
    help="Print license counts as JSON when the check passes.",
)
@click.option(
    "--csv",
    "print_csv",
    is_flag=True,
    default=False,
    help="Print a CSV row for every non-excluded package.",
)
@click.option(
    "--approve",
    multiple=True,
    metavar="ID[,ID...]",
    help="Approved SPDX license identifiers (repeatable).",
)
@click.option(
    "--exclude",
    multiple=True,
    metavar="NAME[,NAME...]",
    help="Package names to skip (repeatable).",
)
@click.option(
    "--exclude-prefix",
    "--excludePrefix",
    "exclude_prefix",
    multiple=True,
    metavar="PFX[,PFX...]",
    help="Package name prefixes to skip (repeatable).",
)
@click.option(
    "--verify/--no-verify",
    default=True,
    help="Fail on packages whose license is not approved (default: verify).",
)
@click.option(
    "--input",
    "-i",
    "input_stream",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="Inventory file in newline-delimited JSON (default: stdin).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to YAML configuration file.",
)
@click.option(
    "--modules-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding installed package manifests (default: node_modules).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Log debug information to stderr.",
)
def main(
    print_counts: bool,
    print_csv: bool,
    approve: tuple[str, ...],
    exclude: tuple[str, ...],
    exclude_prefix: tuple[str, ...],
    verify: bool,
    input_stream: TextIO,
    config_path: Optional[str],
    modules_dir: Optional[str],
    verbose: bool,
) -> None:
    """Check a dependency license inventory against an approval policy.

    Reads newline-delimited JSON from stdin and uses the last record of
    type "table". Policy values from the command line are merged with
    .manylicenses.yaml and the "manylicenses" key of ./package.json.

    Exits 1 if any non-excluded package has an unapproved license.

    \b
    Examples:
        yarn licenses list --json | manylicenses --approve=MIT,ISC
        manylicenses --csv --no-verify < licenses.json > licenses.csv
        manylicenses --counts --exclude-prefix=@internal/ -i licenses.json
    """
    _configure_logging(verbose)
    terminal = TerminalFormatter(console=_error_console)

    try:
        config = load_config(config_path)
        policy = Policy.from_sources(
            approve=approve,
            exclude=exclude,
            exclude_prefix=exclude_prefix,
            verify=verify,
            config=config,
        )
        table = read_inventory(input_stream)

        options = ReportOptions(csv=print_csv, counts=print_counts)
        resolver = NodeModulesManifestResolver(modules_dir) if print_csv else None
        result = run_check(
            table,
            policy,
            options,
            resolver=resolver,
            on_violation=terminal.print_violation,
        )
    except ManyLicensesError as e:
        terminal.print_error(e)
        sys.exit(EXIT_ERROR)

    _display_result(result, options)

    if result.failure_message is not None:
        terminal.print_failure(result.failure_message)
        sys.exit(EXIT_VIOLATIONS)
    sys.exit(EXIT_SUCCESS)


def _display_result(result: ReportResult, options: ReportOptions) -> None:
    """Print CSV rows and, on success, license counts to stdout.

    Args:
        result: The run result.
        options: Output options.
    """
    if options.csv:
        click.echo(CsvFormatter().format_header())
        for row in result.csv_rows:
            click.echo(row)

    if options.counts and not result.has_violations:
        click.echo(CountsJsonFormatter().format_counts(result.counts))


if __name__ == "__main__":
    main()
