"""
shotit — CLI entrypoint.

Usage:
    python -m shotit.main -c tools.yaml
    python -m shotit.main -c tools.yaml --dry-run
    python -m shotit.main -c tools.yaml --list
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, cast

import click

from shotit import __version__
from shotit.core.observability.logging_config import setup_from_env

if TYPE_CHECKING:
    from shotit.core.models.config import Config

logger = logging.getLogger(__name__)

# Exit status for an unexpected internal fault (config errors exit 1).
EXIT_INTERNAL_ERROR = 2

# Under --json, child output goes here so stdout holds only the report.
STDERR_FD = 2


def parse_skip_names(value: str | None) -> list[str]:
    """Split a comma-separated name list, trimming blanks."""
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="shotit")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="YAML config file (required).",
)
@click.option(
    "--dry-run",
    "--dry",
    "-dry",
    "dry_run",
    is_flag=True,
    help="Show commands without executing.",
)
@click.option(
    "--list",
    "-list",
    "list_mode",
    is_flag=True,
    help="List all entries in the config with binary status.",
)
@click.option(
    "--bc",
    "-bc",
    "--binary-check",
    "binary_check",
    is_flag=True,
    help="Check binary availability for all tools.",
)
@click.option(
    "--skip",
    "-skip",
    "skip_available",
    is_flag=True,
    help="Skip installation for available binaries/paths.",
)
@click.option(
    "--st",
    "-st",
    "--skip-tools",
    "skip_tools",
    default=None,
    metavar="NAMES",
    help="Skip specific entries by name (comma-separated).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    dry_run: bool,
    list_mode: bool,
    binary_check: bool,
    skip_available: bool,
    skip_tools: str | None,
    as_json: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """shotit — set up a toolset from a declarative YAML file.

    \b
    Examples:
        shotit -c tools.yaml
        shotit -c tools.yaml --st ffuf,gau,"gf patterns"
        shotit -c tools.yaml --list
    """
    setup_from_env(debug=debug, verbose=verbose, quiet=quiet)

    if not config_path:
        click.echo(ctx.get_help())
        return

    path = Path(config_path)

    try:
        if list_mode:
            _list(path, as_json)
        elif binary_check:
            _binary_check(path, as_json)
        else:
            _run(path, dry_run, skip_available, parse_skip_names(skip_tools), as_json)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        click.secho(f"internal error: {e}", fg="red", err=True)
        click.echo("re-run with --debug for a traceback", err=True)
        sys.exit(EXIT_INTERNAL_ERROR)


def _config_error(error: str) -> None:
    click.secho("error loading config: ", fg="red", nl=False, err=True)
    click.echo(error, err=True)
    sys.exit(1)


# ── Execute ─────────────────────────────────────────────────────


def _run(
    path: Path,
    dry_run: bool,
    skip_available: bool,
    skip_names: list[str],
    as_json: bool,
) -> None:
    from shotit.adapters.shell.command import ShellRunner
    from shotit.core.engine.reporting import Reporter
    from shotit.core.use_cases.run import run_setup
    from shotit.ui.cli.console import ConsoleReporter

    result = run_setup(
        config_path=path,
        dry_run=dry_run,
        skip_available=skip_available,
        skip_names=skip_names,
        reporter=Reporter() if as_json else ConsoleReporter(),
        runner=ShellRunner(stdout=STDERR_FD if as_json else None),
    )

    if result.error:
        if as_json:
            click.echo(json.dumps(result.to_dict(), indent=2))
            sys.exit(1)
        _config_error(result.error)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))


# ── List ────────────────────────────────────────────────────────


def _list(path: Path, as_json: bool) -> None:
    from shotit.core.use_cases.inventory import check_inventory

    result = check_inventory(path)
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return
    if result.error:
        _config_error(result.error)

    config = cast("Config", result.config)

    click.secho("Config: ", fg="green", nl=False)
    click.echo(config.name)
    if config.description:
        click.secho("Description: ", fg="green", nl=False)
        click.echo(config.description)

    for title, entries in (
        ("Installs", result.installs),
        ("Tools", result.tools),
        ("Wordlists", result.wordlists),
    ):
        if not entries:
            continue
        click.echo()
        click.secho(f"{title}:", fg="green")
        for entry in entries:
            click.echo("  ", nl=False)
            click.secho(entry.name, fg="cyan", nl=False)
            if entry.description:
                click.echo(f" - {entry.description}", nl=False)
            if entry.signal is not None:
                click.echo(" [", nl=False)
                click.secho(entry.signal, fg="green" if entry.present else "red", nl=False)
                click.echo("]", nl=False)
            click.echo()
    click.echo()


# ── Binary check ────────────────────────────────────────────────


def _binary_check(path: Path, as_json: bool) -> None:
    from shotit.core.use_cases.inventory import check_inventory

    result = check_inventory(path)
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return
    if result.error:
        _config_error(result.error)

    config = cast("Config", result.config)

    click.secho("binary check: ", fg="green", nl=False)
    click.echo(config.name)
    click.echo()

    for title, entries, missing in (
        ("Tools", result.tools, "no binary specified"),
        ("Wordlists", result.wordlists, "no binary/path specified"),
    ):
        if not entries:
            continue
        click.secho(f"{title}:", fg="green")
        for entry in entries:
            click.echo("  ", nl=False)
            if entry.present is None:
                click.secho("- ", fg="yellow", nl=False)
                click.secho(entry.name, fg="cyan", nl=False)
                click.echo(f" ({missing})")
                continue
            if entry.present:
                click.secho("✓ ", fg="green", nl=False)
            else:
                click.secho("✗ ", fg="red", nl=False)
            click.secho(entry.signal or "", fg="cyan", nl=False)
            click.echo(f" ({entry.name})")
        click.echo()

    click.secho(f"{result.available} available", fg="green", nl=False)
    click.echo(", ", nl=False)
    click.secho(f"{result.unavailable} unavailable", fg="red")
    click.echo()


if __name__ == "__main__":
    cli()
