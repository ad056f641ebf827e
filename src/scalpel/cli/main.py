"""Scalpel CLI entry point."""

import sys
from pathlib import Path
from typing import Optional

import click

from scalpel import __version__
from scalpel.checks import CheckRegistry
from scalpel.core.config import Config, ConfigError, load_config, merge_cli_args
from scalpel.core.engine import AnalysisEngine, EngineError
from scalpel.core.types import AnalysisResult, Severity
from scalpel.output import get_formatter

DEFAULT_CONFIG = """\
# Scalpel configuration

checks:
  directives:
    enabled: true
    # severity_threshold: error  # Hide UnmatchedDisable/UnmatchedEnable warnings

settings:
  output_format: text
  fail_on: error  # error, warning or none
  max_fix_passes: 10

ignore:
  paths:
    - "**/vendor/**"
  # rules:
  #   - UnmatchedEnable:legacy/*
"""


@click.group()
@click.version_option(version=__version__, prog_name="scalpel")
def cli() -> None:
    """Scalpel - Keep lint suppressions surgical.

    Validates lint:ignore / lint:disable / lint:enable directives in
    source comments, and rewrites legacy markers and mangled notes.
    """
    pass


@cli.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True))
@click.option(
    "-o",
    "--output",
    "output_format",
    type=click.Choice(["text", "json", "sarif"]),
    default=None,
    help="Output format (default: text).",
)
@click.option(
    "-f",
    "--output-file",
    type=click.Path(),
    default=None,
    help="Write output to file (default: stdout).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Config file path (default: .scalpel.yaml).",
)
@click.option(
    "--fail-on",
    type=click.Choice(["error", "warning"]),
    default=None,
    help="Exit non-zero if diagnostics at this severity or above.",
)
@click.option(
    "--no-fixes",
    is_flag=True,
    default=False,
    help="Omit proposed fixes from output.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress progress output.")
def check(
    paths: tuple[str, ...],
    output_format: Optional[str],
    output_file: Optional[str],
    config_path: Optional[str],
    fail_on: Optional[str],
    no_fixes: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Check suppression directives in PATHS (default: current directory)."""
    try:
        config = _load(config_path, output_format, fail_on)
        engine = AnalysisEngine(config, verbose=verbose, quiet=quiet)
        result = engine.analyze(list(paths) or ["."])

        formatter = get_formatter(config.output_format)
        if output_file:
            formatter.write(result, output_file, include_fixes=not no_fixes)
            if not quiet:
                click.echo(f"Output written to {output_file}", err=True)
        else:
            click.echo(formatter.format(result, include_fixes=not no_fixes))

        sys.exit(_exit_code(result, config))

    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)
    except EngineError as e:
        click.echo(f"Analysis error: {e}", err=True)
        sys.exit(3)


@cli.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Config file path (default: .scalpel.yaml).",
)
@click.option(
    "--fail-on",
    type=click.Choice(["error", "warning"]),
    default=None,
    help="Exit non-zero if diagnostics remain at this severity or above.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress progress output.")
def fix(
    paths: tuple[str, ...],
    config_path: Optional[str],
    fail_on: Optional[str],
    verbose: bool,
    quiet: bool,
) -> None:
    """Rewrite fixable directives in PATHS in place."""
    try:
        config = _load(config_path, "text", fail_on)
        engine = AnalysisEngine(config, verbose=verbose, quiet=quiet)
        result = engine.fix(list(paths) or ["."])

        click.echo(get_formatter("text").format(result))

        sys.exit(_exit_code(result, config))

    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)
    except EngineError as e:
        click.echo(f"Analysis error: {e}", err=True)
        sys.exit(3)


@cli.command("checks")
def list_checks() -> None:
    """List available checks."""
    click.echo("Available checks:\n")
    for check_class in CheckRegistry.all():
        instance = check_class()
        click.echo(f"  {instance.name}")
        click.echo(f"    {instance.description}\n")


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite existing config file.",
)
def init(force: bool) -> None:
    """Create .scalpel.yaml config file."""
    config_path = Path(".scalpel.yaml")

    if config_path.exists() and not force:
        click.echo("Config file already exists. Use --force to overwrite.", err=True)
        sys.exit(2)

    config_path.write_text(DEFAULT_CONFIG)
    click.echo(f"Created {config_path}")


def _load(
    config_path: Optional[str], output_format: Optional[str], fail_on: Optional[str]
) -> Config:
    config = load_config(config_path)
    return merge_cli_args(
        config,
        output_format=output_format,
        fail_on=Severity(fail_on) if fail_on else None,
    )


def _exit_code(result: AnalysisResult, config: Config) -> int:
    """Findings at fail_on win over per-file errors."""
    if config.fail_on is not None:
        if any(d.severity >= config.fail_on for d in result.diagnostics):
            return 1
    if result.errors:
        return 3
    return 0


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
