"""CLI entry point for seqtools."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from seqtools.parse import OUTPUT_FORMATS

log = logging.getLogger(__name__)

GREETING = "Hello, world!"

# Let negative integers through as values instead of unknown options
VALUE_COMMAND_SETTINGS = {"ignore_unknown_options": True}

project_root_option = click.option(
    "--project-root",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    default=".",
    help="Project root directory (default: cwd).",
)

format_option = click.option(
    "--format",
    "fmt",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: output.format from config).",
)


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """seqtools: order-preserving sequence helpers.

    Run without a command to print a greeting.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    if ctx.invoked_subcommand is None:
        click.echo(GREETING)


def _load(project_root: str) -> dict:
    from seqtools.config import ConfigError, load_config

    try:
        return load_config(Path(project_root))
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def _tokens(values: tuple[str, ...]) -> list[str]:
    """Positional values, or whitespace-separated stdin when none are given.

    Unknown options pass through as values so negative numbers work;
    anything dash-prefixed that isn't a number is a mistyped option.
    """
    if values:
        for token in values:
            if token.startswith("-") and not _is_number(token):
                raise click.UsageError(f"No such option: {token}")
        return list(values)

    stdin = click.get_text_stream("stdin")
    if stdin.isatty():
        raise click.UsageError("No values given. Pass them as arguments or pipe them on stdin.")
    return stdin.read().split()


def _ints(values: tuple[str, ...]) -> list[int]:
    from seqtools.parse import ParseError, parse_int_tokens

    try:
        return parse_int_tokens(_tokens(values))
    except ParseError as exc:
        raise click.UsageError(str(exc)) from exc


def _scalars(tokens: list[str]) -> list:
    from seqtools.parse import ParseError, parse_value_tokens

    try:
        return parse_value_tokens(tokens)
    except ParseError as exc:
        raise click.UsageError(str(exc)) from exc


def _emit(values: list, config: dict, fmt: str | None) -> None:
    from seqtools.parse import ParseError, format_values

    try:
        click.echo(format_values(values, fmt or config["output"]["format"]))
    except ParseError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@project_root_option
def init(project_root: str) -> None:
    """Write a default .seqtools/config.yaml."""
    from seqtools.config import CONFIG_TEMPLATE, config_path

    root = Path(project_root)
    path = config_path(root)

    if path.parent.exists():
        click.echo(f"{path.parent.name}/ already exists at {path.parent}")
        raise SystemExit(1)

    path.parent.mkdir(parents=True)
    path.write_text(CONFIG_TEMPLATE)
    click.echo(f"Created {path}")


@cli.command(context_settings=VALUE_COMMAND_SETTINGS)
@project_root_option
@format_option
@click.argument("values", nargs=-1)
def compact(project_root: str, fmt: str | None, values: tuple[str, ...]) -> None:
    """Remove zeros from a list of integers, keeping order."""
    from seqtools.arrays import compact as run_compact

    config = _load(project_root)
    ints = _ints(values)
    result = run_compact(ints)
    log.debug("compact: %d in, %d out", len(ints), len(result))
    _emit(result, config, fmt)


@cli.command(context_settings=VALUE_COMMAND_SETTINGS)
@project_root_option
@format_option
@click.option(
    "--size",
    type=click.IntRange(min=0),
    default=None,
    help="Number of leading elements to drop (default: drop.size from config).",
)
@click.argument("values", nargs=-1)
def drop(project_root: str, fmt: str | None, size: int | None, values: tuple[str, ...]) -> None:
    """Drop leading elements from a list of integers."""
    from seqtools.arrays import drop as run_drop

    config = _load(project_root)
    if size is None:
        size = config["drop"]["size"]
    ints = _ints(values)
    try:
        result = run_drop(ints, size)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    log.debug("drop: size=%d, %d in, %d out", size, len(ints), len(result))
    _emit(result, config, fmt)


@cli.command(context_settings=VALUE_COMMAND_SETTINGS)
@project_root_option
@format_option
@click.argument("values", nargs=-1)
def uniq(project_root: str, fmt: str | None, values: tuple[str, ...]) -> None:
    """Remove duplicate values, keeping first occurrences.

    Values are read as JSON scalars, so 1 and true stay distinct.
    """
    from seqtools.arrays import uniq as run_uniq

    config = _load(project_root)
    items = _scalars(_tokens(values))
    result = run_uniq(items)
    log.debug("uniq: %d in, %d out", len(items), len(result))
    _emit(result, config, fmt)


@cli.command(context_settings=VALUE_COMMAND_SETTINGS)
@project_root_option
@format_option
@click.option(
    "--exclude",
    "-x",
    "excluded",
    multiple=True,
    help="Value to remove (repeatable).",
)
@click.argument("values", nargs=-1)
def without(
    project_root: str,
    fmt: str | None,
    excluded: tuple[str, ...],
    values: tuple[str, ...],
) -> None:
    """Remove every occurrence of the --exclude values."""
    from seqtools.arrays import without as run_without

    config = _load(project_root)
    items = _scalars(_tokens(values))
    banned = _scalars(list(excluded))
    result = run_without(items, *banned)
    log.debug("without: excluded=%r, %d in, %d out", banned, len(items), len(result))
    _emit(result, config, fmt)
