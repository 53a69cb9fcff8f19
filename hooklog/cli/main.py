"""Command line entry point for hooklog."""

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from hooklog._version import __version__
from hooklog.config.settings import ConfigurationError, Settings
from hooklog.core.logging import setup_logging
from hooklog.handlers.factory import build_hook_handler
from hooklog.hooks.implementations import PrintHook
from hooklog.levels import Level
from hooklog.logger import Logger


app = typer.Typer(
    name="hooklog",
    help="Leveled logging with hook dispatch.",
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"hooklog {__version__}")
        raise typer.Exit()


@app.callback()
def app_main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Leveled logging with hook dispatch."""
    # Reconfigured by commands once settings are loaded
    setup_logging("WARN")


def _load_settings(
    config: Path | None, log_format: str | None, no_time: bool
) -> Settings:
    logging_overrides: dict[str, object] = {}
    if log_format is not None:
        logging_overrides["format"] = log_format
    if no_time:
        logging_overrides["add_timestamp"] = False

    overrides = {"logging": logging_overrides} if logging_overrides else {}
    try:
        return Settings.from_config(config_path=config, **overrides)
    except ConfigurationError as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e


@app.command()
def demo(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file (TOML)",
        dir_okay=False,
    ),
    log_format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text, json or rich",
    ),
    no_time: bool = typer.Option(
        False,
        "--no-time",
        help="Omit timestamps from output lines",
    ),
) -> None:
    """
    Log three records through a hook handler with a print hook attached.

    The print hook fires for the levels in [bold]hooks.print_levels[/bold]
    (INFO and ERROR by default), so the WARN record is written without a
    HOOK FIRED line.
    """
    settings = _load_settings(config, log_format, no_time)
    setup_logging(
        settings.logging.diagnostics_level,
        json_logs=settings.logging.json_diagnostics,
    )

    handler = build_hook_handler(
        settings,
        stream=sys.stdout,
        hooks=[PrintHook(levels=settings.hooks.print_level_values())],
    )
    logger = Logger(handler)

    logger.info("hello world", user="alice")
    logger.warn("this should NOT fire the hook")
    logger.error("oh no")


@app.command()
def levels() -> None:
    """Show the standard severity levels."""
    table = Table(title="Severity levels")
    table.add_column("Name")
    table.add_column("Value", justify="right")
    for level in Level:
        table.add_row(level.name, str(int(level)))
    Console().print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
