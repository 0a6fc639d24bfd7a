"""Typer CLI entrypoint for gem_lookup."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from . import help as help_text
from .config import ConfigRepository, LookupConfig
from .errors import EmptyInputError
from .logging_conf import configure_logging
from .orchestrator import Engine
from .ui import ConsoleRenderer

app = typer.Typer(
    name=help_text.COMMAND,
    add_completion=False,
    rich_markup_mode=None,
)

console = Console()


def build_engine(config: LookupConfig) -> Engine:
    return Engine(config, renderer=ConsoleRenderer(console))


def _load_config(repository: ConfigRepository, config_path: Optional[Path]) -> LookupConfig:
    try:
        return repository.load_config(config_path)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"Invalid configuration: {exc}", style="red", markup=False)
        raise typer.Exit(code=2) from exc


def _help_callback(value: bool) -> None:
    if value:
        console.print(help_text.content(), markup=False, highlight=False, emoji=False, soft_wrap=True)
        raise typer.Exit()


def _version_callback(value: bool) -> None:
    if value:
        console.print(help_text.version(), markup=False, highlight=False, emoji=False, soft_wrap=True)
        raise typer.Exit()


@app.command(add_help_option=False, help=help_text.description())
def main(
    names: Optional[List[str]] = typer.Argument(
        None, help="Gem names to look up.", show_default=False
    ),
    json_output: bool = typer.Option(False, "-j", "--json", help="Display the raw JSON."),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Read settings from this YAML or JSON file."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging on stderr."),
    version: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Display version information.",
        callback=_version_callback,
        is_eager=True,
    ),
    show_help: bool = typer.Option(
        False,
        "-h",
        "--help",
        help="Display the help screen.",
        callback=_help_callback,
        is_eager=True,
    ),
) -> None:
    repository = ConfigRepository()
    configure_logging(verbose=verbose, log_dir=repository.locator.logs_dir)
    config = _load_config(repository, config_path)
    if json_output:
        config = config.model_copy(update={"output_format": "json"})

    with build_engine(config) as engine:
        try:
            engine.run(names or [])
        except EmptyInputError:
            console.print(
                "\n".join(["", help_text.usage(), "", help_text.options()]),
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
            raise typer.Exit(code=1)


def cli() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    cli()
