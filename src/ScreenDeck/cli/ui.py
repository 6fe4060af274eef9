"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to the command runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from ScreenDeck.cli.runner import CommandRunner
from ScreenDeck.config import load_config

_page_option = click.IntRange(min=1)


@click.group(help="ScreenDeck: browse saved and public stock screens.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env before reading config, so the
    session user can be set there.
    """
    load_dotenv()
    ctx.obj = load_config(config_path)


@cli.command("dashboard")
@click.option("--saved-page", type=_page_option, default=1, show_default=True)
@click.option("--public-page", type=_page_option, default=1, show_default=True)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["console", "json"]),
    default="console",
    show_default=True,
)
@click.pass_context
def dashboard_cmd(ctx: click.Context, saved_page: int, public_page: int, output_format: str) -> None:
    """Show saved screens, sample strategies and public screens."""
    CommandRunner(ctx.obj).run_dashboard(
        ctx.command.name,
        saved_page=saved_page,
        public_page=public_page,
        output_format=output_format,
    )


@cli.command("format")
@click.argument("raw")
@click.pass_context
def format_cmd(ctx: click.Context, raw: str) -> None:
    """Print the display form of a raw query document."""
    CommandRunner(ctx.obj).run_format(ctx.command.name, raw)


@cli.command("open")
@click.argument("screen_id")
@click.option("--results/--edit", "load_results", default=True, show_default=True, help="Load results or only open the editor.")
@click.option("--saved-page", type=_page_option, default=1, show_default=True)
@click.option("--public-page", type=_page_option, default=1, show_default=True)
@click.pass_context
def open_cmd(ctx: click.Context, screen_id: str, load_results: bool, saved_page: int, public_page: int) -> None:
    """Print the editor navigation intent for a screen on the given pages."""
    CommandRunner(ctx.obj).run_open(
        ctx.command.name,
        screen_id=screen_id,
        load_results=load_results,
        saved_page=saved_page,
        public_page=public_page,
    )
