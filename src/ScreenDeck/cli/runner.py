"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation, resource cleanup and
error handling for command execution.
"""

from __future__ import annotations

import json

import click

from ScreenDeck.cli.commands import DashboardCommand, OpenCommand, format_command
from ScreenDeck.config import AppConfig
from ScreenDeck.core.models import NavigationIntent
from ScreenDeck.services import create_api_client, create_dashboard
from ScreenDeck.utils.log import configure_logging, log


def print_intent(intent: NavigationIntent) -> None:
    """Navigation sink for the CLI: print the intent as JSON."""
    click.echo(json.dumps(intent.to_dict(), ensure_ascii=False, default=str))


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_dashboard(self, action: str, *, saved_page: int, public_page: int, output_format: str) -> None:
        """Print the dashboard.

        Raises:
            click.Abort: When the command fails.
        """
        self._configure_logging(action)
        client = create_api_client(self.config)
        try:
            if not self.config.session.authenticated:
                log.info("No user in %s; saved screens are hidden", self.config.session.user_env)
            dashboard = create_dashboard(client, user_id=self.config.session.user_id, navigate=print_intent)
            DashboardCommand(
                dashboard=dashboard,
                echo=click.echo,
                saved_page=saved_page,
                public_page=public_page,
                output_format=output_format,
            ).execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Dashboard failed: %s", e)
            raise click.Abort from e
        finally:
            client.close()

    def run_open(self, action: str, *, screen_id: str, load_results: bool, saved_page: int, public_page: int) -> None:
        """Emit the navigation intent for a screen.

        Raises:
            click.Abort: When the screen is not found or the command fails.
        """
        self._configure_logging(action)
        client = create_api_client(self.config)
        try:
            dashboard = create_dashboard(client, user_id=self.config.session.user_id, navigate=print_intent)
            found = OpenCommand(
                dashboard=dashboard,
                screen_id=screen_id,
                load_results=load_results,
                saved_page=saved_page,
                public_page=public_page,
            ).execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Open failed: %s", e)
            raise click.Abort from e
        finally:
            client.close()
        if not found:
            raise click.Abort

    def run_format(self, action: str, raw: str) -> None:
        self._configure_logging(action)
        format_command(raw, click.echo)
