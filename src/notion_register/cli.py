"""CLI command for notion-register."""

import logging
import sys

import click

from notion_register.config import load_settings
from notion_register.errors import MissingConfigError, NotionRegisterError
from notion_register.logging_config import configure_logging
from notion_register.notion.client import NotionClient

logger = logging.getLogger(__name__)

USAGE = "Usage: notion-register <TITLE>"


class VerbatimCommand(click.Command):
    """Command that hands its arguments to the callback without option parsing.

    Titles such as ``--`` or ``--help`` must reach the callback unchanged.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.params["args"] = tuple(args)
        return []


def _printable(text: str) -> str:
    """Replace characters stdout cannot encode, such as lone surrogates from argv."""
    return text.encode("utf-8", errors="replace").decode("utf-8")


@click.command(cls=VerbatimCommand, add_help_option=False)
def cli(args: tuple[str, ...]):
    """Register TITLE as a new page in the configured Notion database."""
    configure_logging()

    try:
        settings = load_settings()
    except MissingConfigError as exc:
        logger.critical("Error: %s", exc)
        sys.exit(1)

    if not args:
        click.echo(USAGE)
        sys.exit(1)

    # Only the first argument is the title; the rest are ignored.
    title = args[0]

    with NotionClient(settings.notion_token) as client:
        try:
            client.register_record(settings.notion_db_id, title)
        except NotionRegisterError as exc:
            logger.error("Error registering record: %s", exc)
            click.echo(_printable(f"Error: {exc}"))
            sys.exit(1)

    click.echo(_printable(f"Successfully registered: {title}"))
