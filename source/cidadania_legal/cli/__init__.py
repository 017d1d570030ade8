"""This module initializes the CLI application."""

import click
from cidadania_legal.cli.catalog import catalog_group
from cidadania_legal.cli.web import web_group
from cidadania_legal.providers.logging import LoggingProvider


class Context:
    """A context object to pass global options to subcommands."""

    def __init__(self, output_format: str, log_level: str | None = None):
        """Initializes the context.

        Args:
            output_format: The desired output format (e.g., 'text', 'json').
            log_level: The log level override given on the command line, if any.
        """
        self.output_format = output_format
        self.log_level = log_level


def create_cli() -> click.Group:
    """Create and configure the main CLI group with all subcommands.

    Returns:
        The main Click command group for the application.
    """

    @click.group()
    @click.option(
        "--log-level",
        type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
        help="Override the default log level for this command.",
    )
    @click.option(
        "--output",
        type=click.Choice(["text", "json"], case_sensitive=False),
        default="text",
        help="Set the output format.",
    )
    @click.pass_context
    def cli(ctx: click.Context, log_level: str | None, output: str) -> None:
        """A command-line interface for Cidadania Legal.

        Serves the web application and lets the static legal content be
        browsed and searched from the terminal.

        Args:
            ctx: The Click context object.
            log_level: The desired logging level.
            output: The desired output format.
        """
        LoggingProvider().get_logger(level_override=log_level)
        ctx.obj = Context(output_format=output.lower(), log_level=log_level)

    cli.add_command(web_group)
    cli.add_command(catalog_group)

    return cli
