"""Main CLI entry point for conduit-service commands."""

import click

from conduit_service.cli.commands import articles, server
from conduit_service.infra.logging.config import setup_logging


@click.group()
@click.version_option(version="1.0.0", prog_name="conduit-service")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Conduit Service CLI.

    \b
    Command Groups:
      server     Run the API server
      articles   Browse articles with cursor pagination

    \b
    Quick Start:
      conduit-service server run --no-reload
      conduit-service articles list --limit 5
    """
    ctx.ensure_object(dict)


cli.add_command(server.server)
cli.add_command(articles.articles)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
