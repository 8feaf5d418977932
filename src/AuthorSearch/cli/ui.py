"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from AuthorSearch.cli.runner import CommandRunner
from AuthorSearch.config import DEFAULT_CONFIG_PATH, load_config


@click.group(help="AuthorSearch: autocomplete-style author name search.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.
    """
    load_dotenv()

    ctx.obj = load_config(config_path)


@cli.command("search")
@click.option("--query", default=None, help="Name query as typed by the user.")
@click.option("--autocomplete", default=None, help="Prefix-match the last word (true/false).")
@click.option("--limit", default=None, help="Results per page (max 50).")
@click.option("--skip", default=None, help="Offset for pagination (max 1000).")
@click.option("--pretty", is_flag=True, default=False, help="Indent the JSON output.")
@click.pass_context
def search_cmd(
    ctx: click.Context,
    query: str | None,
    autocomplete: str | None,
    limit: str | None,
    skip: str | None,
    pretty: bool,
) -> None:
    """Search authors by name and print the JSON result envelope.

    Options are forwarded as raw strings, the same way an HTTP layer would
    pass query parameters; omitted options use their defaults.
    """
    raw = {"query": query, "autocomplete": autocomplete, "limit": limit, "skip": skip}
    params = {key: value for key, value in raw.items() if value is not None}
    runner = CommandRunner(ctx.obj)
    runner.run_search(action=ctx.command.name, params=params, pretty=pretty)
