"""CLI command: selectorkit combine -- join two selectors with a combinator."""

from __future__ import annotations

import sys

import click

from selectorkit.builder import builder
from selectorkit.config import SelectorKitConfig
from selectorkit.errors import SelectorError
from selectorkit.parser import parse_selector
from selectorkit.serialization import to_json


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
@click.option("--json", "as_json", is_flag=True, help="Print the JSON form instead")
@click.pass_obj
def combine(
    config: SelectorKitConfig, left: str, combinator: str, right: str, as_json: bool
) -> None:
    """Combine LEFT and RIGHT with COMBINATOR (stored verbatim)."""
    try:
        selector = builder.combine(parse_selector(left), combinator, parse_selector(right))
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(to_json(selector, indent=config.json_indent))
    else:
        click.echo(selector.render())
