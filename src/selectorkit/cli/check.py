"""CLI command: selectorkit check -- parse and validate selector text."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import SelectorError
from selectorkit.parser import parse_selector


@click.command()
@click.argument("selector")
def check(selector: str) -> None:
    """Parse SELECTOR and verify its fragment order and uniqueness.

    Prints the re-rendered selector and exits with code 0 when it is valid,
    or prints the error and exits with code 1.
    """
    try:
        parsed = parse_selector(selector)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"OK: {parsed.render()}")
