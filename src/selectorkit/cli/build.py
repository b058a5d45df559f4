"""CLI command: selectorkit build -- assemble a selector from KIND=VALUE parts."""

from __future__ import annotations

import sys

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.errors import SelectorError
from selectorkit.model.fragment import Fragment, FragmentKind
from selectorkit.model.selector import SimpleSelector
from selectorkit.serialization import to_json


def _parse_part(part: str) -> Fragment:
    kind, sep, value = part.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KIND=VALUE, got {part!r}", param_hint="PARTS")
    try:
        return Fragment(FragmentKind(kind.strip().lower().replace("-", "_")), value)
    except ValueError:
        choices = ", ".join(k.value for k in FragmentKind)
        raise click.BadParameter(
            f"unknown kind {kind!r} (choose from {choices})", param_hint="PARTS"
        ) from None


@click.command()
@click.argument("parts", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the JSON form instead")
@click.pass_obj
def build(config: SelectorKitConfig, parts: tuple[str, ...], as_json: bool) -> None:
    """Build a selector from ordered KIND=VALUE parts.

    Example: selectorkit build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    fragments = [_parse_part(p) for p in parts]

    selector = SimpleSelector()
    try:
        for fragment in fragments:
            selector.append(fragment)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(to_json(selector, indent=config.json_indent))
    else:
        click.echo(selector.render())
