"""selectorkit CLI entry point: Click group with subcommands."""

import dataclasses
import logging

import click

from selectorkit import __version__
from selectorkit.config import LOG_LEVELS, SelectorKitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: $SELECTORKIT_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """selectorkit - build, check and combine CSS-like selectors."""
    try:
        config = SelectorKitConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc
    if log_level:
        config = dataclasses.replace(config, log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.check import check  # noqa: E402
from selectorkit.cli.combine import combine  # noqa: E402

cli.add_command(build)
cli.add_command(check)
cli.add_command(combine)
