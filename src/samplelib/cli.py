"""Command-line entry point: ``samplelib [global flags] <command> [args]``.

Global flags become :class:`LibSettings` overrides; each subcommand then
reaches the services through the :class:`AppContext` stored on ``ctx.obj``.
"""

from __future__ import annotations

import click

from samplelib import __version__
from samplelib.commands import register_commands
from samplelib.commands._base import SampleGroup
from samplelib.commands._context import AppContext
from samplelib.commands._examples import PROG_NAME
from samplelib.config.settings import LibSettings

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=SampleGroup, context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__version__, "-V", "--version", prog_name=PROG_NAME)
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON documents.")
@click.option("-q", "--quiet", is_flag=True, help="Print bare values (or the error code) only.")
@click.option("-v", "--verbose", is_flag=True, help="Show service debug events on stderr.")
@click.option("--log-json", is_flag=True, help="Emit log events as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Read settings from this file instead of searching for samplelib.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Calculator and text utilities on top of the samplelib services.

    Results go to stdout. Failures go to stderr with exit status 1.
    """
    ctx.obj = AppContext(LibSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
