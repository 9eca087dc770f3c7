"""Subcommand modules for samplelib.

Provides register_commands() which uses deferred imports to keep
``samplelib --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from samplelib.commands.calc import calc
    from samplelib.commands.text import text

    cli.add_command(calc)
    cli.add_command(text)

    # --- Standalone commands ---
    from samplelib.commands.info import info, ready

    cli.add_command(info)
    cli.add_command(ready)
