"""Click base classes that answer ``--examples`` from the shared example table.

Every SampleCommand and SampleGroup carries an eager ``--examples`` flag. The
examples are looked up by command path in
:data:`samplelib.commands._examples.EXAMPLES` when the flag is used, so a
command never has to know where it is mounted.
"""

from __future__ import annotations

from typing import Any

import click

from samplelib.commands._examples import EXAMPLES, PROG_NAME


def command_key(ctx: click.Context) -> str:
    """Command path below the root group, e.g. ``"calc add"``."""
    names: list[str] = []
    while ctx.parent is not None:
        names.append(ctx.info_name or "")
        ctx = ctx.parent
    return " ".join(reversed(names))


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    key = command_key(ctx)
    examples = EXAMPLES.get(key, ())
    if not examples:
        click.echo(f"No examples for '{ctx.command_path}'.")
        ctx.exit(0)
    formatter = ctx.make_formatter()
    with formatter.section("Examples"):
        formatter.write_dl([(f"{PROG_NAME} {argv}", summary) for argv, summary in examples])
    click.echo(formatter.getvalue().rstrip("\n"))
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show_examples,
        help="Show usage examples and exit.",
    )


class SampleCommand(click.Command):
    """Command with an ``--examples`` flag."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.params.append(_examples_option())


class SampleGroup(click.Group):
    """Group with an ``--examples`` flag whose subcommands are SampleCommands."""

    command_class = SampleCommand

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.params.append(_examples_option())
