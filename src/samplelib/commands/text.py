"""Command group: text operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from samplelib.commands._base import SampleGroup
from samplelib.services.contracts import StringProcessOptions
from samplelib.services.result import ok

if TYPE_CHECKING:
    from samplelib.commands._context import AppContext


@click.group(cls=SampleGroup)
def text() -> None:
    """Text processing operations."""


@text.command()
@click.argument("value")
@click.option("--trim", is_flag=True, help="Strip surrounding whitespace.")
@click.option("--uppercase", is_flag=True, help="Convert to upper case.")
@click.option("--prefix", default=None, help="Text to prepend.")
@click.option("--suffix", default=None, help="Text to append.")
@click.pass_obj
def process(
    app: AppContext,
    value: str,
    trim: bool,
    uppercase: bool,
    prefix: str | None,
    suffix: str | None,
) -> None:
    """Transform VALUE with trim, uppercase, prefix and suffix (in that order)."""
    options = StringProcessOptions(trim=trim, uppercase=uppercase, prefix=prefix, suffix=suffix)
    app.emit(app.library.get_string_service().process(value, options), op="process")


@text.command()
@click.argument("value")
@click.pass_obj
def reverse(app: AppContext, value: str) -> None:
    """Reverse VALUE character by character."""
    app.emit(ok({"result": app.library.get_string_service().reverse(value)}), op="reverse")


@text.command()
@click.argument("value")
@click.pass_obj
def palindrome(app: AppContext, value: str) -> None:
    """Check whether VALUE reads the same backwards."""
    result = app.library.get_string_service().is_palindrome(value)
    app.emit(ok({"palindrome": result}), op="palindrome")


@text.command()
@click.argument("value")
@click.pass_obj
def words(app: AppContext, value: str) -> None:
    """Count whitespace-separated words in VALUE."""
    app.emit(ok({"count": app.library.get_string_service().count_words(value)}), op="words")


@text.command(context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.argument("max_length", type=int)
@click.option("--suffix", default="...", show_default=True, help="Marker for cut text.")
@click.pass_obj
def truncate(app: AppContext, value: str, max_length: int, suffix: str) -> None:
    """Shorten VALUE to at most MAX_LENGTH characters."""
    result = app.library.get_string_service().truncate(value, max_length, suffix)
    app.emit(ok({"result": result}), op="truncate")
