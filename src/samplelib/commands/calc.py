"""Command group: calculator operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from samplelib.commands._base import SampleGroup
from samplelib.services.result import ok

if TYPE_CHECKING:
    from samplelib.commands._context import AppContext

# Negative operands would otherwise be parsed as unknown options.
_NUMERIC_ARGS = {"ignore_unknown_options": True}


@click.group(cls=SampleGroup)
def calc() -> None:
    """Arithmetic operations."""


@calc.command(context_settings=_NUMERIC_ARGS)
@click.argument("a", type=float)
@click.argument("b", type=float)
@click.pass_obj
def add(app: AppContext, a: float, b: float) -> None:
    """Add B to A."""
    app.emit(app.library.get_calculator().add(a, b), op="add")


@calc.command(context_settings=_NUMERIC_ARGS)
@click.argument("a", type=float)
@click.argument("b", type=float)
@click.pass_obj
def subtract(app: AppContext, a: float, b: float) -> None:
    """Subtract B from A."""
    app.emit(app.library.get_calculator().subtract(a, b), op="subtract")


@calc.command(context_settings=_NUMERIC_ARGS)
@click.argument("a", type=float)
@click.argument("b", type=float)
@click.pass_obj
def multiply(app: AppContext, a: float, b: float) -> None:
    """Multiply A by B."""
    app.emit(app.library.get_calculator().multiply(a, b), op="multiply")


@calc.command(context_settings=_NUMERIC_ARGS)
@click.argument("a", type=float)
@click.argument("b", type=float)
@click.pass_obj
def divide(app: AppContext, a: float, b: float) -> None:
    """Divide A by B. Fails when B is zero."""
    app.emit(app.library.get_calculator().divide(a, b), op="divide")


@calc.command("abs", context_settings=_NUMERIC_ARGS)
@click.argument("value", type=float)
@click.pass_obj
def abs_cmd(app: AppContext, value: float) -> None:
    """Absolute value of VALUE."""
    app.emit(ok({"result": app.library.get_calculator().abs(value)}), op="abs")


@calc.command(context_settings=_NUMERIC_ARGS)
@click.argument("value", type=float)
@click.pass_obj
def sign(app: AppContext, value: float) -> None:
    """Classify VALUE as positive, negative or zero."""
    calculator = app.library.get_calculator()
    app.emit(
        ok(
            {
                "value": value,
                "positive": calculator.is_positive(value),
                "negative": calculator.is_negative(value),
                "zero": calculator.is_zero(value),
            }
        ),
        op="sign",
    )
