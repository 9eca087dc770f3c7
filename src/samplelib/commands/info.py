"""Commands: library identity and readiness."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from samplelib.commands._base import SampleCommand
from samplelib.services.result import ok

if TYPE_CHECKING:
    from samplelib.commands._context import AppContext


@click.command(cls=SampleCommand)
@click.pass_obj
def info(app: AppContext) -> None:
    """Show the configured library name, version and description."""
    app.emit(ok(app.library.get_info()), op="info")


@click.command(cls=SampleCommand)
@click.pass_obj
def ready(app: AppContext) -> None:
    """Report whether the configuration is valid. Exits 1 when not ready."""
    is_ready = app.library.is_ready()
    app.emit(ok({"ready": is_ready}), op="ready")
    if not is_ready:
        raise SystemExit(1)
