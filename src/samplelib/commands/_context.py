"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy LibraryService wiring and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from samplelib.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from samplelib.config.settings import LibSettings
    from samplelib.services.library import LibraryService
    from samplelib.services.result import Result


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The library service is built on first use so ``--help`` and
    ``--version`` never resolve configuration providers.
    """

    def __init__(self, settings: LibSettings) -> None:
        self.settings = settings
        self._library: LibraryService | None = None

        from samplelib.config.logging import configure_logging

        self.logger = configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def library(self) -> LibraryService:
        """The wired LibraryService (created lazily on first access)."""
        if self._library is None:
            from samplelib.infrastructure.config_provider import SettingsConfigProvider
            from samplelib.services.library import create_library_service

            self._library = create_library_service(
                SettingsConfigProvider(self.settings),
                self.logger,
            )
        return self._library

    def emit(self, result: Result[Any], *, op: str) -> None:
        """Format and output a Result with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, op=op, settings=settings)
        if result.success:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
