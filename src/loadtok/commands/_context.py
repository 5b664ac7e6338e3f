"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy registry construction (built-ins,
sample types, plugins) and centralized result emission.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from loadtok.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from loadtok.config.settings import LoadtokSettings
    from loadtok.domain.registry import CapabilityRegistry
    from loadtok.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry is built on first use so ``--help`` and ``--version``
    never trigger plugin discovery.
    """

    def __init__(self, settings: LoadtokSettings) -> None:
        self.settings = settings
        self._registry: CapabilityRegistry | None = None

        from loadtok.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> CapabilityRegistry:
        """Capability registry (created lazily on first access)."""
        if self._registry is None:
            from loadtok.domain.registry import default_registry

            registry = default_registry()
            if self.settings.plugins.enabled:
                from loadtok.plugins.manager import PluginManager

                pm = PluginManager()
                loaded = pm.discover_and_load(local_dir=self.settings.plugin_dir)
                added = pm.register_capabilities(registry)
                logger.debug("Loaded %d plugin(s), %d capability(ies)", len(loaded), len(added))
            self._registry = registry
        return self._registry

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
