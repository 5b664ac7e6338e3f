"""Command: run the built-in sample scenarios."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from loadtok.commands._base import LoadtokCommand

if TYPE_CHECKING:
    from loadtok.commands._context import AppContext


@click.command(
    cls=LoadtokCommand,
    examples="""\
  loadtok demo
  loadtok -q demo
  loadtok --json demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Decode the sample inputs and show the results."""
    from loadtok.services.decode import DecodeService

    app.emit(DecodeService(app.settings, app.registry).demo())
