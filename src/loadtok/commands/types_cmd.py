"""Command: list registered type names."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from loadtok.commands._base import LoadtokCommand

if TYPE_CHECKING:
    from loadtok.commands._context import AppContext


@click.command(
    "types",
    cls=LoadtokCommand,
    examples="""\
  loadtok types
  loadtok --json types""",
)
@click.pass_obj
def types_cmd(app: AppContext) -> None:
    """List type names usable in --as expressions."""
    from loadtok.services.decode import DecodeService

    app.emit(DecodeService(app.settings, app.registry).list_types())
