"""Command: decode one input string as a type expression."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from loadtok.commands._base import LoadtokCommand

if TYPE_CHECKING:
    from loadtok.commands._context import AppContext


@click.command(
    cls=LoadtokCommand,
    examples="""\
  loadtok decode 33 --as int
  loadtok decode 3/apple/banana/cherry --as 'list[str]'
  loadtok decode CatWorld/3/tama/5/mike/6/kuro/7 --as Company
  loadtok decode '2|1|2|0' --as 'list[list[int]]' --delimiter '|'
  loadtok --json decode taro/3 --as Employee""",
)
@click.argument("text")
@click.option(
    "--as",
    "type_expr",
    required=True,
    help="Target type expression, e.g. int, str, list[Employee].",
)
@click.option("--delimiter", default=None, help="Token separator (default from config: '/').")
@click.pass_obj
def decode(app: AppContext, text: str, type_expr: str, delimiter: str | None) -> None:
    """Decode TEXT into a typed value."""
    from loadtok.services.decode import DecodeService

    svc = DecodeService(app.settings, app.registry)
    app.emit(svc.decode(text, type_expr, delimiter=delimiter))
