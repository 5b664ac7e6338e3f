"""Subcommand modules for loadtok.

Provides register_commands() which uses deferred imports to keep
``loadtok --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from loadtok.commands.decode import decode
    from loadtok.commands.demo import demo
    from loadtok.commands.types_cmd import types_cmd

    cli.add_command(decode)
    cli.add_command(demo)
    cli.add_command(types_cmd)
