"""Pluggy hook specifications for loadtok."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from loadtok.domain.capability import Decodable

hookspec = pluggy.HookspecMarker("loadtok")


class LoadtokHookSpec:
    """Hook specifications for the loadtok plugin system."""

    @hookspec
    def register_capabilities(self) -> dict[str, Decodable[Any]] | None:
        """Return type name -> capability mappings to add to the registry."""
