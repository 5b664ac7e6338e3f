"""Name to capability table, plus type expression parsing.

Type expression grammar::

    expr := NAME | "list[" expr "]"

``list[list[Employee]]`` resolves to
``sequence_of(sequence_of(registry.get("Employee")))``.
"""

from __future__ import annotations

import re
from typing import Any

from loadtok.domain.capability import Decodable
from loadtok.domain.scalars import FLOAT, INT, TEXT
from loadtok.domain.sequence import sequence_of

_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")

BUILTIN_CAPABILITIES: dict[str, Decodable[Any]] = {
    "int": INT,
    "str": TEXT,
    "float": FLOAT,
}


class TypeExpressionError(ValueError):
    """A type expression could not be parsed."""


class CapabilityRegistry:
    """Maps type names to capabilities.

    Capabilities are immutable, so a registry can be shared freely once
    populated.
    """

    def __init__(self, *, builtins: bool = True) -> None:
        self._capabilities: dict[str, Decodable[Any]] = {}
        if builtins:
            self._capabilities.update(BUILTIN_CAPABILITIES)

    def register(self, name: str, capability: Decodable[Any]) -> None:
        """Register *capability* under *name*.

        Raises:
            ValueError: If *name* is not an identifier, is a built-in, or is
                already bound to a different capability.
            TypeError: If *capability* does not implement ``Decodable``.
        """
        normalized = name.strip()
        if not _NAME_RE.fullmatch(normalized) or normalized == "list":
            msg = f"Invalid type name {name!r}"
            raise ValueError(msg)
        if not isinstance(capability, Decodable):
            msg = f"Capability for {normalized!r} must implement decode() and encode()"
            raise TypeError(msg)
        if normalized in BUILTIN_CAPABILITIES:
            msg = f"Type name {normalized!r} conflicts with a built-in capability"
            raise ValueError(msg)
        existing = self._capabilities.get(normalized)
        if existing is not None and existing is not capability:
            msg = f"Type name {normalized!r} is already registered"
            raise ValueError(msg)
        self._capabilities[normalized] = capability

    def get(self, name: str) -> Decodable[Any]:
        """Look up a capability by exact name.

        Raises:
            KeyError: If nothing is registered under *name*.
        """
        try:
            return self._capabilities[name]
        except KeyError:
            msg = f"No capability registered for type {name!r}"
            raise KeyError(msg) from None

    def names(self) -> list[str]:
        return sorted(self._capabilities)

    def __contains__(self, name: object) -> bool:
        return name in self._capabilities

    def resolve(self, expr: str) -> Decodable[Any]:
        """Parse a type expression into a composed capability.

        Raises:
            TypeExpressionError: If *expr* is malformed.
            KeyError: If a name inside *expr* is not registered.
        """
        capability, rest = self._parse(expr.strip(), expr)
        if rest:
            msg = f"Unexpected trailing text {rest!r} in type expression {expr!r}"
            raise TypeExpressionError(msg)
        return capability

    def _parse(self, text: str, expr: str) -> tuple[Decodable[Any], str]:
        match = _NAME_RE.match(text)
        if match is None:
            msg = f"Expected a type name in {expr!r}"
            raise TypeExpressionError(msg)
        name = match.group(0)
        rest = text[match.end() :].lstrip()
        if name != "list":
            return self.get(name), rest
        if not rest.startswith("["):
            msg = f"'list' requires an element type, e.g. list[int], in {expr!r}"
            raise TypeExpressionError(msg)
        element, rest = self._parse(rest[1:].lstrip(), expr)
        if not rest.startswith("]"):
            msg = f"Missing ']' in type expression {expr!r}"
            raise TypeExpressionError(msg)
        return sequence_of(element), rest[1:].lstrip()


def default_registry() -> CapabilityRegistry:
    """Registry with the built-in scalars and the sample record types."""
    from loadtok.domain.samples import COMPANY, EMPLOYEE

    registry = CapabilityRegistry()
    registry.register("Employee", EMPLOYEE)
    registry.register("Company", COMPANY)
    return registry
