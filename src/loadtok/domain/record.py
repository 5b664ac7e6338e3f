"""Composite record capability.

A record declares an ordered tuple of fields. Decoding runs each field's
capability against the shared stream in declaration order, then builds
the record from the decoded values. Positional and total-order only:
no named lookup, no reordering, no optional fields.

INVARIANT: A record consumes exactly the sum of the tokens its fields
consume. A failure in any field aborts the decode and no record is built.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from loadtok.domain.capability import Decodable, describe
from loadtok.domain.stream import TokenStream


@dataclass(frozen=True)
class Field:
    """One declared field of a record: attribute name and its capability."""

    name: str
    capability: Decodable[Any]


class RecordDecoder[T]:
    """Capability for a record type built by *factory* from its fields.

    *factory* is called with one keyword argument per field, so any
    dataclass, NamedTuple, or pydantic model whose attribute names match
    the field names works as-is. Encoding reads the same attributes back.
    """

    def __init__(
        self,
        factory: Callable[..., T],
        fields: tuple[Field, ...],
        *,
        name: str | None = None,
    ) -> None:
        seen: set[str] = set()
        for f in fields:
            if f.name in seen:
                msg = f"Duplicate field {f.name!r} in record {name or factory!r}"
                raise ValueError(msg)
            seen.add(f.name)
        self.factory = factory
        self.fields = fields
        self.name = name or getattr(factory, "__name__", "record")

    def decode(self, stream: TokenStream) -> T:
        values = {f.name: f.capability.decode(stream) for f in self.fields}
        return self.factory(**values)

    def encode(self, value: T) -> list[str]:
        tokens: list[str] = []
        for f in self.fields:
            tokens.extend(f.capability.encode(getattr(value, f.name)))
        return tokens

    def __repr__(self) -> str:
        inner = ", ".join(f"{f.name}={describe(f.capability)}" for f in self.fields)
        return f"record({self.name}, {inner})"


def record[T](factory: Callable[..., T], /, **fields: Decodable[Any]) -> RecordDecoder[T]:
    """Declare a record capability; keyword order is the decode order.

    Example::

        EMPLOYEE = record(Employee, name=TEXT, age=INT)
    """
    return RecordDecoder(
        factory,
        tuple(Field(field_name, cap) for field_name, cap in fields.items()),
    )
