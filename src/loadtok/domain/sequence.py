"""Length-prefixed sequence capability.

Wire shape: ``n/e1/e2/.../en``. The count token comes first and there is
no end marker, so the count (not the input length) governs how many
elements are read.
"""

from __future__ import annotations

from typing import Any

from loadtok.domain.capability import Decodable, describe
from loadtok.domain.errors import InvalidLength
from loadtok.domain.scalars import INT
from loadtok.domain.stream import TokenStream


class SequenceDecoder[T]:
    """Capability for ``list[T]``, parameterized by the element capability."""

    def __init__(self, element: Decodable[T]) -> None:
        self.element = element
        self.name = f"list[{describe(element)}]"

    def decode(self, stream: TokenStream) -> list[T]:
        position = stream.position
        count = INT.decode(stream)
        if count < 0:
            raise InvalidLength(count, position=position)
        items: list[T] = []
        for _ in range(count):
            items.append(self.element.decode(stream))
        return items

    def encode(self, value: list[T]) -> list[str]:
        tokens = INT.encode(len(value))
        for item in value:
            tokens.extend(self.element.encode(item))
        return tokens

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, SequenceDecoder) and other.element == self.element

    def __hash__(self) -> int:
        return hash((SequenceDecoder, self.element))

    def __repr__(self) -> str:
        return f"sequence_of({self.element!r})"


def sequence_of[T](element: Decodable[T]) -> SequenceDecoder[T]:
    """Compose a sequence capability around *element*."""
    return SequenceDecoder(element)
