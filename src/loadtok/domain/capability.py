"""Decodable capability contract and the two load entry points.

A capability is a stateless object bound to one target type. It knows how
many tokens a value of that type consumes and how to interpret them, and
(for round-tripping) how to produce those tokens again.

Two ways in:

- ``load("3/a/b/c", cap)`` splits a fresh string, then delegates.
- ``load(stream, cap)`` decodes from an already-open stream, so a parent
  and its children share one monotonic cursor.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from loadtok.domain.stream import DELIMITER, TokenStream


@runtime_checkable
class Decodable[T](Protocol):
    """Capability for decoding (and encoding) one value of type ``T``."""

    name: str

    def decode(self, stream: TokenStream) -> T:
        """Consume exactly the tokens one ``T`` requires and build it.

        The only permitted side effect is advancing *stream*.
        """
        ...

    def encode(self, value: T) -> list[str]:
        """Produce the tokens :meth:`decode` would consume for *value*."""
        ...


def load[T](
    source: str | TokenStream,
    capability: Decodable[T],
    *,
    delimiter: str = DELIMITER,
) -> T:
    """Decode one value of *capability*'s type from *source*.

    Args:
        source: Raw input string, or an open stream to continue reading.
        capability: Capability for the target type.
        delimiter: Token separator, only used when *source* is a string.

    Raises:
        DecodeError: On short or malformed input.
    """
    if isinstance(source, str):
        source = TokenStream.from_string(source, delimiter)
    return capability.decode(source)


def dump[T](value: T, capability: Decodable[T], *, delimiter: str = DELIMITER) -> str:
    """Encode *value* into a delimiter-joined token string.

    Raises:
        ValueError: If a token would contain the delimiter (no escaping
            scheme exists, so such a value cannot be represented).
    """
    tokens = capability.encode(value)
    for token in tokens:
        if delimiter in token:
            msg = f"Token {token!r} contains the delimiter {delimiter!r}"
            raise ValueError(msg)
    return delimiter.join(tokens)


def describe(capability: Any) -> str:
    """Human-readable type name of a capability (``list[Employee]``)."""
    return getattr(capability, "name", type(capability).__name__)
