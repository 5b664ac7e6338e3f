"""Scalar capabilities: integer, text, and float. Each consumes one token."""

from __future__ import annotations

import math
import re

from loadtok.domain.errors import ParseError
from loadtok.domain.stream import TokenStream

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class IntDecoder:
    """Base-10 signed integer."""

    name = "int"

    def decode(self, stream: TokenStream) -> int:
        position = stream.position
        token = stream.next()
        if not _INT_RE.fullmatch(token):
            raise ParseError(token, self.name, position=position)
        try:
            return int(token)
        except ValueError as exc:
            # Digit strings past sys.get_int_max_str_digits()
            raise ParseError(token, self.name, position=position) from exc

    def encode(self, value: int) -> list[str]:
        return [str(value)]

    def __repr__(self) -> str:
        return "INT"


class TextDecoder:
    """Literal token content. No escaping or unescaping."""

    name = "str"

    def decode(self, stream: TokenStream) -> str:
        return stream.next()

    def encode(self, value: str) -> list[str]:
        return [value]

    def __repr__(self) -> str:
        return "TEXT"


class FloatDecoder:
    """Finite decimal number such as ``1.5``, ``-2`` or ``3e4``.

    Tokens that overflow to infinity (``1e999``) are rejected, so every
    decoded value encodes back to a token this decoder accepts.
    """

    name = "float"

    def decode(self, stream: TokenStream) -> float:
        position = stream.position
        token = stream.next()
        if not _FLOAT_RE.fullmatch(token):
            raise ParseError(token, self.name, position=position)
        value = float(token)
        if not math.isfinite(value):
            raise ParseError(token, self.name, position=position)
        return value

    def encode(self, value: float) -> list[str]:
        return [repr(float(value))]

    def __repr__(self) -> str:
        return "FLOAT"


INT = IntDecoder()
TEXT = TextDecoder()
FLOAT = FloatDecoder()
