"""Single-pass cursor over delimiter-separated tokens.

INVARIANT: The cursor never moves backward. There is no peek, rewind,
or random access, so every decoder consumes exactly what it declares.
"""

from __future__ import annotations

from collections.abc import Iterable

from loadtok.domain.errors import EndOfStream

DELIMITER = "/"


def tokenize(text: str, delimiter: str = DELIMITER) -> list[str]:
    """Split *text* on *delimiter*.

    The empty string yields no tokens at all rather than one empty token.

    Examples:
        >>> tokenize("3/apple/banana")
        ['3', 'apple', 'banana']
        >>> tokenize("")
        []
        >>> tokenize("a//b")
        ['a', '', 'b']
    """
    if not delimiter:
        msg = "Delimiter must not be empty"
        raise ValueError(msg)
    if text == "":
        return []
    return text.split(delimiter)


class TokenStream:
    """Ordered, finite token sequence with a forward-only cursor.

    A stream is owned by the decode call that created it and is never
    shared between concurrent decoders.
    """

    __slots__ = ("_tokens", "_cursor")

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: tuple[str, ...] = tuple(tokens)
        self._cursor = 0

    @classmethod
    def from_string(cls, text: str, delimiter: str = DELIMITER) -> TokenStream:
        """Build a stream by splitting *text* on *delimiter*."""
        return cls(tokenize(text, delimiter))

    def next(self) -> str:
        """Return the next token and advance the cursor by one.

        Raises:
            EndOfStream: If every token has already been read.
        """
        if self._cursor >= len(self._tokens):
            raise EndOfStream(position=self._cursor)
        token = self._tokens[self._cursor]
        self._cursor += 1
        return token

    @property
    def position(self) -> int:
        """Number of tokens consumed so far."""
        return self._cursor

    @property
    def remaining(self) -> int:
        """Number of tokens not yet read."""
        return len(self._tokens) - self._cursor

    @property
    def exhausted(self) -> bool:
        return self._cursor >= len(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream(position={self._cursor}, total={len(self._tokens)})"
