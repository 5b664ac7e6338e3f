"""Decode error kinds.

Every decoder raises one of these immediately; nothing is recovered,
defaulted, or partially constructed. ``code`` is stable and surfaces in
``ServiceError.code`` at the service boundary.
"""

from __future__ import annotations

from typing import Any


class DecodeError(Exception):
    """Base class for all decode failures.

    Attributes:
        position: Stream cursor position at the moment of failure.
    """

    code: str = "DECODE_ERROR"

    def __init__(self, message: str, *, position: int) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    def detail(self) -> dict[str, Any]:
        """Structured context for error reporting."""
        return {"position": self.position}


class EndOfStream(DecodeError):
    """The stream ran out before a required token was read."""

    code = "END_OF_STREAM"

    def __init__(self, *, position: int) -> None:
        super().__init__(f"Unexpected end of input at token {position}", position=position)


class ParseError(DecodeError):
    """A token was present but could not be converted to the target scalar."""

    code = "PARSE_ERROR"

    def __init__(self, token: str, target: str, *, position: int) -> None:
        super().__init__(
            f"Cannot parse token {token!r} at position {position} as {target}",
            position=position,
        )
        self.token = token
        self.target = target

    def detail(self) -> dict[str, Any]:
        return {"position": self.position, "token": self.token, "target": self.target}


class InvalidLength(DecodeError):
    """A sequence declared a negative element count."""

    code = "INVALID_LENGTH"

    def __init__(self, count: int, *, position: int) -> None:
        super().__init__(
            f"Sequence length must be non-negative, got {count} at position {position}",
            position=position,
        )
        self.count = count

    def detail(self) -> dict[str, Any]:
        return {"position": self.position, "count": self.count}
