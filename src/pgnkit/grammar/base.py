"""Shared grammar-node protocol and cursor helpers.

Every grammar node works on the immutable input string plus an integer
offset. Nodes never copy the remaining input; they return the offset just
past what they consumed.
"""

from __future__ import annotations

from typing import Any, Protocol

from pgnkit.errors import UnexpectedEndOfInputError, UnexpectedInputError

_FOUND_PREVIEW = 20


class GrammarNode(Protocol):
    """Protocol implemented by all grammar nodes.

    Contract:
        * ``check_start`` reports whether the node can begin at *pos*. It must
          not consume anything and must not skip leading whitespace.
        * ``parse`` assumes ``check_start`` returned ``True``, and returns the
          node together with the offset just past it. It may skip whitespace
          inside the node but never trailing whitespace, unless the node is a
          sequence whose members are whitespace separated.
    """

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        """Return ``True`` if the node may start at *pos*."""
        ...

    @classmethod
    def parse(cls, text: str, pos: int, /) -> tuple[Any, int]:
        """Parse the node at *pos* and return ``(node, new_pos)``."""
        ...


def peek(text: str, pos: int) -> str:
    """Character at *pos*, or ``""`` at end of input."""
    return text[pos] if pos < len(text) else ""


def skip_whitespace(text: str, pos: int) -> int:
    end = len(text)
    while pos < end and text[pos].isspace():
        pos += 1
    return pos


def found_text(text: str, pos: int) -> str:
    """Short preview of the input at *pos* for error messages."""
    return text[pos : pos + _FOUND_PREVIEW]


def expect_char(text: str, pos: int, ch: str, context: str) -> int:
    """Consume the literal *ch* at *pos* or raise."""
    if pos >= len(text):
        raise UnexpectedEndOfInputError(context, pos)
    if text[pos] != ch:
        raise UnexpectedInputError(context, found_text(text, pos), pos)
    return pos + 1
