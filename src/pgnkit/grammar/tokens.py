"""Lexical primitives: symbols, strings, integers and NAGs."""

from __future__ import annotations

from dataclasses import dataclass

from pgnkit.errors import (
    InvalidStringCharacterError,
    LengthViolationError,
    NumericParseError,
    UnexpectedEndOfInputError,
    UnexpectedInputError,
)
from pgnkit.grammar.base import expect_char, found_text, peek

MAX_TOKEN_LENGTH = 255
# Signed 32-bit ceiling for integer tokens.
MAX_INTEGER = 2**31 - 1

_DIGITS = frozenset("0123456789")
_SYMBOL_PUNCTUATION = frozenset("_+#=:-")


def is_digit(ch: str) -> bool:
    return ch in _DIGITS


def is_symbol_start(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def is_symbol_continuation(ch: str) -> bool:
    return is_symbol_start(ch) or ch in _SYMBOL_PUNCTUATION


def scan_digits(text: str, pos: int) -> int:
    """Offset just past the run of ASCII digits starting at *pos*."""
    end = len(text)
    while pos < end and text[pos] in _DIGITS:
        pos += 1
    return pos


def scan_symbol(text: str, pos: int) -> int:
    """Offset just past the symbol continuation run starting at *pos*."""
    end = len(text)
    while pos < end and is_symbol_continuation(text[pos]):
        pos += 1
    return pos


def parse_integer(text: str, pos: int, context: str = "integer") -> tuple[int, int]:
    """Parse a decimal integer token.

    *context* names the construct in error messages, e.g.
    ``"move number indicator"``.
    """
    end = scan_digits(text, pos)
    digits = text[pos:end]
    if not digits:
        raise NumericParseError(context, "cannot parse integer from empty string", pos)
    value = int(digits)
    if value > MAX_INTEGER:
        raise NumericParseError(context, "number too large to fit in target type", pos)
    return value, end


@dataclass(frozen=True, slots=True)
class Symbol:
    """Symbol token: an alphanumeric start followed by symbol characters.

    Symbols are used for tag names and for move text. All characters are
    significant, and a symbol is limited to 255 characters.
    """

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        return is_symbol_start(peek(text, pos))

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[Symbol, int]:
        if pos >= len(text):
            raise UnexpectedEndOfInputError("symbol", pos)
        if not cls.check_start(text, pos):
            raise UnexpectedInputError("symbol", found_text(text, pos), pos)
        end = scan_symbol(text, pos + 1)
        if end - pos > MAX_TOKEN_LENGTH:
            raise LengthViolationError("symbol", end - pos, pos)
        return cls(text[pos:end]), end


@dataclass(frozen=True, slots=True)
class QuotedString:
    """String token delimited by double quotes.

    The body holds printable ASCII only. A quote is written as ``\\"`` and a
    backslash as ``\\\\``; no other escapes exist. At most 255 characters of
    data.
    """

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        return peek(text, pos) == '"'

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[QuotedString, int]:
        context = "quoted string"
        start = pos
        pos = expect_char(text, pos, '"', context)

        chars: list[str] = []
        end = len(text)
        while True:
            if pos >= end:
                raise UnexpectedEndOfInputError(context, pos)
            ch = text[pos]
            if ch == '"':
                pos += 1
                break
            if ch == "\\":
                if pos + 1 >= end:
                    raise UnexpectedEndOfInputError(context, pos + 1)
                escaped = text[pos + 1]
                if escaped not in ('"', "\\"):
                    raise InvalidStringCharacterError(context, "\\" + escaped, pos)
                chars.append(escaped)
                pos += 2
                continue
            if not (" " <= ch <= "~"):
                raise InvalidStringCharacterError(context, ch, pos)
            chars.append(ch)
            pos += 1

        if len(chars) > MAX_TOKEN_LENGTH:
            raise LengthViolationError(context, len(chars), start)
        return cls("".join(chars)), pos


@dataclass(frozen=True, slots=True)
class NumericAnnotationGlyph:
    """NAG: ``$`` followed by a non-negative integer, e.g. ``$14``."""

    value: int

    def __str__(self) -> str:
        return f"${self.value}"

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        return peek(text, pos) == "$"

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[NumericAnnotationGlyph, int]:
        context = "numeric annotation glyph"
        pos = expect_char(text, pos, "$", context)
        if not is_digit(peek(text, pos)):
            if pos >= len(text):
                raise UnexpectedEndOfInputError(context, pos)
            raise UnexpectedInputError(context, found_text(text, pos), pos)
        value, pos = parse_integer(text, pos, context)
        return cls(value), pos
