"""Movetext elements and the move-number / termination ambiguity.

The PGN element grammar is not LL(1): a move number (``1``, ``42...``) and
a game termination (``1-0``, ``0-1``, ``1/2-1/2``) can both begin with
``0`` or ``1``. Game termination is therefore parsed as just another
element, and the movetext section pops it off the end of the sequence.

Transformed grammar::

    <element>        ::= <integer> <element-suffix>
                     ::= '*'                         -- unterminated
                     ::= <SAN-move>
                     ::= <numeric-annotation-glyph>
    <element-suffix> ::= '.'*                        -- move number
                     ::= '-' <integer>               -- 1-0 or 0-1, validated
                     ::= "/2-1/2"                    -- tie

A ``-`` suffix that does not validate (``2-0``, ``1-1``, ``0-0-0``) is not
an error: the whole token is read again as a symbol and handed to the SAN
grammar.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias

from pgnkit.enums import GameTermination
from pgnkit.errors import PgnError, UnexpectedEndOfInputError, UnexpectedInputError
from pgnkit.grammar.base import found_text, peek, skip_whitespace
from pgnkit.grammar.san import SanMove, parse_san
from pgnkit.grammar.tokens import (
    NumericAnnotationGlyph,
    Symbol,
    is_digit,
    is_symbol_continuation,
    is_symbol_start,
    parse_integer,
    scan_digits,
)
from pgnkit.options import DEFAULT_OPTIONS, ParseOptions

_LOGGER = logging.getLogger(__name__)

_TIE_SUFFIX = "/2-1/2"


@dataclass(frozen=True, slots=True)
class MoveNumberIndication:
    """Integer followed by zero or more periods, e.g. ``12.`` or ``12...``."""

    number: int

    def __str__(self) -> str:
        return f"{self.number}."


@dataclass(frozen=True, slots=True)
class SanMoveElement:
    """A move symbol, with its SAN reading when it has one.

    ``move`` is ``None`` when the symbol is not valid SAN, e.g. ``2-0``.
    """

    symbol: str
    move: SanMove | None = None

    def __str__(self) -> str:
        return self.symbol

    @property
    def is_valid(self) -> bool:
        return self.move is not None


@dataclass(frozen=True, slots=True)
class TerminationElement:
    """Game-termination marker found inside an element sequence."""

    termination: GameTermination

    def __str__(self) -> str:
        return self.termination.token


Element: TypeAlias = (
    MoveNumberIndication | SanMoveElement | NumericAnnotationGlyph | TerminationElement
)


# ── Integer suffixes ─────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class _MoveNumberSuffix:
    pass


@dataclass(frozen=True, slots=True)
class _TerminationSuffix:
    termination: GameTermination


@dataclass(frozen=True, slots=True)
class _RejectedTerminationSuffix:
    # Digits after the '-', kept for the debug log.
    digits: str


_ElementSuffix: TypeAlias = _MoveNumberSuffix | _TerminationSuffix | _RejectedTerminationSuffix


def _parse_element_suffix(text: str, pos: int, number: str) -> tuple[_ElementSuffix, int]:
    """Classify what follows the leading integer *number* at *pos*."""
    if text.startswith(_TIE_SUFFIX, pos):
        # A tie whatever the leading integer is.
        return _TerminationSuffix(GameTermination.TIE), pos + len(_TIE_SUFFIX)

    if peek(text, pos) == "-":
        end = scan_digits(text, pos + 1)
        digits = text[pos + 1 : end]
        if is_symbol_continuation(peek(text, end)):
            return _RejectedTerminationSuffix(digits), pos
        # Only "1-0" and "0-1" validate; anything else maps to UNTERMINATED.
        termination = GameTermination.from_token(f"{number}-{digits}")
        if termination == GameTermination.UNTERMINATED:
            return _RejectedTerminationSuffix(digits), pos
        return _TerminationSuffix(termination), end

    # Periods may be separated from the number by whitespace: "31 ."
    end = skip_whitespace(text, pos)
    if peek(text, end) != ".":
        return _MoveNumberSuffix(), pos
    while peek(text, end) == ".":
        end += 1
    return _MoveNumberSuffix(), end


# ── Elements ─────────────────────────────────────────────────────────────────


def check_element_start(text: str, pos: int) -> bool:
    ch = peek(text, pos)
    return (
        is_symbol_start(ch)
        or ch == "*"
        or NumericAnnotationGlyph.check_start(text, pos)
    )


def _san_move_element(
    text: str, pos: int, options: ParseOptions
) -> tuple[SanMoveElement, int]:
    symbol, end = Symbol.parse(text, pos)
    try:
        move: SanMove | None = parse_san(symbol.value)
    except PgnError as exc:
        if options.strict_san:
            if exc.offset is not None:
                exc.offset += pos
            raise
        _LOGGER.debug("Keeping %r as a raw symbol: %s", symbol.value, exc)
        move = None
    return SanMoveElement(symbol.value, move), end


def parse_element(
    text: str, pos: int, options: ParseOptions = DEFAULT_OPTIONS
) -> tuple[Element, int]:
    """Parse one element at *pos*.

    Returns a :class:`TerminationElement` for termination markers; deciding
    whether a marker really ends the game is the movetext section's job.
    """
    ch = peek(text, pos)
    if not ch:
        raise UnexpectedEndOfInputError("element", pos)

    if is_digit(ch):
        end = scan_digits(text, pos)
        suffix, suffix_end = _parse_element_suffix(text, end, text[pos:end])
        if isinstance(suffix, _MoveNumberSuffix):
            number, _ = parse_integer(text, pos, "move number indicator")
            return MoveNumberIndication(number), suffix_end
        if isinstance(suffix, _TerminationSuffix):
            return TerminationElement(suffix.termination), suffix_end
        _LOGGER.debug(
            "Rejected game termination %s-%s, reading it as a symbol",
            text[pos:end],
            suffix.digits,
        )
        return _san_move_element(text, pos, options)

    if ch == "*":
        return TerminationElement(GameTermination.UNTERMINATED), pos + 1

    if NumericAnnotationGlyph.check_start(text, pos):
        return NumericAnnotationGlyph.parse(text, pos)

    if is_symbol_start(ch):
        return _san_move_element(text, pos, options)

    raise UnexpectedInputError("element", found_text(text, pos), pos)
