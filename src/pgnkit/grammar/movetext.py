"""Element sequences, recursive variations and the movetext section.

::

    <movetext-section>    ::= <element-sequence> <game-termination>
    <element-sequence>    ::= <element> <element-sequence>
                          ::= <recursive-variation> <element-sequence>
                          ::= <empty>
    <recursive-variation> ::= ( <element-sequence> )
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeAlias

from pgnkit.enums import GameTermination
from pgnkit.errors import (
    MissingTerminationError,
    NestingTooDeepError,
    UnexpectedEndOfInputError,
    UnexpectedInputError,
)
from pgnkit.grammar.base import expect_char, found_text, peek, skip_whitespace
from pgnkit.grammar.element import (
    Element,
    SanMoveElement,
    TerminationElement,
    check_element_start,
    parse_element,
)
from pgnkit.options import DEFAULT_OPTIONS, ParseOptions

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ElementSequence:
    """Ordered members of a (sub)line; order is move order."""

    members: tuple[SequenceMember, ...] = ()

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[SequenceMember]:
        return iter(self.members)

    def __getitem__(self, index: int) -> SequenceMember:
        return self.members[index]

    @property
    def moves(self) -> list[SanMoveElement]:
        """Move elements of this line, skipping variations."""
        return [m for m in self.members if isinstance(m, SanMoveElement)]

    @property
    def variations(self) -> list[RecursiveVariation]:
        return [m for m in self.members if isinstance(m, RecursiveVariation)]

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        return check_element_start(text, pos) or RecursiveVariation.check_start(text, pos)

    @classmethod
    def parse(
        cls, text: str, pos: int, options: ParseOptions = DEFAULT_OPTIONS
    ) -> tuple[ElementSequence, int]:
        """Parse members until none can start; trailing whitespace is consumed."""
        return _parse_members(text, pos, options, enclosed=False)


@dataclass(frozen=True, slots=True)
class RecursiveVariation:
    """Alternative line in parentheses."""

    sequence: ElementSequence = field(default_factory=ElementSequence)

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        return peek(text, pos) == "("

    @classmethod
    def parse(
        cls, text: str, pos: int, options: ParseOptions = DEFAULT_OPTIONS
    ) -> tuple[RecursiveVariation, int]:
        if options.max_variation_depth < 1:
            raise NestingTooDeepError(options.max_variation_depth, pos)
        pos = expect_char(text, pos, "(", "recursive variation")
        sequence, pos = _parse_members(text, skip_whitespace(text, pos), options, enclosed=True)
        return cls(sequence), pos


SequenceMember: TypeAlias = Element | RecursiveVariation


def _parse_members(
    text: str,
    pos: int,
    options: ParseOptions,
    *,
    enclosed: bool,
    stop_at_termination: bool = False,
) -> tuple[ElementSequence, int]:
    """Iterative element-sequence parser.

    Nested variations are handled with an explicit stack of open member
    lists, so nesting depth never touches the interpreter's recursion limit.
    When *enclosed*, the opening ``(`` was already consumed by the caller and
    parsing ends after its matching ``)``. With *stop_at_termination*, a
    termination marker outside any variation ends the sequence.
    """
    base_depth = 1 if enclosed else 0
    open_lines: list[list[SequenceMember]] = []
    members: list[SequenceMember] = []

    while True:
        ch = peek(text, pos)

        if ch == "(":
            depth = base_depth + len(open_lines) + 1
            if depth > options.max_variation_depth:
                raise NestingTooDeepError(options.max_variation_depth, pos)
            open_lines.append(members)
            members = []
            pos = skip_whitespace(text, pos + 1)
            continue

        if ch == ")" and (open_lines or enclosed):
            pos += 1
            if not open_lines:
                return ElementSequence(tuple(members)), pos
            variation = RecursiveVariation(ElementSequence(tuple(members)))
            members = open_lines.pop()
            members.append(variation)
            pos = skip_whitespace(text, pos)
            continue

        if check_element_start(text, pos):
            element, pos = parse_element(text, pos, options)
            members.append(element)
            pos = skip_whitespace(text, pos)
            if (
                stop_at_termination
                and not open_lines
                and isinstance(element, TerminationElement)
            ):
                return ElementSequence(tuple(members)), pos
            continue

        if open_lines or enclosed:
            if not ch:
                raise UnexpectedEndOfInputError("recursive variation", pos)
            raise UnexpectedInputError("recursive variation", found_text(text, pos), pos)
        return ElementSequence(tuple(members)), pos


@dataclass(frozen=True, slots=True)
class MovetextSection:
    """Element sequence plus the game termination popped off its end."""

    sequence: ElementSequence = field(default_factory=ElementSequence)
    termination: GameTermination = GameTermination.UNTERMINATED

    def __len__(self) -> int:
        return len(self.sequence)

    @property
    def moves(self) -> list[SanMoveElement]:
        return self.sequence.moves

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        return ElementSequence.check_start(text, pos)

    @classmethod
    def parse(
        cls, text: str, pos: int, options: ParseOptions = DEFAULT_OPTIONS
    ) -> tuple[MovetextSection, int]:
        """Parse a movetext section.

        The termination marker is only recognised as the last top-level
        member. Without one the game is unterminated, or, with
        ``options.strict_termination``, :class:`MissingTerminationError` is
        raised.
        """
        sequence, pos = _parse_members(
            text, pos, options, enclosed=False, stop_at_termination=True
        )
        members = sequence.members
        if members and isinstance(members[-1], TerminationElement):
            return cls(ElementSequence(members[:-1]), members[-1].termination), pos

        if options.strict_termination:
            raise MissingTerminationError(pos)
        _LOGGER.debug("Movetext section ends without a termination marker at %d", pos)
        return cls(sequence, GameTermination.UNTERMINATED), pos
