"""Parse failures raised by the PGN grammar."""

from __future__ import annotations


class PgnError(ValueError):
    """Base class for every PGN parse failure.

    Args:
        context: Name of the grammar construct being parsed.
        message: Human-readable description.
        offset: Input offset where the failure was detected, if known.
    """

    def __init__(self, context: str, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.context = context
        self.offset = offset


class UnexpectedInputError(PgnError):
    """A required literal or character class was not found."""

    def __init__(self, context: str, found: str, offset: int | None = None) -> None:
        super().__init__(
            context, f"Unexpected input while parsing {context}: {found!r}", offset
        )
        self.found = found


class UnexpectedEndOfInputError(PgnError):
    """Input ended where more was required."""

    def __init__(self, context: str, offset: int | None = None) -> None:
        super().__init__(
            context, f"The input ended unexpectedly while parsing {context}", offset
        )


class NumericParseError(PgnError):
    """An integer literal was malformed or out of range."""

    def __init__(self, context: str, cause: str, offset: int | None = None) -> None:
        super().__init__(
            context, f"Bad number format while parsing {context}: {cause}", offset
        )
        self.cause = cause


class LengthViolationError(PgnError):
    """A string or symbol exceeded the 255-character cap."""

    def __init__(self, context: str, length: int, offset: int | None = None) -> None:
        super().__init__(
            context,
            f"Too long while parsing {context}: {length} characters (max 255)",
            offset,
        )
        self.length = length


class InvalidStringCharacterError(PgnError):
    """A string held a disallowed escape or a non-printable character."""

    def __init__(self, context: str, char: str, offset: int | None = None) -> None:
        super().__init__(
            context, f"Invalid character while parsing {context}: {char!r}", offset
        )
        self.char = char


class UnmatchedFollowSetError(PgnError):
    """The character after a tentative parse rules that parse out.

    Only raised inside the SAN grammar, where the caller always has an
    alternative production to fall back on.
    """

    def __init__(self, context: str, offset: int | None = None) -> None:
        super().__init__(context, f"Unmatched follow set while parsing {context}", offset)


class NestingTooDeepError(PgnError):
    """Recursive variations nest deeper than the configured limit."""

    def __init__(self, depth: int, offset: int | None = None) -> None:
        super().__init__(
            "recursive variation",
            f"Recursive variations nested deeper than {depth} levels",
            offset,
        )
        self.depth = depth


class MissingTerminationError(PgnError):
    """Strict mode: a movetext section has no game-termination marker."""

    def __init__(self, offset: int | None = None) -> None:
        super().__init__(
            "movetext section", "Movetext section has no game termination", offset
        )


class EmptyGameError(PgnError):
    """A game had neither tag pairs nor movetext."""

    def __init__(self, found: str = "", offset: int | None = None) -> None:
        message = "Empty PGN game"
        if found:
            message += f": unexpected {found!r}"
        super().__init__("PGN game", message, offset)
        self.found = found
