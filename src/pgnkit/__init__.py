"""PGN parser with a complete movetext grammar.

Quick start::

    from pgnkit import parse_database

    db = parse_database(open("games.pgn", encoding="utf-8").read())
    for game in db:
        print(game.tags.get("White"), game.result.token, len(game.movetext.moves))
"""

from __future__ import annotations

from pgnkit.enums import CastleSide, CheckSuffix, DisambiguationKind, GameTermination, Piece
from pgnkit.errors import (
    EmptyGameError,
    InvalidStringCharacterError,
    LengthViolationError,
    MissingTerminationError,
    NestingTooDeepError,
    NumericParseError,
    PgnError,
    UnexpectedEndOfInputError,
    UnexpectedInputError,
    UnmatchedFollowSetError,
)
from pgnkit.grammar import (
    Castling,
    ElementSequence,
    MoveNumberIndication,
    MovetextSection,
    NumericAnnotationGlyph,
    PgnDatabase,
    PgnGame,
    PieceMove,
    RecursiveVariation,
    SanMove,
    SanMoveElement,
    TagPair,
    TagSection,
    TerminationElement,
    iter_games,
    parse_san,
)
from pgnkit.options import ParseOptions
from pgnkit.render import (
    format_database,
    format_game,
    format_movetext,
    format_san,
    format_tag_section,
)
from pgnkit.types import Square

__version__ = "0.1.0"


def parse_database(text: str, options: ParseOptions | None = None) -> PgnDatabase:
    """Parse every game in *text*.

    Stops at the first game that fails; check ``PgnDatabase.complete``.
    """
    database, _ = PgnDatabase.parse(text, 0, options or ParseOptions())
    return database


def parse_game(text: str, options: ParseOptions | None = None) -> tuple[PgnGame, str]:
    """Parse one game from the start of *text*; returns it and the rest.

    Leading whitespace is skipped. Empty input raises :class:`EmptyGameError`.
    """
    start = len(text) - len(text.lstrip())
    game, pos = PgnGame.parse(text, start, options or ParseOptions())
    return game, text[pos:]


def parse_movetext_section(
    text: str, options: ParseOptions | None = None
) -> tuple[MovetextSection, str]:
    section, pos = MovetextSection.parse(text, 0, options or ParseOptions())
    return section, text[pos:]


def parse_tag_section(text: str) -> tuple[TagSection, str]:
    section, pos = TagSection.parse(text, 0)
    return section, text[pos:]


__all__ = [
    # Entry points
    "parse_database",
    "parse_game",
    "parse_movetext_section",
    "parse_tag_section",
    "parse_san",
    "iter_games",
    # Rendering
    "format_database",
    "format_game",
    "format_movetext",
    "format_san",
    "format_tag_section",
    # Model
    "CastleSide",
    "Castling",
    "CheckSuffix",
    "DisambiguationKind",
    "ElementSequence",
    "GameTermination",
    "MoveNumberIndication",
    "MovetextSection",
    "NumericAnnotationGlyph",
    "ParseOptions",
    "PgnDatabase",
    "PgnGame",
    "Piece",
    "PieceMove",
    "RecursiveVariation",
    "SanMove",
    "SanMoveElement",
    "Square",
    "TagPair",
    "TagSection",
    "TerminationElement",
    # Errors
    "EmptyGameError",
    "InvalidStringCharacterError",
    "LengthViolationError",
    "MissingTerminationError",
    "NestingTooDeepError",
    "NumericParseError",
    "PgnError",
    "UnexpectedEndOfInputError",
    "UnexpectedInputError",
    "UnmatchedFollowSetError",
]
