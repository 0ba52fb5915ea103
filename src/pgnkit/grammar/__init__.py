"""Grammar package: one module per layer of the PGN grammar."""

from pgnkit.grammar.base import GrammarNode
from pgnkit.grammar.database import PgnDatabase, PgnGame, iter_games
from pgnkit.grammar.element import (
    Element,
    MoveNumberIndication,
    SanMoveElement,
    TerminationElement,
    parse_element,
)
from pgnkit.grammar.movetext import (
    ElementSequence,
    MovetextSection,
    RecursiveVariation,
    SequenceMember,
)
from pgnkit.grammar.san import Castling, Disambiguation, PieceMove, SanMove, is_san, parse_san
from pgnkit.grammar.tags import TagPair, TagSection
from pgnkit.grammar.tokens import NumericAnnotationGlyph, QuotedString, Symbol, parse_integer

__all__ = [
    "GrammarNode",
    # Tokens
    "NumericAnnotationGlyph",
    "QuotedString",
    "Symbol",
    "parse_integer",
    # SAN
    "Castling",
    "Disambiguation",
    "PieceMove",
    "SanMove",
    "is_san",
    "parse_san",
    # Movetext
    "Element",
    "ElementSequence",
    "MoveNumberIndication",
    "MovetextSection",
    "RecursiveVariation",
    "SanMoveElement",
    "SequenceMember",
    "TerminationElement",
    "parse_element",
    # Tags / games
    "PgnDatabase",
    "PgnGame",
    "TagPair",
    "TagSection",
    "iter_games",
]
