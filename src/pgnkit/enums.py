"""Enumerations for the PGN domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Piece(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """SAN letter, e.g. 'N' for a knight."""
        return _PIECE_LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> Piece:
        try:
            return _LETTER_PIECES[letter]
        except KeyError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None


_PIECE_LETTERS: dict[Piece, str] = {
    Piece.PAWN: "P",
    Piece.KNIGHT: "N",
    Piece.BISHOP: "B",
    Piece.ROOK: "R",
    Piece.QUEEN: "Q",
    Piece.KING: "K",
}
_LETTER_PIECES: dict[str, Piece] = {v: k for k, v in _PIECE_LETTERS.items()}


class GameTermination(StrEnum):
    """Game termination marker; the value is the PGN token."""

    WHITE_WINS = "1-0"
    BLACK_WINS = "0-1"
    TIE = "1/2-1/2"
    UNTERMINATED = "*"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> GameTermination:
        """Convert a PGN result token; anything unknown is unterminated."""
        try:
            return cls(token)
        except ValueError:
            return cls.UNTERMINATED


class CheckSuffix(StrEnum):
    """Trailing check indicator of a SAN move."""

    CHECK = "+"
    MATE = "#"


class CastleSide(StrEnum):
    """Castling direction; the value is the SAN spelling."""

    SHORT = "O-O"
    LONG = "O-O-O"


class DisambiguationKind(StrEnum):
    """Which origin coordinates a SAN move spells out."""

    NONE = "none"
    FILE = "file"
    RANK = "rank"
    SQUARE = "square"
