"""SAN (Standard Algebraic Notation) move grammar.

Simple cases::

    Qg4   e5

Captures, castles, checks::

    dxe5  Qxf6  O-O  O-O-O  Qf6+  Nd7#

Disambiguation and promotion::

    Rhe8  N3e1  Ba3c5  g8=Q  dxe1=N  Qa6xb7#  fxg1=Q+

Grammar, alternatives tried in order::

    SAN-MOVE       ::= CASTLE CHECK
                   ::= PIECE? DISAMBIGUATION? 'x'? SQUARE PROMOTION? CHECK
    CASTLE         ::= "O-O-O" | "O-O"        (also "0-0-0" | "0-0")
    DISAMBIGUATION ::= SQUARE | FILE | RANK   (must be followed by 'x' or SQUARE)
    PROMOTION      ::= '=' PIECE
    CHECK          ::= [+#]?
"""

from __future__ import annotations

from dataclasses import dataclass

from pgnkit.enums import CastleSide, CheckSuffix, DisambiguationKind, Piece
from pgnkit.errors import (
    PgnError,
    UnexpectedEndOfInputError,
    UnexpectedInputError,
    UnmatchedFollowSetError,
)
from pgnkit.grammar.base import found_text, peek
from pgnkit.types import (
    File,
    Rank,
    Square,
    file_char,
    file_from_char,
    is_file_char,
    is_rank_char,
    rank_char,
    rank_from_char,
)

_PIECE_LETTERS = frozenset("KQRBNP")

# Long forms first: each short form is a prefix of its long form.
_CASTLES: tuple[tuple[str, CastleSide], ...] = (
    ("O-O-O", CastleSide.LONG),
    ("O-O", CastleSide.SHORT),
    ("0-0-0", CastleSide.LONG),
    ("0-0", CastleSide.SHORT),
)


# ── Squares ──────────────────────────────────────────────────────────────────


def check_square_start(text: str, pos: int) -> bool:
    return is_file_char(peek(text, pos)) and is_rank_char(peek(text, pos + 1))


def parse_square(text: str, pos: int, context: str = "square") -> tuple[Square, int]:
    ch = peek(text, pos)
    if not is_file_char(ch):
        if not ch:
            raise UnexpectedEndOfInputError(f"{context} (file)", pos)
        raise UnexpectedInputError(f"{context} (file)", found_text(text, pos), pos)
    ch = peek(text, pos + 1)
    if not is_rank_char(ch):
        if not ch:
            raise UnexpectedEndOfInputError(f"{context} (rank)", pos + 1)
        raise UnexpectedInputError(f"{context} (rank)", found_text(text, pos + 1), pos + 1)
    return Square(file_from_char(text[pos]), rank_from_char(text[pos + 1])), pos + 2


def _parse_piece(text: str, pos: int, context: str) -> tuple[Piece, int]:
    ch = peek(text, pos)
    if ch not in _PIECE_LETTERS:
        if not ch:
            raise UnexpectedEndOfInputError(context, pos)
        raise UnexpectedInputError(context, found_text(text, pos), pos)
    return Piece.from_letter(ch), pos + 1


def _parse_check(text: str, pos: int) -> tuple[CheckSuffix | None, int]:
    ch = peek(text, pos)
    if ch == "+":
        return CheckSuffix.CHECK, pos + 1
    if ch == "#":
        return CheckSuffix.MATE, pos + 1
    return None, pos


# ── Disambiguation ───────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Disambiguation:
    """Origin file and/or rank written before the destination square."""

    file: File | None = None
    rank: Rank | None = None

    @property
    def kind(self) -> DisambiguationKind:
        if self.file is not None and self.rank is not None:
            return DisambiguationKind.SQUARE
        if self.file is not None:
            return DisambiguationKind.FILE
        if self.rank is not None:
            return DisambiguationKind.RANK
        return DisambiguationKind.NONE

    @staticmethod
    def check_follow(text: str, pos: int) -> None:
        """A disambiguation must be followed by a capture or a square."""
        if peek(text, pos) == "x" or check_square_start(text, pos):
            return
        raise UnmatchedFollowSetError("disambiguation", pos)

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        # A square starts with a file, so FILE covers it.
        ch = peek(text, pos)
        return is_file_char(ch) or is_rank_char(ch)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[Disambiguation, int]:
        """Parse a square, else a file, else a rank.

        Raises:
            UnmatchedFollowSetError: No reading is followed by 'x' or a
                square; the disambiguation is absent.
        """
        if check_square_start(text, pos):
            square, end = parse_square(text, pos)
            try:
                cls.check_follow(text, end)
            except UnmatchedFollowSetError:
                pass
            else:
                return cls(square.file, square.rank), end

        ch = peek(text, pos)
        if is_file_char(ch):
            cls.check_follow(text, pos + 1)
            return cls(file=file_from_char(ch)), pos + 1

        if is_rank_char(ch):
            cls.check_follow(text, pos + 1)
            return cls(rank=rank_from_char(ch)), pos + 1

        raise UnexpectedInputError("disambiguation", found_text(text, pos), pos)


# ── Moves ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, kw_only=True)
class SanMove:
    """One ply in SAN: a :class:`PieceMove` or a :class:`Castling`."""

    check: CheckSuffix | None = None

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        ch = peek(text, pos)
        return ch in _PIECE_LETTERS or ch in ("O", "0") or is_file_char(ch)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[SanMove, int]:
        if Castling.check_start(text, pos):
            return Castling.parse(text, pos)
        return PieceMove.parse(text, pos)


@dataclass(frozen=True, slots=True, kw_only=True)
class Castling(SanMove):
    """``O-O`` or ``O-O-O``."""

    side: CastleSide

    def __str__(self) -> str:
        return self.side.value + (self.check.value if self.check else "")

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        return any(text.startswith(literal, pos) for literal, _ in _CASTLES)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[Castling, int]:
        for literal, side in _CASTLES:
            if text.startswith(literal, pos):
                check, pos = _parse_check(text, pos + len(literal))
                return cls(side=side, check=check), pos
        raise UnexpectedInputError("castling", found_text(text, pos), pos)


@dataclass(frozen=True, slots=True, kw_only=True)
class PieceMove(SanMove):
    """Any non-castling move.

    For pawn captures ``from_file`` is the file the pawn leaves, not a
    disambiguation.
    """

    piece: Piece = Piece.PAWN
    destination: Square
    from_file: File | None = None
    from_rank: Rank | None = None
    capture: bool = False
    promotion: Piece | None = None

    def __str__(self) -> str:
        parts: list[str] = []
        if self.piece != Piece.PAWN:
            parts.append(self.piece.letter)
        if self.from_file is not None:
            parts.append(file_char(self.from_file))
        if self.from_rank is not None:
            parts.append(rank_char(self.from_rank))
        if self.capture:
            parts.append("x")
        parts.append(self.destination.name)
        if self.promotion is not None:
            parts.append("=" + self.promotion.letter)
        if self.check is not None:
            parts.append(self.check.value)
        return "".join(parts)

    @property
    def disambiguation(self) -> DisambiguationKind:
        if self.piece == Piece.PAWN:
            return DisambiguationKind.NONE
        return Disambiguation(self.from_file, self.from_rank).kind

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        ch = peek(text, pos)
        return ch in _PIECE_LETTERS or is_file_char(ch)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[PieceMove, int]:
        piece = Piece.PAWN
        if peek(text, pos) in _PIECE_LETTERS:
            piece, pos = _parse_piece(text, pos, "piece")

        disambiguation = Disambiguation()
        if Disambiguation.check_start(text, pos):
            try:
                disambiguation, pos = Disambiguation.parse(text, pos)
            except UnmatchedFollowSetError:
                pass

        capture = peek(text, pos) == "x"
        if capture:
            pos += 1

        if not check_square_start(text, pos):
            if pos >= len(text):
                raise UnexpectedEndOfInputError("SAN move (no destination square)", pos)
            raise UnexpectedInputError(
                "SAN move (no destination square)", found_text(text, pos), pos
            )
        destination, pos = parse_square(text, pos)

        promotion: Piece | None = None
        if peek(text, pos) == "=":
            promotion, pos = _parse_piece(text, pos + 1, "promotion")

        check, pos = _parse_check(text, pos)
        return (
            cls(
                piece=piece,
                destination=destination,
                from_file=disambiguation.file,
                from_rank=disambiguation.rank,
                capture=capture,
                promotion=promotion,
                check=check,
            ),
            pos,
        )


def parse_san(san: str) -> SanMove:
    """Parse a complete SAN string, e.g. ``"Nbd7"`` or ``"exd8=Q+"``."""
    if not san:
        raise UnexpectedEndOfInputError("SAN move", 0)
    if not SanMove.check_start(san, 0):
        raise UnexpectedInputError("SAN move", found_text(san, 0), 0)
    move, pos = SanMove.parse(san, 0)
    if pos != len(san):
        raise UnexpectedInputError("SAN move", san[pos:], pos)
    return move


def is_san(san: str) -> bool:
    try:
        parse_san(san)
    except PgnError:
        return False
    return True
