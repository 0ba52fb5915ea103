"""Board coordinate types and helpers.

Files and ranks are 1-based ints:
    file a=1, b=2, ..., h=8
    rank 1=1, ..., 8=8
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

File: TypeAlias = int  # 1–8 (a–h)
Rank: TypeAlias = int  # 1–8

FILE_CHARS = "abcdefgh"
RANK_CHARS = "12345678"


def is_file_char(ch: str) -> bool:
    return len(ch) == 1 and ch in FILE_CHARS


def is_rank_char(ch: str) -> bool:
    return len(ch) == 1 and ch in RANK_CHARS


def file_from_char(ch: str) -> File:
    """'a' → 1, ..., 'h' → 8."""
    if not is_file_char(ch):
        raise ValueError(f"Invalid file: {ch!r}")
    return ord(ch) - ord("a") + 1


def rank_from_char(ch: str) -> Rank:
    """'1' → 1, ..., '8' → 8."""
    if not is_rank_char(ch):
        raise ValueError(f"Invalid rank: {ch!r}")
    return ord(ch) - ord("1") + 1


def file_char(file: File) -> str:
    return FILE_CHARS[file - 1]


def rank_char(rank: Rank) -> str:
    return RANK_CHARS[rank - 1]


@dataclass(frozen=True, slots=True)
class Square:
    """Board square as a (file, rank) pair."""

    file: File
    rank: Rank

    def __post_init__(self) -> None:
        if not (1 <= self.file <= 8 and 1 <= self.rank <= 8):
            raise ValueError(f"Invalid square: file={self.file}, rank={self.rank}")

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.name

    @property
    def name(self) -> str:
        """Algebraic name, e.g. 'e4'."""
        return file_char(self.file) + rank_char(self.rank)

    @classmethod
    def parse_name(cls, name: str) -> Square:
        """Parse square name, e.g. 'e4' → Square(5, 4)."""
        if len(name) != 2 or not is_file_char(name[0]) or not is_rank_char(name[1]):
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(file_from_char(name[0]), rank_from_char(name[1]))
