"""Game and database assembly.

::

    <PGN-database> ::= <PGN-game> <PGN-database>
                   ::= <empty>
    <PGN-game>     ::= <tag-section> <movetext-section>
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from pgnkit.enums import GameTermination
from pgnkit.errors import EmptyGameError, PgnError
from pgnkit.grammar.base import GrammarNode, found_text, skip_whitespace
from pgnkit.grammar.movetext import MovetextSection
from pgnkit.grammar.tags import TagSection
from pgnkit.options import DEFAULT_OPTIONS, ParseOptions

_LOGGER = logging.getLogger(__name__)

# Sections a game is made of, in input order.
_GAME_PARTS: tuple[type[GrammarNode], ...] = (TagSection, MovetextSection)


@dataclass(frozen=True, slots=True)
class PgnGame:
    """One game: tag section plus movetext section."""

    tags: TagSection = field(default_factory=TagSection)
    movetext: MovetextSection = field(default_factory=MovetextSection)

    @property
    def result(self) -> GameTermination:
        return self.movetext.termination

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        return any(part.check_start(text, pos) for part in _GAME_PARTS)

    @classmethod
    def parse(
        cls, text: str, pos: int, options: ParseOptions = DEFAULT_OPTIONS
    ) -> tuple[PgnGame, int]:
        """Parse one game starting exactly at *pos*.

        Raises:
            EmptyGameError: Neither a tag section nor movetext starts at *pos*.
        """
        if not cls.check_start(text, pos):
            raise EmptyGameError(found_text(text, pos), pos)

        tags = TagSection()
        if TagSection.check_start(text, pos):
            tags, pos = TagSection.parse(text, pos)
        pos = skip_whitespace(text, pos)

        movetext, pos = MovetextSection.parse(text, pos, options)
        return cls(tags, movetext), pos


@dataclass(frozen=True, slots=True)
class PgnDatabase:
    """Games in input order.

    Parsing stops at the first game that fails; the games before it are
    kept. ``stopped_at`` is the offset of the failing game (``None`` when the
    whole input was consumed) and ``error`` the failure itself.
    """

    games: tuple[PgnGame, ...] = ()
    stopped_at: int | None = None
    error: PgnError | None = None

    def __len__(self) -> int:
        return len(self.games)

    def __iter__(self) -> Iterator[PgnGame]:
        return iter(self.games)

    def __getitem__(self, index: int) -> PgnGame:
        return self.games[index]

    @property
    def complete(self) -> bool:
        return self.stopped_at is None

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        return PgnGame.check_start(text, pos)

    @classmethod
    def parse(
        cls, text: str, pos: int = 0, options: ParseOptions = DEFAULT_OPTIONS
    ) -> tuple[PgnDatabase, int]:
        games: list[PgnGame] = []
        pos = skip_whitespace(text, pos)
        while pos < len(text):
            try:
                game, end = PgnGame.parse(text, pos, options)
            except PgnError as exc:
                _LOGGER.warning(
                    "Stopped after %d game(s) at offset %d: %s", len(games), pos, exc
                )
                return cls(tuple(games), stopped_at=pos, error=exc), pos
            games.append(game)
            pos = skip_whitespace(text, end)
        return cls(tuple(games)), pos


def iter_games(text: str, options: ParseOptions = DEFAULT_OPTIONS) -> Iterator[PgnGame]:
    """Yield games one at a time.

    Unlike :meth:`PgnDatabase.parse`, a failing game raises its
    :class:`PgnError` after the preceding games have been yielded.
    """
    pos = skip_whitespace(text, 0)
    while pos < len(text):
        game, pos = PgnGame.parse(text, pos, options)
        yield game
        pos = skip_whitespace(text, pos)
