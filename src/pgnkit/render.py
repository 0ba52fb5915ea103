"""Render parse trees back to PGN text."""

from __future__ import annotations

import textwrap
from collections.abc import Iterator

from pgnkit.grammar.database import PgnDatabase, PgnGame
from pgnkit.grammar.element import SanMoveElement
from pgnkit.grammar.movetext import (
    ElementSequence,
    MovetextSection,
    RecursiveVariation,
    SequenceMember,
)
from pgnkit.grammar.san import SanMove
from pgnkit.grammar.tags import TagSection


def format_san(move: SanMove) -> str:
    """SAN text for a structured move, e.g. ``"Nbxd7+"``."""
    return str(move)


def _sequence_tokens(sequence: ElementSequence) -> list[str]:
    """Top-level tokens of *sequence*; each variation becomes one token.

    Walks nested variations with an explicit stack, like the parser.
    """
    parts: list[str] = []
    members: Iterator[SequenceMember] = iter(sequence)
    # (remaining members, tokens so far) of each enclosing line.
    open_lines: list[tuple[Iterator[SequenceMember], list[str]]] = []

    while True:
        member = next(members, None)
        if member is None:
            if not open_lines:
                return parts
            inner = " ".join(parts)
            members, parts = open_lines.pop()
            parts.append(f"({inner})")
        elif isinstance(member, RecursiveVariation):
            open_lines.append((members, parts))
            members = iter(member.sequence)
            parts = []
        elif isinstance(member, SanMoveElement):
            # The symbol as written keeps spellings such as "0-0" intact.
            parts.append(member.symbol)
        else:
            parts.append(str(member))


def format_movetext(section: MovetextSection, width: int | None = None) -> str:
    """Movetext followed by its termination marker.

    With *width*, lines are wrapped at spaces to at most *width* columns.
    """
    parts = _sequence_tokens(section.sequence)
    parts.append(section.termination.token)
    text = " ".join(parts)
    if width is None:
        return text
    return textwrap.fill(
        text, width=width, break_long_words=False, break_on_hyphens=False
    )


def format_tag_section(section: TagSection) -> str:
    lines: list[str] = []
    for pair in section:
        escaped = pair.value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{pair.name} "{escaped}"]')
    return "\n".join(lines)


def format_game(game: PgnGame, width: int | None = 79) -> str:
    """Single-game PGN document: tags, blank line, movetext."""
    lines: list[str] = []
    if game.tags:
        lines.append(format_tag_section(game.tags))
        lines.append("")
    lines.append(format_movetext(game.movetext, width))
    lines.append("")
    return "\n".join(lines)


def format_database(database: PgnDatabase, width: int | None = 79) -> str:
    return "\n".join(format_game(game, width) for game in database)
