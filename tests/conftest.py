"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

SAMPLE_GAME = '[EndDate "2021.09.21"]\n\n1. e4 c6 2. d4 d5 3. Nc3 dxe4 4. Nxe4 Nf6'

ANNOTATED_GAME = """[Event "Casual"]
[Site "Berlin GER"]
[White "Anderssen, Adolf"]
[Black "Dufresne, Jean"]
[Result "1-0"]

1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5 4. b4 Bxb4 5. c3 Ba5 6. d4 exd4 7. O-O d3
8. Qb3 Qf6 9. e5 Qg6 10. Re1 Nge7 11. Ba3 b5 $2 (11... O-O 12. Nbd2) 12. Qxb5
Rb8 13. Qa4 Bb6 14. Nbd2 Bb7 15. Ne4 Qf5 16. Bxd3 Qh5 17. Nf6+ gxf6 18. exf6
Rg8 19. Rad1 Qxf3 20. Rxe7+ Nxe7 21. Qxd7+ Kxd7 22. Bf5+ Ke8 23. Bd7+ Kf8
24. Bxe7# 1-0
"""

MULTI_GAME = """[Event "One"]
[Result "1-0"]

1. e4 e5 2. Qh5 Nc6 3. Bc4 Nf6 4. Qxf7# 1-0

[Event "Two"]
[Result "0-1"]

1. f3 e5 2. g4 Qh4# 0-1

[Event "Three"]
[Result "1/2-1/2"]

1. d4 d5 1/2-1/2
"""


@pytest.fixture
def sample_game() -> str:
    return SAMPLE_GAME


@pytest.fixture
def annotated_game() -> str:
    return ANNOTATED_GAME


@pytest.fixture
def multi_game() -> str:
    return MULTI_GAME


@pytest.fixture
def multi_game_file(tmp_path: Path) -> Path:
    path = tmp_path / "games.pgn"
    path.write_text(MULTI_GAME, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_pgnkit_logger() -> Iterator[None]:
    """The CLI attaches a stderr handler; drop it between tests."""
    logger = logging.getLogger("pgnkit")
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
