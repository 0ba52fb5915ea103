"""Command-line entry point: parse PGN files and summarise their games."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pgnkit.grammar.database import PgnDatabase, PgnGame
from pgnkit.options import DEFAULT_MAX_VARIATION_DEPTH, ParseOptions
from pgnkit.render import format_database

_LOGGER = logging.getLogger(__name__)
_FMT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_STDIN_NAME = "<stdin>"


def _configure_logging(verbosity: int) -> None:
    """-1 = quiet, 0 = default, 1 = verbose."""
    level = {-1: logging.ERROR, 0: logging.WARNING, 1: logging.DEBUG}[verbosity]
    logger = logging.getLogger("pgnkit")
    # Idempotent: clear handlers from earlier runs before re-adding.
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FMT))
    logger.addHandler(handler)
    logger.setLevel(level)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnkit",
        description="Parse PGN files and print one summary line per game.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="PGN files to read (default: standard input)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject missing game terminations and move symbols that are not SAN",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_VARIATION_DEPTH,
        metavar="N",
        help="deepest allowed nesting of variations (default: %(default)s)",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="print the parsed games as PGN instead of summaries",
    )
    noise = parser.add_mutually_exclusive_group()
    noise.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    noise.add_argument("-q", "--quiet", action="store_true", help="errors only")
    return parser


def _line_col(text: str, offset: int) -> tuple[int, int]:
    """1-based line and column of *offset*."""
    line = text.count("\n", 0, offset) + 1
    col = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, col


def summarize_game(index: int, game: PgnGame) -> str:
    """``#1  tags=7  elements=84  result=1-0  White vs Black``"""
    line = (
        f"#{index}\ttags={len(game.tags)}\telements={len(game.movetext)}"
        f"\tresult={game.result.token}"
    )
    white = game.tags.get("White")
    black = game.tags.get("Black")
    if white is not None or black is not None:
        line += f"\t{white or '?'} vs {black or '?'}"
    return line


def _report(name: str, text: str, database: PgnDatabase, export: bool, out: TextIO) -> bool:
    """Print *database*; return ``True`` when the whole input was parsed."""
    if export:
        out.write(format_database(database))
    else:
        print(f"{name}: {len(database)} game(s)", file=out)
        for index, game in enumerate(database, start=1):
            print(summarize_game(index, game), file=out)

    if database.complete:
        return True

    offset = database.stopped_at or 0
    if database.error is not None and database.error.offset is not None:
        offset = database.error.offset
    line, col = _line_col(text, offset)
    _LOGGER.error("%s:%d:%d: %s", name, line, col, database.error)
    return False


def _read_inputs(files: Sequence[Path]) -> list[tuple[str, str | None]]:
    """(name, text) pairs; text is ``None`` when the file could not be read."""
    if not files:
        return [(_STDIN_NAME, sys.stdin.read())]
    inputs: list[tuple[str, str | None]] = []
    for path in files:
        try:
            inputs.append((str(path), path.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as exc:
            _LOGGER.error("%s: cannot read file: %s", path, exc)
            inputs.append((str(path), None))
    return inputs


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Run the CLI; returns the process exit code."""
    args = _build_parser().parse_args(argv)
    _configure_logging(-1 if args.quiet else 1 if args.verbose else 0)
    out = out or sys.stdout

    if args.max_depth < 0:
        _LOGGER.error("--max-depth must be non-negative")
        return 2
    if args.strict:
        options = ParseOptions.strict(args.max_depth)
    else:
        options = ParseOptions(max_variation_depth=args.max_depth)

    ok = True
    for name, text in _read_inputs(args.files):
        if text is None:
            ok = False
            continue
        database, _ = PgnDatabase.parse(text, 0, options)
        _LOGGER.debug("%s: parsed %d game(s)", name, len(database))
        ok = _report(name, text, database, args.export, out) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
