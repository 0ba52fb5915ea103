"""Tests for game and database assembly plus the public entry points."""

import logging

import pytest

from pgnkit import parse_database, parse_game, parse_movetext_section
from pgnkit.enums import GameTermination
from pgnkit.errors import (
    EmptyGameError,
    MissingTerminationError,
    PgnError,
    UnexpectedEndOfInputError,
)
from pgnkit.grammar.database import PgnDatabase, PgnGame, iter_games
from pgnkit.grammar.element import MoveNumberIndication
from pgnkit.grammar.tokens import NumericAnnotationGlyph
from pgnkit.options import ParseOptions


class TestSampleGame:
    def test_end_to_end(self, sample_game: str) -> None:
        game, rest = parse_game(sample_game)
        assert rest == ""
        assert len(game.tags) == 1
        assert game.tags.get("EndDate") == "2021.09.21"
        assert len(game.movetext) == 12
        assert len(game.movetext.moves) == 8
        assert game.result == GameTermination.UNTERMINATED

    def test_move_symbols(self, sample_game: str) -> None:
        game, _ = parse_game(sample_game)
        assert [m.symbol for m in game.movetext.moves] == [
            "e4", "c6", "d4", "d5", "Nc3", "dxe4", "Nxe4", "Nf6",
        ]
        assert all(m.is_valid for m in game.movetext.moves)

    def test_move_numbers(self, sample_game: str) -> None:
        game, _ = parse_game(sample_game)
        numbers = [
            m.number for m in game.movetext.sequence if isinstance(m, MoveNumberIndication)
        ]
        assert numbers == [1, 2, 3, 4]


class TestAnnotatedGame:
    def test_parse(self, annotated_game: str) -> None:
        game, rest = parse_game(annotated_game)
        assert rest == ""
        assert len(game.tags) == 5
        assert game.tags.get("White") == "Anderssen, Adolf"
        assert game.result == GameTermination.WHITE_WINS
        assert game.movetext.moves[-1].symbol == "Bxe7#"

    def test_nag_and_variation(self, annotated_game: str) -> None:
        game, _ = parse_game(annotated_game)
        sequence = game.movetext.sequence
        assert NumericAnnotationGlyph(2) in sequence.members
        (variation,) = sequence.variations
        assert [m.symbol for m in variation.sequence.moves] == ["O-O", "Nbd2"]

    def test_moves_exclude_variations(self, annotated_game: str) -> None:
        game, _ = parse_game(annotated_game)
        assert len(game.movetext.moves) == 47


class TestParseGame:
    def test_empty_input(self) -> None:
        with pytest.raises(EmptyGameError):
            parse_game("")

    def test_whitespace_only(self) -> None:
        with pytest.raises(EmptyGameError):
            parse_game("  \n\t ")

    def test_not_a_game(self) -> None:
        with pytest.raises(EmptyGameError, match="unexpected"):
            parse_game("{comment}")

    def test_returns_rest(self, multi_game: str) -> None:
        game, rest = parse_game(multi_game)
        assert game.tags.get("Event") == "One"
        assert rest.startswith('[Event "Two"]')

    def test_tags_only(self) -> None:
        game, _ = parse_game('[Event "Empty"]\n')
        assert len(game.tags) == 1
        assert len(game.movetext) == 0
        assert game.result == GameTermination.UNTERMINATED

    def test_movetext_only(self) -> None:
        game, _ = parse_game("1. e4 e5 1-0")
        assert len(game.tags) == 0
        assert game.result == GameTermination.WHITE_WINS

    def test_check_start(self) -> None:
        assert PgnGame.check_start("[A", 0)
        assert PgnGame.check_start("1.", 0)
        assert not PgnGame.check_start("", 0)


class TestDatabase:
    def test_empty(self) -> None:
        database = parse_database("")
        assert len(database) == 0
        assert database.complete

    def test_multi_game(self, multi_game: str) -> None:
        database = parse_database(multi_game)
        assert database.complete
        assert [g.tags.get("Event") for g in database] == ["One", "Two", "Three"]
        assert [g.result for g in database] == [
            GameTermination.WHITE_WINS,
            GameTermination.BLACK_WINS,
            GameTermination.TIE,
        ]
        assert database[1].movetext.moves[-1].symbol == "Qh4#"

    def test_games_without_tags(self) -> None:
        database = parse_database("1. e4 e5 1-0\n\n1. d4 d5 0-1\n1. c4 *")
        assert len(database) == 3
        assert [g.result for g in database] == [
            GameTermination.WHITE_WINS,
            GameTermination.BLACK_WINS,
            GameTermination.UNTERMINATED,
        ]

    def test_stops_at_failing_game(
        self, multi_game: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        broken = multi_game + '\n[Event "Four"\n1. e4 *\n'
        with caplog.at_level(logging.WARNING, logger="pgnkit"):
            database = parse_database(broken)
        assert len(database) == 3
        assert not database.complete
        assert database.stopped_at == broken.index('[Event "Four"')
        assert isinstance(database.error, PgnError)
        assert "Stopped after 3 game(s)" in caplog.text

    def test_tie_followed_by_symbol_character(self) -> None:
        database = parse_database("1. e4 1/2-1/2+ \n")
        assert len(database) == 1
        game = database[0]
        assert game.result == GameTermination.TIE
        assert [m.symbol for m in game.movetext.moves] == ["e4"]
        assert database.stopped_at == len("1. e4 1/2-1/2")

    def test_stray_character_stops_parse(self) -> None:
        database = parse_database("1. e4 *\n{not pgn}")
        assert len(database) == 1
        assert isinstance(database.error, EmptyGameError)

    def test_strict_options(self) -> None:
        database = parse_database("1. e4 e5", ParseOptions(strict_termination=True))
        assert len(database) == 0
        assert isinstance(database.error, MissingTerminationError)

    def test_returned_offset(self, multi_game: str) -> None:
        database, pos = PgnDatabase.parse(multi_game)
        assert len(database) == 3
        assert pos == len(multi_game)


class TestIterGames:
    def test_yields_games(self, multi_game: str) -> None:
        assert len(list(iter_games(multi_game))) == 3

    def test_raises_after_good_games(self) -> None:
        games = iter_games('1. e4 *\n[Event "x')
        assert next(games).result == GameTermination.UNTERMINATED
        with pytest.raises(UnexpectedEndOfInputError):
            next(games)


class TestMovetextWrapper:
    def test_returns_rest(self) -> None:
        section, rest = parse_movetext_section('1. e4 e5 1-0\n[Event "Next"]')
        assert section.termination == GameTermination.WHITE_WINS
        assert rest == '[Event "Next"]'
