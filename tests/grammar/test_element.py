"""Tests for movetext elements and the termination / move-number split."""

import logging

import pytest

from pgnkit.enums import CastleSide, GameTermination, Piece
from pgnkit.errors import UnexpectedEndOfInputError, UnexpectedInputError
from pgnkit.grammar.element import (
    MoveNumberIndication,
    SanMoveElement,
    TerminationElement,
    check_element_start,
    parse_element,
)
from pgnkit.grammar.san import Castling, PieceMove
from pgnkit.grammar.tokens import NumericAnnotationGlyph
from pgnkit.options import ParseOptions
from pgnkit.types import Square


class TestTermination:
    @pytest.mark.parametrize(
        ("text", "termination"),
        [
            ("1-0", GameTermination.WHITE_WINS),
            ("0-1", GameTermination.BLACK_WINS),
            ("1/2-1/2", GameTermination.TIE),
            ("*", GameTermination.UNTERMINATED),
        ],
    )
    def test_markers(self, text: str, termination: GameTermination) -> None:
        element, pos = parse_element(text + " TAIL", 0)
        assert element == TerminationElement(termination)
        assert pos == len(text)

    def test_str(self) -> None:
        assert str(TerminationElement(GameTermination.TIE)) == "1/2-1/2"

    @pytest.mark.parametrize("text", ["1/2-1/2+", "1/2-1/2x", "3/2-1/2"])
    def test_tie_regardless_of_surroundings(self, text: str) -> None:
        element, pos = parse_element(text, 0)
        assert element == TerminationElement(GameTermination.TIE)
        assert text[pos:] == text[7:]


class TestRejectedTermination:
    @pytest.mark.parametrize("text", ["1-1", "2-0", "2-1", "0-2", "1-2", "2-2", "10-0"])
    def test_becomes_symbol(self, text: str) -> None:
        element, pos = parse_element(text, 0)
        assert element == SanMoveElement(text, None)
        assert not element.is_valid
        assert pos == len(text)

    def test_zero_castling_short(self) -> None:
        element, pos = parse_element("0-0 Nf3", 0)
        assert isinstance(element, SanMoveElement)
        assert element.symbol == "0-0"
        assert element.move == Castling(side=CastleSide.SHORT)
        assert pos == 3

    def test_zero_castling_long(self) -> None:
        element, _ = parse_element("0-0-0", 0)
        assert isinstance(element, SanMoveElement)
        assert element.move == Castling(side=CastleSide.LONG)

    def test_termination_followed_by_symbol_character(self) -> None:
        element, _ = parse_element("1-0+", 0)
        assert isinstance(element, SanMoveElement)
        assert element.symbol == "1-0+"

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pgnkit"):
            parse_element("2-0", 0)
        assert "Rejected game termination 2-0" in caplog.text

    def test_strict_san_raises_with_input_offset(self) -> None:
        text = "e4 2-0"
        with pytest.raises(UnexpectedInputError) as info:
            parse_element(text, 3, ParseOptions(strict_san=True))
        assert info.value.offset == 3


class TestMoveNumber:
    @pytest.mark.parametrize(
        ("text", "number", "end"),
        [
            ("1", 1, 1),
            ("2.", 2, 2),
            ("23...", 23, 5),
            ("31 .", 31, 4),
            ("42 ...", 42, 6),
            ("7 e4", 7, 1),
        ],
    )
    def test_forms(self, text: str, number: int, end: int) -> None:
        element, pos = parse_element(text, 0)
        assert element == MoveNumberIndication(number)
        assert pos == end

    def test_str(self) -> None:
        assert str(MoveNumberIndication(12)) == "12."


class TestOtherElements:
    def test_san_move(self) -> None:
        element, pos = parse_element("e5 TAIL", 0)
        assert element == SanMoveElement(
            "e5", PieceMove(piece=Piece.PAWN, destination=Square(5, 5))
        )
        assert element.is_valid
        assert pos == 2

    def test_check_suffix_stays_in_symbol(self) -> None:
        element, _ = parse_element("Qxf7#", 0)
        assert isinstance(element, SanMoveElement)
        assert element.symbol == "Qxf7#"
        assert str(element) == "Qxf7#"

    def test_nag(self) -> None:
        assert parse_element("$32", 0) == (NumericAnnotationGlyph(32), 3)

    def test_lenient_symbol(self) -> None:
        element, _ = parse_element("Zz9", 0)
        assert element == SanMoveElement("Zz9", None)

    def test_strict_san(self) -> None:
        with pytest.raises(UnexpectedInputError):
            parse_element("Zz9", 0, ParseOptions(strict_san=True))

    def test_unexpected_character(self) -> None:
        with pytest.raises(UnexpectedInputError, match="element"):
            parse_element(")", 0)

    def test_end_of_input(self) -> None:
        with pytest.raises(UnexpectedEndOfInputError):
            parse_element("", 0)


class TestCheckStart:
    def test_starts(self) -> None:
        for text in ("e4", "1.", "*", "$1", "O-O"):
            assert check_element_start(text, 0)

    def test_non_starts(self) -> None:
        for text in ("(", ")", "[", "{", "", " e4"):
            assert not check_element_start(text, 0)
