"""
Tests for the code, piece-count and weight-block stages.
"""

import pytest
from scan_parser.core.extractors import (
    CodeMatch,
    PiecesMatch,
    StageResult,
    clean_weight_block,
    extract_code,
    extract_pieces,
    extract_weight_block,
)


class TestStageResult:

    def test_success(self):
        result = StageResult.success(42)

        assert result.ok
        assert result.value == 42
        assert result.error is None

    def test_failure(self):
        result = StageResult.failure("boom")

        assert not result.ok
        assert result.value is None
        assert result.error == "boom"


class TestExtractCode:

    def test_code_is_suffix_from_first_letter(self):
        result = extract_code("12.5002.50010.0001ABC123")

        assert result.ok
        assert result.value == CodeMatch(code="ABC123", start=18)

    def test_first_letter_anywhere(self):
        result = extract_code("A1.01.0")

        assert result.value == CodeMatch(code="A1.01.0", start=0)

    def test_no_letter(self):
        result = extract_code("12.5002.50010.0001")

        assert not result.ok
        assert result.error == "no alphabetic character found for CODE"


class TestExtractPieces:

    def test_digit_right_before_code(self):
        result = extract_pieces("7.2507.2505XYZ9", 11)

        assert result.value == PiecesMatch(pieces=5, index=10)

    @pytest.mark.parametrize("text, code_start, expected", [
        ("1.01.0 7-CODE", 9, PiecesMatch(pieces=7, index=7)),
        ("1.01.0 7 . CODE", 11, PiecesMatch(pieces=7, index=7)),
        ("1.01.03.#ABC", 9, PiecesMatch(pieces=3, index=6)),
    ])
    def test_skips_separators(self, text, code_start, expected):
        assert extract_pieces(text, code_start).value == expected

    def test_only_single_digit(self):
        # "12" before the code is PCS 2, the 1 stays in the weight block
        result = extract_pieces("1.01.012AB", 8)

        assert result.value == PiecesMatch(pieces=2, index=7)

    def test_no_digit(self):
        result = extract_pieces("ABCXYZ", 0)

        assert not result.ok
        assert result.error == "no digit found for PCS"

    def test_only_symbols_before_code(self):
        assert not extract_pieces("*- .AB", 4).ok


class TestCleanWeightBlock:

    @pytest.mark.parametrize("raw, expected", [
        ("12.500*2.500*10.000", "12.5002.50010.000"),
        (" 12 .5 00 ", "12.500"),
        ("1....5", "1.5"),
        ("1..0 1...0", "1.01.0"),
        ("12*5.0#0", "125.00"),
        (".5.5", "0.5.5"),
        ("**", ""),
        ("", ""),
    ])
    def test_cleaning(self, raw, expected):
        assert clean_weight_block(raw) == expected

    def test_dots_collapse_before_symbols_are_removed(self):
        # Runs are collapsed first, so dots separated by a symbol survive
        assert clean_weight_block("1.a.5") == "1..5"


class TestExtractWeightBlock:

    def test_block_before_pcs(self):
        result = extract_weight_block("12.500*2.500*10.0001ABC123", 19)

        assert result.value == "12.5002.50010.000"

    def test_empty_block(self):
        result = extract_weight_block("5ABC", 0)

        assert not result.ok
        assert result.error == "no weight data found"
