"""Unit tests for filmsCount query parameter parsing."""

import pytest

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.presentation.api.v1.residencies import parse_films_count


@pytest.mark.unit
class TestParseFilmsCount:
    """Tests for parse_films_count."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("0", 0), ("2", 2), ("007", 7), ("-1", -1), ("+3", 3)],
    )
    def test_accepts_decimal_integers(self, raw, expected):
        result = parse_films_count(raw)

        assert isinstance(result, Success)
        assert result.value == expected

    @pytest.mark.parametrize(
        "raw",
        [None, "", "abc", "2.5", " 2", "2 ", "1_000", "0x10", "--1", "+", "٣"],
    )
    def test_rejects_everything_else(self, raw):
        result = parse_films_count(raw)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_FILMS_COUNT
        assert result.error.field == "filmsCount"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("9223372036854775807", 2**63 - 1),
            ("-9223372036854775808", -(2**63)),
            ("0" * 5000 + "1", 1),
        ],
    )
    def test_accepts_64_bit_bounds_and_leading_zeros(self, raw, expected):
        result = parse_films_count(raw)

        assert isinstance(result, Success)
        assert result.value == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "9223372036854775808",
            "-9223372036854775809",
            "99999999999999999999",
            "9" * 5000,
            "-" + "9" * 5000,
        ],
    )
    def test_rejects_values_outside_64_bit_range(self, raw):
        result = parse_films_count(raw)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_FILMS_COUNT
