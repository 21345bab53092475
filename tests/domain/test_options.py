"""Tests for option-list parsing and value typing."""

from __future__ import annotations

import math

import pytest

from sflang.domain.options import parse_number, parse_options, parse_value


class TestParseValue:
    @pytest.mark.parametrize("token", ["true", "t", "T"])
    def test_true_tokens(self, token: str) -> None:
        assert parse_value(token) is True

    @pytest.mark.parametrize("token", ["false", "f", "F"])
    def test_false_tokens(self, token: str) -> None:
        assert parse_value(token) is False

    def test_boolean_tokens_are_case_sensitive(self) -> None:
        assert math.isnan(parse_value("True"))  # type: ignore[arg-type]

    def test_unrecognized_bare_value_is_nan(self) -> None:
        value = parse_value("abc")
        assert isinstance(value, float)
        assert math.isnan(value)
        assert value != "abc"

    def test_quoted_value_is_string(self) -> None:
        assert parse_value('"abc"') == "abc"

    def test_quoted_number_stays_string(self) -> None:
        assert parse_value('"10"') == "10"

    def test_quoted_value_decodes_quotes_not_newlines(self) -> None:
        assert parse_value(r'"say \"hi\"\n"') == 'say "hi"\\n'

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_value("  12  ") == 12


class TestParseNumber:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("12", 12),
            ("-3", -3),
            ("+4", 4),
            ("1.5", 1.5),
            (".5", 0.5),
            ("2.", 2.0),
            ("1e3", 1000.0),
            ("0x10", 16),
            ("0o17", 15),
            ("0b101", 5),
            ("", 0),
        ],
    )
    def test_numbers(self, token: str, expected: float) -> None:
        assert parse_number(token) == expected

    def test_integers_stay_int(self) -> None:
        assert isinstance(parse_number("7"), int)

    def test_infinity(self) -> None:
        assert parse_number("Infinity") == math.inf
        assert parse_number("-Infinity") == -math.inf

    @pytest.mark.parametrize("token", ["12px", "abc", "1.2.3", "inf", "nan", "1_000"])
    def test_not_a_number(self, token: str) -> None:
        assert math.isnan(parse_number(token))


class TestParseOptions:
    def test_typed_pairs(self) -> None:
        options = parse_options('width=10,color="red",newtab=true')
        assert options == {"width": 10, "color": "red", "newtab": True}

    def test_whitespace_insensitive(self) -> None:
        assert parse_options(" a = 1 ,  b=2 ") == {"a": 1, "b": 2}

    def test_last_duplicate_wins_first_position_kept(self) -> None:
        options = parse_options("a=1,b=2,a=3")
        assert options == {"a": 3, "b": 2}
        assert list(options) == ["a", "b"]

    def test_keys_are_case_sensitive(self) -> None:
        assert parse_options("W=1,w=2") == {"W": 1, "w": 2}

    def test_quoted_value_may_contain_commas(self) -> None:
        assert parse_options('alt="a, b",width=3') == {"alt": "a, b", "width": 3}

    def test_empty_key_skipped(self) -> None:
        assert parse_options("=5,a=1") == {"a": 1}

    def test_entries_without_equals_ignored(self) -> None:
        assert parse_options("lonely,a=1") == {"a": 1}

    def test_empty(self) -> None:
        assert parse_options("") == {}
