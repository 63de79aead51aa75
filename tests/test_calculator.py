"""
Tests for the inline calculator's expression evaluator.
"""

import math

import pytest

from Calculator import (
    OPERATORS,
    MalformedExpressionError,
    evaluate,
    evaluate_postfix,
    format_number,
    tokenize,
    to_postfix,
)


class TestTokenize:
    """Tests for tokenize."""

    def test_numbers_operators_and_parentheses(self):
        assert tokenize("(3+4)*2") == ["(", "3", "+", "4", ")", "*", "2"]

    def test_spaces_are_skipped(self):
        assert tokenize(" 12 +  3.5 ") == ["12", "+", "3.5"]

    def test_unknown_characters_are_dropped(self):
        assert tokenize("2a+b3,") == ["2", "+", "3"]

    def test_multiple_decimal_points_are_kept_together(self):
        assert tokenize("1.2.3+1") == ["1.2.3", "+", "1"]

    def test_empty_input(self):
        assert tokenize("") == []


class TestToPostfix:
    """Tests for the shunting-yard conversion."""

    def test_precedence(self):
        assert to_postfix(["2", "+", "3", "*", "4"]) == ["2", "3", "4", "*", "+"]

    def test_parentheses_override_precedence(self):
        assert to_postfix(tokenize("(2+3)*4")) == ["2", "3", "+", "4", "*"]

    def test_equal_precedence_reduces_left_to_right(self):
        assert to_postfix(tokenize("8-3-2")) == ["8", "3", "-", "2", "-"]

    def test_power_is_left_associative(self):
        assert to_postfix(tokenize("2^3^2")) == ["2", "3", "^", "2", "^"]

    def test_stray_closing_parenthesis_is_ignored(self):
        assert to_postfix(tokenize("2+3)")) == ["2", "3", "+"]

    def test_unclosed_parenthesis_is_left_in_output(self):
        assert to_postfix(tokenize("(2+3")) == ["2", "3", "+", "("]


class TestEvaluate:
    """Tests for evaluate."""

    @pytest.mark.parametrize("expression,expected", [
        ("2+2", 4),
        ("10*5", 50),
        ("(3+4)*2", 14),
        ("2^3", 8),
        ("10%3", 1),
        ("2+3*4", 14),
        ("8-3-2", 3),
        ("100/10/5", 2),
        ("0.5*4", 2),
        ("2^0.5^2", 2),
    ])
    def test_results(self, expression, expected):
        assert evaluate(expression) == pytest.approx(expected)

    def test_power_left_associative(self):
        """2^3^2 groups as (2^3)^2."""
        assert evaluate("2^3^2") == 64

    def test_division_by_zero_is_infinite(self):
        assert evaluate("1/0") == math.inf
        assert evaluate("(0-1)/0") == -math.inf

    def test_zero_divided_by_zero_is_nan(self):
        assert math.isnan(evaluate("0/0"))

    def test_remainder_by_zero_is_nan(self):
        assert math.isnan(evaluate("5%0"))

    def test_remainder_keeps_sign_of_dividend(self):
        assert evaluate("(0-7)%3") == -1

    def test_fractional_power_of_negative_is_nan(self):
        assert math.isnan(evaluate("(0-8)^0.5"))

    def test_power_overflow_is_infinite(self):
        assert evaluate("10^400") == math.inf

    def test_malformed_number_is_nan(self):
        assert math.isnan(evaluate("1.2.3+1"))

    def test_whitespace_insensitive(self):
        assert evaluate("2 + 2") == evaluate("2+2")

    def test_repeated_evaluation_is_stable(self):
        results = {evaluate("(1+2)^2/3") for _ in range(5)}
        assert results == {3}

    def test_unclosed_parenthesis_still_evaluates(self):
        assert evaluate("(2+3") == 5

    @pytest.mark.parametrize("expression", ["", "+", "2+", "-3", "abc"])
    def test_missing_operands_raise(self, expression):
        with pytest.raises(MalformedExpressionError):
            evaluate(expression)

    def test_values_without_operator_raise(self):
        with pytest.raises(MalformedExpressionError):
            evaluate("(2)(3)")

    def test_malformed_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            evaluate_postfix(["*"])


class TestOperatorTable:
    """Tests for the operator table."""

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            OPERATORS["+"] = OPERATORS["-"]

    def test_precedence_ranks(self):
        assert {symbol: op.precedence for symbol, op in OPERATORS.items()} == {
            "+": 1, "-": 1, "*": 2, "/": 2, "%": 2, "^": 3,
        }


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize("value,expected", [
        (4.0, "4"),
        (-12.0, "-12"),
        (0.5, "0.5"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
    ])
    def test_rendering(self, value, expected):
        assert format_number(value) == expected
