"""Tests for the polynomial text grammar."""

import pytest

from polynomial import Polynomial
from polynomial_parser import parse_polynomial, parse_term, tokenize
from rational import Rational
from term import Term


class TestTokenize:
    def test_signs_are_tokens(self) -> None:
        toks = tokenize("x^2-3/2*x+1")
        assert [(t.kind, t.lex) for t in toks] == [
            ("TERM", "x^2"),
            ("-", "-"),
            ("TERM", "3/2*x"),
            ("+", "+"),
            ("TERM", "1"),
        ]

    def test_whitespace_rejected(self) -> None:
        with pytest.raises(ValueError):
            tokenize("x + 1")


class TestParsePolynomial:
    @pytest.mark.parametrize(
        "text",
        ["0", "1", "-1", "x", "-x", "-x+1", "x^2-3/2*x+1", "x^17-3/2*x^2+1", "-1/2", "x^3-2*x^2+5/3*x+3", "NaN"],
    )
    def test_round_trip(self, text) -> None:
        assert parse_polynomial(text).to_string() == text

    def test_like_terms_combine(self) -> None:
        assert parse_polynomial("x+2*x-1+1").to_string() == "3*x"

    def test_out_of_order_terms_are_sorted(self) -> None:
        assert parse_polynomial("1+x+x^3").to_string() == "x^3+x+1"

    def test_leading_plus(self) -> None:
        assert parse_polynomial("+x") == parse_polynomial("x")

    def test_nan_anywhere(self) -> None:
        assert parse_polynomial("x^2+NaN*x").is_nan()
        assert parse_polynomial("x-NaN") == Polynomial.nan()

    @pytest.mark.parametrize("text", ["", "x+", "x+-1", "--x", "x^-2", "2x", "x+y", "1/2/3"])
    def test_malformed_raises(self, text) -> None:
        with pytest.raises(ValueError):
            parse_polynomial(text)


class TestParseTerm:
    @pytest.mark.parametrize(
        "text, coeff, expt",
        [
            ("3/4*x^10", Rational(3, 4), 10),
            ("3*x", Rational(3), 1),
            ("x^5", Rational(1), 5),
            ("-x^5", Rational(-1), 5),
            ("x", Rational(1), 1),
            ("-x", Rational(-1), 1),
            ("-7/2", Rational(-7, 2), 0),
        ],
    )
    def test_forms(self, text, coeff, expt) -> None:
        assert parse_term(text) == Term(coeff, expt)

    def test_term_parse_delegates(self) -> None:
        assert Term.parse("2*x^2") == parse_term("2*x^2")
