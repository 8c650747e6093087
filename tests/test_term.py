"""Tests for Term: canonical zero, arithmetic, calculus and the text form."""

import math

import pytest

from rational import Rational
from term import Term


def t(text: str) -> Term:
    return Term.parse(text)


class TestConstruction:
    def test_zero_coefficient_forces_exponent_zero(self) -> None:
        z = Term(Rational.zero(), 5)
        assert z.exponent() == 0
        assert z == Term.zero()

    def test_nan_terms_equal(self) -> None:
        assert Term(Rational.nan(), 3) == Term.nan()
        assert hash(Term(Rational.nan(), 3)) == hash(Term.nan())
        assert Term(Rational.nan(), 3).is_nan()


class TestArithmetic:
    def test_add_same_exponent(self) -> None:
        assert t("2*x^3") + t("1/2*x^3") == t("5/2*x^3")

    def test_add_cancels_to_zero(self) -> None:
        assert (t("x^2") + t("-x^2")).is_zero()

    def test_add_mismatched_exponents_raises(self) -> None:
        with pytest.raises(ValueError):
            t("x^2") + t("x")

    def test_add_zero_keeps_other_exponent(self) -> None:
        assert Term.zero() + t("3*x^2") == t("3*x^2")
        assert t("3*x^2") + Term.zero() == t("3*x^2")

    def test_add_nan(self) -> None:
        assert (t("x^2") + Term.nan()).is_nan()

    def test_subtract(self) -> None:
        assert t("3*x") - t("x") == t("2*x")

    def test_multiply(self) -> None:
        assert t("2*x^2") * t("3/4*x") == t("3/2*x^3")

    def test_divide(self) -> None:
        assert t("x^3") / t("3*x^2") == t("1/3*x")

    def test_divide_nan(self) -> None:
        assert (t("x") / Term.nan()).is_nan()
        assert (Term.nan() / t("x")).is_nan()


class TestCalculus:
    def test_derivative(self) -> None:
        assert t("3*x^4").derivative() == t("12*x^3")
        assert t("5*x").derivative() == t("5")

    def test_derivative_of_constant_is_zero(self) -> None:
        assert t("7").derivative() == Term.zero()

    def test_antiderivative(self) -> None:
        assert t("3*x^2").antiderivative() == t("x^3")
        assert t("2").antiderivative() == t("2*x")

    def test_nan_calculus(self) -> None:
        assert Term.nan().derivative().is_nan()
        assert Term.nan().antiderivative().is_nan()

    def test_eval(self) -> None:
        assert t("-3/2*x^2").eval(2.0) == -6.0
        assert t("4").eval(10.0) == 4.0
        assert math.isnan(Term.nan().eval(1.0))


class TestText:
    @pytest.mark.parametrize(
        "coeff, expt, expected",
        [
            (Rational(1), 1, "x"),
            (Rational(-1), 1, "-x"),
            (Rational(1), 4, "x^4"),
            (Rational(-1), 4, "-x^4"),
            (Rational(1), 0, "1"),
            (Rational(-3, 2), 0, "-3/2"),
            (Rational(2), 1, "2*x"),
            (Rational(-2, 5), 3, "-2/5*x^3"),
            (Rational.nan(), 2, "NaN"),
            (Rational.zero(), 3, "0"),
        ],
    )
    def test_to_string(self, coeff, expt, expected) -> None:
        assert Term(coeff, expt).to_string() == expected

    @pytest.mark.parametrize("text", ["x", "-x", "x^4", "-x^4", "1", "-3/2", "2*x", "-2/5*x^3", "NaN"])
    def test_round_trip(self, text) -> None:
        assert t(text).to_string() == text

    def test_parse_values(self) -> None:
        assert t("3/4*x^10") == Term(Rational(3, 4), 10)
        assert t("-x") == Term(Rational(-1), 1)

    @pytest.mark.parametrize("text", ["", "x^", "x^-1", "*x", "2x", "2*y", "2*x^2^3", "x*2", "+-x", "2*x3"])
    def test_malformed_raises(self, text) -> None:
        with pytest.raises(ValueError):
            t(text)


class TestOverflow:
    """Evaluation past the float range gives inf, as eval_many does"""

    def test_eval_overflows_to_inf(self) -> None:
        assert t("x^400").eval(10.0) == math.inf
        assert t("x^3").eval(-1e200) == -math.inf
        assert t("-2*x^2").eval(1e200) == -math.inf
