from __future__ import annotations
import math
from typing import Iterable, Iterator, List, Tuple
from dataclasses import dataclass, field

import numpy as np

import opts
from rational import Rational
from term import Term


def sorted_insert(terms: List[Term], new: Term) -> None:
    """Insert `new` into `terms`, keeping exponents strictly descending.

    A term whose exponent is already present is merged into that slot, and the
    slot is removed if the coefficients cancel. Zero terms are ignored.
    """
    if new.is_zero():
        return
    i = 0
    while i < len(terms) and terms[i].expt >= new.expt:
        if terms[i].expt == new.expt:
            merged = Term(terms[i].coeff + new.coeff, new.expt)
            if merged.is_zero():
                del terms[i]
            else:
                terms[i] = merged
            return
        i += 1
    terms.insert(i, new)


@dataclass(frozen=True, eq=False)
class Polynomial:
    terms: Tuple[Term, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "terms", tuple(self.terms))
        if opts.check_rep.value:
            self.check_rep()

    def check_rep(self) -> None:
        for i, t in enumerate(self.terms):
            assert not t.is_zero(), f"zero coefficient at position {i}"
            assert t.expt >= 0, f"negative exponent {t.expt}"
            if i + 1 < len(self.terms):
                assert self.terms[i + 1].expt < t.expt, "exponents not strictly descending"

    @staticmethod
    def zero() -> "Polynomial":
        return Polynomial()

    @staticmethod
    def nan() -> "Polynomial":
        return Polynomial((Term.nan(),))

    @staticmethod
    def from_term(t: Term) -> "Polynomial":
        if t.is_zero():
            return Polynomial()
        return Polynomial((t,))

    @staticmethod
    def monomial(coeff: int, expt: int) -> "Polynomial":
        return Polynomial.from_term(Term(Rational(coeff), expt))

    @staticmethod
    def from_terms(terms: Iterable[Term]) -> "Polynomial":
        acc: List[Term] = []
        for t in terms:
            sorted_insert(acc, t)
        return Polynomial(acc)

    @staticmethod
    def parse(text: str) -> "Polynomial":
        from polynomial_parser import parse_polynomial
        return parse_polynomial(text)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def is_nan(self) -> bool:
        return any(t.is_nan() for t in self.terms)

    def is_zero(self) -> bool:
        return len(self.terms) == 0

    def degree(self) -> int:
        # 0 for both the zero polynomial and constants; check is_zero() to tell them apart
        if not self.terms:
            return 0
        return self.terms[0].expt

    def term(self, expt: int) -> Term:
        for t in self.terms:
            if t.expt == expt:
                return t
        return Term.zero()

    def __neg__(self) -> "Polynomial":
        if self.is_nan():
            return Polynomial.nan()
        return Polynomial(tuple(-t for t in self.terms))

    def __add__(self, rhs: "Polynomial") -> "Polynomial":
        if self.is_nan() or rhs.is_nan():
            return Polynomial.nan()
        acc = list(self.terms)
        for t in rhs.terms:
            sorted_insert(acc, t)
        return Polynomial(acc)

    def __sub__(self, rhs: "Polynomial") -> "Polynomial":
        return self + (-rhs)

    def __mul__(self, rhs: "Polynomial") -> "Polynomial":
        if self.is_nan() or rhs.is_nan():
            return Polynomial.nan()
        acc: List[Term] = []
        for a in self.terms:
            for b in rhs.terms:
                sorted_insert(acc, a * b)
        return Polynomial(acc)

    def __truediv__(self, rhs: "Polynomial") -> "Polynomial":
        """Truncating long division; the remainder is discarded.

        "x^3-2*x+3" / "3*x^2" is "1/3*x" (remainder "-2*x+3").
        """
        if self.is_nan() or rhs.is_nan() or rhs.is_zero():
            return Polynomial.nan()
        quotient: List[Term] = []
        remaining = self
        lead = rhs.terms[0]
        while not remaining.is_zero() and remaining.degree() >= rhs.degree():
            q = remaining.terms[0] / lead
            before = remaining.degree()
            remaining = remaining - rhs * Polynomial.from_term(q)
            if opts.check_rep.value:
                assert remaining.is_zero() or remaining.degree() < before, "division made no progress"
            sorted_insert(quotient, q)
        return Polynomial(quotient)

    def derivative(self) -> "Polynomial":
        if self.is_nan():
            return Polynomial.nan()
        terms = [t.derivative() for t in self.terms]
        return Polynomial(tuple(t for t in terms if not t.is_zero()))

    def antiderivative(self, constant: Rational) -> "Polynomial":
        """Term-wise antiderivative plus `constant` as the x^0 term."""
        if constant is None:
            raise TypeError("antiderivative requires an integration constant")
        if self.is_nan() or constant.is_nan():
            return Polynomial.nan()
        acc = [t.antiderivative() for t in self.terms]
        sorted_insert(acc, Term(constant, 0))
        return Polynomial(acc)

    def integrate(self, lower: float, upper: float) -> float:
        """Definite integral from `lower` to `upper` (either order)."""
        if self.is_nan() or not math.isfinite(lower) or not math.isfinite(upper):
            return math.nan
        F = self.antiderivative(Rational.zero())
        return F.eval(upper) - F.eval(lower)

    def eval(self, x: float) -> float:
        if self.is_nan():
            return math.nan
        total = 0.0
        for t in self.terms:
            total += t.eval(x)
        return total

    def eval_many(self, xs) -> np.ndarray:
        """Evaluate at every point of an array-like."""
        xs = np.asarray(xs, dtype=float)
        if self.is_nan():
            return np.full(xs.shape, np.nan)
        out = np.zeros(xs.shape)
        with np.errstate(over="ignore", invalid="ignore"):
            for t in self.terms:
                out += t.coeff.to_float() * np.power(xs, t.expt)
        return out

    def sample(self, lower: float, upper: float, count: int) -> Tuple[np.ndarray, np.ndarray]:
        xs = np.linspace(lower, upper, count)
        return xs, self.eval_many(xs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.is_nan() or other.is_nan():
            return self.is_nan() and other.is_nan()
        return self.terms == other.terms

    def __hash__(self) -> int:
        if self.is_nan():
            return hash("NaN")
        return hash(self.terms)

    def to_string(self) -> str:
        if len(self.terms) == 0:
            return "0"
        if self.is_nan():
            return "NaN"
        parts: List[str] = []
        for idx, t in enumerate(self.terms):
            s = t.to_string()
            if idx > 0 and not s.startswith("-"):
                parts.append("+")
            parts.append(s)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Polynomial({self.to_string()!r})"
