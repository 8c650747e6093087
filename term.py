from __future__ import annotations
import math
from dataclasses import dataclass
import numpy as np
import opts
from rational import Rational

@dataclass(frozen=True, eq=False)
class Term:
	"""coeff * x^expt. A zero coefficient always carries exponent 0."""
	coeff: Rational
	expt: int = 0
	def __post_init__(self) -> None:
		if self.coeff.is_zero() and self.expt != 0:
			object.__setattr__(self, "expt", 0)
		if opts.check_rep.value:
			self._check_rep()
	def _check_rep(self) -> None:
		assert isinstance(self.coeff, Rational), "coefficient must be a Rational"
		assert not self.coeff.is_zero() or self.expt == 0, "zero term with nonzero exponent"
	@staticmethod
	def nan() -> Term:
		return Term(Rational.nan(), 0)
	@staticmethod
	def zero() -> Term:
		return Term(Rational.zero(), 0)
	def coefficient(self) -> Rational:
		return self.coeff
	def exponent(self) -> int:
		return self.expt
	def is_nan(self) -> bool:
		return self.coeff.is_nan()
	def is_zero(self) -> bool:
		return self.coeff.is_zero()
	def eval(self, x: float) -> float:
		if self.is_nan():
			return math.nan
		# float64 power overflows to +-inf instead of raising
		with np.errstate(over="ignore", invalid="ignore"):
			return float(self.coeff.to_float() * np.power(np.float64(x), self.expt))
	def __neg__(self) -> Term:
		return Term(-self.coeff, self.expt)
	def __add__(self, other: Term) -> Term:
		if self.is_nan() or other.is_nan():
			return Term.nan()
		if self.is_zero():
			return other
		if other.is_zero():
			return self
		if self.expt != other.expt:
			raise ValueError(f"Cannot add terms with exponents {self.expt} and {other.expt}")
		return Term(self.coeff + other.coeff, self.expt)
	def __sub__(self, other: Term) -> Term:
		return self + (-other)
	def __mul__(self, other: Term) -> Term:
		if self.is_nan() or other.is_nan():
			return Term.nan()
		return Term(self.coeff * other.coeff, self.expt + other.expt)
	def __truediv__(self, other: Term) -> Term:
		# exponents may go negative here; Polynomial rejects such terms
		if self.is_nan() or other.is_nan():
			return Term.nan()
		return Term(self.coeff / other.coeff, self.expt - other.expt)
	def derivative(self) -> Term:
		if self.is_nan():
			return Term.nan()
		return Term(self.coeff * self.expt, self.expt - 1 if self.expt > 0 else 0)
	def antiderivative(self) -> Term:
		if self.is_nan():
			return Term.nan()
		return Term(self.coeff / (self.expt + 1), self.expt + 1)
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Term):
			return NotImplemented
		if self.is_nan() or other.is_nan():
			return self.is_nan() and other.is_nan()
		return self.coeff == other.coeff and self.expt == other.expt
	def __hash__(self) -> int:
		if self.is_nan():
			return hash("NaN")
		return hash((self.coeff, self.expt))
	def to_string(self) -> str:
		if self.is_nan():
			return "NaN"
		sign = "-" if self.coeff.is_negative() else ""
		abs_coeff = -self.coeff if sign else self.coeff
		if self.expt == 0:
			return f"{sign}{abs_coeff.to_string()}"
		coeff_part = "" if abs_coeff == Rational.one() else abs_coeff.to_string() + "*"
		x_part = "x" if self.expt == 1 else f"x^{self.expt}"
		return f"{sign}{coeff_part}{x_part}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Term({self.to_string()!r})"
	@staticmethod
	def parse(text: str) -> Term:
		from polynomial_parser import parse_term
		return parse_term(text)
