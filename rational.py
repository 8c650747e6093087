from __future__ import annotations
import math
import re
from fractions import Fraction

_INT = re.compile(r"[+-]?\d+")

class Rational:
	"""Exact fraction in lowest terms, or NaN.

	NaN is stored as a missing value rather than a zero denominator, so every
	NaN is the same value no matter how it was built.
	"""
	__slots__ = ("_f",)
	def __init__(self, num: int | Fraction, den: int | None = None) -> None:
		if isinstance(num, Fraction):
			if den is not None:
				raise TypeError("A Fraction argument takes no separate denominator")
			self._f: Fraction | None = num
		elif den == 0:
			self._f = None
		else:
			self._f = Fraction(num, 1 if den is None else den)
	@staticmethod
	def nan() -> Rational:
		return Rational(1, 0)
	@staticmethod
	def zero() -> Rational:
		return Rational(0)
	@staticmethod
	def one() -> Rational:
		return Rational(1)
	def __neg__(self) -> Rational:
		if self._f is None:
			return self
		return Rational(-self._f)
	def __add__(self, other: Rational) -> Rational:
		if self._f is None or other._f is None:
			return Rational.nan()
		return Rational(self._f + other._f)
	def __sub__(self, other: Rational) -> Rational:
		if self._f is None or other._f is None:
			return Rational.nan()
		return Rational(self._f - other._f)
	def __mul__(self, other: Rational | int) -> Rational:
		if not isinstance(other, Rational):
			other = Rational(other)
		if self._f is None or other._f is None:
			return Rational.nan()
		return Rational(self._f * other._f)
	def __truediv__(self, other: Rational | int) -> Rational:
		if not isinstance(other, Rational):
			other = Rational(other)
		# dividing by NaN gives zero, not NaN
		if other._f is None:
			return Rational.zero()
		if self._f is None:
			return self
		# a zero divisor lands on a zero denominator, i.e. NaN
		return Rational(self.numerator() * other.denominator(), self.denominator() * other.numerator())
	def compare(self, other: Rational) -> int:
		"""-1, 0 or 1; NaN sorts above every number."""
		if self._f is None:
			return 0 if other._f is None else 1
		if other._f is None:
			return -1
		diff = self._f - other._f
		return (diff > 0) - (diff < 0)
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		if self._f is None or other._f is None:
			return self._f is None and other._f is None
		return self._f == other._f
	def __hash__(self) -> int:
		if self._f is None:
			return hash("NaN")
		return hash(self._f)
	def __lt__(self, other: Rational) -> bool:
		return self.compare(other) < 0
	def __le__(self, other: Rational) -> bool:
		return self.compare(other) <= 0
	def __gt__(self, other: Rational) -> bool:
		return self.compare(other) > 0
	def __ge__(self, other: Rational) -> bool:
		return self.compare(other) >= 0
	def is_nan(self) -> bool:
		return self._f is None
	def is_zero(self) -> bool:
		return self._f is not None and self._f == 0
	def is_negative(self) -> bool:
		return self._f is not None and self._f < 0
	def is_positive(self) -> bool:
		return self._f is not None and self._f > 0
	def numerator(self) -> int:
		return 1 if self._f is None else self._f.numerator
	def denominator(self) -> int:
		return 0 if self._f is None else self._f.denominator
	def to_float(self) -> float:
		if self._f is None:
			return math.nan
		return float(self._f)
	def to_string(self) -> str:
		if self._f is None:
			return "NaN"
		if self._f.denominator == 1:
			return str(self._f.numerator)
		return f"{self._f.numerator}/{self._f.denominator}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Rational({self.to_string()!r})"
	@staticmethod
	def parse(text: str) -> Rational:
		"""Read "NaN", "n" or "n/d"."""
		if text == "NaN":
			return Rational.nan()
		parts = text.split("/")
		if len(parts) > 2 or not all(_INT.fullmatch(p) for p in parts):
			raise ValueError(f"Malformed rational '{text}'")
		if len(parts) == 1:
			return Rational(int(parts[0]))
		return Rational(int(parts[0]), int(parts[1]))
