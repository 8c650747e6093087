from __future__ import annotations
import re
from typing import List
from rational import Rational
from term import Term
from polynomial import Polynomial, sorted_insert

# Lexer for the canonical printed form, e.g. "x^2-3/2*x+1".
# Signs between terms are kept as their own tokens.
class Tok:
	def __init__(self, kind: str, lex: str = ""):
		self.kind, self.lex = kind, lex
	def __repr__(self) -> str:
		return f"Tok({self.kind!r}, {self.lex!r})"

_EXPT = re.compile(r"\d+")

def tokenize(expr: str) -> List[Tok]:
	toks: List[Tok] = []
	i, n = 0, len(expr)
	while i < n:
		c = expr[i]
		if c.isspace():
			raise ValueError(f"Unexpected whitespace at {i} in '{expr}'")
		if c in "+-":
			toks.append(Tok(c, c))
			i += 1; continue
		j = i
		while j < n and expr[j] not in "+-" and not expr[j].isspace():
			j += 1
		toks.append(Tok('TERM', expr[i:j]))
		i = j
	return toks

def parse_term(text: str) -> Term:
	"""Read one term: A*x^B, A*x, x^B, A, x, -x^B, -x or NaN."""
	if text == "NaN":
		return Term.nan()
	if not text:
		raise ValueError("Empty term")
	star, caret, xpos = text.find("*"), text.find("^"), text.find("x")
	if xpos == -1:
		# form A
		if star != -1 or caret != -1:
			raise ValueError(f"Malformed term '{text}'")
		return Term(Rational.parse(text), 0)
	if star == -1:
		# forms x^B, x, -x^B, -x
		head = text[:xpos]
		if head == "":
			coeff = Rational.one()
		elif head == "-":
			coeff = Rational(-1)
		else:
			raise ValueError(f"Malformed term '{text}'")
	else:
		# forms A*x^B, A*x
		if star != xpos - 1 or star == 0:
			raise ValueError(f"Malformed term '{text}'")
		coeff = Rational.parse(text[:star])
	tail = text[xpos+1:]
	if tail == "":
		expt = 1
	elif tail[0] == "^" and _EXPT.fullmatch(tail[1:]):
		expt = int(tail[1:])
	else:
		raise ValueError(f"Malformed exponent in term '{text}'")
	return Term(coeff, expt)

def parse_polynomial(expr: str) -> Polynomial:
	toks = tokenize(expr)
	if not toks:
		raise ValueError("Empty polynomial")
	terms: List[Term] = []
	negative = False
	pending_sign = False
	for t in toks:
		if t.kind in ('+', '-'):
			if pending_sign:
				raise ValueError(f"Repeated sign in '{expr}'")
			negative = t.kind == '-'
			pending_sign = True
			continue
		term = parse_term(t.lex)
		if negative:
			term = -term
		sorted_insert(terms, term)
		negative = pending_sign = False
	if pending_sign:
		raise ValueError(f"Dangling sign at end of '{expr}'")
	p = Polynomial(terms)
	if p.is_nan():
		return Polynomial.nan()
	return p
