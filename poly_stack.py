from __future__ import annotations
import logging
from typing import Iterator, List

import opts
from polynomial import Polynomial
from rational import Rational

logger = logging.getLogger(__name__)


class PolyStack:
    """LIFO stack of polynomials driven by calculator commands.

    Index 0 of `nth_from_top` is the top. Arithmetic pops its operands and
    pushes the result; algebraic failures come back as NaN polynomials, while
    running out of operands raises IndexError and leaves the stack untouched.
    """

    def __init__(self) -> None:
        self._polys: List[Polynomial] = []

    def _check_rep(self) -> None:
        if not opts.check_rep.value:
            return
        for p in self._polys:
            assert isinstance(p, Polynomial), f"stack holds a {type(p).__name__}"

    def _require(self, n: int, op: str) -> None:
        if len(self._polys) < n:
            raise IndexError(f"{op} needs {n} operand(s), stack has {len(self._polys)}")

    def size(self) -> int:
        return len(self._polys)

    def __len__(self) -> int:
        return len(self._polys)

    def __iter__(self) -> Iterator[Polynomial]:
        """Bottom to top."""
        return iter(list(self._polys))

    def push(self, p: Polynomial) -> None:
        if not isinstance(p, Polynomial):
            raise TypeError(f"Cannot push {type(p).__name__} onto a PolyStack")
        self._polys.append(p)
        logger.debug("push %s (size=%d)", p, len(self._polys))
        self._check_rep()

    def pop(self) -> Polynomial:
        self._require(1, "pop")
        p = self._polys.pop()
        logger.debug("pop %s (size=%d)", p, len(self._polys))
        self._check_rep()
        return p

    def peek(self) -> Polynomial:
        return self.nth_from_top(0)

    def nth_from_top(self, index: int) -> Polynomial:
        if index < 0 or index >= len(self._polys):
            raise IndexError(f"No element {index} from top in a stack of {len(self._polys)}")
        return self._polys[-1 - index]

    def dup(self) -> None:
        self._require(1, "dup")
        self.push(self._polys[-1])

    def swap(self) -> None:
        self._require(2, "swap")
        self._polys[-1], self._polys[-2] = self._polys[-2], self._polys[-1]
        logger.debug("swap")
        self._check_rep()

    def clear(self) -> None:
        self._polys.clear()
        logger.debug("clear")
        self._check_rep()

    def _binary(self, op: str, fn) -> None:
        self._require(2, op)
        top = self._polys.pop()
        second = self._polys.pop()
        result = fn(second, top)
        logger.debug("%s: %s, %s -> %s", op, second, top, result)
        self.push(result)

    def add(self) -> None:
        self._binary("add", lambda a, b: a + b)

    def sub(self) -> None:
        self._binary("sub", lambda a, b: a - b)

    def mul(self) -> None:
        self._binary("mul", lambda a, b: a * b)

    def div(self) -> None:
        self._binary("div", lambda a, b: a / b)

    def differentiate(self) -> None:
        self._require(1, "differentiate")
        self.push(self._polys.pop().derivative())

    def integrate(self) -> None:
        """Replace the top with its antiderivative, constant 0."""
        self._require(1, "integrate")
        self.push(self._polys.pop().antiderivative(Rational.zero()))
