#!/usr/bin/env python3
"""RPN polynomial calculator.

    polycalc x+1 x-1 mul          ->  x^2-1
    polycalc x^2+2*x+1 eval:3     ->  16.0

With no words on the command line, words are read from stdin one line at a
time and the stack is printed after each line.
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO

import opts
from poly_stack import PolyStack
from polynomial import Polynomial

logger = logging.getLogger(__name__)

COMMANDS: Dict[str, Callable[[PolyStack], None]] = {
    "add": PolyStack.add,
    "sub": PolyStack.sub,
    "mul": PolyStack.mul,
    "div": PolyStack.div,
    "diff": PolyStack.differentiate,
    "integ": PolyStack.integrate,
    "dup": PolyStack.dup,
    "swap": PolyStack.swap,
    "clear": PolyStack.clear,
}


def show_stack(stack: PolyStack, out: TextIO) -> None:
    if len(stack) == 0:
        print("(empty)", file=out)
        return
    for p in stack:
        print(p, file=out)


def _numbers(word: str, n: int) -> List[str]:
    parts = word.split(":")[1:]
    if len(parts) != n:
        raise ValueError(f"'{word}' takes {n} argument(s)")
    return parts


def run_word(stack: PolyStack, word: str, out: TextIO) -> None:
    if word in COMMANDS:
        COMMANDS[word](stack)
    elif word == "pop":
        stack.pop()
    elif word == "print":
        show_stack(stack, out)
    elif word.startswith("eval:"):
        (x,) = _numbers(word, 1)
        print(stack.peek().eval(float(x)), file=out)
    elif word.startswith("integrate:"):
        a, b = _numbers(word, 2)
        print(stack.peek().integrate(float(a), float(b)), file=out)
    elif word.startswith("table:"):
        a, b, n = _numbers(word, 3)
        xs, ys = stack.peek().sample(float(a), float(b), int(n))
        for x, y in zip(xs, ys):
            print(f"{x:g}\t{y:g}", file=out)
    else:
        logger.debug("literal %s", word)
        stack.push(Polynomial.parse(word))


def run_words(stack: PolyStack, words: List[str], out: TextIO) -> None:
    for w in words:
        run_word(stack, w, out)


def repl(stack: PolyStack, inp: TextIO, out: TextIO, err: TextIO) -> None:
    for line in inp:
        try:
            run_words(stack, line.split(), out)
        except (ValueError, IndexError, TypeError) as e:
            print(f"error: {e}", file=err)
        show_stack(stack, out)


def run(argv: Optional[List[str]] = None, inp: Optional[TextIO] = None,
        out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    inp = inp or sys.stdin
    out = out or sys.stdout
    err = err or sys.stderr
    parser = argparse.ArgumentParser(
        description="Exact rational polynomial calculator (RPN).",
        usage="%(prog)s [options] [WORD ...]",
    )
    opts.setup(parser)
    flags, words = opts.split_flags(sys.argv[1:] if argv is None else list(argv))
    args = parser.parse_args(flags)
    opts.read(args)
    level = logging.DEBUG if opts.verbose.value else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    stack = PolyStack()
    if not words:
        repl(stack, inp, out, err)
        return 0
    try:
        run_words(stack, words, out)
    except (ValueError, IndexError, TypeError) as e:
        print(f"error: {e}", file=err)
        return 1
    if not any(w == "print" or ":" in w for w in words):
        show_stack(stack, out)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
