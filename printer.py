from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Sequence
import re

from monomial import Monomial


class Printer(ABC):
    """
    Turns polynomials into text. Terms are pushed one at a time with
    add_term, in the order they should appear, and print() returns the
    assembled string and empties the buffer.
    """

    @abstractmethod
    def add_term(self, coef, monomial: Monomial) -> None:
        ...

    @abstractmethod
    def print(self) -> str:
        ...

    @abstractmethod
    def power_product_string(self, exponents: Sequence[int]) -> str:
        ...


_CLEANUPS = [
    (re.compile(r"\+ -"), "- "),     # x + -y  -> x - y
    (re.compile(r" 1\*"), " "),      # x + 1*y -> x + y
    (re.compile(r"^1\*"), ""),       # 1*x + y -> x + y
    (re.compile(r"^-1\*"), "-"),     # -1*x    -> -x
]


class StreamPrinter(Printer):
    """
    Plain-text printer: "-3*x*y^2 + 1/2*y - 2". The first len(variables)
    variables use the given names, the rest are called x1, x2, ...
    """

    def __init__(self, variables: Sequence[str] = ()):
        self.variables: List[str] = list(variables)
        self._buf: List[str] = []

    def var(self, n: int) -> str:
        if n < len(self.variables):
            return self.variables[n]
        return f"x{n + 1}"

    def add_term(self, coef, monomial: Monomial) -> None:
        self._buf.append(f"{coef}{monomial.to_string(self)}")

    def print(self) -> str:
        if not self._buf:
            return "0"
        out = " + ".join(self._buf)
        self._buf = []
        for pattern, repl in _CLEANUPS:
            out = pattern.sub(repl, out)
        return out

    def power_product_string(self, exponents: Sequence[int]) -> str:
        parts = []
        for n, e in enumerate(exponents):
            if e == 0:
                continue
            parts.append("*" + (self.var(n) if e == 1 else f"{self.var(n)}^{e}"))
        return "".join(parts)
