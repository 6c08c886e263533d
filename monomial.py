from __future__ import annotations
from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Tuple

from errors import NegativeExponent, NotDivisible


def _strip(exps: Iterable[int]) -> Tuple[int, ...]:
    """Tuple of exponents without trailing zeros."""
    out = [int(e) for e in exps]
    while out and out[-1] == 0:
        out.pop()
    return tuple(out)


# ------------------ Monomial class ------------------
@dataclass(frozen=True, slots=True)
class Monomial:
    """
    A power product x_0^e_0 * x_1^e_1 * ... over an unbounded, ordered set
    of variables. Variables are identified by position only: with the
    variables (z, y, x), z*x^3 is Monomial((1, 0, 3)).

    The exponent tuple never has trailing zeros, so equal monomials have
    equal tuples; the empty tuple is the monomial 1.
    """

    exponents: Tuple[int, ...] = ()

    def __post_init__(self):
        exps = _strip(self.exponents)
        if any(e < 0 for e in exps):
            raise NegativeExponent("negative exponents are not allowed in monomials")
        object.__setattr__(self, "exponents", exps)

    # ---- factory ----
    @classmethod
    def one(cls) -> "Monomial":
        return cls(())

    @classmethod
    def variable(cls, n: int) -> "Monomial":
        """The n-th variable (0-based)."""
        if n < 0:
            raise IndexError(f"variable index must be nonnegative, got {n}")
        return cls((0,) * n + (1,))

    # ---- queries ----
    @property
    def degree(self) -> int:
        return sum(self.exponents)

    @property
    def nvars(self) -> int:
        """Number of variables this monomial spans, including zero exponents."""
        return len(self.exponents)

    def is_one(self) -> bool:
        return not self.exponents

    def is_divisible_by(self, other: "Monomial") -> bool:
        if len(self.exponents) < len(other.exponents):
            # other uses a variable that self does not
            return False
        return all(a >= b for a, b in zip(self.exponents, other.exponents))

    # ---- algebra ----
    def __mul__(self, other: "Monomial") -> "Monomial":
        if not isinstance(other, Monomial):
            return NotImplemented
        return Monomial(
            a + b for a, b in zip_longest(self.exponents, other.exponents, fillvalue=0)
        )

    def __truediv__(self, other: "Monomial") -> "Monomial":
        if not isinstance(other, Monomial):
            return NotImplemented
        if not self.is_divisible_by(other):
            raise NotDivisible(f"{self!r} is not divisible by {other!r}")
        return Monomial(
            a - b for a, b in zip_longest(self.exponents, other.exponents, fillvalue=0)
        )

    def __pow__(self, n: int) -> "Monomial":
        n = int(n)
        if n < 0:
            raise NegativeExponent("monomial raised to a negative power")
        if n == 0:
            return Monomial.one()
        return Monomial(e * n for e in self.exponents)

    def lcm(self, other: "Monomial") -> "Monomial":
        return Monomial(
            max(a, b) for a, b in zip_longest(self.exponents, other.exponents, fillvalue=0)
        )

    # ---- rendering ----
    def to_string(self, printer) -> str:
        return printer.power_product_string(self.exponents)

    def __repr__(self) -> str:
        return f"Monomial({self.exponents})"
