from __future__ import annotations
from dataclasses import dataclass
import operator
import re

from errors import DivisionByZero, ParseError


_RATIONAL_RE = re.compile(r"\s*([+-]?\d+)\s*(?:/\s*(\d+))?\s*")


def _gcd(a: int, b: int) -> int:
    # Euclide sui valori assoluti
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


@dataclass(frozen=True, slots=True, eq=False)
class Rational:
    """Exact fraction, always in lowest terms with a positive denominator."""

    numerator: int = 0
    denominator: int = 1

    def __post_init__(self):
        n, d = self.numerator, self.denominator
        if isinstance(n, Rational) or isinstance(d, Rational):
            # Rational(a, b) con a, b razionali => a / b
            q = Rational._coerce(n) / Rational._coerce(d)
            n, d = q.numerator, q.denominator
        n, d = operator.index(n), operator.index(d)
        if d == 0:
            raise DivisionByZero("denominator was zero")
        if d < 0:
            n, d = -n, -d
        g = _gcd(n, d)
        object.__setattr__(self, "numerator", n // g)
        object.__setattr__(self, "denominator", d // g)

    # ---- factory ----
    @classmethod
    def parse(cls, s: str) -> "Rational":
        m = _RATIONAL_RE.fullmatch(s)
        if not m:
            raise ParseError(f"invalid rational number: {s!r}", s)
        num, den = m.group(1), m.group(2)
        return cls(int(num), int(den) if den is not None else 1)

    @staticmethod
    def _coerce(x) -> "Rational":
        if isinstance(x, Rational):
            return x
        if isinstance(x, int):
            return Rational(x, 1)
        return NotImplemented

    # ---- algebra ----
    def __add__(self, other) -> "Rational":
        other = Rational._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Rational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    __radd__ = __add__

    def __neg__(self) -> "Rational":
        return Rational(-self.numerator, self.denominator)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return Rational(abs(self.numerator), self.denominator)

    def __sub__(self, other) -> "Rational":
        other = Rational._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other) -> "Rational":
        other = Rational._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other) -> "Rational":
        other = Rational._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Rational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    __rmul__ = __mul__

    def __truediv__(self, other) -> "Rational":
        other = Rational._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if other.numerator == 0:
            raise DivisionByZero("division by zero")
        return Rational(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def __rtruediv__(self, other) -> "Rational":
        other = Rational._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __pow__(self, n: int) -> "Rational":
        n = int(n)
        if n < 0:
            if self.numerator == 0:
                raise DivisionByZero("zero raised to a negative power")
            return Rational(self.denominator ** -n, self.numerator ** -n)
        return Rational(self.numerator ** n, self.denominator ** n)

    # ---- comparison ----
    def _compare(self, other) -> int:
        # positivo se self > other, negativo se self < other
        return self.numerator * other.denominator - self.denominator * other.numerator

    def __eq__(self, other) -> bool:
        other = Rational._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.numerator == other.numerator and self.denominator == other.denominator

    def __hash__(self) -> int:
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __lt__(self, other) -> bool:
        other = Rational._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other) -> bool:
        other = Rational._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other) -> bool:
        other = Rational._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other) -> bool:
        other = Rational._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) >= 0

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __float__(self) -> float:
        return self.numerator / self.denominator

    # ---- rendering ----
    def __str__(self) -> str:
        if self.numerator == 0 or self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"
