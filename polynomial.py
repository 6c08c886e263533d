from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from errors import NegativeExponent, NotAMonomial, NotDivisible, UndefinedLeadingTerm
from monomial import Monomial
from ordering import Lex, TermOrder, sort_monomials
from printer import StreamPrinter
from rational import Rational
import state


@dataclass(frozen=True, slots=True, eq=False)
class Polynomial:
    """
    A finite map from Monomials to nonzero coefficients. The coefficients
    belong to `field`, any exact field type that supports + - * / and
    can be built from a small int (Rational by default, Fraction works too).

    A polynomial has no built-in term order: every "leading" query takes
    the order as an argument, so the same value can be looked at under
    different orders.
    """

    terms: Mapping[Monomial, Any]
    field: type = Rational

    def __post_init__(self):
        zero = self.field(0)
        items = self.terms.items() if isinstance(self.terms, Mapping) else self.terms
        # Combine like terms and drop zero coefficients
        cleaned: Dict[Monomial, Any] = {}
        for m, c in items:
            if not isinstance(c, self.field):
                c = self.field(c)
            cleaned[m] = cleaned[m] + c if m in cleaned else c
        cleaned = {m: c for m, c in cleaned.items() if c != zero}
        object.__setattr__(self, "terms", MappingProxyType(cleaned))

    # ---- factory ----
    @classmethod
    def zero(cls, field: type = Rational) -> "Polynomial":
        return cls({}, field)

    @classmethod
    def const(cls, c, field: type = Rational) -> "Polynomial":
        return cls({Monomial.one(): c}, field)

    @classmethod
    def var(cls, n: int, field: type = Rational) -> "Polynomial":
        return cls.from_monomial(Monomial.variable(n), field)

    @classmethod
    def from_monomial(cls, m: Monomial, field: type = Rational) -> "Polynomial":
        return cls({m: field(1)}, field)

    @classmethod
    def from_terms(cls, pairs: Iterable[Tuple[Any, Monomial]], field: type = Rational) -> "Polynomial":
        """Build from (coefficient, monomial) pairs; repeated monomials are summed."""
        return cls([(m, c) for c, m in pairs], field)

    @classmethod
    def parse(cls, s: str, variables: Optional[List[str]] = None, field: type = Rational) -> "Polynomial":
        # Parser imports this module, so the import has to stay local
        from Parser import PolynomialParser

        names = state.ringvar if variables is None else variables
        return PolynomialParser(names, field=field).parse(s)

    def _coerce(self, other) -> "Polynomial":
        if isinstance(other, Polynomial):
            return other
        if isinstance(other, Monomial):
            return Polynomial.from_monomial(other, self.field)
        if isinstance(other, (int, self.field)):
            return Polynomial.const(other, self.field)
        return NotImplemented

    # ---- queries ----
    def is_zero(self) -> bool:
        return not self.terms

    def is_monomial(self) -> bool:
        """True for a single term, whatever its coefficient."""
        return len(self.terms) == 1

    def __bool__(self) -> bool:
        return bool(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def monomials(self) -> List[Monomial]:
        return list(self.terms)

    def coefficient(self, m: Monomial):
        return self.terms.get(m, self.field(0))

    @property
    def degree(self) -> int:
        """Total degree; -1 for the zero polynomial."""
        if not self.terms:
            return -1
        return max(m.degree for m in self.terms)

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return dict(self.terms) == dict(other.terms)

    def __hash__(self) -> int:
        return hash(frozenset(self.terms.items()))

    # ---- algebra ----
    def __add__(self, other) -> "Polynomial":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        out = dict(self.terms)
        for m, c in other.terms.items():
            out[m] = out[m] + c if m in out else c
        return Polynomial(out, self.field)

    __radd__ = __add__

    def __neg__(self) -> "Polynomial":
        return Polynomial({m: -c for m, c in self.terms.items()}, self.field)

    def __pos__(self) -> "Polynomial":
        return self

    def __sub__(self, other) -> "Polynomial":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other) -> "Polynomial":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other) -> "Polynomial":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if not self.terms or not other.terms:
            return Polynomial.zero(self.field)

        # Multiply every pair of terms and collect by product monomial
        out: Dict[Monomial, Any] = {}
        for m_a, c_a in self.terms.items():
            for m_b, c_b in other.terms.items():
                m = m_a * m_b
                c = c_a * c_b
                out[m] = out[m] + c if m in out else c
        return Polynomial(out, self.field)

    __rmul__ = __mul__

    def mul_term(self, c, m: Monomial) -> "Polynomial":
        """self * (c * m) for a single term, without building it."""
        if c == self.field(0):
            return Polynomial.zero(self.field)
        return Polynomial({k * m: v * c for k, v in self.terms.items()}, self.field)

    def __pow__(self, n: int) -> "Polynomial":
        n = int(n)
        if n < 0:
            raise NegativeExponent("polynomial raised to a negative power")
        if len(self.terms) == 1:
            (m, c), = self.terms.items()
            if c == self.field(1):
                # a bare power product
                return Polynomial.from_monomial(m ** n, self.field)
        return self._recursive_pow(n)

    def _recursive_pow(self, n: int) -> "Polynomial":
        if n == 0:
            return Polynomial.const(1, self.field)
        if n == 1:
            return self
        half = self._recursive_pow(n // 2)
        sq = half * half
        return sq * self if n % 2 else sq

    def is_divisible_by(self, other) -> bool:
        """True if other is a single term dividing every term of self."""
        other = self._coerce(other)
        if other is NotImplemented or len(other.terms) != 1:
            return False
        (d, _), = other.terms.items()
        return all(m.is_divisible_by(d) for m in self.terms)

    def __truediv__(self, other) -> "Polynomial":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if len(other.terms) != 1:
            raise NotAMonomial("polynomials can only be divided by monomials")
        if not self.is_divisible_by(other):
            raise NotDivisible("polynomial not divisible")
        (d, dc), = other.terms.items()
        return Polynomial({m / d: c / dc for m, c in self.terms.items()}, self.field)

    # ---- ordered queries ----
    def leading_monomial(self, order: TermOrder) -> Monomial:
        if not self.terms:
            raise UndefinedLeadingTerm("leading monomial of the zero polynomial")
        return order.max(self.terms)

    def leading_coefficient(self, order: TermOrder):
        if not self.terms:
            return self.field(0)
        return self.terms[order.max(self.terms)]

    def leading_term(self, order: TermOrder) -> "Polynomial":
        if not self.terms:
            return Polynomial.zero(self.field)
        m = order.max(self.terms)
        return Polynomial({m: self.terms[m]}, self.field)

    def normalized(self, order: TermOrder) -> "Polynomial":
        """The monic multiple of self; zero stays zero."""
        if not self.terms:
            return self
        lc = self.leading_coefficient(order)
        return Polynomial({m: c / lc for m, c in self.terms.items()}, self.field)

    def ordered_terms(self, order: Optional[TermOrder] = None) -> List[Tuple[Any, Monomial]]:
        """(coefficient, monomial) pairs, greatest first (lex when no order is given)."""
        return [(self.terms[m], m) for m in sort_monomials(self.terms, order or Lex)]

    # ---- rendering ----
    def to_string(self, printer, order: Optional[TermOrder] = None) -> str:
        for c, m in self.ordered_terms(order):
            printer.add_term(c, m)
        return printer.print()

    def __str__(self) -> str:
        return self.to_string(StreamPrinter(state.ringvar))

    def __repr__(self) -> str:
        inner = ", ".join(f"{m!r}: {c!r}" for c, m in self.ordered_terms())
        return f"Polynomial({{{inner}}})"
