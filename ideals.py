from __future__ import annotations
from collections import deque
from typing import Iterable, List, Optional, Tuple
import logging

from errors import NullOrdering
from ordering import Lex, TermOrder
from polynomial import Polynomial
from printer import Printer, StreamPrinter
import state

logger = logging.getLogger(__name__)


class Ideal:
    """
    The ideal generated by a finite set of polynomials, kept as its reduced
    Groebner basis with respect to the active term order.

    Building the ideal (or changing its order) runs Buchberger's algorithm,
    then drops redundant elements and finally reduces every element by the
    others, so two ideals built under the same order have the same basis
    as a set.
    """

    def __init__(self, generators: Iterable[Polynomial] = (), order: TermOrder = Lex):
        if order is None:
            raise NullOrdering("an ideal needs a term order")
        self._order = order
        self._basis: List[Polynomial] = [g for g in generators if not g.is_zero()]
        self._build()

    @property
    def order(self) -> TermOrder:
        return self._order

    @property
    def basis(self) -> Tuple[Polynomial, ...]:
        return tuple(self._basis)

    def __len__(self) -> int:
        return len(self._basis)

    def __iter__(self):
        return iter(tuple(self._basis))

    def set_order(self, order: TermOrder) -> None:
        """Switch to another term order and recompute the basis from the current one."""
        if order is None:
            raise NullOrdering("term order must not be None")
        logger.info("changing term order %r -> %r", self._order, order)
        self._order = order
        self._build()

    def _build(self) -> None:
        self._compute_groebner_basis()
        self._minimize_groebner_basis()
        self._reduce_groebner_basis()
        logger.debug("reduced basis has %d elements", len(self._basis))

    # ---- division ----
    def reduce(self, p: Polynomial) -> Polynomial:
        """Remainder of p under multivariate division by the basis."""
        return self._reduce_by(p, self._basis)

    def _reduce_by(self, p: Polynomial, basis: List[Polynomial]) -> Polynomial:
        order = self._order
        leads = [(g.leading_monomial(order), g.leading_coefficient(order), g) for g in basis]
        remainder = Polynomial.zero(p.field)
        while not p.is_zero():
            lm = p.leading_monomial(order)
            lc = p.terms[lm]
            for g_lm, g_lc, g in leads:
                if lm.is_divisible_by(g_lm):
                    # cancel the leading term of p
                    p = p - g.mul_term(lc / g_lc, lm / g_lm)
                    break
            else:
                remainder = remainder + Polynomial({lm: lc}, p.field)
                p = p - Polynomial({lm: lc}, p.field)
        return remainder

    def s_polynomial(self, f: Polynomial, g: Polynomial) -> Polynomial:
        order = self._order
        f_lm, g_lm = f.leading_monomial(order), g.leading_monomial(order)
        lcm = f_lm.lcm(g_lm)
        return (
            f.mul_term(1 / f.leading_coefficient(order), lcm / f_lm)
            - g.mul_term(1 / g.leading_coefficient(order), lcm / g_lm)
        )

    # ---- basis construction ----
    def _compute_groebner_basis(self) -> None:
        # Buchberger: FIFO queue of pairs of basis elements
        G = self._basis
        pairs = deque((G[i], G[j]) for j in range(len(G)) for i in range(j))
        logger.debug("buchberger: %d generators, %d initial pairs", len(G), len(pairs))
        while pairs:
            f, g = pairs.popleft()
            h = self.reduce(self.s_polynomial(f, g))
            if h.is_zero():
                continue
            pairs.extend((b, h) for b in G)
            G.append(h)
            logger.debug("buchberger: new basis element #%d, %d pairs queued", len(G), len(pairs))

    def _minimize_groebner_basis(self) -> None:
        G, order = self._basis, self._order
        i = 0
        while i < len(G):
            lm = G[i].leading_monomial(order)
            if any(j != i and lm.is_divisible_by(G[j].leading_monomial(order)) for j in range(len(G))):
                logger.debug("minimize: dropping redundant element %d", i)
                del G[i]
            else:
                i += 1
        # monic basis
        self._basis = [g.normalized(order) for g in G]

    def _reduce_groebner_basis(self) -> None:
        # Each element is reduced against all the other *current* elements,
        # so later ones see the already reduced earlier ones.
        G = self._basis
        for i in range(len(G)):
            g = G.pop(i)
            G.insert(i, self._reduce_by(g, G))

    # ---- queries ----
    def is_member(self, p: Polynomial) -> bool:
        return self.reduce(p).is_zero()

    def __contains__(self, p) -> bool:
        return self.is_member(p)

    def contains(self, other: "Ideal") -> bool:
        """True if every element of other lies in this ideal."""
        return all(self.is_member(g) for g in other._basis)

    def is_unit(self) -> bool:
        """True if this is the whole ring."""
        return len(self._basis) == 1 and self._basis[0] == 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ideal):
            return NotImplemented
        return self.contains(other) and other.contains(self)

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    __hash__ = None

    # ---- ideal arithmetic ----
    def __add__(self, other: "Ideal") -> "Ideal":
        if not isinstance(other, Ideal):
            return NotImplemented
        return Ideal(self._basis + other._basis, self._order)

    def __mul__(self, other: "Ideal") -> "Ideal":
        if not isinstance(other, Ideal):
            return NotImplemented
        return Ideal([f * g for f in self._basis for g in other._basis], self._order)

    # ---- rendering ----
    def to_string(self, printer: Printer) -> str:
        return "( " + " , ".join(g.to_string(printer, self._order) for g in self._basis) + " )"

    def __str__(self) -> str:
        return self.to_string(StreamPrinter(state.ringvar))

    def __repr__(self) -> str:
        return f"Ideal({list(self._basis)!r}, order={self._order!r})"
