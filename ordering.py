from __future__ import annotations
from abc import ABC, abstractmethod
from functools import cmp_to_key
from itertools import zip_longest
from typing import List, Sequence, Tuple

import numpy as np

from monomial import Monomial, _strip
import state


class TermOrder(ABC):
    """
    A monomial order. The only thing an order has to provide is a strict
    less-than on exponent sequences; everything else is derived from it.
    Orders carry no state, so one instance can be shared freely.
    """

    name = "order"

    @abstractmethod
    def less(self, a: Sequence[int], b: Sequence[int]) -> bool:
        """True if the exponent vector a is strictly less than b."""

    def __call__(self, a: Monomial, b: Monomial) -> bool:
        return self.less(a.exponents, b.exponents)

    def compare(self, a: Monomial, b: Monomial) -> int:
        if self(a, b):
            return -1
        if self(b, a):
            return 1
        return 0

    @property
    def key(self):
        """Sort key for Monomials (ascending)."""
        return cmp_to_key(self.compare)

    def max(self, monomials) -> Monomial:
        it = iter(monomials)
        best = next(it)
        for m in it:
            if self(best, m):
                best = m
        return best

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _lex_less(a: Tuple[int, ...], b: Tuple[int, ...]) -> bool:
    # padding implicito con zeri
    for x, y in zip_longest(a, b, fillvalue=0):
        if x != y:
            return x < y
    return False


class LexOrder(TermOrder):
    name = "lex"

    def less(self, a, b) -> bool:
        return _lex_less(tuple(a), tuple(b))


class DegLexOrder(TermOrder):
    name = "deglex"

    def less(self, a, b) -> bool:
        da, db = sum(a), sum(b)
        if da != db:
            return da < db
        return _lex_less(tuple(a), tuple(b))


class DegRevLexOrder(TermOrder):
    name = "degrevlex"

    def less(self, a, b) -> bool:
        da, db = sum(a), sum(b)
        if da != db:
            return da < db
        a, b = _strip(a), _strip(b)
        if len(a) != len(b):
            # a nonzero exponent on a later variable makes the monomial smaller
            return len(a) > len(b)
        return tuple(reversed(b)) < tuple(reversed(a))


class MatrixOrder(TermOrder):
    """
    Weight-matrix order: a < b iff W @ a < W @ b lexicographically.
    W needs full column rank for this to be a total order on the
    variables it covers.
    """

    name = "matrix"

    def __init__(self, weights):
        W = np.array(weights, dtype=float)
        if W.ndim != 2 or W.size == 0:
            raise ValueError("weight matrix must be a non-empty 2D array")
        if np.linalg.matrix_rank(W) < W.shape[1]:
            raise ValueError(
                f"weight matrix of shape {W.shape} does not have full column rank"
            )
        self.weights = W

    @property
    def nvars(self) -> int:
        return self.weights.shape[1]

    def _weigh(self, exps) -> Tuple[float, ...]:
        exps = _strip(exps)
        if len(exps) > self.nvars:
            raise ValueError(
                f"monomial uses {len(exps)} variables, the order covers {self.nvars}"
            )
        v = np.zeros(self.nvars)
        v[: len(exps)] = exps
        return tuple(self.weights @ v)

    def less(self, a, b) -> bool:
        return self._weigh(a) < self._weigh(b)

    def __eq__(self, other) -> bool:
        return isinstance(other, MatrixOrder) and np.array_equal(self.weights, other.weights)

    def __hash__(self) -> int:
        return hash((type(self), self.weights.tobytes()))

    def __repr__(self) -> str:
        return f"MatrixOrder({self.weights.tolist()})"


Lex = LexOrder()
DegLex = DegLexOrder()
DegRevLex = DegRevLexOrder()

_ORDERS = {
    "lex": Lex,
    "deglex": DegLex,
    "grlex": DegLex,
    "degrevlex": DegRevLex,
    "grevlex": DegRevLex,
}


def get_order(name: str) -> TermOrder:
    key = name.strip().lower()
    if key == "matrix":
        if len(state.M) == 0:
            raise ValueError("no weight matrix configured (state.M is empty)")
        return MatrixOrder(state.M)
    try:
        return _ORDERS[key]
    except KeyError:
        raise ValueError(
            f"unknown term order {name!r}; choose one of {sorted(_ORDERS) + ['matrix']}"
        ) from None


# ------------------ weight matrices ------------------
def lex_matrix(n: int) -> List[List[int]]:
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def deglex_matrix(n: int) -> List[List[int]]:
    return [[1] * n] + lex_matrix(n)[: n - 1]


def degrevlex_matrix(n: int) -> List[List[int]]:
    rows = [[1] * n]
    for i in range(n - 1, 0, -1):
        rows.append([-1 if j == i else 0 for j in range(n)])
    return rows


def sort_monomials(monomials, order: TermOrder) -> List[Monomial]:
    """Monomials sorted greatest first."""
    return sorted(monomials, key=order.key, reverse=True)
