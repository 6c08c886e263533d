from itertools import product

import pytest

from monomial import Monomial
from ordering import (
    DegLex, DegRevLex, Lex, MatrixOrder, deglex_matrix, degrevlex_matrix,
    get_order, lex_matrix, sort_monomials,
)
import state


def M(*exps):
    return Monomial(exps)


ALL_ORDERS = [Lex, DegLex, DegRevLex]


class TestLex:

    def test_compare(self):
        assert Lex(M(0, 5), M(1))
        assert not Lex(M(1), M(0, 5))
        assert Lex.less((0, 1), (1,))
        assert Lex.less((1, 2), (1, 3))

    def test_padding(self):
        assert not Lex.less((1, 0), (1,))
        assert not Lex.less((1,), (1, 0))
        assert Lex.less((1,), (1, 0, 1))


class TestDegLex:

    def test_compare(self):
        assert DegLex.less((2,), (0, 0, 3))
        assert DegLex.less((0, 2), (1, 1))
        assert not DegLex.less((1, 1), (0, 2))


class TestDegRevLex:

    def test_compare(self):
        assert DegRevLex(M(0, 1, 1), M(2, 1, 0))
        assert DegRevLex(M(1, 0, 1), M(2, 0, 0))
        assert DegRevLex(M(1, 0, 2), M(0, 2, 1))

    def test_differs_from_deglex(self):
        # x*z against y^2 in the variables x, y, z
        xz, y2 = M(1, 0, 1), M(0, 2)
        assert DegRevLex(xz, y2)
        assert DegLex(y2, xz)


class TestAllOrders:

    def test_strict(self):
        for order in ALL_ORDERS:
            for m in [M(), M(1), M(0, 2, 1)]:
                assert not order(m, m)

    def test_total(self):
        monos = [Monomial(e) for e in product(range(3), repeat=2)]
        for order in ALL_ORDERS:
            for a in monos:
                for b in monos:
                    if a != b:
                        assert order(a, b) != order(b, a)

    def test_one_is_smallest(self):
        for order in ALL_ORDERS:
            assert order(Monomial.one(), M(0, 0, 1))

    def test_sort_monomials(self):
        monos = [M(), M(0, 2), M(1), M(1, 1)]
        assert sort_monomials(monos, Lex) == [M(1, 1), M(1), M(0, 2), M()]
        assert sort_monomials(monos, DegLex) == [M(1, 1), M(0, 2), M(1), M()]

    def test_max(self):
        assert Lex.max([M(0, 3), M(1), M(0, 0, 9)]) == M(1)
        assert DegLex.max([M(0, 3), M(1), M(0, 0, 9)]) == M(0, 0, 9)


class TestMatrixOrder:

    def test_matches_builtin_orders(self):
        vectors = list(product(range(3), repeat=3))
        for matrix, order in [(lex_matrix(3), Lex),
                              (deglex_matrix(3), DegLex),
                              (degrevlex_matrix(3), DegRevLex)]:
            mo = MatrixOrder(matrix)
            for a in vectors:
                for b in vectors:
                    assert mo.less(a, b) == order.less(a, b), (matrix, a, b)

    def test_weighted(self):
        # weight 2 on x: x beats y^1 but not y^3
        mo = MatrixOrder([[2, 1], [1, 0]])
        assert mo(M(0, 1), M(1))
        assert mo(M(1), M(0, 3))

    def test_singular_matrix(self):
        with pytest.raises(ValueError):
            MatrixOrder([[1, 1], [1, 1]])

    def test_too_many_variables(self):
        mo = MatrixOrder(lex_matrix(2))
        with pytest.raises(ValueError):
            mo(M(0, 0, 1), M(1))


class TestGetOrder:

    def test_names(self):
        assert get_order("lex") is Lex
        assert get_order("DegRevLex") is DegRevLex
        assert get_order("grlex") is DegLex
        assert get_order(" deglex ") is DegLex

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_order("revlex-ish")

    def test_matrix_from_state(self, monkeypatch):
        monkeypatch.setattr(state, "M", [])
        with pytest.raises(ValueError):
            get_order("matrix")
        monkeypatch.setattr(state, "M", deglex_matrix(3))
        assert get_order("matrix") == MatrixOrder(deglex_matrix(3))
