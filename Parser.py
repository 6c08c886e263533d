from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple
import re

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput, VisitError

from errors import DuplicateVariableName, InvalidVariableName, ParseError, ParserError
from ideals import Ideal
from monomial import Monomial
from ordering import Lex, TermOrder
from polynomial import Polynomial
from rational import Rational


# ------------------ Grammar ------------------
# Precedenza:
#   ^  (piu' forte)
#   unario +/-
#   *
#   binario +/-
#
# so -x^2 is -(x^2), not (-x)^2
POLY_DSL_GRAMMAR = r"""
?start: expr
?expr: sum

?sum: product ((PLUS|MINUS) product)*        -> sum_chain

?product: unary ("*" unary)*                 -> mul_chain

?unary: PLUS unary                           -> uplus
      | MINUS unary                          -> uminus
      | power

?power: atom ("^" UNSIGNED_INT)?             -> pow

?atom: UNSIGNED_INT ("/" UNSIGNED_INT)?      -> num_lit
     | VAR                                   -> var
     | "(" expr ")"                          -> group

PLUS: "+"
MINUS: "-"

VAR: /[a-zA-Z]+[0-9]*/
UNSIGNED_INT: /[0-9]+/

%import common.WS
%ignore WS
"""

_NAME_RE = re.compile(r"[a-zA-Z]+[0-9]*")


def check_variable_names(names: Sequence[str]) -> Tuple[str, ...]:
    seen = set()
    for v in names:
        if not isinstance(v, str) or not _NAME_RE.fullmatch(v):
            raise InvalidVariableName(str(v))
        if v in seen:
            raise DuplicateVariableName(v)
        seen.add(v)
    return tuple(names)


# ------------------ Transformer ------------------
@v_args(inline=True)
class PolynomialTransformer(Transformer):
    def __init__(self, index: Dict[str, int], field: type):
        super().__init__()
        self.index = index
        self.field = field

    def num_lit(self, n, d=None):
        if d is None:
            return Polynomial.const(int(n), self.field)
        if int(d) == 0:
            raise ParseError(f"zero denominator in {n}/{d}", f"{n}/{d}")
        return Polynomial.const(self.field(int(n)) / self.field(int(d)), self.field)

    def var(self, tok):
        name = str(tok)
        if name not in self.index:
            raise ParseError(f"unknown variable name {name}", name)
        return Polynomial.var(self.index[name], self.field)

    def group(self, expr):
        return expr

    def uplus(self, _sign, x):
        return x

    def uminus(self, _sign, x):
        return -x

    def mul_chain(self, first, *rest):
        out = first
        for x in rest:
            out = out * x
        return out

    def sum_chain(self, first, *tail):
        # tail: (PLUS|MINUS, product, PLUS|MINUS, product, ...)
        out = first
        for i in range(0, len(tail), 2):
            op, term = tail[i], tail[i + 1]
            out = out + term if op.type == "PLUS" else out - term
        return out

    def pow(self, base, exp=None):
        if exp is None:
            return base
        return base ** int(exp)


def split_top_level_commas(s: str) -> List[str]:
    parts: List[str] = []
    buf: List[str] = []
    depth = 0

    for ch in s:
        if ch == "(":
            depth += 1
            buf.append(ch)
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise ParseError("unbalanced parentheses", s)
            buf.append(ch)
        elif ch == "," and depth == 0:
            parts.append("".join(buf).strip())
            buf = []
        else:
            buf.append(ch)

    if depth != 0:
        raise ParseError("unbalanced parentheses", s)

    parts.append("".join(buf).strip())
    if any(not p for p in parts):
        raise ParseError(f"empty element in list: {s!r}", s)
    return parts


# ------------------ Parser ------------------
class PolynomialParser:
    """
    Reads polynomials over a fixed, ordered list of variable names; the
    i-th name becomes variable i. Coefficients are built in `field`.
    """

    def __init__(self, variables: Sequence[str], field: type = Rational):
        self.variables = check_variable_names(variables)
        self.field = field
        self._parser = Lark(
            POLY_DSL_GRAMMAR,
            parser="lalr",
            transformer=PolynomialTransformer(
                {v: i for i, v in enumerate(self.variables)}, field
            ),
        )

    def parse(self, s: str) -> Polynomial:
        try:
            return self._parser.parse(s)
        except VisitError as e:
            if isinstance(e.orig_exc, ParserError):
                raise e.orig_exc from None
            raise
        except UnexpectedInput as e:
            pos = getattr(e, "pos_in_stream", None)
            fragment = s[pos:] if pos is not None and pos >= 0 else s
            raise ParseError(f"invalid input format: {s.strip()}", fragment.strip()) from None

    def parse_list(self, s: str) -> List[Polynomial]:
        """Parse comma separated polynomials."""
        return [self.parse(part) for part in split_top_level_commas(s)]

    def parse_ideal(self, s: str, order: TermOrder = Lex) -> Ideal:
        """Parse '<p1, ..., pn>' (brackets optional) into an Ideal."""
        raw = s.strip()
        if raw.startswith("<") and raw.endswith(">"):
            raw = raw[1:-1]
        elif raw.startswith("<") or raw.endswith(">"):
            raise ParseError(f"invalid ideal: {s!r} (expected <p1,...,pn>)", s)
        if not raw.strip():
            return Ideal((), order)
        return Ideal(self.parse_list(raw), order)

    def monomial(self, s: str) -> Monomial:
        """Parse a single power product such as 'x^2*y'."""
        p = self.parse(s)
        if len(p) != 1 or p.leading_coefficient(Lex) != self.field(1):
            raise ParseError(f"not a power product: {s!r}", s)
        return p.monomials()[0]


@dataclass(frozen=True, slots=True)
class PolynomialRing:
    domain: str
    variables: Tuple[str, ...]

    @classmethod
    def parse(cls, s: str) -> "PolynomialRing":
        s = s.strip()

        m = re.fullmatch(r"""\\?([A-Za-z]+)\s*\[\s*(.*?)\s*\]\s*""", s)
        if not m:
            raise ParseError(f"invalid ring: {s!r} (expected e.g. Q[x,y])", s)

        dom = m.group(1)
        varlist = m.group(2).strip()
        if not varlist:
            raise ParseError("empty variable list in ring", s)

        vars_raw = [v.strip() for v in varlist.split(",")]
        return cls(domain=dom, variables=check_variable_names(vars_raw))

    def parser(self, field: type = Rational) -> PolynomialParser:
        return PolynomialParser(self.variables, field)

    def __str__(self) -> str:
        return f"{self.domain}[{','.join(self.variables)}]"


def parse_ring(s: str) -> PolynomialRing:
    return PolynomialRing.parse(s)
