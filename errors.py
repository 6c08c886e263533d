from __future__ import annotations


class GroebnerError(Exception):
    """Base class of every error raised by the algebra core and the parser."""


class DivisionByZero(GroebnerError, ZeroDivisionError):
    pass


class NegativeExponent(GroebnerError, ValueError):
    pass


class NotDivisible(GroebnerError, ArithmeticError):
    pass


class NotAMonomial(GroebnerError, ValueError):
    pass


class UndefinedLeadingTerm(GroebnerError, ValueError):
    pass


class NullOrdering(GroebnerError, TypeError):
    pass


# ------------------ parser errors ------------------
class ParserError(GroebnerError, ValueError):
    pass


class InvalidVariableName(ParserError):
    def __init__(self, name: str):
        super().__init__(f"invalid variable name {name}")
        self.name = name


class DuplicateVariableName(ParserError):
    def __init__(self, name: str):
        super().__init__(f"duplicate variable name {name}")
        self.name = name


class ParseError(ParserError):
    """Raised on malformed input; `fragment` is the offending substring."""

    def __init__(self, message: str, fragment: str = ""):
        super().__init__(message)
        self.fragment = fragment
