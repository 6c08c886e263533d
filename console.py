from __future__ import annotations
from typing import List, Optional, Sequence
import argparse
import logging
import sys

from errors import GroebnerError
from ideals import Ideal
from ordering import get_order
from Parser import PolynomialParser, parse_ring
from printer import StreamPrinter
import state

logger = logging.getLogger(__name__)

HELP = """
Solves the ideal membership problem for polynomials with rational coefficients.
Polynomials are entered as sums of terms, e.g. 1/2*x^2 + x*y - (y+1)^2.

COMMANDS:

help
Display this help menu.

ideal p1, p2, ...
Set the generators of the ideal and print its reduced Groebner basis.
Example:
>>order deglex
...
>>ideal x^2*y - x + 1, -y^2*z + 1/3*x^3
I := ( y*x^2 - x + 1 , z*y^2 - 1/3*x^3 , x^5 - 3*z*y*x + 3*z*y )

member p
Print true if p is in the ideal, false otherwise.
Example:
>>member x^5 - 3*z*y*x + 3*z*y
true

reduce p
Print the remainder of p divided by the Groebner basis.
Example:
>>reduce y^2*x^3
-y*x + x - 1

order lex|deglex|degrevlex
Change the term order and print the new basis.

ring Q[a,b,...]
Change the variables (the first one is the greatest). Resets the ideal.

quit
Quit the application.

"""

HEADER = (
    "IDEAL MEMBERSHIP SOLVER\n"
    'Enter "help" for instructions, or "quit" to exit.\n>>'
)

PROMPT = ">>"


class Console:
    """Line oriented front end; every command returns the text to show."""

    def __init__(self, variables: Optional[Sequence[str]] = None, order: Optional[str] = None):
        self._quit = False
        self._order = get_order(order or state.order)
        self._set_variables(state.ringvar if variables is None else variables)

    def _set_variables(self, variables: Sequence[str]) -> None:
        self.parser = PolynomialParser(variables)
        self.printer = StreamPrinter(self.parser.variables)
        self.ideal = Ideal((), self._order)

    def __bool__(self) -> bool:
        return not self._quit

    @staticmethod
    def header() -> str:
        return HEADER

    def dispatch_command(self, line: str) -> str:
        command, _, rest = line.strip().partition(" ")
        handlers = {
            "ideal": self.set_ideal,
            "member": self.is_member,
            "reduce": self.reduce,
            "order": self.set_order,
            "ring": self.set_ring,
        }
        out = ""
        if command == "quit":
            self._quit = True
        elif command == "help":
            out = HELP
        elif command in handlers:
            try:
                out = handlers[command](rest) + "\n"
            except GroebnerError as e:
                logger.debug("command %r failed", line, exc_info=True)
                out = f"Error: {e}\n"
        elif command:
            out = f"Unknown command {command}\n"

        if not self._quit:
            out += PROMPT
        return out

    # ---- commands ----
    def set_ideal(self, rest: str) -> str:
        self.ideal = Ideal(self.parser.parse_list(rest), self._order)
        return "I := " + self.ideal.to_string(self.printer)

    def is_member(self, rest: str) -> str:
        return "true" if self.ideal.is_member(self.parser.parse(rest)) else "false"

    def reduce(self, rest: str) -> str:
        return self.ideal.reduce(self.parser.parse(rest)).to_string(self.printer, self._order)

    def set_order(self, rest: str) -> str:
        try:
            order = get_order(rest)
        except ValueError as e:
            raise GroebnerError(str(e)) from None
        self._order = order
        self.ideal.set_order(order)
        return "I := " + self.ideal.to_string(self.printer)

    def set_ring(self, rest: str) -> str:
        ring = parse_ring(rest)
        self._set_variables(ring.variables)
        return f"ring {ring}"


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Interactive ideal membership solver.")
    ap.add_argument("--vars", default=",".join(state.ringvar),
                    help="comma separated variable names, greatest first (default: %(default)s)")
    ap.add_argument("--order", default=state.order,
                    help="term order: lex, deglex or degrevlex (default: %(default)s)")
    ap.add_argument("--verbose", action="store_true", help="log the basis computation")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    state.ringvar = [v.strip() for v in args.vars.split(",")]
    state.order = args.order
    state.verbose = state.verbose or args.verbose
    logging.basicConfig(
        level=logging.DEBUG if state.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        console = Console()
    except (GroebnerError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    sys.stdout.write(console.header())
    sys.stdout.flush()
    for line in sys.stdin:
        sys.stdout.write(console.dispatch_command(line))
        sys.stdout.flush()
        if not console:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())
