from typing import Optional

from specgrammar.common import Location
from specgrammar.termui import s_attention as err
from specgrammar.termui import s_header as _


class SpecGrammarError(Exception):
    """
    Base class for all errors raised while parsing grammar notation.

    The error keeps everything needed to render a diagnostic so the source
    text doesn't have to be consulted again.

    Attributes:
    location(Location): Where the error was detected.
    message(str): Human readable description of the problem.
    line(str): The offending source line.
    lineno, col(int): 1-based line/column of the error.
    """
    def __init__(self, location: Location, message: str):
        self.location = location
        self.message = message
        self.line = location.line_text
        self.lineno = location.line
        self.col = location.column
        super().__init__(message)

    @property
    def file_name(self) -> Optional[str]:
        return self.location.file_name

    def diagnostic(self) -> str:
        """
        Renders the compiler style diagnostic:

            |
          3 | a -> `x`
            |     ^ message
        """
        lineno = str(self.lineno)
        space = " " * (len(lineno) + 1)
        col = " " * self.col
        return "\n{}{}\n{}{}\n{}{}{}".format(
            space, _("|"),
            _(f"{lineno} | "), self.line,
            space, _("|"), col + err(f"^ {self.message}"))

    def __str__(self):
        return self.diagnostic()


class SyntaxError(SpecGrammarError):
    """
    Structural violation of the grammar notation.
    """


class DuplicateProductionError(SpecGrammarError):
    """
    Raised when a production name is already registered.

    Attributes:
    production(Production): The previously registered production.
    """
    def __init__(self, location: Location, production):
        self.production = production
        super().__init__(location, "duplicate production {} in grammar"
                         .format(production.name))
