"""
Low-level cursor over the grammar text.

The scanner knows nothing about the notation. It only moves a position
forward over an immutable input string and reports errors at the current
position.
"""
import re
from typing import Callable, Optional

from specgrammar.common import Location
from specgrammar.exceptions import SyntaxError


class Scanner:
    """
    Args:
    input_str(str): The text to scan.
    file_name(str): Source identifier used in error reporting.

    Attributes:
    position(int): Current offset into `input_str`. Only ever increases.
    """
    def __init__(self, input_str: str, file_name: Optional[str] = None):
        self.input_str = input_str
        self.file_name = file_name
        self.position = 0

    def take_while(self, pred: Callable[[str], bool]) -> str:
        """
        Consumes the longest run of characters satisfying `pred`. Returns the
        consumed text, which may be empty.
        """
        start = end = self.position
        input_str = self.input_str
        while end < len(input_str) and pred(input_str[end]):
            end += 1
        self.position = end
        return input_str[start:end]

    def take_re(self, regex: re.Pattern) -> Optional[re.Match]:
        """
        If the input at the current position matches the given compiled
        regex the match is returned and the position is moved past it.
        """
        m = regex.match(self.input_str, self.position)
        if m:
            self.position = m.end()
        return m

    def take_str(self, s: str) -> bool:
        """
        Returns whether the given string is next, and advances the position if
        it is.
        """
        if self.input_str.startswith(s, self.position):
            self.position += len(s)
            return True
        return False

    def peek(self) -> Optional[str]:
        """Returns the next character without consuming it, or None at eof."""
        if self.position >= len(self.input_str):
            return None
        return self.input_str[self.position]

    def eof(self) -> bool:
        return self.position >= len(self.input_str)

    def expect(self, s: str, message: str):
        """Consumes `s` or raises a syntax error with the given message."""
        if not self.take_str(s):
            raise self.error(message)

    def space0(self) -> str:
        """Consumes zero or more spaces."""
        return self.take_while(lambda ch: ch == ' ')

    def location(self) -> Location:
        return Location(self.input_str, self.position, self.file_name)

    def error(self, message: str) -> SyntaxError:
        return SyntaxError(self.location(), message)
