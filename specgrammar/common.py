from typing import Optional, Tuple


class Location:
    """
    Represents a point in the grammar source text.

    Args:
    input_str(str): The grammar text being parsed.
    position(int): The character offset into `input_str`.
    file_name(str): The name (path) of the source this text came from.

    Attributes:
    line, column (int): 1-based line/column calculated from the position
        and input_str.
    line_text (str): The full text of the line containing the position,
        without the line terminator.
    """

    __slots__ = ['input_str', 'position', 'file_name',
                 '_line', '_column', '_line_text']

    def __init__(self, input_str: str, position: int,
                 file_name: Optional[str] = None):
        self.input_str = input_str
        self.position = position
        self.file_name = file_name

        # Evaluate this only when needed. E.g. during error reporting
        self._line = None
        self._column = None
        self._line_text = None

    @property
    def line(self) -> int:
        if self._line is None:
            self.evaluate_line_col()
        return self._line

    @property
    def column(self) -> int:
        if self._column is None:
            self.evaluate_line_col()
        return self._column

    @property
    def line_text(self) -> str:
        if self._line_text is None:
            self.evaluate_line_col()
        return self._line_text

    def evaluate_line_col(self):
        self._line_text, self._line, self._column = translate_position(
            self.input_str, self.position)

    def __str__(self):
        return '{}{}:{}'.format(f"{self.file_name}:"
                                if self.file_name else "",
                                self.line, self.column)

    def __repr__(self):
        return str(self)


def translate_position(input_str: str, position: int) -> Tuple[str, int, int]:
    """
    Translates a character offset to `(line_text, line_no, col_no)`, both
    numbers 1-based.

    A position on the newline itself belongs to the line it terminates. A
    position after the final newline belongs to an empty last line.
    """
    if not input_str:
        return "", 0, 0
    position = min(position, len(input_str))

    line_start = 0
    line_number = 1
    while True:
        line_end = input_str.find('\n', line_start)
        if line_end == -1:
            line_end = len(input_str)
        if position <= line_end:
            line = input_str[line_start:line_end]
            return line.rstrip('\r'), line_number, position - line_start + 1
        line_start = line_end + 1
        line_number += 1
