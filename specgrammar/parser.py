"""
Recursive descent parser of the EBNF-like grammar notation.

A chunk of text is a sequence of productions separated by blank lines:

    @root Rule -> Term `;` | Other*

Each production is parsed into an `Expression` tree and registered in a
`Grammar`.
"""
import logging
import re
from typing import Optional

from specgrammar import termui
from specgrammar.exceptions import DuplicateProductionError
from specgrammar.expressions import (
    REPETITIONS, Alternation, Break, CharacterName, CharacterRange,
    CharacterTerminal, Charset, CodepointRef, Expression, Grouped, Negation,
    Nonterminal, Prose, RepeatRange, Sequence, Terminal)
from specgrammar.grammar import Grammar, Production
from specgrammar.scanner import Scanner
from specgrammar.termui import a_print, h_print

logger = logging.getLogger(__name__)

ALT_RE = re.compile(r' *\| *')
REPEAT_RE = re.compile(r' ?(\*\?|\+\?|\?|\*|\+)')
RANGE_RE = re.compile(r'\{([0-9]+)?\.\.([0-9]+)?\}')
TERMINAL_RE = re.compile(r'`([^`\n]+)`')
CHAR_RANGE_RE = re.compile(r'`(.)`-`(.)`')
PROSE_RE = re.compile(r'<([^>\n]+)>')
UNICODE_RE = re.compile(r'[A-Z0-9]{4}')
FOOTNOTE_START_RE = re.compile(r' ?\[\^')
FOOTNOTE_RE = re.compile(r'([^\]\n]+)]')


def parse_grammar(input_str: str, grammar: Grammar, category: str,
                  path: Optional[str] = None, debug=False,
                  debug_colors=False):
    """
    Parses all productions of the given chunk into `grammar`.

    Productions are registered one at a time. Parsing stops at the first
    error, leaving the productions registered so far in place.

    Raises:
        SyntaxError: on malformed notation.
        DuplicateProductionError: if a name is already registered.
    """
    parser = GrammarParser(input_str, path, debug=debug,
                           debug_colors=debug_colors)
    logger.debug("Parsing %s grammar chunk from %s", category,
                 path or "<string>")
    while True:
        p = parser.parse_production(category, path)
        dupe = grammar.productions.get(p.name)
        if dupe is not None:
            raise DuplicateProductionError(parser.location(), dupe)
        grammar.name_order.append(p.name)
        grammar.productions[p.name] = p
        logger.debug("Registered production %s", p.name)
        if debug:
            h_print("Registered:", str(p))
        parser.take_while(lambda ch: ch == '\n')
        if parser.eof():
            break


class GrammarParser(Scanner):
    """
    Parser of a single chunk of grammar text.

    Args:
    input_str(str): The grammar text.
    file_name(str): Source identifier used in error reporting.
    debug(bool): Print a trace of parsed terms.
    debug_colors(bool): Use colors in debug output.
    """
    def __init__(self, input_str: str, file_name: Optional[str] = None,
                 debug=False, debug_colors=False):
        super().__init__(input_str, file_name)
        self.debug = debug
        self.debug_colors = debug_colors
        if debug:
            termui.colors = debug_colors

    def parse_production(self, category: str,
                         path: Optional[str] = None) -> Production:
        is_root = self.parse_is_root()
        self.space0()
        name = self.parse_name()
        if name is None:
            raise self.error("expected production name")
        if self.debug:
            a_print("Production:", name, new_line=True)
        self.expect(" ->", "expected -> arrow")
        expression = self.parse_expression()
        if expression is None:
            raise self.error("expected an expression")
        return Production(name, category, expression, path=path,
                          is_root=is_root)

    def parse_is_root(self) -> bool:
        return self.take_str("@root")

    def parse_name(self) -> Optional[str]:
        name = self.take_while(lambda ch: ch.isalnum() or ch == '_')
        return name or None

    def parse_expression(self) -> Optional[Expression]:
        es = []
        while True:
            e = self.parse_seq()
            if e is None:
                break
            es.append(e)
            if self.take_re(ALT_RE) is None:
                break
        if not es:
            return None
        if len(es) == 1:
            return es[0]
        return Expression(Alternation(es))

    def parse_seq(self) -> Optional[Expression]:
        es = []
        while True:
            self.space0()
            e = self.parse_term()
            if e is None:
                break
            es.append(e)
        if not es:
            return None
        if len(es) == 1:
            return es[0]
        return Expression(Sequence(es))

    def parse_term(self) -> Optional[Expression]:
        """
        Parses a single term with its optional repetition, suffix and
        footnote. Returns None if no term starts at the current position.
        """
        next_char = self.peek()
        if next_char is None:
            return None

        if self.take_str("U+"):
            kind = self.parse_unicode()
        elif next_char.isalnum():
            kind = self.parse_nonterminal()
        elif self.take_str("\n"):
            # A blank line or the end of input ends the production.
            if self.eof() or self.take_str("\n"):
                return None
            space = self.space0()
            if not space:
                raise self.error("expected indentation on next line")
            kind = Break(len(space))
        elif next_char == '`':
            kind = self.parse_terminal()
        elif next_char == '[':
            kind = self.parse_charset()
        elif next_char == '<':
            kind = self.parse_prose()
        elif next_char == '(':
            kind = self.parse_grouped()
        elif next_char == '~':
            kind = self.parse_neg_expression()
        else:
            return None

        m = self.take_re(REPEAT_RE)
        if m:
            kind = REPETITIONS[m.group(1)](Expression(kind))
        else:
            m = self.take_re(RANGE_RE)
            if m:
                a, b = [int(g) if g is not None else None
                        for g in m.groups()]
                if a is not None and b is not None and b < a:
                    raise self.error(f"range {a}..{b} is malformed")
                kind = RepeatRange(Expression(kind), a, b)

        suffix = self.parse_suffix()
        footnote = self.parse_footnote()

        if self.debug:
            h_print("Term:", kind.label(), level=1)
        return Expression(kind, suffix, footnote)

    def parse_nonterminal(self) -> Optional[Nonterminal]:
        name = self.parse_name()
        if name is None:
            return None
        return Nonterminal(name)

    def parse_terminal(self) -> Terminal:
        m = self.take_re(TERMINAL_RE)
        if m is None:
            raise self.error(
                "unterminated terminal, expected closing backtick")
        return Terminal(m.group(1))

    def parse_charset(self) -> Charset:
        self.expect("[", "expected opening [")
        characters = []
        while True:
            self.space0()
            ch = self.parse_characters()
            if ch is None:
                break
            characters.append(ch)
        if not characters:
            raise self.error(
                "expected at least one character in character group")
        self.space0()
        self.expect("]", "expected closing ]")
        return Charset(characters)

    def parse_characters(self):
        m = self.take_re(CHAR_RANGE_RE)
        if m:
            return CharacterRange(m.group(1), m.group(2))
        m = self.take_re(TERMINAL_RE)
        if m:
            return CharacterTerminal(m.group(1))
        name = self.parse_name()
        if name is None:
            return None
        return CharacterName(name)

    def parse_prose(self) -> Prose:
        m = self.take_re(PROSE_RE)
        if m is None:
            raise self.error("unterminated prose, expected closing `>`")
        return Prose(m.group(1))

    def parse_grouped(self) -> Grouped:
        self.expect("(", "expected opening `(`")
        self.space0()
        e = self.parse_expression()
        if e is None:
            raise self.error("expected expression in parenthesized group")
        self.space0()
        self.expect(")", "expected closing `)`")
        return Grouped(e)

    def parse_neg_expression(self) -> Negation:
        self.expect("~", "expected ~")
        next_char = self.peek()
        if next_char is None:
            raise self.error("expected expression after ~")
        if next_char == '[':
            kind = self.parse_charset()
        elif next_char == '`':
            kind = self.parse_terminal()
        else:
            kind = self.parse_nonterminal()
            if kind is None:
                raise self.error("expected a charset, terminal, or name "
                                 "after ~ negation")
        return Negation(Expression(kind))

    def parse_unicode(self) -> CodepointRef:
        # Only the character class is checked, e.g. `U+GGGG` is accepted.
        m = self.take_re(UNICODE_RE)
        if m is None:
            raise self.error(
                "expected 4 hexadecimal uppercase digits after U+")
        return CodepointRef(m.group())

    def parse_suffix(self) -> Optional[str]:
        """
        Parses ` _text_`. Backticks toggle literal text, inside which `_`
        doesn't end the suffix. The closing `_` must be followed by a space,
        a newline or the end of input.
        """
        if not self.take_str(" _"):
            return None
        in_backtick = False
        start = self.position
        while True:
            next_char = self.peek()
            if next_char is None:
                raise self.error("failed to find end of _ suffixed text")
            self.position += 1
            if next_char == '\n':
                raise self.error("failed to find end of _ suffixed text")
            elif next_char == '`':
                in_backtick = not in_backtick
            elif next_char == '_' and not in_backtick:
                if self.peek() in (None, '\n', ' '):
                    break
        return self.input_str[start:self.position - 1]

    def parse_footnote(self) -> Optional[str]:
        if self.take_re(FOOTNOTE_START_RE) is None:
            return None
        m = self.take_re(FOOTNOTE_RE)
        if m is None:
            raise self.error("unterminated footnote, expected closing `]`")
        return m.group(1)
