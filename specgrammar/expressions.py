"""
Expression tree produced by the grammar notation parser.

Every node is an immutable value. An `Expression` wraps one expression kind
and optionally carries a suffix annotation and a footnote marker. Kinds that
contain other expressions expose them through `children()`, which is what the
generic `visitor` uses to walk the tree.
"""
import typing
from dataclasses import dataclass


@dataclass(frozen=True)
class Expression:
    """
    A node of the expression tree.

    Attributes:
    kind(ExpressionKind): What this node matches.
    suffix(str): Free-form annotation attached with `_text_`.
    footnote(str): Footnote marker attached with `[^text]`.
    """
    kind: 'ExpressionKind'
    suffix: typing.Optional[str] = None
    footnote: typing.Optional[str] = None

    def children(self):
        return self.kind.children()

    def walk(self):
        """
        Yields this expression and all of its sub-expressions depth-first,
        in source order.
        """
        stack = [self]
        while stack:
            expr = stack.pop()
            yield expr
            stack.extend(reversed(expr.children()))

    def nonterminals(self):
        """
        Yields the names of all nonterminals referenced from this expression,
        including those under negation. Names are not resolved.
        """
        for expr in self.walk():
            kind = expr.kind
            if isinstance(kind, Nonterminal):
                yield kind.name

    def __str__(self):
        s = str(self.kind)
        if self.suffix is not None:
            s += f" _{self.suffix}_"
        if self.footnote is not None:
            s += f"[^{self.footnote}]"
        return s


class ExpressionKind:
    """Base class for all expression kinds."""

    def children(self):
        return ()

    def label(self):
        return type(self).__name__


def _to_tuple(obj, attr):
    # Keep nodes hashable even if lists are given.
    object.__setattr__(obj, attr, tuple(getattr(obj, attr)))


@dataclass(frozen=True)
class Alternation(ExpressionKind):
    expressions: typing.Tuple[Expression, ...]

    def __post_init__(self):
        _to_tuple(self, 'expressions')

    def children(self):
        return self.expressions

    def __str__(self):
        return " | ".join(str(e) for e in self.expressions)


@dataclass(frozen=True)
class Sequence(ExpressionKind):
    expressions: typing.Tuple[Expression, ...]

    def __post_init__(self):
        _to_tuple(self, 'expressions')

    def children(self):
        return self.expressions

    def __str__(self):
        s = ""
        prev = None
        for e in self.expressions:
            if prev is not None and not isinstance(prev.kind, Break) \
                    and not isinstance(e.kind, Break):
                s += " "
            s += str(e)
            prev = e
        return s


@dataclass(frozen=True)
class Break(ExpressionKind):
    """Author chosen line break, `indent` is the width of the continuation."""
    indent: int

    def label(self):
        return f"Break({self.indent})"

    def __str__(self):
        return "\n" + " " * self.indent


@dataclass(frozen=True)
class Nonterminal(ExpressionKind):
    name: str

    def label(self):
        return f"Nonterminal({self.name})"

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Terminal(ExpressionKind):
    text: str

    def label(self):
        return f"Terminal({self})"

    def __str__(self):
        return f"`{self.text}`"


@dataclass(frozen=True)
class Charset(ExpressionKind):
    characters: typing.Tuple['Characters', ...]

    def __post_init__(self):
        _to_tuple(self, 'characters')

    def label(self):
        return f"Charset({self})"

    def __str__(self):
        return "[{}]".format(" ".join(str(c) for c in self.characters))


@dataclass(frozen=True)
class Prose(ExpressionKind):
    text: str

    def label(self):
        return f"Prose({self})"

    def __str__(self):
        return f"<{self.text}>"


@dataclass(frozen=True)
class CodepointRef(ExpressionKind):
    """Unicode scalar written as `U+XXXX`. `code` holds the four characters."""
    code: str

    def label(self):
        return f"CodepointRef({self})"

    def __str__(self):
        return f"U+{self.code}"


class Wrapper(ExpressionKind):
    """Base for kinds holding a single inner expression."""

    def children(self):
        return (self.expression,)


@dataclass(frozen=True)
class Grouped(Wrapper):
    expression: Expression

    def __str__(self):
        return f"({self.expression})"


@dataclass(frozen=True)
class Negation(Wrapper):
    """
    Matches anything the inner expression wouldn't. The inner kind is always
    a Charset, a Terminal or a Nonterminal.
    """
    expression: Expression

    def __str__(self):
        return f"~{self.expression}"


class Repetition(Wrapper):
    operator = ''

    def __str__(self):
        return f"{self.expression}{self.operator}"


@dataclass(frozen=True)
class Optional(Repetition):
    expression: Expression
    operator = '?'


@dataclass(frozen=True)
class Repeat0(Repetition):
    expression: Expression
    operator = '*'


@dataclass(frozen=True)
class Repeat0NonGreedy(Repetition):
    expression: Expression
    operator = '*?'


@dataclass(frozen=True)
class Repeat1(Repetition):
    expression: Expression
    operator = '+'


@dataclass(frozen=True)
class Repeat1NonGreedy(Repetition):
    expression: Expression
    operator = '+?'


@dataclass(frozen=True)
class RepeatRange(Repetition):
    expression: Expression
    min: typing.Optional[int] = None
    max: typing.Optional[int] = None

    @property
    def operator(self):
        return "{{{}..{}}}".format("" if self.min is None else self.min,
                                   "" if self.max is None else self.max)

    def label(self):
        return f"RepeatRange({self.operator})"


# Character matchers used inside a Charset

class Characters:
    pass


@dataclass(frozen=True)
class CharacterRange(Characters):
    low: str
    high: str

    def __str__(self):
        return f"`{self.low}`-`{self.high}`"


@dataclass(frozen=True)
class CharacterTerminal(Characters):
    text: str

    def __str__(self):
        return f"`{self.text}`"


@dataclass(frozen=True)
class CharacterName(Characters):
    """Named character class, resolved by a consumer."""
    name: str

    def __str__(self):
        return self.name


REPETITIONS = {
    '?': Optional,
    '*': Repeat0,
    '*?': Repeat0NonGreedy,
    '+': Repeat1,
    '+?': Repeat1NonGreedy,
}


def visitor(root, iterator, visit):
    """Generic iterative depth-first visitor.

    Accepts the start of the structure to visit (root), iterator callable which
    gets called to get the next elements to visit and `visit` function which
    is called with the element and sub-results of the iterated child elements.
    Should return the result for the given node.
    """
    stack = [(root, iterator(root), [])]
    while stack:
        node, it, results = stack[-1]
        try:
            next_elem = next(it)
        except StopIteration:
            # No more sub-elements for this node
            stack.pop()
            result = visit(node, results)
            if stack:
                stack[-1][-1].append(result)
            else:
                return result
            continue
        stack.append((next_elem, iterator(next_elem), []))


def expression_iterator(expr):
    return iter(expr.children())


def to_str(root):
    """
    Returns an indented, one node per line, dump of the expression tree.
    """
    def visit(expr, subresults):
        s = expr.kind.label()
        if expr.suffix is not None:
            s += f' _{expr.suffix}_'
        if expr.footnote is not None:
            s += f'[^{expr.footnote}]'
        if subresults:
            s += '\n  ' + '\n'.join(subresults).replace('\n', '\n  ')
        return s
    return visitor(root, expression_iterator, visit)

