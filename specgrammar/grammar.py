from dataclasses import dataclass
from typing import Dict, List, Optional

from specgrammar.expressions import Expression, to_str
from specgrammar.termui import a_print, h_print, prints, s_emph


@dataclass(frozen=True)
class Production:
    """
    A named rule of the grammar, `name -> expression`.

    Attributes:
    name(str): Unique name of the rule.
    category(str): Caller supplied tag (e.g. lexer or syntax), not
        interpreted here.
    path(str): Source identifier the rule came from.
    is_root(bool): Whether the rule was declared with `@root`.
    expression(Expression): The parsed right hand side.
    """

    name: str
    category: str
    expression: Expression
    path: Optional[str] = None
    is_root: bool = False

    def to_str(self):
        return to_str(self.expression)

    def __str__(self):
        return "{}{} -> {}".format("@root " if self.is_root else "",
                                   self.name, self.expression)

    def __repr__(self):
        return f"Production({self.name})"


class Grammar:
    """
    Registry of productions accumulated over one or more parsed chunks.

    Attributes:
    name_order(list of str): Production names in the order they were first
        declared.
    productions(dict): Mapping of production name to `Production`.
    """
    def __init__(self):
        self.name_order: List[str] = []
        self.productions: Dict[str, Production] = {}

    def parse(self, input_str: str, category: str,
              path: Optional[str] = None, **kwargs) -> List[Production]:
        """
        Parses the given chunk of grammar text into this registry.

        Args:
            input_str(str): The grammar text.
            category(str): Tag recorded on every production of this chunk.
            path(str): Source identifier used in error reporting.
            debug(bool): Print a parse trace.
            debug_colors(bool): Use colors in debug output.

        Returns:
            The list of productions registered from this chunk.
        """
        from specgrammar.parser import parse_grammar
        count = len(self.name_order)
        parse_grammar(input_str, self, category, path, **kwargs)
        return [self.productions[n] for n in self.name_order[count:]]

    @staticmethod
    def from_string(input_str: str, category: str,
                    path: Optional[str] = None, **kwargs) -> 'Grammar':
        g = Grammar()
        g.parse(input_str, category, path, **kwargs)
        return g

    def get_production(self, name: str) -> Optional[Production]:
        return self.productions.get(name)

    def get_productions(self, category: str) -> List[Production]:
        return [p for p in self if p.category == category]

    def categories(self) -> List[str]:
        categories = []
        for p in self:
            if p.category not in categories:
                categories.append(p.category)
        return categories

    @property
    def roots(self) -> List[Production]:
        return [p for p in self if p.is_root]

    def references(self):
        """
        Yields `(production, name)` for every nonterminal referenced in the
        registry. Referenced names are not checked for existence.
        """
        for p in self:
            for name in p.expression.nonterminals():
                yield p, name

    def __getitem__(self, name: str) -> Production:
        return self.productions[name]

    def __contains__(self, name: str) -> bool:
        return name in self.productions

    def __len__(self):
        return len(self.name_order)

    def __iter__(self):
        return (self.productions[n] for n in self.name_order)

    def print_debug(self):
        a_print("*** GRAMMAR ***", new_line=True)
        for category in self.categories():
            h_print("Category:", s_emph(category), new_line=True)
            for p in self.get_productions(category):
                h_print("Production:", "{}{}".format(
                    p.name, " (root)" if p.is_root else ""), level=1)
                prints(p.to_str())
