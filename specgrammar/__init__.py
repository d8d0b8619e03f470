# -*- coding: utf-8 -*-
# flake8: NOQA
from specgrammar.grammar import Grammar, Production
from specgrammar.parser import GrammarParser, parse_grammar
from specgrammar.common import Location, translate_position
from specgrammar.expressions import Expression, to_str, visitor
from specgrammar.exceptions import SpecGrammarError, SyntaxError, \
    DuplicateProductionError

from .version import __version__
