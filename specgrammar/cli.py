#!/usr/bin/env python
import io
import sys
import click
from specgrammar import Grammar, SpecGrammarError
from specgrammar.termui import prints, a_print, h_print, s_emph
import specgrammar.termui as t


@click.group()
@click.option('--debug', default=False, is_flag=True,
              help="Debug/trace output.")
@click.option('--no-colors', default=False, is_flag=True,
              help="Disable output coloring.")
@click.pass_context
def sgrammar(ctx, debug, no_colors):
    """
    Command line interface for checking grammar notation files.
    """
    ctx.obj = {'debug': debug, 'colors': not no_colors}


@sgrammar.command()
@click.argument('grammar_files', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False))
@click.option('--category', '-c', default='syntax',
              help="Category recorded on the parsed productions.")
@click.pass_context
def check(ctx, grammar_files, category):
    grammar = load_grammar(grammar_files, category, ctx.obj['debug'],
                           ctx.obj['colors'])
    h_print("Grammar OK.")
    prints(f"{len(grammar)} production(s) in {len(grammar_files)} file(s).")


@sgrammar.command()
@click.argument('grammar_files', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False))
@click.option('--category', '-c', default='syntax',
              help="Category recorded on the parsed productions.")
@click.option('--roots', default=False, is_flag=True,
              help="Show only root productions.")
@click.pass_context
def show(ctx, grammar_files, category, roots):
    grammar = load_grammar(grammar_files, category, ctx.obj['debug'],
                           ctx.obj['colors'])
    productions = grammar.roots if roots else list(grammar)
    for p in productions:
        h_print(p.name, s_emph("[{}{}]".format(
            p.category, ", root" if p.is_root else "")), new_line=True)
        prints(p.to_str())


def load_grammar(grammar_files, category, debug, colors):
    """
    Parses the given files, in order, into a single grammar. Prints the
    diagnostic and exits on the first error.
    """
    t.colors = colors
    grammar = Grammar()
    for file_name in grammar_files:
        with io.open(file_name, 'r', encoding='utf-8') as f:
            content = f.read()
        try:
            grammar.parse(content, category, file_name, debug=debug,
                          debug_colors=colors)
        except SpecGrammarError as e:
            a_print(f"Error in grammar file {file_name}.")
            prints(str(e))
            sys.exit(1)
    return grammar


if __name__ == '__main__':
    sgrammar()
