"""
Parses lexer and syntax rules of a small Rust subset into one grammar and
lists the references a later validation step would have to resolve.
"""
import io
import os
from specgrammar import Grammar


def main(debug=False):
    this_folder = os.path.dirname(__file__)
    grammar = Grammar()
    for file_name, category in [('lexer.grammar', 'lexer'),
                                ('syntax.grammar', 'syntax')]:
        file_path = os.path.join(this_folder, file_name)
        with io.open(file_path, 'r', encoding='utf-8') as f:
            grammar.parse(f.read(), category, file_path, debug=debug)

    if debug:
        grammar.print_debug()

    print(f"Parsed {len(grammar)} productions.")
    print("Roots:", ", ".join(p.name for p in grammar.roots))
    unresolved = sorted({name for _, name in grammar.references()
                         if name not in grammar})
    print("Unresolved:", ", ".join(unresolved))
    return grammar


if __name__ == "__main__":
    main(debug=True)
