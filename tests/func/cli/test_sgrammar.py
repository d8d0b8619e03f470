import pytest  # noqa
from click.testing import CliRunner
from specgrammar.cli import sgrammar


@pytest.fixture
def grammar_files(tmp_path):
    lexer = tmp_path / "lexer.grammar"
    lexer.write_text("IDENTIFIER -> [`a`-`z`]+\n\nCOMMA -> `,`\n",
                     encoding="utf-8")
    syntax = tmp_path / "syntax.grammar"
    syntax.write_text("@root List -> IDENTIFIER (COMMA IDENTIFIER)*\n",
                      encoding="utf-8")
    return str(lexer), str(syntax)


def test_sgrammar_check(grammar_files):
    result = CliRunner().invoke(sgrammar, ['--no-colors', 'check',
                                           *grammar_files])
    assert result.exit_code == 0
    assert "Grammar OK." in result.output
    assert "3 production(s) in 2 file(s)." in result.output


def test_sgrammar_check_error(tmp_path):
    bad = tmp_path / "bad.grammar"
    bad.write_text("a -> `x`\n\nb -> (`y`", encoding="utf-8")
    result = CliRunner().invoke(sgrammar, ['--no-colors', 'check', str(bad)])
    assert result.exit_code == 1
    assert f"Error in grammar file {bad}." in result.output
    assert "3 | b -> (`y`" in result.output
    assert "^ expected closing `)`" in result.output


def test_sgrammar_check_duplicate_across_files(tmp_path):
    first = tmp_path / "first.grammar"
    first.write_text("a -> `x`", encoding="utf-8")
    second = tmp_path / "second.grammar"
    second.write_text("a -> `y`", encoding="utf-8")
    result = CliRunner().invoke(sgrammar, ['--no-colors', 'check',
                                           str(first), str(second)])
    assert result.exit_code == 1
    assert f"Error in grammar file {second}." in result.output
    assert "duplicate production a in grammar" in result.output


def test_sgrammar_show(grammar_files):
    result = CliRunner().invoke(sgrammar, ['--no-colors', 'show',
                                           '-c', 'lexer', *grammar_files])
    assert result.exit_code == 0
    assert "IDENTIFIER [lexer]" in result.output
    assert "List [lexer, root]" in result.output
    assert "Repeat1\n  Charset([`a`-`z`])" in result.output


def test_sgrammar_show_roots(grammar_files):
    result = CliRunner().invoke(sgrammar, ['--no-colors', 'show', '--roots',
                                           *grammar_files])
    assert result.exit_code == 0
    assert "List [syntax, root]" in result.output
    assert "IDENTIFIER" not in result.output.split("List")[0]
    assert "COMMA [" not in result.output


def test_sgrammar_debug(grammar_files):
    result = CliRunner().invoke(sgrammar, ['--no-colors', '--debug', 'check',
                                           *grammar_files])
    assert result.exit_code == 0
    assert "Production: IDENTIFIER" in result.output
    assert "Registered: @root List -> IDENTIFIER (COMMA IDENTIFIER)*" \
        in result.output
