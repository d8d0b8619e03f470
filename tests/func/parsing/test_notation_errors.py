"""
Every malformed construct is a hard error reported at the exact position
where it was detected.
"""
import pytest  # noqa
from specgrammar import Grammar, SyntaxError


def parse_error(text):
    with pytest.raises(SyntaxError) as e:
        Grammar.from_string(text, "syntax")
    return e.value


@pytest.mark.parametrize("text, message, col", [
    ("-> `x`", "expected production name", 1),
    ("@root -> `x`", "expected production name", 7),
    ("a `x`", "expected -> arrow", 2),
    ("a->`x`", "expected -> arrow", 2),
    ("a ->", "expected an expression", 5),
    ("a -> |", "expected an expression", 6),
    ("a -> `x", "unterminated terminal, expected closing backtick", 6),
    ("a -> ``", "unterminated terminal, expected closing backtick", 6),
    ("a -> []", "expected at least one character in character group", 7),
    ("a -> [`a`", "expected closing ]", 10),
    ("a -> [`a` |]", "expected closing ]", 11),
    ("a -> <prose", "unterminated prose, expected closing `>`", 6),
    ("a -> ()", "expected expression in parenthesized group", 7),
    ("a -> (x", "expected closing `)`", 8),
    ("a -> ~", "expected expression after ~", 7),
    ("a -> ~(`a` `b`)", "expected a charset, terminal, or name after "
     "~ negation", 7),
    ("a -> ~~x", "expected a charset, terminal, or name after "
     "~ negation", 7),
    ("a -> ~x*?", None, None),
    ("a -> U+12", "expected 4 hexadecimal uppercase digits after U+", 8),
    ("a -> U+00ab", "expected 4 hexadecimal uppercase digits after U+", 8),
    ("a -> x _note", "failed to find end of _ suffixed text", 13),
    ("a -> x [^note", "unterminated footnote, expected closing `]`", 10),
    ("a -> x{3..1}", "range 3..1 is malformed", 13),
])
def test_error_message_and_column(text, message, col):
    if message is None:
        # Repetition after a negated name is fine.
        assert Grammar.from_string(text, "syntax")["a"]
        return
    e = parse_error(text)
    assert e.message == message
    assert e.lineno == 1
    assert e.col == col
    assert e.line == text


def test_missing_indentation_points_after_newline():
    e = parse_error("a -> `x`\n`y`")
    assert e.message == "expected indentation on next line"
    assert e.lineno == 2
    assert e.col == 1
    assert e.line == "`y`"


def test_suffix_must_end_on_same_line():
    e = parse_error("a -> x _note\n  y_")
    assert e.message == "failed to find end of _ suffixed text"
    assert e.lineno == 2
    assert e.col == 1


def test_underscore_in_backticks_does_not_end_suffix():
    e = parse_error("a -> x _`a_ b")
    assert e.message == "failed to find end of _ suffixed text"


def test_error_in_second_production():
    text = "a -> `x`\n\nb -> `y` | (`z`"
    e = parse_error(text)
    assert e.message == "expected closing `)`"
    assert e.lineno == 3
    assert e.col == len("b -> `y` | (`z`") + 1


def test_error_rendering():
    e = parse_error("a -> `x`\n\nb -> `y`{3..1}")
    assert str(e) == ("\n"
                      "  |\n"
                      "3 | b -> `y`{3..1}\n"
                      "  |" + " " * 15 + "^ range 3..1 is malformed")


@pytest.mark.parametrize("text, message, col", [
    ("a -> `x\n  `", "unterminated terminal, expected closing backtick", 6),
    ("a -> <a\n  >", "unterminated prose, expected closing `>`", 6),
    ("a -> x [^a\n  ]", "unterminated footnote, expected closing `]`", 10),
    ("a -> [`a\n  `]", "expected at least one character in character "
     "group", 7),
])
def test_delimited_text_stops_at_newline(text, message, col):
    e = parse_error(text)
    assert e.message == message
    assert e.lineno == 1
    assert e.col == col
    assert e.line == text.split("\n")[0]
