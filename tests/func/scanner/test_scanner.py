import re
import pytest  # noqa
from specgrammar.scanner import Scanner
from specgrammar.exceptions import SyntaxError


def test_take_while():
    s = Scanner("aaab")
    assert s.take_while(lambda ch: ch == 'a') == 'aaa'
    assert s.position == 3
    assert s.take_while(lambda ch: ch == 'a') == ''
    assert s.position == 3
    assert s.take_while(lambda ch: True) == 'b'
    assert s.eof()


def test_take_re_is_anchored():
    s = Scanner("xx12")
    digits = re.compile(r'[0-9]+')
    assert s.take_re(digits) is None
    assert s.position == 0
    s.take_str("xx")
    m = s.take_re(digits)
    assert m.group() == '12'
    assert s.position == 4


def test_take_str_and_peek():
    s = Scanner("->x")
    assert s.peek() == '-'
    assert not s.take_str("=>")
    assert s.position == 0
    assert s.take_str("->")
    assert s.peek() == 'x'
    s.take_str("x")
    assert s.peek() is None
    assert s.eof()


def test_expect():
    s = Scanner("a ->", file_name="g.txt")
    s.expect("a", "expected a")
    with pytest.raises(SyntaxError) as e:
        s.expect("->", "expected arrow")
    assert e.value.message == "expected arrow"
    assert e.value.col == 2
    assert e.value.file_name == "g.txt"
    # Failed expectation doesn't move the position.
    assert s.position == 1


def test_space0():
    s = Scanner("   \t")
    assert s.space0() == '   '
    assert s.space0() == ''
    assert s.peek() == '\t'


def test_empty_input():
    s = Scanner("")
    assert s.eof()
    assert s.peek() is None
    assert s.take_while(lambda ch: True) == ''
