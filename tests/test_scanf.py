import io
import sys

import pytest

from examkit.scanf import Scanner, main, scan


def test_word_and_number():
    assert scan("%s a%d", io.StringIO("hello a42")) == ["hello", 42]


def test_number_skips_leading_space():
    assert scan("%d", io.StringIO("  -17")) == [-17]


def test_char_does_not_skip_space():
    assert scan("%c%c", io.StringIO(" x")) == [" ", "x"]


def test_failed_int_leaves_input_for_next_scan():
    scanner = Scanner(io.StringIO("abc"))
    assert scanner.scan("%d") == []
    assert scanner.scan("%s") == ["abc"]


def test_sign_without_digits_is_consumed():
    scanner = Scanner(io.StringIO("-x"))
    assert scanner.scan("%d") == []
    assert scanner.scan("%s") == ["x"]


def test_sign_at_end_of_input_fails():
    assert scan("%d", io.StringIO("+")) == []


def test_literal_mismatch_stops():
    assert scan("%d,%d", io.StringIO("1;2")) == [1]


def test_literal_match_continues():
    assert scan("%d,%d", io.StringIO("1,2")) == [1, 2]


def test_space_at_end_of_input_stops():
    assert scan("%d %d", io.StringIO("5")) == [5]


def test_string_stops_at_whitespace():
    scanner = Scanner(io.StringIO("one two"))
    assert scanner.scan("%s") == ["one"]
    assert scanner.scan("%c") == [" "]


def test_unknown_conversion_stops():
    assert scan("%x", io.StringIO("ff")) == []


def test_trailing_percent_stops():
    assert scan("%d%", io.StringIO("3 4")) == [3]


def test_empty_input_raises():
    with pytest.raises(EOFError):
        scan("%d", io.StringIO(""))


def test_default_stream_is_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("word"))
    assert scan("%s") == ["word"]


def test_main_reports_values(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("word a7"))
    assert main() == 0
    assert capsys.readouterr().out == "\n c : ! \n i : 7 \n s : word\n\t> R : 2<\n"


def test_main_on_empty_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main() == 0
    assert capsys.readouterr().out.endswith("\t> R : -1<\n")