import io

import pytest

from sheets.scanners import (
    LINES,
    LINES_UNIVERSAL,
    after_string,
    before_string,
    cut_suffix,
    eof_sep_func,
    match_string,
    replace_if,
    rune_sep,
    rune_sep_func,
    scan,
    trim,
    trim_left,
    trim_right,
)


def test_rune_sep_func_example():
    tokens = [trim(t) for t in scan(io.StringIO(" 123 , 124\t\t,\t234, "), rune_sep_func(","))]
    assert tokens == ["123", "124", "234", ""]


def _cells(lines, splitter):
    return [list(scan(io.StringIO(line), splitter)) for line in lines]


def test_before_string_csv_with_comments():
    text = " 123 , 124 ## comment\n 1,2\n3,  4  ## comment"
    lines = scan(io.StringIO(text), rune_sep_func("\n"))
    cells = _cells(lines, rune_sep_func(",", before_string("##"), trim))
    assert cells == [["123", "124"], ["1", "2"], ["3", "4"]]


def test_before_string_windows_lines():
    text = " 123 , 124 // comment\r\n 1,2\r\n3,  4  // comment"
    lines = scan(io.StringIO(text), LINES)
    cells = _cells(lines, rune_sep_func(",", trim))
    assert cells == [["123", "124"], ["1", "2"], ["3", "4"]]


def test_lines_keeps_carriage_return():
    assert list(scan("a\r\nb", LINES)) == ["a\r", "b"]


def test_lines_universal_drops_carriage_return_and_comment():
    assert list(scan("a\r\nb // note\r\nc", LINES_UNIVERSAL)) == ["a", "b ", "c"]


def test_trailing_separator_gives_no_empty_token():
    assert list(scan("x\ny\n", LINES)) == ["x", "y"]


def test_empty_lines_are_tokens():
    assert list(scan("\n\nz", LINES)) == ["", "", "z"]


def test_empty_stream_gives_nothing():
    assert list(scan("", LINES)) == []


def test_scan_accepts_long_input_across_chunks():
    text = "\n".join(str(n) for n in range(3000))
    assert list(scan(io.StringIO(text), LINES)) == [str(n) for n in range(3000)]


def test_scan_rejects_binary_stream():
    with pytest.raises(TypeError):
        list(scan(io.BytesIO(b"a,b"), rune_sep_func(",")))


def test_scan_rejects_bad_advance():
    with pytest.raises(ValueError):
        list(scan("abc", lambda data, at_eof: (len(data) + 1, "x")))


def test_match_string_drops_token():
    drop_a = match_string("a", lambda data, text: data == text)
    assert list(scan("x,a", rune_sep_func(",", drop_a))) == ["x"]


def test_rune_sep():
    separator = rune_sep(",")
    assert separator("ab,cd") == (3, "ab")
    assert separator("abcd") == (0, None)
    assert separator(",x") == (1, "")


def test_rune_sep_needs_one_character():
    with pytest.raises(ValueError):
        rune_sep(",,")


def test_eof_sep_func():
    splitter = eof_sep_func(rune_sep(","))
    assert splitter("a,b", False) == (2, "a")
    assert splitter("ab", True) == (2, "ab")
    assert splitter("", True) == (0, None)


def test_trim_unicode_space():
    assert trim("\u00a0 x \u3000") == "x"
    assert trim_left("  x  ") == "x  "
    assert trim_right("  x  ") == "  x"


def test_trim_does_not_strip_file_separator():
    assert trim_left("\x1cx") == "\x1cx"


def test_cut_suffix():
    cut = cut_suffix("\r")
    assert cut("ab\r") == "ab"
    assert cut("ab") == "ab"


def test_replace_if():
    upper_if_short = replace_if("", lambda data, _: (data.upper(), len(data) < 3))
    assert upper_if_short("ab") == "AB"
    assert upper_if_short("abcd") == "abcd"


def test_before_and_after_string():
    assert before_string("//")("a//b//c") == "a"
    assert before_string("//")("abc") == "abc"
    assert before_string("")("abc") == ""
    assert after_string("//")("a//b//c") == "b//c"
    assert after_string("//")("abc") == "abc"