import re

import pytest

from unicode_scanner import ScannerCore, describe
from unicode_scanner.match import MatchRecord
from unicode_scanner.patterns import ANY_CHAR, coerce_pattern


@pytest.mark.parametrize(
    "text,pos,expected",
    [
        ("Fri Dec 12 1975 14:39", 0, '<ScannerCore 0/21 @ "Fri D...">'),
        ("Fri Dec 12 1975 14:39", 10, '<ScannerCore 10/21 "...ec 12" @ " 1975...">'),
        ("abc def", 3, '<ScannerCore 3/7 "abc" @ " def">'),
        ("abcdefghij", 5, '<ScannerCore 5/10 "abcde" @ "fghij">'),
        ("abcdefghijk", 6, '<ScannerCore 6/11 "...bcdef" @ "ghijk">'),
        ("a\nb\"c", 0, '<ScannerCore 0/5 @ "a\\nb\\"c">'),
        ("test", 4, "<ScannerCore fin>"),
        ("", 0, "<ScannerCore fin>"),
    ],
)
def test_describe(text, pos, expected):
    """Context is cut to five codepoints and quoted"""
    s = ScannerCore(text)
    s.pos = pos
    assert describe(s) == expected
    assert repr(s) == expected


def test_describe_uses_subclass_name():
    class TokenScanner(ScannerCore):
        pass

    assert repr(TokenScanner("abc")) == '<TokenScanner 0/3 @ "abc">'


def test_describe_respects_inspect_length():
    class WideScanner(ScannerCore):
        INSPECT_LENGTH = 8

    s = WideScanner("Fri Dec 12 1975 14:39")
    s.scan_until(r"12")
    assert repr(s) == '<WideScanner 10/21 "...i Dec 12" @ " 1975 14...">'


def test_match_record_offsets_are_relative_to_base():
    text = "Fri Dec 12 1975"
    found = re.compile(r"(\d+) (\d+)").search(text, 4)
    record = MatchRecord(base=4, match=found)

    assert record.start == 4
    assert record.end == 11
    assert record.absolute_start == 8
    assert record.absolute_end == 15
    assert record.span(0) == (4, 11)
    assert record.span(2) == (7, 11)
    assert record.group(1) == "12"
    assert record.group(2) == "1975"


def test_match_record_missing_groups():
    found = re.compile(r"(a)|(b)").match("b")
    record = MatchRecord(base=0, match=found)

    assert record.span(1) is None
    assert record.group(1) is None
    assert record.group(2) == "b"
    assert record.group(3) is None
    assert record.group(True) is None
    assert record.group(1.0) is None


def test_coerce_pattern():
    compiled = re.compile(r"\w+")
    assert coerce_pattern(compiled) is compiled
    assert coerce_pattern(r"\w+").pattern == r"\w+"
    assert coerce_pattern(r"\w+", re.IGNORECASE).flags & re.IGNORECASE
    # Sources are compiled once per flag set
    assert coerce_pattern(r"[a-z]+") is coerce_pattern(r"[a-z]+")


def test_any_char_matches_newline():
    assert ANY_CHAR.match("\n").group() == "\n"
    assert ANY_CHAR.match("😀").group() == "😀"


def test_matched_size_uses_whole_match_span():
    s = ScannerCore("Fri Dec 12 1975")
    assert s.skip_until(r"(\d+) (\d+)") == 15
    assert s.matched_size() == 7
    s.check(r"x")
    assert s.matched_size() is None
