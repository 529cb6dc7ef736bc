import re

import pytest

from argtrex.trex import ICASE, TRex, TRexError, TRexMatch, compile


@pytest.mark.parametrize(
    "pattern, text",
    [
        ("abc", "abc"),
        ("abc", "abd"),
        ("abc", "ab"),
        ("a.c", "axc"),
        ("[0-9]+", "123"),
        ("[0-9]+", "12a3"),
        ("[0-9]+", ""),
        ("^ab$", "ab"),
        ("a|b", "b"),
        ("a|b", "ab"),
        ("(ab)+", "abab"),
        ("(?:ab)+", "abab"),
        ("a{2}", "aa"),
        ("a{2}", "a"),
        ("a{2}", "aaa"),
        ("a{1,3}", "aa"),
        ("a{1,3}", "aaaa"),
        ("a{2,}", "aaaaa"),
        ("\\d+", "42"),
        ("\\d+", "4x"),
        ("[^abc]", "d"),
        ("[^abc]", "a"),
        ("colou?r", "color"),
        ("colou?r", "colour"),
        ("\\w+", "foo_1"),
        ("\\s", "\t"),
        ("x\\.y", "x.y"),
        ("x\\.y", "xzy"),
    ],
)
def test_match_agrees_with_full_match(pattern, text):
    expected = re.fullmatch(pattern, text) is not None
    assert compile(pattern).match(text) == expected


def test_repetition_does_not_backtrack():
    assert compile("a*a").match("aaa") is False


def test_case_insensitive_literals():
    assert compile("abc", ICASE).match("AbC") is True
    assert compile("abc").match("AbC") is False


def test_case_insensitive_range():
    assert compile("[a-z]+", ICASE).match("HeLLo") is True
    assert compile("[a-z]+").match("HeLLo") is False


def test_constructor_and_compile_agree():
    assert TRex("ab+", 0).match("abbb") == compile("ab+").match("abbb")


@pytest.mark.parametrize(
    "pattern, message",
    [
        ("", "letter expected"),
        ("(ab", "expected paren"),
        ("(?x)", "expected paren"),
        ("[]", "empty class"),
        ("a{x}", "number expected"),
        ("a{2x", ", or } expected"),
        ("a**", "unexpected character"),
        ("a)", "unexpected character"),
        ("a{1234567890}", "overflow in numeric constant"),
        ("[\\d-z]", "cannot use character classes in ranges"),
        ("[a-", "invalid range"),
    ],
)
def test_compile_errors(pattern, message):
    with pytest.raises(TRexError, match=re.escape(message)):
        compile(pattern)


def test_compile_error_is_value_error():
    with pytest.raises(ValueError):
        compile("[]")


def test_captures_after_match():
    rex = compile("(a)(b)")
    text = "ab"
    assert rex.match(text)
    assert rex.subexp(0) == TRexMatch(0, len(text), text)
    assert rex.subexp(1).text == "a"
    assert rex.subexp(2).text == "b"


def test_failed_whole_match_clears_root_capture():
    rex = compile("(a)b")
    assert not rex.match("ac")
    assert rex.subexp(0) == TRexMatch(None, 0, "")
    assert rex.subexp(1).text == "a"


def test_subexp_count_includes_whole_pattern_and_skips_noncapturing():
    assert compile("(a)(?:b)(c)").subexp_count() == 3
    assert compile("(a)(?:b)(c)").subexp_count() == compile("(a)(c)").subexp_count()


@pytest.mark.parametrize("index", [-1, 2])
def test_subexp_out_of_range(index):
    rex = compile("(a)")
    assert rex.subexp_count() == 2
    with pytest.raises(IndexError):
        rex.subexp(index)


@pytest.mark.parametrize(
    "pattern, text",
    [
        ("b+", "aabbbc"),
        ("[0-9]+", "abc123"),
        ("x", "abc"),
        ("^b", "ab"),
        ("cd", "abcd"),
    ],
)
def test_search_agrees_with_search(pattern, text):
    found = re.search(pattern, text)
    expected = found.span() if found else None
    assert compile(pattern).search(text) == expected


def test_search_result_slices_to_matching_text():
    text = "xxhelloyy"
    span = compile("hel+o").search(text)
    assert span is not None
    assert text[span[0] : span[1]] == "hello"


def test_search_range_respects_bounds():
    text = "abcb"
    found = re.compile("b").search(text, 0, 2)
    assert compile("b").search_range(text, 0, 2) == found.span()


def test_search_range_empty_window():
    assert compile("a").search_range("aaa", 2, 2) is None


def test_search_on_empty_text():
    assert compile("a").search("") is None


def test_end_anchor_inside_search_range():
    text = "abab"
    found = re.compile("ab$").search(text, 0, 2)
    assert compile("ab$").search_range(text, 0, 2) == found.span()