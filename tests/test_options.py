import pytest

from argtrex.errors import ErrorCode, OptionError
from argtrex.options import (
    RexOption,
    StrOption,
    rex0,
    rex1,
    rexn,
    str0,
    str1,
    strn,
)
from argtrex.trex import ICASE


def test_str_default_datatype():
    opt = str0("s", None)
    assert opt.datatype == "<string>"


def test_str_counts_from_helpers():
    assert (str0("a", None).mincount, str0("a", None).maxcount) == (0, 1)
    assert (str1("a", None).mincount, str1("a", None).maxcount) == (1, 1)
    opt = strn("a", None, "<x>", 2, 5)
    assert (opt.mincount, opt.maxcount) == (2, 5)


def test_str_maxcount_raised_to_mincount():
    opt = strn("a", None, None, 3, 1)
    assert opt.maxcount == 3
    assert opt.sval == ["", "", ""]


def test_str_scan_records_values_in_order():
    opt = strn("n", "name", None, 0, 3)
    opt.scan("alpha")
    opt.scan("beta")
    assert opt.count == 2
    assert opt.values == ["alpha", "beta"]


def test_str_scan_none_counts_without_value():
    opt = str0("n", None)
    opt.scan(None)
    assert opt.count == 1
    assert opt.values == [""]


def test_str_scan_excess_raises():
    opt = str1("n", None)
    opt.scan("one")
    with pytest.raises(OptionError) as info:
        opt.scan("two")
    assert info.value.code is ErrorCode.MAXCOUNT
    assert info.value.argval == "two"
    assert opt.values == ["one"]


def test_str_check_missing():
    opt = strn("n", None, None, 2, 3)
    opt.scan("x")
    with pytest.raises(OptionError) as info:
        opt.check()
    assert info.value.code is ErrorCode.MINCOUNT
    opt.scan("y")
    opt.check()
    assert opt.count == 2


def test_str_reset_clears():
    opt = strn("n", None, None, 0, 2)
    opt.scan("a")
    opt.scan("b")
    opt.reset()
    assert opt.count == 0
    assert opt.sval == ["", ""]


def test_str_error_message_missing():
    opt = str1("a", "alpha", "<s>")
    msg = opt.error_message(ErrorCode.MINCOUNT, None, "prog")
    assert msg == "prog: missing option -a <s>\n"


def test_str_error_message_excess_uses_argval():
    opt = str1(None, "alpha,beta", "<s>")
    msg = opt.error_message(ErrorCode.MAXCOUNT, "val", "prog")
    assert msg == "prog: excess option --alpha=val\n"


def test_str_error_message_other_code_only_prefix():
    opt = str1("a", None)
    assert opt.error_message(ErrorCode.BADINT, "x", "prog") == "prog: "


def test_rex_datatype_defaults_to_pattern():
    opt = rex0(None, "name", "^[a-z]+$")
    assert opt.datatype == "^[a-z]+$"
    assert rex0(None, "name", "a", "<w>").datatype == "<w>"


def test_rex_none_pattern_rejected():
    with pytest.raises(ValueError):
        RexOption("a", None, None)


def test_rex_counts_from_helpers():
    assert (rex0("a", None, "x").mincount, rex0("a", None, "x").maxcount) == (0, 1)
    assert (rex1("a", None, "x").mincount, rex1("a", None, "x").maxcount) == (1, 1)
    opt = rexn("a", None, "x", None, 4, 2)
    assert (opt.mincount, opt.maxcount) == (4, 4)


def test_rex_scan_matching_value():
    opt = rexn(None, "word", "[a-z]+", None, 0, 2)
    opt.scan("hello")
    assert opt.values == ["hello"]


def test_rex_scan_non_matching_value():
    opt = rex1(None, "word", "[a-z]+")
    with pytest.raises(OptionError) as info:
        opt.scan("HELLO")
    assert info.value.code is ErrorCode.REGNOMATCH
    assert opt.count == 0


def test_rex_icase_flag():
    opt = rex1(None, "word", "[a-z]+", None, ICASE)
    opt.scan("HeLLo")
    assert opt.values == ["HeLLo"]


def test_rex_scan_excess():
    opt = rex1("w", None, "a+")
    opt.scan("aaa")
    with pytest.raises(OptionError) as info:
        opt.scan("a")
    assert info.value.code is ErrorCode.MAXCOUNT


def test_rex_scan_none_counts():
    opt = rex0("w", None, "a+")
    opt.scan(None)
    assert opt.count == 1


def test_rex_check_and_reset():
    opt = rex1("w", None, "a+")
    with pytest.raises(OptionError) as info:
        opt.check()
    assert info.value.code is ErrorCode.MINCOUNT
    opt.scan("aa")
    opt.check()
    opt.reset()
    assert opt.count == 0


def test_rex_error_message_illegal_value():
    opt = rex1("w", None, "a+")
    msg = opt.error_message(ErrorCode.REGNOMATCH, "bbb", "prog")
    assert msg.startswith("prog: illegal value  ")
    assert msg.endswith("bbb\n")


def test_rex_error_message_missing_uses_datatype():
    opt = rex1(None, "word", "a+")
    msg = opt.error_message(ErrorCode.MINCOUNT, None, "prog")
    assert msg == "prog: missing option --word=a+\n"


def test_rex_bad_pattern_reported_at_scan(capsys):
    opt = rex0("w", None, "[]")
    err = capsys.readouterr().err
    assert "Bad argument table." in err
    with pytest.raises(ValueError):
        opt.scan("x")


def test_str_option_class_direct():
    opt = StrOption("x", None, None, 0, 2, "gloss")
    assert opt.glossary == "gloss"
    opt.scan("v")
    assert opt.values == ["v"]