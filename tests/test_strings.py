import re

import pytest

from gklib.strings import (
    ReplacementError,
    case_equal,
    chr_replace,
    get_string_id,
    hprune,
    rcmp,
    regex_replace,
    str2time,
    time2str,
    tprune,
)


def test_chr_replace_translates_characters():
    text = "a-b-c"
    assert chr_replace(text, "-", "_") == text.replace("-", "_")


def test_chr_replace_deletes_characters_without_counterpart():
    text = "a-b.c-d"
    result = chr_replace(text, "-.", "+")
    assert "-" not in result
    assert "." not in result
    assert result.count("+") == text.count("-")
    assert len(result) == len(text) - text.count(".")


def test_chr_replace_first_occurrence_in_fromlist_wins():
    text = "xyx"
    result = chr_replace(text, "xx", "ab")
    assert set(result) == {"a", "y"}


def test_regex_replace_global():
    word, new = "cat", "dog"
    text = f"a {word} b {word}"
    assert regex_replace(text, word, new, "g") == (f"a {new} b {new}", 2)


def test_regex_replace_first_only():
    word, new = "cat", "dog"
    text = f"{word} {word}"
    assert regex_replace(text, word, new, "") == (f"{new} {word}", 1)


def test_regex_replace_no_match_returns_text():
    text = "nothing here"
    assert regex_replace(text, "zzz", "q", "g") == (text, 0)


def test_regex_replace_groups():
    left, right = "key", "value"
    result, count = regex_replace(f"{left}={right}", r"(\w+)=(\w+)", "$2=$1", "")
    assert result == f"{right}={left}"
    assert count == 1


def test_regex_replace_whole_match_and_escape():
    word = "abc"
    result, _ = regex_replace(word, word, "[$0]\\$", "")
    assert result == f"[{word}]$"


def test_regex_replace_ignore_case():
    word = "Cat"
    result, count = regex_replace(word.upper(), word.lower(), word, "i")
    assert (result, count) == (word, 1)
    assert regex_replace(word.upper(), word.lower(), word, "") == (word.upper(), 0)


def test_regex_replace_empty_matches_agree_with_re_sub():
    text = "abxd"
    result, _ = regex_replace(text, "x*", "-", "g")
    assert result == re.sub("x*", "-", text)


@pytest.mark.parametrize("replacement", ["a\\", "a$", "$x"])
def test_regex_replace_bad_replacement(replacement):
    with pytest.raises(ReplacementError):
        regex_replace("abc", "b", replacement, "")


def test_regex_replace_missing_group():
    with pytest.raises(ReplacementError):
        regex_replace("abc", "b", "$3", "")


def test_regex_replace_bad_pattern():
    with pytest.raises(ReplacementError):
        regex_replace("abc", "(", "x", "")


def test_prunes():
    core = "abc"
    assert tprune(core + "  \n", " \n") == core
    assert hprune("\t " + core, " \t") == core
    assert tprune(core + " ", "") == core + " "
    assert hprune(" " + core + " ", " ") == core + " "


def test_case_equal():
    assert case_equal("Hello", "hELLO") is True
    assert case_equal("Hello", "Hell") is False
    assert case_equal("abc", "abd") is False


def test_rcmp():
    assert rcmp("abc", "abc") == 0
    assert rcmp("abc", "xbc") == ord("a") - ord("x")
    assert rcmp("bc", "abc") == -1
    assert rcmp("abc", "bc") == 1


def test_time_round_trip():
    stamp = 1_000_000_000
    text = time2str(stamp)
    assert re.fullmatch(r"\d{2}/\d{2}/\d{4} \d{2}:\d{2}:\d{2}", text)
    assert str2time(text) == stamp


def test_str2time_before_epoch_is_zero():
    assert str2time("06/15/1900 12:00:00") == 0


def test_str2time_rejects_bad_text():
    with pytest.raises(ValueError):
        str2time("not a date")


def test_get_string_id():
    strmap = {"alpha": 1, "beta": 2}
    assert get_string_id(strmap, "BETA") == strmap["beta"]
    assert get_string_id([("x", 7), ("X", 9)], "x") == 7
    assert get_string_id(strmap, "gamma") is None