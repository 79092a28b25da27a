import pytest

from ftkit.strings import (
    strcat,
    strchr,
    strcmp,
    strcpy,
    strdup,
    strequ,
    strisnum,
    strlen,
    strncmp,
    strndup,
    strnstr,
    strrchr,
)


def test_strlen_matches_len():
    for text in ("", "a", "hello world"):
        assert strlen(text) == len(text)


def test_strchr_finds_first():
    assert strchr("banana", "a") == 1
    assert strchr("banana", ord("n")) == 2


def test_strchr_missing_and_nul():
    assert strchr("banana", "z") is None
    assert strchr("banana", "\0") == len("banana")


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last():
    assert strrchr("banana", "a") == 5
    assert strrchr("banana", "z") is None
    assert strrchr("abc", 0) == 3


def test_strcmp_equal_and_order():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") == ord("c") - ord("d")
    assert strcmp("abd", "abc") > 0


def test_strcmp_prefix_uses_terminator():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


def test_strcmp_antisymmetric():
    pairs = [("apple", "apricot"), ("", "x"), ("same", "same")]
    for a, b in pairs:
        assert strcmp(a, b) == -strcmp(b, a)


def test_strncmp_limits_comparison():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abcdef", "abcxyz", 4) == ord("d") - ord("x")
    assert strncmp("anything", "else", 0) == 0


def test_strncmp_stops_at_end():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("ab", "abc", 10) == -ord("c")


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strequ():
    assert strequ("minishell", "minishell") is True
    assert strequ("minishell", "minishel") is False
    assert strequ(None, "x") is False
    assert strequ("x", None) is False


@pytest.mark.parametrize("text", ["0", "123", "-42", "", "-"])
def test_strisnum_true(text):
    assert strisnum(text) is True


@pytest.mark.parametrize("text", ["12a", "+5", "1-2", " 1", "--1"])
def test_strisnum_false(text):
    assert strisnum(text) is False


def test_strisnum_none():
    assert strisnum(None) is False


def test_strnstr_found_within_length():
    assert strnstr("hello world", "world", 11) == 6
    assert strnstr("hello world", "lo", 5) == 3


def test_strnstr_not_fitting_length():
    assert strnstr("hello world", "world", 10) is None
    assert strnstr("hello", "xyz", 5) is None


def test_strnstr_empty_needle():
    assert strnstr("hello", "", 0) == 0


def test_strdup_and_strcpy_copy():
    assert strdup("export") == "export"
    assert strcpy("unset") == "unset"
    assert strdup("") == ""


def test_strndup_truncates():
    assert strndup("hello", 3) == "hel"
    assert strndup("hi", 10) == "hi"
    assert strndup("hi", 0) == ""


def test_strndup_negative():
    with pytest.raises(ValueError):
        strndup("hi", -1)


def test_strcat_appends():
    assert strcat("foo", "bar") == "foobar"
    assert strcat("", "x") == "x"
    result = strcat("abc", "def")
    assert strlen(result) == strlen("abc") + strlen("def")
    assert strnstr(result, "def", len(result)) == 3