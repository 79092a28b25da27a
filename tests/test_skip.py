import pytest

from ftkit import skip


def test_skip_char_stops_at_other():
    text = "---abc"
    end = skip.skip_char(text, 0, "-")
    assert set(text[:end]) == {"-"}
    assert text[end] == "a"


def test_skip_char_no_match_keeps_index():
    assert skip.skip_char("abc", 1, "-") == 1


def test_skip_char_to_end():
    text = "xxxx"
    assert skip.skip_char(text, 0, "x") == len(text)


def test_skip_char_from_middle():
    text = "ab  cd"
    end = skip.skip_char(text, 2, " ")
    assert text[end:] == "cd"


def test_skip_chars_set():
    text = "+-+-42"
    end = skip.skip_chars(text, 0, "+-")
    assert text[end:] == "42"


def test_skip_chars_empty_base():
    assert skip.skip_chars("abc", 0, "") == 0


def test_skip_space_does_not_skip_newline():
    text = " \t\r\v\f\nx"
    end = skip.skip_space(text, 0)
    assert text[end] == "\n"


def test_skip_spacenl_skips_newline():
    text = " \t\r\v\f\nx"
    end = skip.skip_spacenl(text, 0)
    assert text[end:] == "x"


def test_skip_at_end_returns_length():
    text = "abc"
    assert skip.skip_space(text, len(text)) == len(text)
    assert skip.skip_spacenl("", 0) == 0


def test_skip_result_never_before_start():
    text = "a   b"
    for start in range(len(text) + 1):
        assert skip.skip_space(text, start) >= start


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        skip.skip_char("abc", -1, "a")