from collections import Counter

import pytest
from charfreq.errors import DecodeError, InvalidOption
from charfreq.tally import decode, tally


class TestDecode:
    def test_str_passes_through(self):
        assert decode("hello") == "hello"

    def test_utf8_bytes(self):
        assert decode("café".encode("utf-8")) == "café"

    def test_multibyte_is_one_code_point(self):
        text = decode("世界🌍".encode("utf-8"))
        assert len(text) == 3

    def test_malformed_strict(self):
        with pytest.raises(DecodeError) as e:
            decode(b"ab\xffcd")
        assert e.value.position == 2
        assert e.value.encoding == "utf-8"

    def test_malformed_replace(self):
        assert decode(b"ab\xffcd", errors="replace") == "ab�cd"

    def test_malformed_ignore(self):
        assert decode(b"ab\xffcd", errors="ignore") == "abcd"

    def test_other_encoding(self):
        assert decode("é".encode("latin-1"), encoding="latin-1") == "é"

    def test_unknown_encoding(self):
        with pytest.raises(InvalidOption):
            decode(b"abc", encoding="not-a-codec")

    def test_empty(self):
        assert decode(b"") == ""


class TestTally:
    def test_empty_string(self):
        assert tally("") == Counter()

    def test_single_character(self):
        assert tally("a") == Counter({"a": 1})

    def test_multiple_same_characters(self):
        assert tally("aaa") == Counter({"a": 3})

    def test_whitespace_ignored(self):
        assert tally("a b\tc\n") == Counter({"a": 1, "b": 1, "c": 1})

    def test_whitespace_included(self):
        assert tally("a b\n", include_whitespace=True) == Counter(
            {"a": 1, " ": 1, "b": 1, "\n": 1}
        )

    def test_case_sensitivity(self):
        assert tally("aAaA") == Counter({"a": 2, "A": 2})

    def test_special_characters(self):
        table = tally("a!@#$%^&*()")
        assert len(table) == 11
        assert table["!"] == 1

    def test_unicode_characters(self):
        table = tally("Hello, 世界！🌍")
        assert table["世"] == 1
        assert table["界"] == 1
        assert table["！"] == 1
        assert table["🌍"] == 1
        assert len(table) == 9

    def test_total_matches_code_points(self):
        text = "the quick brown fox, 素早い茶色の狐"
        assert tally(text, include_whitespace=True).total() == len(text)
        assert tally(text).total() == len(text) - text.count(" ")
