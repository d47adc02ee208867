"""Tests for width and glyph normalization."""

import pytest

from thread_annotator.text import is_quote_line, normalize, normalize_line, quote_core


class TestNormalize:
    def test_full_width_quote_and_digits(self):
        assert normalize("＞＞ｈｅｌｌｏ１２３") == ">>hello123"

    def test_double_angle_becomes_quote(self):
        assert normalize("≫10") == ">10"

    def test_removes_zero_width_space(self):
        assert normalize("No.\u200b100") == "No.100"

    def test_ideographic_space(self):
        assert normalize("a\u3000b") == "a b"

    def test_quote_runs_are_kept(self):
        assert normalize(">>>x") == ">>>x"

    def test_empty(self):
        assert normalize("") == ""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain ascii",
            "＞＞ｆｕｌｌ\u3000ｗｉｄｔｈ",
            "≫≫１２３\u200b",
            "ｶﾀｶﾅ ﾃｽﾄ",
            "①②③ ㍻",
            "No．１００ そうだね",
            " \t\u3000 ",
        ],
    )
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once


class TestNormalizeLine:
    def test_collapses_and_trims(self):
        assert normalize_line("  hello \t\u3000 world  ") == "hello world"

    def test_equal_lines_across_widths(self):
        assert normalize_line("ｈｅｌｌｏ\u3000ｗｏｒｌｄ") == normalize_line("hello world")


class TestQuoteCore:
    def test_strips_whole_run(self):
        assert quote_core(">> foo ") == "foo"

    def test_full_width_run(self):
        assert quote_core("＞＞foo") == "foo"

    def test_leading_whitespace(self):
        assert quote_core("  >bar") == "bar"

    def test_not_a_quote(self):
        assert quote_core("plain") == "plain"


class TestIsQuoteLine:
    def test_ascii(self):
        assert is_quote_line(">quoted") is True

    def test_indented_full_width(self):
        assert is_quote_line("\u3000＞quoted") is True

    def test_body_line(self):
        assert is_quote_line("a > b") is False
