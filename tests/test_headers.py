"""Tests for header line classification."""

from thread_annotator.config import AnnotatorConfig
from thread_annotator.text import is_header_line
from thread_annotator.text.headers import header_flags


class TestIsHeaderLine:
    def test_first_line_with_numeral_name_and_number(self):
        assert is_header_line("1 無念 Name としあき No.100", 0) is True

    def test_same_line_further_down_is_not_header(self):
        assert is_header_line("1 無念 Name としあき No.100", 2) is False

    def test_date_time_is_header_anywhere(self):
        assert is_header_line("24/01/01(月)12:00:00 No.5", 3) is True

    def test_requires_leading_numeral(self):
        assert is_header_line("無念 Name No.100", 0) is False

    def test_requires_name_marker(self):
        assert is_header_line("1 anon No.100", 0) is False

    def test_requires_post_number(self):
        assert is_header_line("1 無念 Name", 0) is False

    def test_full_width_dot(self):
        assert is_header_line("7 としあき No．700", 0) is True

    def test_body_text(self):
        assert is_header_line("just some text", 0) is False

    def test_custom_name_markers(self):
        config = AnnotatorConfig(poster_name_markers=("名無し",))
        assert is_header_line("1 名無し No.5", 0) is False
        assert is_header_line("1 名無し No.5", 0, config=config) is True


class TestHeaderFlags:
    def test_per_line(self):
        text = "1 無念 No.100\nbody\n>2 無念 No.99"
        assert header_flags(text) == [True, False, False]
