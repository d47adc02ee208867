"""Tests for body-only extraction."""

from thread_annotator.text import extract_body_only


class TestExtractBodyOnly:
    def test_skips_header_and_file_info(self):
        plain = "1 無念 24/01/01(月)12:00:00 No.100\nfoo.jpg-(123 KB)\n\nhello\n[1234 B]\nworld\n\n"
        assert extract_body_only(plain) == "hello\nworld"

    def test_keeps_quote_lines(self):
        assert extract_body_only("No.5\n>quoted\nbody") == ">quoted\nbody"

    def test_skips_id_line(self):
        assert extract_body_only("ID:abc123\nbody text") == "body text"

    def test_file_name_head(self):
        assert extract_body_only("ファイル名:a.png\nbody") == "body"

    def test_body_header_shapes_after_start_are_kept(self):
        assert extract_body_only("body\nNo.5 was great") == "body\nNo.5 was great"

    def test_plain_body(self):
        assert extract_body_only("just text") == "just text"

    def test_empty(self):
        assert extract_body_only("") == ""
