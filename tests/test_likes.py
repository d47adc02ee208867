"""Tests for the like-count overlay."""

from thread_annotator.text import apply_like_overlay, own_post_number, render_display_text


class TestApplyLikeOverlay:
    def test_rewrites_marker_for_own_number(self):
        line = "5 無念 ...No.105 そうだね"
        assert "そうだねx3" in apply_like_overlay(line, {"105": 3}, "105")

    def test_empty_map_leaves_text(self):
        line = "5 無念 ...No.105 そうだね"
        assert apply_like_overlay(line, {}, "105") == line

    def test_zero_count_leaves_text(self):
        line = "5 無念 No.105 +"
        assert apply_like_overlay(line, {"105": 0}) == line

    def test_plus_marker(self):
        line = "5 無念 No.105 +"
        assert apply_like_overlay(line, {"105": 2}) == "5 無念 No.105 そうだねx2"

    def test_existing_count_replaced(self):
        line = "5 無念 No.105 そうだねx1"
        assert apply_like_overlay(line, {"105": 4}) == "5 無念 No.105 そうだねx4"

    def test_stable_on_rerun(self):
        line = "5 無念 No.105 そうだね"
        once = apply_like_overlay(line, {"105": 3})
        assert apply_like_overlay(once, {"105": 3}) == once

    def test_fallback_number_for_line_without_no(self):
        line = "24/01/01(月)12:00:00 そうだね"
        assert apply_like_overlay(line, {"105": 3}, "105") == "24/01/01(月)12:00:00 そうだねx3"

    def test_poster_id_plus_untouched(self):
        line = "1 無念 24/01/01(月)12:00:00 ID:a+b No.100 +"
        result = apply_like_overlay(line, {"100": 2})
        assert "ID:a+b" in result
        assert result.endswith("No.100 そうだねx2")

    def test_body_lines_untouched(self):
        text = "1 無念 No.100 +\n1+1 is two"
        assert apply_like_overlay(text, {"100": 2}).split("\n")[1] == "1+1 is two"

    def test_counts_not_mutated(self):
        counts = {"100": 2}
        apply_like_overlay("1 無念 No.100 +", counts)
        assert counts == {"100": 2}


class TestOwnPostNumber:
    def test_parses_first_number(self):
        assert own_post_number("1 無念 No.100\n>>No.99") == "100"

    def test_none(self):
        assert own_post_number("no numbers here") is None


class TestRenderDisplayText:
    def test_synthesized_marker_gets_count(self):
        display = render_display_text("6 無念 24/01/01(月)12:00:00 No.106", {"106": 5})
        assert display == "6 無念 24/01/01(月)12:00:00 No.106 そうだねx5"

    def test_without_counts(self):
        display = render_display_text("6 無念 24/01/01(月)12:00:00 No.106")
        assert display.endswith("No.106 そうだね")
