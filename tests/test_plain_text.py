"""Tests for plain-text rendering and caching."""

from thread_annotator.content import (
    ImageItem,
    PlainTextSource,
    TextItem,
    build_plain_text_cache,
    html_to_plain_text,
)


class TestHtmlToPlainText:
    def test_line_breaks(self):
        assert html_to_plain_text("a<br>b<br/>c") == "a\nb\nc"

    def test_entities(self):
        assert html_to_plain_text("&gt;quote &amp; more") == ">quote & more"

    def test_block_tags(self):
        assert html_to_plain_text("<p>a</p><p>b</p>") == "a\nb"

    def test_scripts_removed(self):
        assert html_to_plain_text("<script>x()</script>y") == "y"

    def test_inline_tags(self):
        assert html_to_plain_text('<font color="#789922">&gt;quoted</font>') == ">quoted"

    def test_plain_passthrough(self):
        assert html_to_plain_text("no markup") == "no markup"

    def test_empty(self):
        assert html_to_plain_text("") == ""


class TestPlainTextSource:
    def test_renders_markup(self):
        source = PlainTextSource()
        assert source.plain(TextItem(id="t", raw_markup="a<br>b")) == "a\nb"

    def test_cache_is_consulted_first(self):
        calls = []

        def renderer(item):
            calls.append(item.id)
            return "rendered"

        source = PlainTextSource(renderer, {"t1": "cached"})
        assert source.plain(TextItem(id="t1", raw_markup="x")) == "cached"
        assert source.plain(TextItem(id="t2", raw_markup="x")) == "rendered"
        assert calls == ["t2"]

    def test_renders_once(self):
        calls = []

        def renderer(item):
            calls.append(item.id)
            return "ｎｏ．１"

        source = PlainTextSource(renderer)
        item = TextItem(id="t1", raw_markup="x")
        source.plain(item)
        source.plain(item)
        assert source.normalized(item) == "no.1"
        assert calls == ["t1"]

    def test_cache_not_written(self):
        cache = {}
        PlainTextSource(cache=cache).plain(TextItem(id="t1", raw_markup="x"))
        assert cache == {}


class TestBuildPlainTextCache:
    def test_covers_texts_only(self, thread_items):
        cache = build_plain_text_cache(thread_items)
        assert sorted(cache) == ["t1", "t2", "t3", "t4"]
        assert cache["t2"].split("\n")[1] == ">hello world"

    def test_reuses_existing_without_mutating(self):
        existing = {"t1": "kept"}
        items = [TextItem(id="t1", raw_markup="x"), TextItem(id="t2", raw_markup="y"), ImageItem(id="i", media_url="u")]
        cache = build_plain_text_cache(items, existing=existing)
        assert cache == {"t1": "kept", "t2": "y"}
        assert existing == {"t1": "kept"}
