"""Tests for in-thread search and navigation."""

from thread_annotator.resolve import SearchNavigator, SearchState, find_search_hits


class TestFindSearchHits:
    def test_text_and_media_file_name(self, snapshot):
        assert find_search_hits(snapshot, "1700000000001") == [1, 4]

    def test_media_caption(self, snapshot):
        assert find_search_hits(snapshot, "CAT") == [5]

    def test_end_marker_never_matches(self, snapshot):
        assert find_search_hits(snapshot, "expired") == []

    def test_blank_query(self, snapshot):
        assert find_search_hits(snapshot, "  ") == []

    def test_uses_cache(self, thread_items):
        assert find_search_hits(thread_items, "secret", cache={"t3": "secret text"}) == [3]


class TestSearchNavigator:
    def test_wraps_forward_and_back(self, snapshot):
        navigator = SearchNavigator(snapshot)
        assert navigator.search("1700000000001") == SearchState(active=True, current_index_display=1, total=2)
        assert navigator.current == 1
        assert navigator.next_hit() == 4
        assert navigator.state.current_index_display == 2
        assert navigator.next_hit() == 1
        assert navigator.state.current_index_display == 1
        assert navigator.prev_hit() == 4
        assert navigator.state == SearchState(active=True, current_index_display=2, total=2)

    def test_no_hits(self, snapshot):
        navigator = SearchNavigator(snapshot)
        assert navigator.search("zzz") == SearchState(active=True, current_index_display=0, total=0)
        assert navigator.next_hit() is None
        assert navigator.prev_hit() is None
        assert navigator.current is None

    def test_inactive_by_default(self, snapshot):
        assert SearchNavigator(snapshot).state == SearchState(active=False, current_index_display=0, total=0)

    def test_clear(self, snapshot):
        navigator = SearchNavigator(snapshot)
        navigator.search("hello")
        navigator.clear()
        assert navigator.state.active is False
        assert navigator.hits == []

    def test_blank_search_clears(self, snapshot):
        navigator = SearchNavigator(snapshot)
        navigator.search("hello")
        assert navigator.search(" ").active is False
