"""Tests for block chunking."""

from thread_annotator.content import (
    BlockChunker,
    EndMarker,
    ImageItem,
    TextItem,
    VideoItem,
    block_at,
    chunk_blocks,
)


def _ids(blocks):
    return [[item.id for item in block] for block in blocks]


class TestChunkBlocks:
    def test_thread(self, thread_items):
        assert _ids(chunk_blocks(thread_items)) == [
            ["t1", "i1"],
            ["t2"],
            ["t3"],
            ["t4", "v1"],
            ["end"],
        ]

    def test_leading_media_are_dropped(self):
        items = [
            ImageItem(id="orphan", media_url="http://x/o.jpg"),
            TextItem(id="t1", raw_markup="a"),
            VideoItem(id="v1", media_url="http://x/v.mp4"),
        ]
        assert _ids(chunk_blocks(items)) == [["t1", "v1"]]

    def test_empty(self):
        assert chunk_blocks([]) == []

    def test_only_media(self):
        assert chunk_blocks([ImageItem(id="i", media_url="http://x/i.png")]) == []

    def test_coverage(self, thread_items):
        items = [ImageItem(id="orphan", media_url="http://x/o.jpg"), *thread_items]
        flat = [item for block in chunk_blocks(items) for item in block]
        assert flat == thread_items


class TestBlockAt:
    def test_text_with_media(self, thread_items):
        assert [item.id for item in block_at(thread_items, 0)] == ["t1", "i1"]

    def test_stops_at_next_text(self, thread_items):
        assert [item.id for item in block_at(thread_items, 2)] == ["t2"]

    def test_end_marker_alone(self):
        items = [
            TextItem(id="t1", raw_markup="a"),
            EndMarker(id="end", label="expired"),
            ImageItem(id="late", media_url="http://x/l.jpg"),
        ]
        assert [item.id for item in block_at(items, 1)] == ["end"]

    def test_out_of_range(self, thread_items):
        assert block_at(thread_items, 99) == []
        assert block_at(thread_items, -1) == []


class TestBlockChunker:
    def test_text_block_starts(self, thread_items):
        assert BlockChunker(thread_items).text_block_starts() == [0, 2, 3, 4]

    def test_media_after_end_marker_join_marker_block(self):
        items = [
            TextItem(id="t1", raw_markup="a"),
            EndMarker(id="end", label="expired"),
            ImageItem(id="late", media_url="http://x/l.jpg"),
        ]
        assert _ids(BlockChunker(items).iter_blocks()) == [["t1"], ["end", "late"]]
