"""Thread content snapshot access layer."""

from thread_annotator.content.chunker import BlockChunker, block_at, chunk_blocks
from thread_annotator.content.exceptions import ContentError, DuplicateItemIdError, SnapshotFormatError
from thread_annotator.content.models import (
    Block,
    EndMarker,
    ImageItem,
    Snapshot,
    TextItem,
    ThreadItem,
    VideoItem,
    item_to_dict,
)
from thread_annotator.content.plain_text import (
    PlainTextRenderer,
    PlainTextSource,
    build_plain_text_cache,
    html_to_plain_text,
)
from thread_annotator.content.reader import item_from_dict, load_snapshot, snapshot_from_dict

__all__ = [
    "Block",
    "BlockChunker",
    "ContentError",
    "DuplicateItemIdError",
    "EndMarker",
    "ImageItem",
    "PlainTextRenderer",
    "PlainTextSource",
    "Snapshot",
    "SnapshotFormatError",
    "TextItem",
    "ThreadItem",
    "VideoItem",
    "block_at",
    "build_plain_text_cache",
    "chunk_blocks",
    "html_to_plain_text",
    "item_from_dict",
    "item_to_dict",
    "load_snapshot",
    "snapshot_from_dict",
]
