"""Block chunking for thread content snapshots."""

from __future__ import annotations

from typing import Iterator, Sequence

from thread_annotator.content.models import Block, EndMarker, TextItem, ThreadItem, is_media


def block_at(items: Sequence[ThreadItem], index: int) -> Block:
    """Build the block that starts at ``index``.

    The block holds the item at ``index`` followed by the media directly
    after it, up to the next Text, EndMarker or end of the stream.
    """
    if index < 0 or index >= len(items):
        return []
    block: Block = [items[index]]
    if isinstance(items[index], EndMarker):
        return block
    cursor = index + 1
    while cursor < len(items) and is_media(items[cursor]):
        block.append(items[cursor])
        cursor += 1
    return block


def chunk_blocks(items: Sequence[ThreadItem]) -> list[Block]:
    """Partition a snapshot into blocks. See :class:`BlockChunker`."""
    return list(BlockChunker(items).iter_blocks())


class BlockChunker:
    """Group a flat content stream into per-post blocks."""

    def __init__(self, items: Sequence[ThreadItem]) -> None:
        """Initialize with a snapshot's items."""
        self._items = items

    def iter_blocks(self) -> Iterator[Block]:
        """
        Yield blocks in stream order.

        A block starts at every Text and collects the media that follow it.
        An EndMarker starts its own block. Media before the first Text have
        no owner and are dropped.
        """
        current: Block | None = None
        for item in self._items:
            if isinstance(item, (TextItem, EndMarker)):
                if current:
                    yield current
                current = [item]
            elif current is not None:
                current.append(item)
        if current:
            yield current

    def block_at(self, index: int) -> Block:
        """Block starting at ``index``; see :func:`block_at`."""
        return block_at(self._items, index)

    def text_block_starts(self) -> list[int]:
        """Indices of every Text item, i.e. every resolvable block head."""
        return [index for index, item in enumerate(self._items) if isinstance(item, TextItem)]
