"""Ordering and de-duplication of resolved blocks."""

from __future__ import annotations

from typing import Callable, Iterable

from thread_annotator.content.models import Block, ThreadItem


def dedupe_blocks(blocks: Iterable[Block]) -> list[Block]:
    """Drop empty blocks and blocks whose head id was already seen."""
    seen: set[str] = set()
    unique: list[Block] = []
    for block in blocks:
        if not block:
            continue
        head_id = block[0].id
        if head_id in seen:
            continue
        seen.add(head_id)
        unique.append(block)
    return unique


def sort_blocks(blocks: list[Block], number_of: Callable[[Block], int | None]) -> list[Block]:
    """Stable sort by ascending post number; blocks without one go last."""

    def key(block: Block) -> tuple[int, int]:
        number = number_of(block)
        return (1, 0) if number is None else (0, number)

    return sorted(blocks, key=key)


def flatten_unique(blocks: Iterable[Block]) -> list[ThreadItem]:
    """Concatenate blocks, keeping only the first occurrence of every id."""
    seen: set[str] = set()
    flat: list[ThreadItem] = []
    for block in blocks:
        for item in block:
            if item.id in seen:
                continue
            seen.add(item.id)
            flat.append(item)
    return flat


def order_blocks(
    blocks: Iterable[Block],
    number_of: Callable[[Block], int | None],
) -> list[ThreadItem]:
    """De-duplicate by head, sort by post number, flatten and de-duplicate items."""
    return flatten_unique(sort_blocks(dedupe_blocks(blocks), number_of))
