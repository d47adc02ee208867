"""Shared pytest fixtures for thread-annotator tests."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from thread_annotator.content import (
    EndMarker,
    ImageItem,
    Snapshot,
    TextItem,
    ThreadItem,
    VideoItem,
    item_to_dict,
)


def make_thread() -> list[ThreadItem]:
    """A short thread: OP with an image, three replies, a video and the end marker."""
    return [
        TextItem(
            id="t1",
            raw_markup="1 無念 Name としあき 24/01/01(月)12:00:00 No.100<br>hello world<br>first post",
            post_number="100",
        ),
        ImageItem(
            id="i1",
            media_url="https://img.example/src/1700000000001.jpg?v=2",
            file_name="1700000000001.jpg",
        ),
        TextItem(
            id="t2",
            raw_markup="2 無念 Name としあき 24/01/01(月)12:01:00 ID:abc No.101<br>&gt;hello world<br>same here",
            post_number="101",
        ),
        TextItem(
            id="t3",
            raw_markup="3 無念 Name としあき 24/01/01(月)12:02:00 ID:xyz No.102<br>&gt;&gt;No.100<br>welcome",
            post_number="102",
        ),
        TextItem(
            id="t4",
            raw_markup="4 無念 Name としあき 24/01/01(月)12:03:00 ID:abc No.103<br>&gt;1700000000001.jpg<br>nice picture",
            post_number="103",
        ),
        VideoItem(
            id="v1",
            media_url="https://img.example/src/1700000000002.mp4",
            thumbnail_url="https://img.example/thumb/1700000000002s.jpg",
            file_name="clip.mp4",
            caption="cat video",
        ),
        EndMarker(id="end", label="expired 24/01/02 00:00"),
    ]


@pytest.fixture
def thread_items() -> list[ThreadItem]:
    return make_thread()


@pytest.fixture
def snapshot(thread_items: list[ThreadItem]) -> Snapshot:
    return Snapshot(items=thread_items, title="test thread")


@pytest.fixture
def snapshot_path(thread_items: list[ThreadItem]) -> Path:
    """Snapshot fixture written to a temporary JSON file."""
    document = {
        "title": "test thread",
        "items": [item_to_dict(item) for item in thread_items],
    }
    with tempfile.NamedTemporaryFile("w", suffix=".json", delete=False, encoding="utf-8") as f:
        json.dump(document, f, ensure_ascii=False)
        return Path(f.name)


@pytest.fixture
def temp_output() -> Path:
    """Create a temporary output file path."""
    with tempfile.NamedTemporaryFile(suffix=".json", delete=False) as f:
        return Path(f.name)
