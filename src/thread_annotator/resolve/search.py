"""In-thread search hits and next/previous navigation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

from thread_annotator.content.models import ImageItem, MediaItem, Snapshot, TextItem, ThreadItem, VideoItem
from thread_annotator.content.plain_text import PlainTextRenderer, PlainTextSource
from thread_annotator.resolve.resolvers import last_path_segment

LOGGER = logging.getLogger(__name__)


def _media_haystack(item: MediaItem) -> str:
    parts = [item.caption or "", item.file_name or "", last_path_segment(item.media_url or "")]
    return " ".join(part for part in parts if part)


def find_search_hits(
    snapshot: Snapshot | Sequence[ThreadItem],
    query: str,
    *,
    renderer: PlainTextRenderer | None = None,
    cache: Mapping[str, str] | None = None,
) -> list[int]:
    """Indices of the items matching ``query`` case-insensitively.

    Text items match on their plain text, media on caption, filename and the
    last segment of their URL. End markers never match.
    """
    needle = (query or "").strip().casefold()
    if not needle:
        return []
    items = snapshot.items if isinstance(snapshot, Snapshot) else snapshot
    source = PlainTextSource(renderer, cache)
    hits: list[int] = []
    for index, item in enumerate(items):
        if isinstance(item, TextItem):
            haystack = source.plain(item)
        elif isinstance(item, (ImageItem, VideoItem)):
            haystack = _media_haystack(item)
        else:
            continue
        if needle in haystack.casefold():
            hits.append(index)
    LOGGER.debug("Search %r matched %s items", query, len(hits))
    return hits


@dataclass(frozen=True)
class SearchState:
    """What a search bar shows: ``current_index_display`` is 1-based, 0 when inactive."""

    active: bool
    current_index_display: int
    total: int


INACTIVE = SearchState(active=False, current_index_display=0, total=0)


class SearchNavigator:
    """Holds a query, its hits and a cursor that wraps around both ways."""

    def __init__(
        self,
        snapshot: Snapshot | Sequence[ThreadItem],
        renderer: PlainTextRenderer | None = None,
        cache: Mapping[str, str] | None = None,
    ) -> None:
        self._snapshot = snapshot
        self._renderer = renderer
        self._cache = cache
        self.query: str | None = None
        self.hits: list[int] = []
        self._cursor = 0

    def search(self, query: str) -> SearchState:
        """Start a new search; the cursor lands on the first hit."""
        if not (query or "").strip():
            self.clear()
            return self.state
        self.query = query
        self.hits = find_search_hits(self._snapshot, query, renderer=self._renderer, cache=self._cache)
        self._cursor = 0
        return self.state

    def next_hit(self) -> int | None:
        """Advance to the next hit, wrapping to the first; returns its item index."""
        if not self.hits:
            return None
        self._cursor = (self._cursor + 1) % len(self.hits)
        return self.hits[self._cursor]

    def prev_hit(self) -> int | None:
        """Step back to the previous hit, wrapping to the last."""
        if not self.hits:
            return None
        self._cursor = (self._cursor - 1) % len(self.hits)
        return self.hits[self._cursor]

    @property
    def current(self) -> int | None:
        """Item index of the current hit."""
        if not self.hits:
            return None
        return self.hits[self._cursor]

    def clear(self) -> None:
        self.query = None
        self.hits = []
        self._cursor = 0

    @property
    def state(self) -> SearchState:
        if self.query is None:
            return INACTIVE
        if not self.hits:
            return SearchState(active=True, current_index_display=0, total=0)
        return SearchState(active=True, current_index_display=self._cursor + 1, total=len(self.hits))
