"""Resolve clicked tokens to the posts they relate to.

Every resolver follows the same shape: find the Text items that match,
build the block starting at each one, drop blocks whose head was already
collected, order blocks by the post number in their head text (blocks
without one keep their relative order at the end) and flatten, keeping the
first occurrence of every item id.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping, Sequence
from urllib.parse import urlsplit

from thread_annotator.config import DEFAULT_CONFIG, AnnotatorConfig
from thread_annotator.content.chunker import BlockChunker
from thread_annotator.content.models import (
    Block,
    EndMarker,
    ImageItem,
    MediaItem,
    Snapshot,
    TextItem,
    ThreadItem,
    VideoItem,
)
from thread_annotator.content.plain_text import PlainTextRenderer, PlainTextSource
from thread_annotator.resolve.grouping import order_blocks
from thread_annotator.text.body import extract_body_only
from thread_annotator.text.normalize import normalize, normalize_line, quote_core
from thread_annotator.text.patterns import (
    QUOTE_RUN_RE,
    SORT_NUMBER_RE,
    parse_post_number,
    post_number_patterns,
    whole_file_name_pattern,
)
from thread_annotator.text.tokens import Token, TokenKind

LOGGER = logging.getLogger(__name__)

_HEADER_FRAGMENT_PREFIXES = ("no.", "id:")


def last_path_segment(value: str) -> str:
    """Last path segment of a URL or path, without query or fragment."""
    path = urlsplit(value).path if "://" in value else value.split("?", 1)[0].split("#", 1)[0]
    return path.rsplit("/", 1)[-1]


class ThreadResolver:
    """Resolvers bound to one snapshot.

    Plain text is rendered at most once per Text item for the lifetime of
    the resolver; create a new one for every request or snapshot.
    """

    def __init__(
        self,
        snapshot: Snapshot | Sequence[ThreadItem],
        renderer: PlainTextRenderer | None = None,
        cache: Mapping[str, str] | None = None,
        *,
        config: AnnotatorConfig = DEFAULT_CONFIG,
    ) -> None:
        """
        Bind resolvers to a snapshot.

        Args:
            snapshot: A Snapshot, or any ordered sequence of thread items.
            renderer: Markup to plain text function; BeautifulSoup-based by default.
            cache: Optional read-only ``id -> plain text`` map consulted first.
            config: Vocabulary for headers, filenames and quote candidates.
        """
        if isinstance(snapshot, Snapshot):
            self._items: list[ThreadItem] = list(snapshot.items)
            self._title = snapshot.title
        else:
            self._items = list(snapshot)
            self._title = None
        self._chunker = BlockChunker(self._items)
        self._text = PlainTextSource(renderer, cache)
        self._config = config
        self._text_indexes = self._chunker.text_block_starts()

    @property
    def items(self) -> list[ThreadItem]:
        return self._items

    def plain_text(self, item: TextItem) -> str:
        return self._text.plain(item)

    # ----- shared helpers -----

    def _iter_texts(self) -> Iterator[tuple[int, TextItem]]:
        for index in self._text_indexes:
            item = self._items[index]
            if isinstance(item, TextItem):
                yield index, item

    def _index_of(self, item_id: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def _blocks(self, indexes: Iterable[int]) -> list[Block]:
        return [self._chunker.block_at(index) for index in indexes]

    def _block_number(self, block: Block) -> int | None:
        head = block[0] if block else None
        if not isinstance(head, TextItem):
            return None
        number = parse_post_number(self._text.plain(head))
        if number is None and head.post_number and head.post_number.isdigit():
            return int(head.post_number)
        return number

    def _ordered(self, blocks: Iterable[Block]) -> list[ThreadItem]:
        return order_blocks(blocks, self._block_number)

    def _quote_cores(self, plain: str) -> Iterator[str]:
        for line in plain.splitlines():
            norm = normalize(line).strip()
            if not norm.startswith(">"):
                continue
            core = normalize_line(QUOTE_RUN_RE.sub("", norm, count=1))
            if core:
                yield core

    def own_number(self, item: TextItem) -> str | None:
        """Post number parsed from the item's normalized text, else the scraped one."""
        match = SORT_NUMBER_RE.search(self._text.normalized(item))
        if match is not None:
            return match.group(1)
        return normalize(item.post_number) if item.post_number else None

    # ----- by post number -----

    def post_number_blocks(self, post_number: str) -> list[Block]:
        """Origin block (if present) followed by every block citing ``post_number``."""
        number = (post_number or "").strip()
        if not number:
            return []
        patterns = post_number_patterns(number)
        blocks: list[Block] = []
        origin = next(
            (index for index, item in self._iter_texts() if (item.post_number or "").strip() == number),
            None,
        )
        if origin is not None:
            blocks.append(self._chunker.block_at(origin))
        hits = [
            index
            for index, item in self._iter_texts()
            if any(pattern.search(self._text.normalized(item)) for pattern in patterns)
        ]
        blocks.extend(self._blocks(hits))
        return blocks

    def resolve_by_post_number(self, post_number: str) -> list[ThreadItem]:
        """The post numbered ``post_number`` and every post referencing it."""
        result = self._ordered(self.post_number_blocks(post_number))
        LOGGER.debug("No.%s resolved to %s items", post_number, len(result))
        return result

    # ----- by quoted content -----

    def _is_candidate(self, line: str) -> bool:
        if len(line) < self._config.min_quote_candidate_length:
            return False
        return not line.lower().startswith(_HEADER_FRAGMENT_PREFIXES)

    def quote_candidates(self, source: TextItem, extra_candidates: Iterable[str] = ()) -> set[str]:
        """Normalized body lines of ``source`` that another post could quote."""
        body = extract_body_only(self._text.plain(source), config=self._config)
        lines = list(body.splitlines()) + list(extra_candidates)
        return {line for line in (normalize_line(raw) for raw in lines) if self._is_candidate(line)}

    def content_backref_blocks(
        self,
        source: TextItem,
        extra_candidates: Iterable[str] = (),
    ) -> list[Block]:
        """Blocks of posts whose quote lines repeat a line of ``source``.

        With extra candidates (the thread title quoting the OP), an unquoted
        line equal to a candidate also counts.
        """
        extras = [extra for extra in extra_candidates if extra and extra.strip()]
        candidates = self.quote_candidates(source, extras)
        if not candidates:
            return []
        hits: list[int] = []
        for index, item in self._iter_texts():
            if item.id == source.id:
                continue
            plain = self._text.plain(item)
            if any(core in candidates for core in self._quote_cores(plain)):
                hits.append(index)
                continue
            if extras and any(normalize_line(line) in candidates for line in plain.splitlines()):
                hits.append(index)
        return self._blocks(hits)

    def resolve_by_quote(
        self,
        source: TextItem,
        extra_candidates: Iterable[str] = (),
    ) -> list[ThreadItem]:
        """Posts quoting the content of ``source``."""
        result = self._ordered(self.content_backref_blocks(source, extra_candidates))
        LOGGER.debug("Quotes of %s resolved to %s items", source.id, len(result))
        return result

    def resolve_self_and_backrefs(self, source: TextItem) -> list[ThreadItem]:
        """``source`` itself plus the posts quoting its content."""
        index = self._index_of(source.id)
        if index is None:
            return []
        blocks = [self._chunker.block_at(index)]
        blocks.extend(self.content_backref_blocks(source))
        return self._ordered(blocks)

    # ----- by poster id -----

    def resolve_by_poster_id(self, poster_id: str) -> list[ThreadItem]:
        """Every post whose text carries ``ID:<poster_id>``."""
        value = normalize((poster_id or "").strip())
        if not value:
            return []
        needle = f"ID:{value}"
        hits = [index for index, item in self._iter_texts() if needle in self._text.normalized(item)]
        result = self._ordered(self._blocks(hits))
        LOGGER.debug("ID:%s resolved to %s items", value, len(result))
        return result

    # ----- by filename -----

    def _media_matches(self, item: MediaItem, needle: str) -> bool:
        for candidate in (item.file_name, item.media_url):
            if candidate and last_path_segment(candidate).lower() == needle:
                return True
        return False

    def _parent_text_index(self, index: int) -> int | None:
        cursor = index - 1
        while cursor >= 0:
            item = self._items[cursor]
            if isinstance(item, TextItem):
                return cursor
            if isinstance(item, EndMarker):
                return None
            cursor -= 1
        return None

    def resolve_by_filename(self, file_name: str) -> list[ThreadItem]:
        """Posts carrying the file ``file_name`` and posts mentioning it."""
        needle = last_path_segment((file_name or "").strip()).lower()
        if not needle:
            return []
        indexes: set[int] = set()
        for index, item in enumerate(self._items):
            if isinstance(item, (ImageItem, VideoItem)):
                if self._media_matches(item, needle):
                    parent = self._parent_text_index(index)
                    if parent is not None:
                        indexes.add(parent)
            elif isinstance(item, TextItem):
                plain = self._text.plain(item)
                if needle in plain.lower():
                    indexes.add(index)
                elif any(needle in core.lower() for core in self._quote_cores(plain)):
                    indexes.add(index)
        result = self._ordered(self._blocks(sorted(indexes)))
        LOGGER.debug("File %s resolved to %s items", needle, len(result))
        return result

    # ----- free text -----

    def resolve_by_free_text(self, query: str) -> list[ThreadItem]:
        """Posts whose normalized text contains ``query``, ignoring case."""
        needle = normalize((query or "").strip()).strip().casefold()
        if not needle:
            return []
        hits = [index for index, item in self._iter_texts() if needle in self._text.normalized(item).casefold()]
        return self._ordered(self._blocks(hits))

    # ----- quote tokens -----

    def _line_sources(self, needle: str) -> list[int]:
        return [
            index
            for index, item in self._iter_texts()
            if any(normalize_line(line) == needle for line in self._text.plain(item).splitlines())
        ]

    def resolve_quote(self, token: str) -> list[ThreadItem]:
        """Posts containing a line equal to the quoted text."""
        needle = normalize_line(quote_core(token or ""))
        if not needle:
            return []
        return self._ordered(self._blocks(self._line_sources(needle)))

    def resolve_quote_and_backrefs(
        self,
        token: str,
        thread_title: str | None = None,
    ) -> list[ThreadItem]:
        """The quoted posts plus every post quoting or citing them.

        When the thread title equals the quoted text the OP counts as a
        quoted post too, and unquoted lines equal to the title count as
        quotes of it.
        """
        needle = normalize_line(quote_core(token or ""))
        if not needle:
            return []
        title = thread_title if thread_title is not None else self._title
        sources = self._line_sources(needle)
        first_text = self._text_indexes[0] if self._text_indexes else None
        title_matched = bool(title) and first_text is not None and normalize_line(title) == needle
        if title_matched and first_text not in sources:
            sources = sorted([*sources, first_text])
        if not sources:
            return []

        blocks: list[Block] = []
        for index in sources:
            source = self._items[index]
            if not isinstance(source, TextItem):
                continue
            blocks.append(self._chunker.block_at(index))
            extras = (needle,) if title_matched and index == first_text else ()
            blocks.extend(self.content_backref_blocks(source, extras))
            number = self.own_number(source)
            if number:
                blocks.extend(self.post_number_blocks(number))
        result = self._ordered(blocks)
        LOGGER.debug("Quote %r resolved to %s items from %s sources", needle, len(result), len(sources))
        return result

    def resolve_quote_click(self, token: str, thread_title: str | None = None) -> list[ThreadItem]:
        """Filename-shaped quotes resolve by filename, the rest by quote and backrefs."""
        core = quote_core(token or "")
        if whole_file_name_pattern(self._config.media_extensions).match(core):
            return self.resolve_by_filename(core)
        return self.resolve_quote_and_backrefs(token, thread_title)

    def resolve_token(self, token: Token, thread_title: str | None = None) -> list[ThreadItem]:
        """Dispatch an annotated token to the matching resolver.

        URLs, like markers and highlights do not resolve to posts.
        """
        if token.kind is TokenKind.POST_REF:
            return self.resolve_by_post_number(token.value)
        if token.kind in (TokenKind.QUOTE_LINE, TokenKind.TITLE_LINE):
            return self.resolve_quote_click(">" + token.value, thread_title)
        if token.kind is TokenKind.POSTER_ID:
            return self.resolve_by_poster_id(token.value)
        if token.kind is TokenKind.FILE_NAME:
            return self.resolve_by_filename(token.value)
        return []


def resolve_by_post_number(
    snapshot: Snapshot | Sequence[ThreadItem],
    post_number: str,
    *,
    renderer: PlainTextRenderer | None = None,
    cache: Mapping[str, str] | None = None,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> list[ThreadItem]:
    return ThreadResolver(snapshot, renderer, cache, config=config).resolve_by_post_number(post_number)


def resolve_by_quote(
    snapshot: Snapshot | Sequence[ThreadItem],
    source: TextItem,
    extra_candidates: Iterable[str] = (),
    *,
    renderer: PlainTextRenderer | None = None,
    cache: Mapping[str, str] | None = None,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> list[ThreadItem]:
    return ThreadResolver(snapshot, renderer, cache, config=config).resolve_by_quote(source, extra_candidates)


def resolve_self_and_backrefs(
    snapshot: Snapshot | Sequence[ThreadItem],
    source: TextItem,
    *,
    renderer: PlainTextRenderer | None = None,
    cache: Mapping[str, str] | None = None,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> list[ThreadItem]:
    return ThreadResolver(snapshot, renderer, cache, config=config).resolve_self_and_backrefs(source)


def resolve_by_poster_id(
    snapshot: Snapshot | Sequence[ThreadItem],
    poster_id: str,
    *,
    renderer: PlainTextRenderer | None = None,
    cache: Mapping[str, str] | None = None,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> list[ThreadItem]:
    return ThreadResolver(snapshot, renderer, cache, config=config).resolve_by_poster_id(poster_id)


def resolve_by_filename(
    snapshot: Snapshot | Sequence[ThreadItem],
    file_name: str,
    *,
    renderer: PlainTextRenderer | None = None,
    cache: Mapping[str, str] | None = None,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> list[ThreadItem]:
    return ThreadResolver(snapshot, renderer, cache, config=config).resolve_by_filename(file_name)


def resolve_by_free_text(
    snapshot: Snapshot | Sequence[ThreadItem],
    query: str,
    *,
    renderer: PlainTextRenderer | None = None,
    cache: Mapping[str, str] | None = None,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> list[ThreadItem]:
    return ThreadResolver(snapshot, renderer, cache, config=config).resolve_by_free_text(query)


def resolve_quote(
    snapshot: Snapshot | Sequence[ThreadItem],
    token: str,
    *,
    renderer: PlainTextRenderer | None = None,
    cache: Mapping[str, str] | None = None,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> list[ThreadItem]:
    return ThreadResolver(snapshot, renderer, cache, config=config).resolve_quote(token)


def resolve_quote_and_backrefs(
    snapshot: Snapshot | Sequence[ThreadItem],
    token: str,
    thread_title: str | None = None,
    *,
    renderer: PlainTextRenderer | None = None,
    cache: Mapping[str, str] | None = None,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> list[ThreadItem]:
    return ThreadResolver(snapshot, renderer, cache, config=config).resolve_quote_and_backrefs(token, thread_title)


def resolve_quote_click(
    snapshot: Snapshot | Sequence[ThreadItem],
    token: str,
    thread_title: str | None = None,
    *,
    renderer: PlainTextRenderer | None = None,
    cache: Mapping[str, str] | None = None,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> list[ThreadItem]:
    return ThreadResolver(snapshot, renderer, cache, config=config).resolve_quote_click(token, thread_title)
