"""Plain-text rendering of post markup, with caller-owned caching."""

from __future__ import annotations

import re
import warnings
from typing import Callable, Iterable, Mapping

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

from thread_annotator.content.models import TextItem, ThreadItem
from thread_annotator.text.normalize import normalize

PlainTextRenderer = Callable[[TextItem], str]

# Block-level elements that should start on a new line when collapsing to text.
BLOCK_LEVEL_TAGS = [
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "main", "ol", "p", "pre", "section", "table", "tr", "ul",
]

_TRAILING_SPACE_RE = re.compile(r"[ \t]+\n")


def html_to_plain_text(markup: str) -> str:
    """Collapse post markup to plain text; ``<br>`` and block tags become newlines."""
    if not markup:
        return ""
    if "<" not in markup and "&" not in markup:
        return markup
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(markup, "html.parser")
    for tag in soup.find_all(["script", "style"]):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(BLOCK_LEVEL_TAGS):
        if tag.previous_sibling is not None or tag.find_parent(BLOCK_LEVEL_TAGS):
            tag.insert_before("\n")
    text = soup.get_text(separator="")
    return _TRAILING_SPACE_RE.sub("\n", text).strip("\n")


def render_text_item(item: TextItem) -> str:
    """Default renderer: the item's markup through :func:`html_to_plain_text`."""
    return html_to_plain_text(item.raw_markup)


class PlainTextSource:
    """Plain text for Text items, consulting a caller-supplied cache first.

    The cache is read-only here; misses go to the renderer and are memoized
    on this object only, so one instance should live for one request.
    """

    def __init__(
        self,
        renderer: PlainTextRenderer | None = None,
        cache: Mapping[str, str] | None = None,
    ) -> None:
        self._renderer = renderer or render_text_item
        self._cache = cache or {}
        self._plain: dict[str, str] = {}
        self._normalized: dict[str, str] = {}

    def plain(self, item: TextItem) -> str:
        """Rendered plain text for ``item``."""
        cached = self._cache.get(item.id)
        if cached is not None:
            return cached
        rendered = self._plain.get(item.id)
        if rendered is None:
            rendered = self._renderer(item) or ""
            self._plain[item.id] = rendered
        return rendered

    def normalized(self, item: TextItem) -> str:
        """Plain text passed through :func:`normalize`."""
        value = self._normalized.get(item.id)
        if value is None:
            value = normalize(self.plain(item))
            self._normalized[item.id] = value
        return value


def build_plain_text_cache(
    items: Iterable[ThreadItem],
    renderer: PlainTextRenderer | None = None,
    existing: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return a new ``id -> plain text`` map covering every Text in ``items``.

    Entries already present in ``existing`` are reused rather than
    re-rendered; ``existing`` itself is not modified.
    """
    render = renderer or render_text_item
    cache = dict(existing or {})
    for item in items:
        if isinstance(item, TextItem) and item.id not in cache:
            cache[item.id] = render(item)
    return cache
