"""Resolve clicked tokens and search queries to thread items."""

from thread_annotator.resolve.grouping import dedupe_blocks, flatten_unique, order_blocks, sort_blocks
from thread_annotator.resolve.resolvers import (
    ThreadResolver,
    resolve_by_filename,
    resolve_by_free_text,
    resolve_by_post_number,
    resolve_by_poster_id,
    resolve_by_quote,
    resolve_quote,
    resolve_quote_and_backrefs,
    resolve_quote_click,
    resolve_self_and_backrefs,
)
from thread_annotator.resolve.search import SearchNavigator, SearchState, find_search_hits

__all__ = [
    "SearchNavigator",
    "SearchState",
    "ThreadResolver",
    "dedupe_blocks",
    "find_search_hits",
    "flatten_unique",
    "order_blocks",
    "resolve_by_filename",
    "resolve_by_free_text",
    "resolve_by_post_number",
    "resolve_by_poster_id",
    "resolve_by_quote",
    "resolve_quote",
    "resolve_quote_and_backrefs",
    "resolve_quote_click",
    "resolve_self_and_backrefs",
    "sort_blocks",
]
