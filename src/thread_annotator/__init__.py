"""Cross-referencing for image-board thread content: tokens, blocks and resolvers."""

from thread_annotator.config import DEFAULT_CONFIG, AnnotatorConfig
from thread_annotator.content import (
    Block,
    BlockChunker,
    ContentError,
    DuplicateItemIdError,
    EndMarker,
    ImageItem,
    Snapshot,
    SnapshotFormatError,
    TextItem,
    ThreadItem,
    VideoItem,
    block_at,
    build_plain_text_cache,
    chunk_blocks,
    load_snapshot,
)
from thread_annotator.resolve import (
    SearchNavigator,
    SearchState,
    ThreadResolver,
    find_search_hits,
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
from thread_annotator.text import (
    Token,
    TokenKind,
    annotate,
    apply_like_overlay,
    extract_body_only,
    is_header_line,
    is_quote_line,
    normalize,
    normalize_line,
    render_display_text,
    repair_spacing,
)

__all__ = [
    "AnnotatorConfig",
    "Block",
    "BlockChunker",
    "ContentError",
    "DEFAULT_CONFIG",
    "DuplicateItemIdError",
    "EndMarker",
    "ImageItem",
    "SearchNavigator",
    "SearchState",
    "Snapshot",
    "SnapshotFormatError",
    "TextItem",
    "ThreadItem",
    "ThreadResolver",
    "Token",
    "TokenKind",
    "VideoItem",
    "annotate",
    "apply_like_overlay",
    "block_at",
    "build_plain_text_cache",
    "chunk_blocks",
    "extract_body_only",
    "find_search_hits",
    "is_header_line",
    "is_quote_line",
    "load_snapshot",
    "normalize",
    "normalize_line",
    "render_display_text",
    "repair_spacing",
    "resolve_by_filename",
    "resolve_by_free_text",
    "resolve_by_post_number",
    "resolve_by_poster_id",
    "resolve_by_quote",
    "resolve_quote",
    "resolve_quote_and_backrefs",
    "resolve_quote_click",
    "resolve_self_and_backrefs",
]
