"""Plain-text analysis: normalization, header detection, tokens and display rewrites."""

from thread_annotator.text.body import extract_body_only
from thread_annotator.text.headers import header_flags, is_header_line
from thread_annotator.text.likes import apply_like_overlay, own_post_number, render_display_text
from thread_annotator.text.normalize import is_quote_line, normalize, normalize_line, quote_core
from thread_annotator.text.spacing import repair_spacing
from thread_annotator.text.tokens import Token, TokenKind, annotate, token_at, tokens_of_kind

__all__ = [
    "Token",
    "TokenKind",
    "annotate",
    "apply_like_overlay",
    "extract_body_only",
    "header_flags",
    "is_header_line",
    "is_quote_line",
    "normalize",
    "normalize_line",
    "own_post_number",
    "quote_core",
    "render_display_text",
    "repair_spacing",
    "token_at",
    "tokens_of_kind",
]
