"""Width and glyph normalization for post text."""

from __future__ import annotations

import unicodedata

from thread_annotator.text.patterns import QUOTE_RUN_RE, WHITESPACE_RUN_RE

ZERO_WIDTH_SPACE = "\u200b"
IDEOGRAPHIC_SPACE = "\u3000"

_QUOTE_GLYPHS = str.maketrans({"＞": ">", "≫": ">", IDEOGRAPHIC_SPACE: " "})


def normalize_width(text: str) -> str:
    """Strip zero-width spaces, map ideographic spaces to ASCII and apply NFKC."""
    text = text.replace(ZERO_WIDTH_SPACE, "").replace(IDEOGRAPHIC_SPACE, " ")
    return unicodedata.normalize("NFKC", text)


def normalize(text: str) -> str:
    """Canonical form used before every comparison of post text.

    Removes zero-width spaces, unifies ``＞``/``≫`` to ``>`` and applies
    NFKC so full-width digits and punctuation match their ASCII forms.
    Idempotent.
    """
    if not text:
        return ""
    text = text.replace(ZERO_WIDTH_SPACE, "").translate(_QUOTE_GLYPHS)
    text = unicodedata.normalize("NFKC", text)
    # second pass keeps the result a fixed point
    return text.replace(ZERO_WIDTH_SPACE, "").translate(_QUOTE_GLYPHS)


def normalize_line(text: str) -> str:
    """Normalize, collapse whitespace runs and trim; the line equality form."""
    return WHITESPACE_RUN_RE.sub(" ", normalize(text)).strip()


def quote_core(token: str) -> str:
    """Text of a quote token with leading whitespace and the ``>`` run removed."""
    stripped = token.translate(_QUOTE_GLYPHS).lstrip()
    return QUOTE_RUN_RE.sub("", stripped, count=1).strip()


def is_quote_line(line: str) -> bool:
    """True when the line, after width normalization, starts with ``>``."""
    return normalize(line).lstrip().startswith(">")
