"""Optimistic like-count overlay for header lines."""

from __future__ import annotations

from typing import Mapping

from thread_annotator.config import DEFAULT_CONFIG, AnnotatorConfig
from thread_annotator.text.headers import is_header_line
from thread_annotator.text.patterns import (
    LIKE_MARKER_RE,
    POST_NUMBER_RE,
    POST_REF_RE,
    POSTER_ID_RE,
)
from thread_annotator.text.spacing import repair_spacing


def own_post_number(plain: str) -> str | None:
    """Lenient parse of a post's own number from its plain text."""
    match = POST_REF_RE.search(plain)
    if match is not None:
        return match.group(2)
    match = POST_NUMBER_RE.search(plain)
    return match.group(1) if match else None


def _rewrite_markers(line: str, replacement: str) -> str:
    # Poster ids may legitimately contain "+"; leave those spans alone.
    pieces: list[str] = []
    cursor = 0
    for id_match in POSTER_ID_RE.finditer(line):
        pieces.append(LIKE_MARKER_RE.sub(replacement, line[cursor : id_match.start()]))
        pieces.append(id_match.group())
        cursor = id_match.end()
    pieces.append(LIKE_MARKER_RE.sub(replacement, line[cursor:]))
    return "".join(pieces)


def apply_like_overlay(
    text: str,
    counts: Mapping[str, int],
    fallback_post_number: str | None = None,
    *,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> str:
    """Rewrite like markers on header lines to ``そうだねx<count>``.

    The count is looked up by the line's own ``No.`` or, when the line has
    none, by ``fallback_post_number``. Entries with a count of zero or less
    leave the line untouched. ``counts`` is only read.
    """
    if not counts or not text:
        return text
    lines = text.split("\n")
    for index, line in enumerate(lines):
        if not is_header_line(line, index, config=config):
            continue
        match = POST_NUMBER_RE.search(line)
        number = match.group(1) if match else fallback_post_number
        if number is None:
            continue
        count = counts.get(number)
        if count is None or count <= 0:
            continue
        lines[index] = _rewrite_markers(line, f"そうだねx{count}")
    return "\n".join(lines)


def render_display_text(
    plain: str,
    counts: Mapping[str, int] | None = None,
    fallback_post_number: str | None = None,
    *,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> str:
    """Spacing repair followed by the like overlay; the text a post displays."""
    repaired = repair_spacing(plain, config)
    if fallback_post_number is None:
        fallback_post_number = own_post_number(plain)
    return apply_like_overlay(repaired, counts or {}, fallback_post_number, config=config)
