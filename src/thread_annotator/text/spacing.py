"""Whitespace repair between tokens a renderer glued together.

Scraped headers often come out as ``...12:34:56)No.1234+`` or
``ID:abcNo.12``; the passes below put single spaces back at those
junctions so token detection sees separate words, then make sure every
own-post header line exposes a like marker.
"""

from __future__ import annotations

import re
from functools import lru_cache

from thread_annotator.config import DEFAULT_CONFIG, AnnotatorConfig
from thread_annotator.text.headers import is_header_line
from thread_annotator.text.normalize import is_quote_line, normalize_width
from thread_annotator.text.patterns import (
    LEADING_LIKE_MARKER_RE,
    POST_NUMBER_RE,
    POST_NUMBER_WORD_RE,
)

SPACING_CACHE_SIZE = 256
SYNTHESIZED_LIKE_MARKER = " そうだね"

_DIGIT_OR_PAREN_BEFORE_NO_RE = re.compile(r"([0-9)])(?=No[.．]?)", re.IGNORECASE)
_GLUED_NO_RE = re.compile(r"(?<=\S)(?=No[.．]?\s*\d+)", re.IGNORECASE)
_ID_BEFORE_NO_RE = re.compile(r"(ID[:：][A-Za-z0-9_./+\-]+?) *(?=No[.．]?\s*\d)", re.IGNORECASE)
_NO_BEFORE_ID_RE = re.compile(r"(No[.．]?\s*\d+) *(?=ID[:：])", re.IGNORECASE)
_NO_BEFORE_LIKE_RE = re.compile(r"(No[.．]?\s*\d+)(?=[+＋]|そうだね)", re.IGNORECASE)
_SPACE_RUN_RE = re.compile(r" {2,}")


@lru_cache(maxsize=SPACING_CACHE_SIZE)
def repair_spacing(text: str, config: AnnotatorConfig = DEFAULT_CONFIG) -> str:
    """Return ``text`` with token junction spacing repaired.

    Deterministic, so results are memoized by input string.
    """
    if not text:
        return ""
    repaired = normalize_width(text)
    repaired = _DIGIT_OR_PAREN_BEFORE_NO_RE.sub(r"\1 ", repaired)
    repaired = _GLUED_NO_RE.sub(" ", repaired)
    repaired = _ID_BEFORE_NO_RE.sub(r"\1 ", repaired)
    repaired = _NO_BEFORE_ID_RE.sub(r"\1 ", repaired)
    repaired = _NO_BEFORE_LIKE_RE.sub(r"\1 ", repaired)
    repaired = _SPACE_RUN_RE.sub(" ", repaired)
    return _synthesize_like_markers(repaired, config)


def _synthesize_like_markers(text: str, config: AnnotatorConfig) -> str:
    lines = text.split("\n")
    for index, line in enumerate(lines):
        if is_quote_line(line) or not is_header_line(line, index, config=config):
            continue
        if not POST_NUMBER_WORD_RE.search(line):
            continue
        match = POST_NUMBER_RE.search(line)
        if match is None:
            continue
        after = line[match.end():]
        if LEADING_LIKE_MARKER_RE.search(after):
            continue
        lines[index] = line[: match.end()] + SYNTHESIZED_LIKE_MARKER + after
    return "\n".join(lines)
