"""Header line classification.

Only the first line of a post conventionally carries the full metadata
(numeral, poster name, ``No.``). Header-shaped lines further down are almost
always quoted headers and must not be mistaken for the post's own metadata;
the exception is a line with a full date-time stamp, which is a header
wherever it appears.
"""

from __future__ import annotations

from thread_annotator.config import DEFAULT_CONFIG, AnnotatorConfig
from thread_annotator.text.patterns import (
    DATE_TIME_RE,
    LEADING_NUMERAL_RE,
    POST_NUMBER_RE,
    poster_name_pattern,
)


def is_header_line(
    line: str,
    line_index: int,
    *,
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> bool:
    """Return True when ``line`` carries post metadata."""
    trimmed = line.strip()
    if DATE_TIME_RE.search(trimmed):
        return True
    if line_index != 0:
        return False
    return bool(
        LEADING_NUMERAL_RE.search(trimmed)
        and poster_name_pattern(config.poster_name_markers).search(trimmed)
        and POST_NUMBER_RE.search(trimmed)
    )


def header_flags(text: str, *, config: AnnotatorConfig = DEFAULT_CONFIG) -> list[bool]:
    """Header classification for every ``\\n``-separated line of ``text``."""
    return [
        is_header_line(line, index, config=config)
        for index, line in enumerate(text.split("\n"))
    ]
