"""Clickable token detection over a post's display text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from thread_annotator.config import DEFAULT_CONFIG, AnnotatorConfig
from thread_annotator.text.headers import header_flags
from thread_annotator.text.normalize import is_quote_line, normalize_line
from thread_annotator.text.patterns import (
    ID_MARK_RE,
    LIKE_MARKER_RE,
    POST_REF_RE,
    POSTER_ID_RE,
    QUOTE_LINE_RE,
    QUOTE_RUN_RE,
    URL_RE,
    file_name_pattern,
    trim_url,
)


class TokenKind(str, Enum):
    POST_REF = "post_ref"
    QUOTE_LINE = "quote_line"
    TITLE_LINE = "title_line"
    POSTER_ID = "poster_id"
    URL = "url"
    FILE_NAME = "file_name"
    LIKE_MARKER = "like_marker"
    HIGHLIGHT = "highlight"


_KIND_ORDER = {kind: position for position, kind in enumerate(TokenKind)}


@dataclass(frozen=True)
class Token:
    """A typed span of display text.

    ``start``/``end`` are offsets into the text passed to :func:`annotate`
    (end exclusive); ``line_index`` is the ``\\n``-separated line holding
    ``start``.
    """

    kind: TokenKind
    value: str
    start: int
    end: int
    line_index: int
    own_post: bool = False

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)


@dataclass
class _Line:
    index: int
    start: int
    text: str
    is_header: bool

    @property
    def is_quote(self) -> bool:
        return is_quote_line(self.text)


def _split_lines(
    text: str,
    config: AnnotatorConfig,
    header_lines: Sequence[bool] | None = None,
) -> list[_Line]:
    lines: list[_Line] = []
    offset = 0
    flags = list(header_lines) if header_lines is not None else header_flags(text, config=config)
    for index, line in enumerate(text.split("\n")):
        is_header = flags[index] if index < len(flags) else False
        lines.append(_Line(index=index, start=offset, text=line, is_header=is_header))
        offset += len(line) + 1
    return lines


def _line_at(lines: list[_Line], position: int) -> _Line:
    for line in reversed(lines):
        if line.start <= position:
            return line
    return lines[0]


def quote_token_value(line: str) -> str:
    """Core text carried by a quote-line token."""
    stripped = line.lstrip()
    return QUOTE_RUN_RE.sub("", stripped, count=1).strip().replace("＞", ">")


def annotate(
    text: str,
    header_lines: Sequence[bool] | None = None,
    *,
    thread_title: str | None = None,
    highlight: str | None = None,
    own_post_numbers: Iterable[str] = (),
    config: AnnotatorConfig = DEFAULT_CONFIG,
) -> list[Token]:
    """Detect every clickable token in spacing-repaired ``text``.

    Post references are only promoted on header lines and quote lines, so a
    stray "No. 5" in prose stays plain text. Like markers are only taken from
    a non-quote header line, between its ``No.`` and the following ``ID:``.

    ``header_lines`` may carry a precomputed header classification per line;
    it is derived from the text when omitted.

    Returns tokens ordered by start offset.
    """
    if not text:
        return []
    lines = _split_lines(text, config, header_lines)
    own = set(own_post_numbers)
    tokens: list[Token] = []

    for match in POST_REF_RE.finditer(text):
        line = _line_at(lines, match.start())
        if not (line.is_header or line.is_quote):
            continue
        number = match.group(2)
        tokens.append(
            Token(
                TokenKind.POST_REF,
                number,
                match.start(),
                match.end(),
                line.index,
                own_post=number in own,
            )
        )

    for match in QUOTE_LINE_RE.finditer(text):
        raw = match.group()
        start = match.start() + (len(raw) - len(raw.lstrip()))
        tokens.append(
            Token(
                TokenKind.QUOTE_LINE,
                quote_token_value(raw),
                start,
                match.end(),
                _line_at(lines, start).index,
            )
        )

    if thread_title and thread_title.strip():
        tokens.extend(_title_tokens(lines, normalize_line(thread_title)))

    for match in POSTER_ID_RE.finditer(text):
        tokens.append(
            Token(TokenKind.POSTER_ID, match.group(2), match.start(), match.end(), _line_at(lines, match.start()).index)
        )

    for match in URL_RE.finditer(text):
        value = trim_url(match.group())
        if not value:
            continue
        tokens.append(
            Token(TokenKind.URL, value, match.start(), match.start() + len(value), _line_at(lines, match.start()).index)
        )

    for match in file_name_pattern(config.media_extensions).finditer(text):
        tokens.append(
            Token(TokenKind.FILE_NAME, match.group(1), match.start(), match.end(), _line_at(lines, match.start()).index)
        )

    tokens.extend(_like_marker_tokens(lines))

    if highlight and highlight.strip():
        pattern = re.compile(re.escape(highlight), re.IGNORECASE)
        for match in pattern.finditer(text):
            if match.end() > match.start():
                tokens.append(
                    Token(TokenKind.HIGHLIGHT, match.group(), match.start(), match.end(), _line_at(lines, match.start()).index)
                )

    tokens.sort(key=lambda token: (token.start, _KIND_ORDER[token.kind]))
    return tokens


def _title_tokens(lines: list[_Line], title: str) -> list[Token]:
    # Title lines behave like a quote of the OP for the combined resolver,
    # but they are not quote lines themselves.
    tokens: list[Token] = []
    if not title:
        return tokens
    for line in lines:
        if line.is_quote:
            continue
        if normalize_line(line.text) != title:
            continue
        tokens.append(
            Token(
                TokenKind.TITLE_LINE,
                line.text.strip(),
                line.start,
                line.start + len(line.text),
                line.index,
            )
        )
    return tokens


def _like_marker_tokens(lines: list[_Line]) -> list[Token]:
    tokens: list[Token] = []
    for line in lines:
        if line.is_quote or not line.is_header:
            continue
        number_match = POST_REF_RE.search(line.text)
        if number_match is None:
            continue
        after_start = number_match.end()
        after = line.text[after_start:]
        id_match = ID_MARK_RE.search(after)
        segment = after[: id_match.start()] if id_match else after
        marker = LIKE_MARKER_RE.search(segment)
        if marker is None:
            continue
        start = line.start + after_start + marker.start()
        tokens.append(
            Token(TokenKind.LIKE_MARKER, marker.group(), start, start + len(marker.group()), line.index)
        )
    return tokens


def tokens_of_kind(tokens: Iterable[Token], kind: TokenKind) -> list[Token]:
    return [token for token in tokens if token.kind is kind]


def token_at(tokens: Iterable[Token], offset: int) -> Token | None:
    """Clickable token covering ``offset``; highlights are never clickable."""
    for token in tokens:
        if token.kind is TokenKind.HIGHLIGHT:
            continue
        if token.start <= offset < token.end:
            return token
    return None
