"""Compiled patterns shared by annotation, spacing repair and resolution.

Every matching rule lives here once; callers import the compiled objects
instead of building ad hoc regexes.
"""

from __future__ import annotations

import re
from functools import lru_cache

# "No" followed by an optional ASCII or full-width dot
_NO = r"No[.．]?"

# Post reference; tolerates a line break between "No." and the digits
POST_REF_RE = re.compile(_NO + r"\s*(\n?\s*)?(\d+)", re.IGNORECASE)

# Strict single-line "No.<digits>" used for header detection and own-number parsing
POST_NUMBER_RE = re.compile(_NO + r"\s*(\d+)", re.IGNORECASE)
POST_NUMBER_WORD_RE = re.compile(r"\b" + _NO + r"\s*\d+\b", re.IGNORECASE)

# Ordering key parse; also accepts the full-width "Ｎｏ" spelling
SORT_NUMBER_RE = re.compile(r"(?:No|Ｎｏ)[.．]?\s*(\d+)", re.IGNORECASE)

DATE_TIME_RE = re.compile(r"\d{2}/\d{2}/\d{2}\(\S+\)\d{2}:\d{2}:\d{2}")
LEADING_NUMERAL_RE = re.compile(r"^\d+")

QUOTE_LINE_RE = re.compile(r"^[\t \u3000]*[>＞]+[^\n]*", re.MULTILINE)
QUOTE_RUN_RE = re.compile(r"^[>＞≫]+")

POSTER_ID_RE = re.compile(r"ID([:：])([\x21-\x7E\xA0-\xFF]+)")
ID_MARK_RE = re.compile(r"ID[:：]")

LIKE_MARKER_RE = re.compile(r"そうだねx\d+|そうだね|[+＋]")
LEADING_LIKE_MARKER_RE = re.compile(r"^\s*(?:[+＋]|そうだね(?:x\d+)?)")

URL_RE = re.compile(r"(?:(?:https?|ftp)://|www\.)[^\s<>\"'「」]+", re.IGNORECASE)
URL_TRAILING_PUNCT = ".,;:!?)]}"

WHITESPACE_RUN_RE = re.compile(r"\s+")


@lru_cache(maxsize=8)
def file_name_pattern(extensions: tuple[str, ...]) -> re.Pattern[str]:
    """Pattern for a bare media filename such as ``a_01.jpg``."""
    alternatives = "|".join(re.escape(ext) for ext in extensions)
    return re.compile(r"([A-Za-z0-9._-]+\.(?:" + alternatives + r"))(?![A-Za-z0-9])", re.IGNORECASE)


@lru_cache(maxsize=8)
def whole_file_name_pattern(extensions: tuple[str, ...]) -> re.Pattern[str]:
    """Pattern that only matches when the entire string is a filename."""
    alternatives = "|".join(re.escape(ext) for ext in extensions)
    return re.compile(r"^[A-Za-z0-9._-]+\.(?:" + alternatives + r")$", re.IGNORECASE)


@lru_cache(maxsize=8)
def poster_name_pattern(markers: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile("|".join(re.escape(marker) for marker in markers))


def post_number_patterns(post_number: str) -> list[re.Pattern[str]]:
    """Patterns that count as a citation of ``post_number`` in normalized text.

    The last pattern matches the bare number anywhere it is not glued to
    other digits, so prices and counts in prose can also match.
    """
    esc = re.escape(post_number)
    return [
        re.compile(r"\bNo\.?\s*" + esc + r"\b", re.IGNORECASE),
        re.compile(r"^>+\s*(?:No\.?\s*)?" + esc + r"\b", re.MULTILINE | re.IGNORECASE),
        re.compile(r"\B>+\s*(?:No\.?\s*)?" + esc + r"\b", re.IGNORECASE),
        re.compile(r"(?<!\d)" + esc + r"(?!\d)"),
    ]


def parse_post_number(text: str) -> int | None:
    """Best-effort ``No.<digits>`` parse used as the ordering key."""
    match = SORT_NUMBER_RE.search(text)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def trim_url(value: str) -> str:
    return value.rstrip(URL_TRAILING_PUNCT)
