"""Separate a post's body from its leading header and file-info lines."""

from __future__ import annotations

import re
from functools import lru_cache

from thread_annotator.config import DEFAULT_CONFIG, AnnotatorConfig
from thread_annotator.text.normalize import normalize

_ID_LINE_RE = re.compile(r"\bID(?:[:：]|無し)\b[\w./+\-]*", re.IGNORECASE)
_NO_LINE_RE = re.compile(r"\b(?:No|Ｎｏ)[.．]?\s*\d+\b", re.IGNORECASE)
_DATE_TIME_LOOSE_RE = re.compile(r"(?:(?:\d{2}|\d{4})/\d{1,2}/\d{1,2}).*?\d{1,2}:\d{2}:\d{2}")
_FILE_INFO_HEAD_RE = re.compile(r"^\s*(?:ファイル名|画像|ファイル)[:：].*", re.IGNORECASE)
_FILE_SIZE_RE = re.compile(r"^\s*(?:\[[\d\s]+[KMGT]?B\]|.*?[\-ー－]\([\d\s]+[KMGT]?B\))\s*$")


@lru_cache(maxsize=8)
def _file_info_pattern(extensions: tuple[str, ...]) -> re.Pattern[str]:
    # e.g. "foo.jpg - (123KB 800x600)" or "foo.png(12.3MB)"
    alternatives = "|".join(re.escape(ext) for ext in extensions)
    return re.compile(r"^\s*.*?\.(?:" + alternatives + r")\s*[\-ー－]?\s*\([^)]*\).*", re.IGNORECASE)


def _is_header_ish(line: str, config: AnnotatorConfig) -> bool:
    norm = normalize(line)
    return bool(
        _ID_LINE_RE.search(norm)
        or _NO_LINE_RE.search(norm)
        or _DATE_TIME_LOOSE_RE.search(norm)
        or _FILE_INFO_HEAD_RE.search(norm)
        or _file_info_pattern(config.media_extensions).search(norm)
        or _FILE_SIZE_RE.search(line)
    )


def extract_body_only(plain: str, *, config: AnnotatorConfig = DEFAULT_CONFIG) -> str:
    """Return the body of ``plain`` without its leading header block.

    Leading blank, ID, ``No.``, date-time and file-info lines are skipped;
    quote lines stay part of the body. Size lines such as ``[180986 B]`` are
    dropped wherever they appear, as are trailing blank lines.
    """
    lines = plain.splitlines()
    start = 0
    while start < len(lines):
        trimmed = lines[start].lstrip()
        if not trimmed.strip() or _is_header_ish(trimmed, config):
            start += 1
            continue
        break
    kept = [line for line in lines[start:] if not _FILE_SIZE_RE.search(line.strip())]
    while kept and not kept[-1].strip():
        kept.pop()
    return "\n".join(kept)
