"""Tunable vocabularies shared by the annotator and the resolvers."""

from __future__ import annotations

from dataclasses import dataclass

MEDIA_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "webp", "bmp", "mp4", "webm", "avi", "mov", "mkv")
POSTER_NAME_MARKERS = ("無念", "Name", "としあき")


@dataclass(frozen=True)
class AnnotatorConfig:
    """Vocabulary used to recognise headers, filenames and quote candidates.

    Frozen so it can key memoized helpers such as spacing repair.
    """

    poster_name_markers: tuple[str, ...] = POSTER_NAME_MARKERS
    media_extensions: tuple[str, ...] = MEDIA_EXTENSIONS
    min_quote_candidate_length: int = 2


DEFAULT_CONFIG = AnnotatorConfig()
