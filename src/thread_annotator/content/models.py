"""Data models for a thread content snapshot."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class TextItem:
    """A post body as markup, with its post number when the scraper found one."""

    kind: ClassVar[str] = "text"

    id: str
    raw_markup: str
    post_number: str | None = None


@dataclass(frozen=True)
class ImageItem:
    """An image attached to the preceding post."""

    kind: ClassVar[str] = "image"

    id: str
    media_url: str
    file_name: str | None = None
    caption: str | None = None


@dataclass(frozen=True)
class VideoItem:
    """A video attached to the preceding post."""

    kind: ClassVar[str] = "video"

    id: str
    media_url: str
    thumbnail_url: str | None = None
    file_name: str | None = None
    caption: str | None = None


@dataclass(frozen=True)
class EndMarker:
    """End-of-thread marker (e.g. the thread expiry time)."""

    kind: ClassVar[str] = "end"

    id: str
    label: str


ThreadItem = Union[TextItem, ImageItem, VideoItem, EndMarker]
MediaItem = Union[ImageItem, VideoItem]

# A Text (or EndMarker) head followed by its trailing media.
Block = list[ThreadItem]

ITEM_TYPES: dict[str, type] = {
    TextItem.kind: TextItem,
    ImageItem.kind: ImageItem,
    VideoItem.kind: VideoItem,
    EndMarker.kind: EndMarker,
}


def is_media(item: ThreadItem) -> bool:
    return isinstance(item, (ImageItem, VideoItem))


def item_to_dict(item: ThreadItem) -> dict:
    """Serialize an item with its ``kind`` tag."""
    data = {"kind": item.kind}
    data.update(asdict(item))
    return data


@dataclass
class Snapshot:
    """An ordered, id-unique sequence of thread items plus the thread title."""

    items: list[ThreadItem]
    title: str | None = None

    def __len__(self) -> int:
        return len(self.items)

    def get(self, item_id: str) -> ThreadItem | None:
        """Find an item by id."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

