"""Read thread snapshots from JSON or YAML documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from thread_annotator.content.exceptions import DuplicateItemIdError, SnapshotFormatError
from thread_annotator.content.models import ITEM_TYPES, Snapshot, ThreadItem

LOGGER = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def item_from_dict(data: Mapping[str, Any]) -> ThreadItem:
    """Build a thread item from its ``kind``-tagged dict form."""
    if not isinstance(data, Mapping):
        raise SnapshotFormatError(f"Item must be a mapping, got {type(data).__name__}")
    kind = data.get("kind")
    item_type = ITEM_TYPES.get(kind) if isinstance(kind, str) else None
    if item_type is None:
        raise SnapshotFormatError(f"Unknown item kind: {kind!r}")
    fields = {key: value for key, value in data.items() if key != "kind"}
    try:
        item = item_type(**fields)
    except TypeError as exc:
        raise SnapshotFormatError(f"Invalid {kind} item: {exc}") from exc
    if not isinstance(item.id, str) or not item.id:
        raise SnapshotFormatError(f"{kind} item has no id")
    return item


def snapshot_from_dict(data: Mapping[str, Any]) -> Snapshot:
    """Build a snapshot from ``{"title": ..., "items": [...]}``."""
    if not isinstance(data, Mapping):
        raise SnapshotFormatError("Snapshot document must be a mapping")
    raw_items = data.get("items")
    if not isinstance(raw_items, list):
        raise SnapshotFormatError("Snapshot document needs an 'items' list")
    title = data.get("title")
    if title is not None and not isinstance(title, str):
        raise SnapshotFormatError("Snapshot title must be a string")

    items: list[ThreadItem] = []
    seen: set[str] = set()
    for raw in raw_items:
        item = item_from_dict(raw)
        if item.id in seen:
            raise DuplicateItemIdError(item.id)
        seen.add(item.id)
        items.append(item)
    return Snapshot(items=items, title=title)


def load_snapshot(path: Path | str) -> Snapshot:
    """Load a snapshot file; ``.yaml``/``.yml`` are read as YAML, anything else as JSON."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotFormatError(f"Cannot read snapshot {path}: {exc}") from exc

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SnapshotFormatError(f"Cannot parse snapshot {path}: {exc}") from exc

    snapshot = snapshot_from_dict(data)
    LOGGER.info("Loaded snapshot %s (%s items)", path, len(snapshot))
    return snapshot
