"""Content-loading exceptions."""


class ContentError(Exception):
    """Base exception for snapshot loading."""


class SnapshotFormatError(ContentError):
    """Snapshot document is malformed or names an unknown item kind."""


class DuplicateItemIdError(ContentError):
    """Two items in one snapshot share an id."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Item id '{item_id}' appears more than once")
