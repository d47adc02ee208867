"""Base exporter interface for resolved thread items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Iterable

from thread_annotator.content.models import ThreadItem, item_to_dict


class Exporter(ABC):
    """Base class for result exporters."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension without dot (e.g., 'json', 'yaml')."""
        ...

    @abstractmethod
    def dump(self, document: dict, stream: IO[str]) -> None:
        """Write an already-built document to an open text stream."""
        ...

    @staticmethod
    def build_document(items: Iterable[ThreadItem]) -> dict:
        """``{"items": [...], "count": n}`` with every item in its tagged dict form."""
        data = [item_to_dict(item) for item in items]
        return {
            "items": data,
            "count": len(data),
        }

    def export(self, items: Iterable[ThreadItem], output_path: Path) -> int:
        """Export items to a file.

        Args:
            items: Resolved items, in display order.
            output_path: Path to the output file.

        Returns:
            Number of items exported.
        """
        document = self.build_document(items)
        with open(output_path, "w", encoding="utf-8") as f:
            self.dump(document, f)
        return document["count"]

    def export_stream(self, items: Iterable[ThreadItem], stream: IO[str]) -> int:
        """Like :meth:`export`, writing to an open stream such as stdout."""
        document = self.build_document(items)
        self.dump(document, stream)
        return document["count"]
