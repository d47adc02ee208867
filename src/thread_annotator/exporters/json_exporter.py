"""JSON exporter for resolved thread items."""

from __future__ import annotations

import json
from typing import IO

from thread_annotator.exporters.base import Exporter


class JsonExporter(Exporter):
    """Export resolved items to JSON."""

    @property
    def extension(self) -> str:
        return "json"

    def dump(self, document: dict, stream: IO[str]) -> None:
        json.dump(document, stream, indent=2, ensure_ascii=False)
        stream.write("\n")
