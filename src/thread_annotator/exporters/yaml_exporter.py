"""YAML exporter for resolved thread items."""

from __future__ import annotations

from typing import IO

import yaml

from thread_annotator.exporters.base import Exporter


class YamlExporter(Exporter):
    """Export resolved items to YAML."""

    @property
    def extension(self) -> str:
        return "yaml"

    def dump(self, document: dict, stream: IO[str]) -> None:
        yaml.safe_dump(document, stream, allow_unicode=True, sort_keys=False)
