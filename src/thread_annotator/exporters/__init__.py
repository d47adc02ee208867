"""Exporters for resolved item lists in JSON and YAML formats."""

from thread_annotator.exporters.base import Exporter
from thread_annotator.exporters.json_exporter import JsonExporter
from thread_annotator.exporters.yaml_exporter import YamlExporter

EXPORTERS: dict[str, type[Exporter]] = {
    "json": JsonExporter,
    "yaml": YamlExporter,
}


def get_exporter(fmt: str) -> Exporter:
    """Exporter instance for a format name (``json`` or ``yaml``)."""
    try:
        return EXPORTERS[fmt]()
    except KeyError:
        raise ValueError(f"Unknown export format: {fmt}") from None


__all__ = [
    "EXPORTERS",
    "Exporter",
    "JsonExporter",
    "YamlExporter",
    "get_exporter",
]
