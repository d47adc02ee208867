"""Command-line interface for inspecting thread snapshots."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_CONFIG
from .content import ContentError, Snapshot, TextItem, load_snapshot
from .content.plain_text import PlainTextSource
from .exporters import EXPORTERS, get_exporter
from .resolve import SearchNavigator, ThreadResolver
from .text import annotate, extract_body_only, own_post_number, render_display_text

LOGGER = logging.getLogger(__name__)

RESOLVE_KINDS = ("post-number", "quote", "poster-id", "filename", "text", "backrefs")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Thread content annotator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    annotate_parser = subparsers.add_parser("annotate", help="Show a post's display text and its tokens")
    annotate_parser.add_argument("snapshot", help="Snapshot JSON/YAML path")
    annotate_parser.add_argument("item_id", help="Id of the text item to annotate")
    annotate_parser.add_argument(
        "--likes",
        action="append",
        default=[],
        metavar="NUMBER=COUNT",
        help="Like count overlay for a post number (repeatable)",
    )
    annotate_parser.add_argument("--highlight", default=None, help="Highlight occurrences of this text")
    annotate_parser.add_argument(
        "--own",
        action="append",
        default=[],
        metavar="NUMBER",
        help="Post number written by the reader (repeatable)",
    )
    annotate_parser.add_argument("--body-only", action="store_true", help="Print the body without header lines")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a token to the related posts")
    resolve_parser.add_argument("snapshot", help="Snapshot JSON/YAML path")
    resolve_parser.add_argument("kind", choices=RESOLVE_KINDS, help="Token kind to resolve")
    resolve_parser.add_argument("value", help="Token value (item id for 'backrefs')")
    resolve_parser.add_argument("--title", default=None, help="Thread title (defaults to the snapshot's)")
    resolve_parser.add_argument("--format", choices=sorted(EXPORTERS), default="json", help="Output format")
    resolve_parser.add_argument("--output", default=None, help="Write to this file instead of stdout")

    search_parser = subparsers.add_parser("search", help="List items matching a query")
    search_parser.add_argument("snapshot", help="Snapshot JSON/YAML path")
    search_parser.add_argument("query", help="Case-insensitive search text")

    return parser


def _parse_likes(values: list[str]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for value in values:
        number, sep, count = value.partition("=")
        if not sep or not number.strip() or not count.strip().isdigit():
            raise ValueError(f"Invalid --likes value {value!r}, expected NUMBER=COUNT")
        counts[number.strip()] = int(count)
    return counts


def _text_item(snapshot: Snapshot, item_id: str) -> TextItem:
    item = snapshot.get(item_id)
    if not isinstance(item, TextItem):
        raise ValueError(f"No text item with id {item_id!r}")
    return item


def annotate_command(args: argparse.Namespace, snapshot: Snapshot) -> None:
    item = _text_item(snapshot, args.item_id)
    plain = PlainTextSource().plain(item)
    if args.body_only:
        print(extract_body_only(plain))
        return

    counts = _parse_likes(args.likes)
    display = render_display_text(plain, counts, own_post_number(plain) or item.post_number)
    tokens = annotate(
        display,
        thread_title=snapshot.title,
        highlight=args.highlight,
        own_post_numbers=args.own,
        config=DEFAULT_CONFIG,
    )
    print(display)
    print()
    for token in tokens:
        marker = " (own)" if token.own_post else ""
        print(f"{token.kind.value}\t{token.start}-{token.end}\t{token.value}{marker}")


def resolve_command(args: argparse.Namespace, snapshot: Snapshot) -> None:
    resolver = ThreadResolver(snapshot)
    if args.kind == "post-number":
        items = resolver.resolve_by_post_number(args.value)
    elif args.kind == "quote":
        items = resolver.resolve_quote_click(args.value, args.title)
    elif args.kind == "poster-id":
        items = resolver.resolve_by_poster_id(args.value)
    elif args.kind == "filename":
        items = resolver.resolve_by_filename(args.value)
    elif args.kind == "text":
        items = resolver.resolve_by_free_text(args.value)
    else:
        items = resolver.resolve_self_and_backrefs(_text_item(snapshot, args.value))

    exporter = get_exporter(args.format)
    if args.output:
        count = exporter.export(items, Path(args.output))
        LOGGER.info("Wrote %s items to %s", count, args.output)
    else:
        exporter.export_stream(items, sys.stdout)


def search_command(args: argparse.Namespace, snapshot: Snapshot) -> None:
    navigator = SearchNavigator(snapshot)
    state = navigator.search(args.query)
    for index in navigator.hits:
        item = snapshot.items[index]
        print(f"{index}\t{item.kind}\t{item.id}")
    print(f"{state.total} hits")


COMMANDS = {
    "annotate": annotate_command,
    "resolve": resolve_command,
    "search": search_command,
}


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    try:
        snapshot = load_snapshot(args.snapshot)
        handler(args, snapshot)
    except (ContentError, ValueError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
