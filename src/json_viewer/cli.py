"""Command-line entry point: ``json-viewer``.

Reads JSON text from a file, a URL, or stdin and prints the rendered markup
(or the document statistics) to stdout.

Exit codes: 0 on success, 1 on invalid JSON or a failed load, 2 on usage
errors (reported by argparse).
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from json_viewer.analysis.metrics import format_bytes
from json_viewer.config import ViewerConfig, ViewMode
from json_viewer.errors import JsonViewerError
from json_viewer.session import ViewerSession

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="json-viewer",
        description="Format, minify, or tree-render JSON as HTML markup",
    )
    ap.add_argument("file", nargs="?", help="JSON file to view (default: stdin)")
    ap.add_argument("--url", help="load the JSON from this URL instead")
    ap.add_argument(
        "--mode",
        choices=[mode.value for mode in ViewMode],
        default=ViewMode.FORMATTED.value,
        help="presentation (default: formatted)",
    )
    ap.add_argument("--stats", action="store_true", help="print statistics instead of markup")
    ap.add_argument("--search", metavar="TERM", help="mark matches of TERM in the output")
    ap.add_argument("--indent", type=int, default=2, help="spaces per level in formatted mode")
    ap.add_argument("--verbose", action="store_true", help="log debug output to stderr")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.file and args.url:
        ap.error("give either FILE or --url, not both")
    try:
        config = ViewerConfig(indent=args.indent)
    except ValueError as exc:
        ap.error(str(exc))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    session = ViewerSession(config=config)
    session.view_mode = ViewMode(args.mode)
    try:
        if args.url:
            session.load_url(args.url)
        elif args.file:
            session.load_file(args.file)
        else:
            session.update_input(sys.stdin.read())
            session.validate()
    except JsonViewerError as exc:
        print(f"json-viewer: {exc}", file=sys.stderr)
        return 1

    if args.stats:
        stats = session.stats
        print(f"size: {format_bytes(stats.size)}")
        print(f"lines: {stats.lines}")
        print(f"keys: {stats.total_keys}")
        print(f"depth: {stats.max_depth}")
        return 0

    rendered: list[str] = []
    session.display(on_ready=lambda presentation: rendered.append(presentation.markup))
    markup = rendered[0]
    if args.search:
        result = session.search(args.search)
        logger.info("%d matches for %r", result.match_count, args.search)
        markup = result.markup
    print(markup)
    return 0 if session.render_error is None else 1


if __name__ == "__main__":
    sys.exit(main())
