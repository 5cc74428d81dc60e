"""
Interactive snippet lookup.

Usage:
    python -m sentence_snippets path/to/document.txt

Reads one query per line from stdin and prints the snippet followed by the
time it took to build it.
"""

import argparse
import logging
import sys
import time

from sentence_snippets.core.config import settings
from sentence_snippets.errors import DocumentLoadError
from sentence_snippets.i18n.messages import MESSAGES, get_message
from sentence_snippets.search.searcher import SnippetEngine

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sentence_snippets",
        description="Print the best matching excerpt of a document for each query line.",
    )
    parser.add_argument("document", help="Path to the text document")
    parser.add_argument(
        "--encoding", default=settings.ENCODING, help="Document encoding"
    )
    parser.add_argument(
        "--lang",
        default=settings.LANGUAGE,
        choices=sorted(MESSAGES),
        help="Language of fixed messages",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log at INFO level"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else settings.LOG_LEVEL)

    try:
        engine = SnippetEngine.from_file(
            args.document,
            encoding=args.encoding,
            config=settings.snippet_config(),
            language=args.lang,
        )
    except DocumentLoadError as e:
        print(get_message("load_failed", args.lang).format(path=e.path), file=sys.stderr)
        return 1

    for line in sys.stdin:
        started = time.perf_counter()
        snippet = engine.get_snippet(line.rstrip("\n"))
        elapsed = (time.perf_counter() - started) * 1000

        print(snippet)
        print(get_message("timing", args.lang).format(elapsed=elapsed), flush=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
