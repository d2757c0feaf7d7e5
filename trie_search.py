#!/usr/bin/env python3
"""
Trie Search -- loads a word list into a prefix trie, prints its metrics
and answers a prefix query.

Usage:
    python trie_search.py                     # words.txt, interactive query
    python trie_search.py --words FILE --query ca
"""

from __future__ import annotations

import argparse
import logging
import sys

from lextrie.cli import run_cli
from lextrie.records import MalformedRecordError, load_trie

log = logging.getLogger("lextrie")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Trie Search -- prefix search and shape metrics over a word list",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to the word list (one '<id> <word>' record per line)")
    parser.add_argument("--query", type=str, default=None,
                        help="Prefix to search for instead of prompting")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on malformed records instead of skipping them")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        trie, count = load_trie(args.words, strict=args.strict)
    except (FileNotFoundError, MalformedRecordError) as e:
        log.error("%s", e)
        return 1

    print(f"Words loaded: {count}")
    run_cli(trie, args.query)
    return 0


if __name__ == "__main__":
    sys.exit(main())
