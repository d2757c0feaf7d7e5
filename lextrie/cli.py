"""CLI / terminal mode for the prefix trie search."""

from __future__ import annotations

import logging

from lextrie.constants import MAX_PROMPT_ATTEMPTS
from lextrie.trie import Trie

log = logging.getLogger("lextrie")


def prompt_query(
    prompt: str = "Enter a word to search: ",
    retry_prompt: str = "Try again: ",
    attempts: int = MAX_PROMPT_ATTEMPTS,
) -> str | None:
    """Read one query line, asking again while no line arrives.

    An empty line is a valid query. Returns None once *attempts* reads
    in a row hit end of input.
    """
    text = prompt
    for _ in range(attempts):
        try:
            return input(text)
        except EOFError:
            print()
            text = retry_prompt
    log.debug("No query after %d attempts", attempts)
    return None


def print_metrics(trie: Trie) -> None:
    print()
    print(trie.metrics())


def print_results(words: list[str] | None) -> None:
    if words is None:
        print("No results found")
        return
    print(f"Found {len(words)} words")
    for word in words:
        print(word)


def run_cli(trie: Trie, query: str | None = None) -> list[str] | None:
    """Run in terminal mode: report metrics, then answer one prefix query."""
    print_metrics(trie)

    if query is None:
        print()
        query = prompt_query()
        if query is None:
            print("No query entered.")
            return None

    results = trie.search_words(query)
    log.debug("search_words(%r) -> %s", query, "no subtree" if results is None else len(results))
    print_results(results)
    return results
