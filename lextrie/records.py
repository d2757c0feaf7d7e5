"""Word-list loader: reads key records from a text file into a trie."""

from __future__ import annotations

import logging
import os
from typing import Iterator

from lextrie.constants import DEFAULT_SEARCH_PATHS, FIELD_DELIMITER, KEY_FIELD
from lextrie.trie import Trie

log = logging.getLogger("lextrie")


class MalformedRecordError(ValueError):
    """A record line has no usable key field."""

    def __init__(self, line: str, lineno: int | None = None):
        self.line = line
        self.lineno = lineno
        where = f"line {lineno}" if lineno is not None else "record"
        super().__init__(f"{where}: expected at least {KEY_FIELD + 1} fields, got {line!r}")


def parse_record(line: str, lineno: int | None = None) -> tuple[str, str]:
    """Split one record into ``(key, payload)``.

    The key is the second space-separated field and the payload is the
    key's last character.
    """
    fields = line.split(FIELD_DELIMITER)
    if len(fields) <= KEY_FIELD or not fields[KEY_FIELD]:
        raise MalformedRecordError(line, lineno)
    key = fields[KEY_FIELD]
    return key, key[-1]


def read_records(path: str, strict: bool = False) -> Iterator[tuple[str, str]]:
    """Yield ``(key, payload)`` for every record in *path*.

    Malformed lines are skipped with a warning unless *strict* is set.
    """
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.rstrip("\r\n")
            try:
                yield parse_record(line, lineno)
            except MalformedRecordError:
                if strict:
                    raise
                log.warning("Skipping malformed record at %s:%d: %r", path, lineno, line)


def find_words_file(path: str | None = None) -> str:
    """First existing file among *path* and the default search paths."""
    search_paths: list[str] = []
    if path:
        search_paths.append(path)
    search_paths.extend(DEFAULT_SEARCH_PATHS)

    for candidate in search_paths:
        if os.path.exists(candidate):
            return candidate
        log.debug("No word list at %s", candidate)
    raise FileNotFoundError(f"no word list found (tried: {', '.join(search_paths)})")


def load_trie(path: str | None = None, strict: bool = False) -> tuple[Trie, int]:
    """Build a trie from a word list; returns the trie and the record count."""
    words_path = find_words_file(path)
    trie = Trie()
    count = 0
    for key, payload in read_records(words_path, strict=strict):
        trie.insert(key, payload)
        count += 1
    log.info("Loaded %s words from %s", f"{count:,}", words_path)
    return trie, count
