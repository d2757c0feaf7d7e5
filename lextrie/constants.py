"""Defaults shared by the loader and the console front end."""

from __future__ import annotations

import os

DEFAULT_WORDS_FILE = "words.txt"

# Record layout: "<field0> <key> ...", one record per line.
FIELD_DELIMITER = " "
KEY_FIELD = 1

DEFAULT_SEARCH_PATHS: list[str] = [
    DEFAULT_WORDS_FILE,
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", DEFAULT_WORDS_FILE),
]

# EOF on stdin is retried this many times before giving up.
MAX_PROMPT_ATTEMPTS = 5
