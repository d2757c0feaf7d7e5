"""Lextrie -- prefix trie with prefix search and shape metrics."""

from lextrie.metrics import MetricsReport
from lextrie.trie import Trie, TrieNode
from lextrie.records import MalformedRecordError, load_trie, parse_record, read_records
from lextrie.cli import run_cli

__all__ = [
    "MalformedRecordError",
    "MetricsReport",
    "Trie",
    "TrieNode",
    "load_trie",
    "parse_record",
    "read_records",
    "run_cli",
]
