""" Unit tests for the word-list loader. """

import logging

import pytest

from lextrie import records
from lextrie.records import MalformedRecordError, find_words_file, load_trie, parse_record, read_records


@pytest.fixture
def no_defaults(monkeypatch):
    monkeypatch.setattr(records, "DEFAULT_SEARCH_PATHS", [])


def _write(tmp_path, text: str) -> str:
    path = tmp_path / "words.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_parse_record() -> None:
    assert parse_record("1 cat") == ("cat", "t")
    assert parse_record("17 dog extra fields") == ("dog", "g")
    assert parse_record("x a") == ("a", "a")
    for bad in ("cat", "", "1 ", "1  cat"):
        with pytest.raises(MalformedRecordError):
            parse_record(bad)
    with pytest.raises(ValueError, match="line 3"):
        parse_record("oops", 3)


def test_read_records(tmp_path, caplog) -> None:
    path = _write(tmp_path, "1 cat\r\n2 car\nbroken\n3 dog\n")
    with caplog.at_level(logging.WARNING, logger="lextrie"):
        assert list(read_records(path)) == [("cat", "t"), ("car", "r"), ("dog", "g")]
    assert "words.txt:3" in caplog.text
    assert "broken" in caplog.text


def test_read_records_strict(tmp_path) -> None:
    path = _write(tmp_path, "1 cat\nbroken\n")
    with pytest.raises(MalformedRecordError) as exc_info:
        list(read_records(path, strict=True))
    assert exc_info.value.lineno == 2
    assert exc_info.value.line == "broken"


def test_load_trie(tmp_path, no_defaults) -> None:
    path = _write(tmp_path, "1 cat\n2 car\n3 dog\n4 cat\n")
    trie, count = load_trie(path)
    assert count == 4
    assert trie.total_characters == 12
    assert trie.lookup("car").payload == "r"
    assert trie.search_words("ca") == ["cat", "car"]


def test_load_empty(tmp_path, no_defaults) -> None:
    trie, count = load_trie(_write(tmp_path, ""))
    assert count == 0
    assert trie.node_count == 1
    assert trie.search_words("a") is None


def test_find_words_file(tmp_path, monkeypatch, no_defaults) -> None:
    path = _write(tmp_path, "1 a\n")
    assert find_words_file(path) == path
    with pytest.raises(FileNotFoundError):
        find_words_file(str(tmp_path / "missing.txt"))
    with pytest.raises(FileNotFoundError):
        find_words_file()
    # Falls back to the default search paths when the given file is missing.
    monkeypatch.setattr(records, "DEFAULT_SEARCH_PATHS", [path])
    assert find_words_file(str(tmp_path / "missing.txt")) == path
