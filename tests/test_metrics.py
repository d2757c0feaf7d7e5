""" Unit tests for the metrics snapshot. """

from lextrie.metrics import MetricsReport
from lextrie.trie import Trie


def test_from_trie() -> None:
    t = Trie()
    for k in ("cat", "car", "dog"):
        t.insert(k, k[-1])
    report = t.metrics()
    assert report == MetricsReport(9, 3, 4, 2, 2.0)
    assert report.as_dict() == {
        "total_characters": 9,
        "total_words": 3,
        "internal_nodes": 4,
        "branching_nodes": 2,
        "average_branching_factor": 2.0,
    }
    # Snapshots do not follow later inserts.
    t.insert("cow", "w")
    assert report.total_characters == 9
    assert t.metrics().total_characters == 12


def test_lines() -> None:
    report = MetricsReport(12, 4, 3, 2, 7 / 3)
    lines = report.lines()
    assert lines[0] == "Trie metrics:"
    assert lines[1] == "1. Total characters: 12"
    assert lines[2] == "2. Words (leaf nodes in the tree): 4"
    assert lines[3] == "3. Internal nodes: 3"
    assert lines[4] == "4. Branching nodes (internal nodes with more than one path): 2"
    assert lines[5] == "5. Average paths per branching node: 2.33"
    assert str(report) == "\n".join(lines)


def test_empty() -> None:
    report = Trie().metrics()
    assert report.total_characters == 0
    assert report.branching_nodes == 0
    assert report.lines()[-1].endswith(": 0.00")
