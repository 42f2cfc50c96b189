"""
Tests for ranking.py, report.py and the console table in utils.py.
"""

import csv
from pathlib import Path

import ranking
import report
import utils

STATS = {
    "http://site/a": {"foo": 1, "bar": 0},
    "http://site/b": {"foo": 2, "bar": 3},
    "http://site/c": {"foo": 0, "bar": 1},
    "http://site/d": {"foo": 4, "bar": 1},
}


def _read(path: Path):
    with open(path, newline="", encoding="utf-8") as fh:
        return list(csv.reader(fh))


def test_sorted_by_total_is_descending_and_stable():
    order = [u for u, _ in ranking.sorted_by_total(STATS)]
    # b and d tie on 5, a and c tie on 1: table order is kept
    assert order == ["http://site/b", "http://site/d", "http://site/a", "http://site/c"]


def test_top_pages_clamps():
    assert len(ranking.top_pages(STATS, 10)) == 4
    assert ranking.top_pages(STATS, 0) == []
    assert ranking.top_pages({}, 3) == []


def test_page_total():
    assert ranking.page_total({"x": 2, "y": 5}) == 7
    assert ranking.page_total({}) == 0


def test_write_stats_csv(tmp_path: Path):
    path = tmp_path / "all.csv"
    report.write_stats_csv(str(path), ["foo", "bar"], STATS)
    rows = _read(path)
    assert rows[0] == ["Page", "foo", "bar", "Total"]
    assert rows[1] == ["http://site/a", "1", "0", "1"]
    assert len(rows) == 5


def test_write_top_pages_csv(tmp_path: Path):
    path = tmp_path / "top.csv"
    report.write_top_pages_csv(str(path), ["bar", "foo"], STATS, 2)
    assert _read(path) == [
        ["Page", "bar", "foo", "Total"],
        ["http://site/b", "3", "2", "5"],
        ["http://site/d", "1", "4", "5"],
    ]


def test_parse_terms():
    assert utils.parse_terms("foo, Bar,,baz ,") == ["foo", "Bar", "baz"]
    assert utils.parse_terms("") == []


def test_format_stats_table():
    table = utils.format_stats_table(["foo", "bar"], ranking.top_pages(STATS, 1))
    assert table.splitlines() == ["Page foo bar Total", "http://site/b 2 3 5"]
    assert utils.format_stats_table(["foo"], []) == "No pages crawled."
