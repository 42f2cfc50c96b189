"""
CLI tests for main.py via click's CliRunner.
"""

from click.testing import CliRunner

import fetcher
from fetcher import FetchError, Link, Page
from main import cli

SITE = {
    "http://site/": ("Apple banana", [Link("/fruit", "http://site/fruit")]),
    "http://site/fruit": ("apple APPLE banana apple", []),
}


def _fake_fetch(url):
    if url not in SITE:
        raise FetchError("not found")
    text, links = SITE[url]
    return Page(url, text, links)


def test_crawl_writes_csv_and_prints_top(monkeypatch, tmp_path):
    monkeypatch.setattr(fetcher, "fetch_page", _fake_fetch)
    all_csv, top_csv = tmp_path / "all.csv", tmp_path / "top.csv"
    result = CliRunner().invoke(cli, [
        "crawl", "http://site/", "--terms", "apple,banana", "--top", "1",
        "--all-csv", str(all_csv), "--top-csv", str(top_csv),
    ])
    assert result.exit_code == 0, result.output
    assert "Analysed 2 pages" in result.output
    assert "http://site/fruit 3 1 4" in result.output
    assert all_csv.read_text(encoding="utf-8").splitlines() == [
        "Page,apple,banana,Total",
        "http://site/,1,1,2",
        "http://site/fruit,3,1,4",
    ]
    assert len(top_csv.read_text(encoding="utf-8").splitlines()) == 2


def test_crawl_prompts_for_terms(monkeypatch, tmp_path):
    monkeypatch.setattr(fetcher, "fetch_page", _fake_fetch)
    result = CliRunner().invoke(cli, [
        "crawl", "http://site/", "--depth", "0",
        "--all-csv", str(tmp_path / "a.csv"), "--top-csv", str(tmp_path / "t.csv"),
    ], input="banana\n")
    assert result.exit_code == 0, result.output
    assert "Enter terms comma separated" in result.output
    assert "http://site/ 1 1" in result.output


def test_crawl_unreachable_seed(monkeypatch, tmp_path):
    monkeypatch.setattr(fetcher, "fetch_page", _fake_fetch)
    result = CliRunner().invoke(cli, [
        "crawl", "http://nowhere/", "-t", "x",
        "--all-csv", str(tmp_path / "a.csv"), "--top-csv", str(tmp_path / "t.csv"),
    ])
    assert result.exit_code == 0
    assert "Page request failed" in result.output
    assert "No pages crawled." in result.output


def test_crawl_unwritable_csv(monkeypatch, tmp_path):
    monkeypatch.setattr(fetcher, "fetch_page", _fake_fetch)
    result = CliRunner().invoke(cli, [
        "crawl", "http://site/", "-t", "x", "--depth", "0",
        "--all-csv", str(tmp_path / "missing" / "a.csv"),
        "--top-csv", str(tmp_path / "t.csv"),
    ])
    assert result.exit_code == 1
    assert "could not write CSV" in result.output


def test_count_command():
    result = CliRunner().invoke(cli, ["count", "ABAB", "--terms", "ab,B"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["ab: 2", "b: 2"]
