# report.py — CSV export of crawl stats
from __future__ import annotations
import csv
from typing import Iterable, List, Mapping, Sequence, Tuple

import ranking

CSV_SEPARATOR = ","


def stats_rows(terms: Sequence[str],
               rows: Iterable[Tuple[str, Mapping[str, int]]]) -> List[list]:
    """Header ["Page", *terms, "Total"] followed by one row per page."""
    out: List[list] = [["Page", *terms, "Total"]]
    for url, counts in rows:
        values = [counts.get(t, 0) for t in terms]
        out.append([url, *values, ranking.page_total(counts)])
    return out

def _write(path: str, table: List[list]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as fh:
        csv.writer(fh, delimiter=CSV_SEPARATOR).writerows(table)

def write_stats_csv(path: str, terms: Sequence[str],
                    pages_stats: Mapping[str, Mapping[str, int]]) -> None:
    """Every crawled page, in crawl order."""
    _write(path, stats_rows(terms, pages_stats.items()))

def write_top_pages_csv(path: str, terms: Sequence[str],
                        pages_stats: Mapping[str, Mapping[str, int]],
                        n: int) -> None:
    """The `n` pages with the most total hits."""
    _write(path, stats_rows(terms, ranking.top_pages(pages_stats, n)))
