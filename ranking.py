# ranking.py — pure views over {url: {term: count}}
from __future__ import annotations
from typing import Dict, List, Mapping, Tuple

PageCounts = Dict[str, int]


def page_total(counts: Mapping[str, int]) -> int:
    return sum(counts.values())

def sorted_by_total(pages_stats: Mapping[str, PageCounts]) -> List[Tuple[str, PageCounts]]:
    """Pages by total hits, highest first. Ties keep table order."""
    return sorted(pages_stats.items(), key=lambda kv: page_total(kv[1]), reverse=True)

def top_pages(pages_stats: Mapping[str, PageCounts], n: int) -> List[Tuple[str, PageCounts]]:
    if n <= 0:
        return []
    return sorted_by_total(pages_stats)[:n]
