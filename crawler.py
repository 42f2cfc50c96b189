# crawler.py — sync, breadth-first, budget-limited term counter

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Dict, Iterable, List, Optional, Tuple

import fetcher
import ranking
from automaton import PatternAutomaton
from parser import is_followable

# ─────────────────────────── tunables ────────────────────────────
DEFAULT_LINK_DEPTH              = 8
DEFAULT_MAX_VISITED_PAGES_LIMIT = 10_000
# ──────────────────────────────────────────────────────────────────

FetchFn = Callable[[str], "fetcher.Page"]


def _normalise_terms(terms: Iterable[str]) -> List[str]:
    out: List[str] = []
    for t in terms:
        t = t.lower()
        if t and t not in out:
            out.append(t)
    return out


class WebCrawler:
    """
    Crawl outward from `seed_url` and count `terms` on every page.

    The frontier is a FIFO of (url, remaining depth); a url is checked
    against the visited table when dequeued, so it may be queued many
    times but is analysed at most once. `max_visited_pages_limit` only
    counts pages that were fetched successfully.
    """

    def __init__(
        self,
        seed_url: str,
        terms: Iterable[str],
        link_depth: int = DEFAULT_LINK_DEPTH,
        max_visited_pages_limit: int = DEFAULT_MAX_VISITED_PAGES_LIMIT,
        fetch: Optional[FetchFn] = None,
        verbose: bool = False,
    ) -> None:
        self.seed_url = seed_url
        self.terms = _normalise_terms(terms)
        self.link_depth = link_depth
        self.max_visited_pages_limit = max_visited_pages_limit
        self.verbose = verbose
        self._fetch = fetch
        self._trie = PatternAutomaton(self.terms)
        self.pages_stats: Dict[str, Dict[str, int]] = {}
        self._done = False

    def get_pages_stats(self) -> Dict[str, Dict[str, int]]:
        return self.pages_stats

    # ---------- crawl ----------
    def calculate_stats(self) -> None:
        if self._done:
            raise RuntimeError("WebCrawler.calculate_stats() can only run once")
        self._done = True

        fetch = self._fetch or fetcher.fetch_page
        budget = self.max_visited_pages_limit
        frontier: Deque[Tuple[str, int]] = deque([(self.seed_url, self.link_depth)])

        while frontier and budget > 0:
            url, depth = frontier.popleft()
            if url in self.pages_stats:
                continue
            if self.verbose:
                print(f"FETCH {url}  (depth left {depth}, budget {budget})")
            try:
                page = fetch(url)
            except fetcher.FetchError as exc:
                print("Page request failed")
                print(f"Requested page {url}")
                print(f"Exception message {exc}")
                continue

            self.pages_stats[url] = self._trie.count_occurrences(page.text.lower())
            budget -= 1
            if depth <= 0:
                continue
            self._add_pages_to_visit(frontier, page.links, depth)

    run = calculate_stats

    @staticmethod
    def _add_pages_to_visit(frontier: Deque[Tuple[str, int]], links, depth: int) -> None:
        for link in links:
            if is_followable(link.href) and link.abs_url:
                frontier.append((link.abs_url, depth - 1))

    # ---------- ranking ----------
    def sorted_pages_stats(self):
        return ranking.sorted_by_total(self.pages_stats)

    def top_pages(self, n: int):
        return ranking.top_pages(self.pages_stats, n)


def crawl_site(
    seed_url: str,
    terms: Iterable[str],
    link_depth: int = DEFAULT_LINK_DEPTH,
    max_pages: int = DEFAULT_MAX_VISITED_PAGES_LIMIT,
    fetch: Optional[FetchFn] = None,
) -> Dict[str, Dict[str, int]]:
    """One-shot helper: crawl and return {url: {term: count}}."""
    wc = WebCrawler(seed_url, terms, link_depth, max_pages, fetch=fetch)
    wc.calculate_stats()
    return wc.pages_stats
