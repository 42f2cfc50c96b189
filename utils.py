# utils.py — 2026-10-18
from __future__ import annotations
from typing import Iterable, List, Mapping, Sequence, Tuple

import ranking

# ─────────────────────────── constants ────────────────────────────
DEFAULT_TOP_PAGES = 10
# ──────────────────────────────────────────────────────────────────

# ───────────────────────── parse term list ─────────────────────────
def parse_terms(raw: str) -> List[str]:
    """"foo, Bar,,baz" → ["foo", "Bar", "baz"] (order kept, blanks dropped)."""
    return [t.strip() for t in raw.split(",") if t.strip()]

# ─────────────────────── pretty-print page stats ───────────────────
def format_stats_table(terms: Sequence[str],
                       rows: Iterable[Tuple[str, Mapping[str, int]]]) -> str:
    """Console view: `Page term… Total`, one line per page."""
    rows = list(rows)
    if not rows:
        return "No pages crawled."
    lines = [" ".join(["Page", *terms, "Total"])]
    for url, counts in rows:
        values = [str(counts.get(t, 0)) for t in terms]
        lines.append(" ".join([url, *values, str(ranking.page_total(counts))]))
    return "\n".join(lines)
