#fetcher.py
from __future__ import annotations
import random
from typing import List, NamedTuple

import requests

import parser

_UA_POOL = [
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 13_5) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.4 Safari/605.1.15",
    "Mozilla/5.0 (Macintosh; arm64; Mac OS X 14_0) AppleWebKit/605.1.15 (KHTML, like Gecko)",
]
DEFAULT_TIMEOUT = 10


class FetchError(Exception):
    """A page could not be downloaded or is not an HTML document."""


class Link(NamedTuple):
    href: str          # attribute value as written in the page
    abs_url: str


class Page(NamedTuple):
    url: str
    text: str
    links: List[Link]


def _ua() -> str:
    return random.choice(_UA_POOL)

def _is_html(resp) -> bool:
    ct = resp.headers.get("content-type", "")
    return "text/html" in ct or "application/xhtml+xml" in ct

def fetch_page(url: str, timeout: int = DEFAULT_TIMEOUT) -> Page:
    """Download `url` once and split it into body text + outgoing links."""
    try:
        r = requests.get(url, headers={"User-Agent": _ua()}, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(str(exc)) from exc
    if not _is_html(r):
        raise FetchError(f"unhandled content type {r.headers.get('content-type', '?')!r}")

    text, links = parser.parse_page(r.text, r.url or url)
    return Page(url, text, [Link(href, abs_url) for href, abs_url in links])
