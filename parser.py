#parser.py
from __future__ import annotations
import re
from typing import List, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup

_WS_RE = re.compile(r"\s+")
_NON_TEXT_TAGS = ["script", "style", "noscript", "template"]


def _abs_url(base_url: str, href: str) -> str:
    """Resolved URL, or "" when the href cannot be parsed (e.g. "http://[broken/")."""
    try:
        return urljoin(base_url, href)
    except ValueError:
        return ""


def is_followable(href: str) -> bool:
    """False for empty hrefs and same-page `#fragment` references."""
    return bool(href) and not href.startswith("#")


def parse_page(html: str, base_url: str) -> Tuple[str, List[Tuple[str, str]]]:
    """
    Split an HTML document into (body text, [(raw href, absolute url), …]).
    Links keep document order; relative hrefs resolve against <base href>
    when the page declares one.
    """
    if not html:
        return "", []
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_NON_TEXT_TAGS):
        tag.decompose()

    base_tag = soup.find("base", href=True)
    if base_tag:
        base_url = _abs_url(base_url, base_tag["href"].strip()) or base_url

    body = soup.body or soup
    text = _WS_RE.sub(" ", body.get_text(" ", strip=True)).strip()

    links = []
    for a in body.find_all("a"):
        href = (a.get("href") or "").strip()
        links.append((href, _abs_url(base_url, href) if href else ""))
    return text, links
