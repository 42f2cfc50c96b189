# automaton.py — 2026-10-18
"""
Aho-Corasick automaton: count every occurrence of a fixed set of terms
in a single pass over the text.

Built in three BFS-friendly phases:
  1. insert every pattern into a character trie
  2. suffix (failure) links: longest proper suffix that is also a prefix
  3. terminal (output) links: nearest pattern-completing node on the
     suffix chain, or root
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Optional, Tuple


class TrieNode:
    """One trie state; `pattern_id` is None unless a whole pattern ends here."""

    __slots__ = ("children", "suffix_link", "terminal_link", "pattern_id", "_moves")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.suffix_link: Optional[TrieNode] = None
        self.terminal_link: Optional[TrieNode] = None
        self.pattern_id: Optional[int] = None
        self._moves: Dict[str, TrieNode] = {}      # memoized fallback moves


class PatternAutomaton:
    """Multi-pattern matcher over a fixed, ordered list of patterns."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self.root = TrieNode()
        self.patterns: List[str] = []
        seen: set[str] = set()
        for p in patterns:
            if p and p not in seen:                 # "" can never match
                seen.add(p)
                self.patterns.append(p)
        self._node_count = 1
        self._build_nodes()
        self._build_suffix_links()
        self._build_terminal_links()

    @classmethod
    def build(cls, patterns: Iterable[str]) -> "PatternAutomaton":
        return cls(patterns)

    def __len__(self) -> int:
        return len(self.patterns)

    @property
    def node_count(self) -> int:
        return self._node_count

    # ───────────────────────── construction ─────────────────────────
    def _build_nodes(self) -> None:
        for pattern_id, pattern in enumerate(self.patterns):
            node = self.root
            for ch in pattern:
                nxt = node.children.get(ch)
                if nxt is None:
                    nxt = node.children[ch] = TrieNode()
                    self._node_count += 1
                node = nxt
            node.pattern_id = pattern_id

    def _child_suffix_link(self, parent: TrieNode, ch: str) -> TrieNode:
        root = self.root
        if parent is root:
            return root
        fallback = parent.suffix_link
        while fallback is not root and ch not in fallback.children:
            fallback = fallback.suffix_link
        return fallback.children.get(ch, root)

    def _build_suffix_links(self) -> None:
        root = self.root
        root.suffix_link = root
        queue = deque([root])
        while queue:
            parent = queue.popleft()
            for ch, child in parent.children.items():
                child.suffix_link = self._child_suffix_link(parent, ch)
                queue.append(child)

    def _build_terminal_links(self) -> None:
        root = self.root
        root.terminal_link = root
        queue = deque(root.children.values())
        while queue:
            node = queue.popleft()
            link = node.suffix_link
            node.terminal_link = link if link.pattern_id is not None else link.terminal_link
            queue.extend(node.children.values())

    # ─────────────────────────── matching ───────────────────────────
    def _next_node(self, node: TrieNode, ch: str) -> TrieNode:
        nxt = node.children.get(ch)
        if nxt is not None:
            return nxt
        cached = node._moves.get(ch)
        if cached is not None:
            return cached
        root = self.root
        fallback = node.suffix_link
        while fallback is not root and ch not in fallback.children:
            fallback = fallback.suffix_link
        nxt = fallback.children.get(ch, root)
        node._moves[ch] = nxt
        return nxt

    def _matches_at(self, node: TrieNode):
        """Yield the pattern ids ending at `node` via the terminal chain."""
        root = self.root
        while node is not root:
            if node.pattern_id is not None:
                yield node.pattern_id
            node = node.terminal_link

    def count_occurrences(self, text: str) -> Dict[str, int]:
        """
        Count overlapping occurrences of every pattern in `text`.
        Every pattern is present in the result, zero when absent.
        """
        counts = [0] * len(self.patterns)
        node = self.root
        for ch in text:
            node = self._next_node(node, ch)
            for pattern_id in self._matches_at(node):
                counts[pattern_id] += 1
        return dict(zip(self.patterns, counts))

    def find_all(self, text: str) -> List[Tuple[int, str]]:
        """Every match as (end index, pattern), in text order."""
        out: List[Tuple[int, str]] = []
        node = self.root
        for i, ch in enumerate(text):
            node = self._next_node(node, ch)
            out.extend((i, self.patterns[pid]) for pid in self._matches_at(node))
        return out
