# trie.py
# Prefix tree (TermIndex) holding every known search term with its metadata.
# Nodes live in a flat arena and point at children by index, so traversal is a
# plain loop over ints rather than recursion through node objects.

from __future__ import annotations
import logging
import time
from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional

from adaptive_autocompleter.core.records import DEFAULT_CATEGORY, TermRecord

logger = logging.getLogger(__name__)

NodeId = int
ROOT: NodeId = 0


class TrieNode:
    """
    A single node in the arena.
    children: char -> index of child node
    record: TermRecord when this path is a known term, else None (non-terminal)
    """

    __slots__ = ("children", "record")

    def __init__(self) -> None:
        self.children: Dict[str, NodeId] = {}
        self.record: Optional[TermRecord] = None

    @property
    def is_terminal(self) -> bool:
        return self.record is not None


class TermIndex:
    """
    Trie of search terms used by the SearchSession for:
     - learning new terms / refreshing known ones (insert_or_update)
     - membership checks (exists)
     - collecting every term under a prefix (find_by_prefix)

    Ordering of find_by_prefix output is whatever the traversal yields;
    ranking is the SuggestionRanker's job.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._nodes: List[TrieNode] = [TrieNode()]
        self._size = 0
        self._clock = clock

    # insertion -----------------------------------------------------
    def insert_or_update(
        self,
        term: str,
        *,
        frequency: Optional[int] = None,
        last_seen_at: Optional[float] = None,
        category: Optional[str] = None,
        direct_answer: Optional[str] = None,
        related_terms: Optional[Iterable[str]] = None,
        is_user_generated: Optional[bool] = None,
    ) -> TermRecord:
        """
        Insert `term` or merge metadata into the existing record.
        Any keyword left as None keeps the stored value, except frequency:
        without an explicit value it becomes stored frequency + 1.
        """
        if not term:
            raise ValueError("term must be a non-empty string")

        text = term.lower()
        node_id = ROOT
        for ch in text:
            children = self._nodes[node_id].children
            nxt = children.get(ch)
            if nxt is None:
                nxt = len(self._nodes)
                self._nodes.append(TrieNode())
                children[ch] = nxt
            node_id = nxt

        node = self._nodes[node_id]
        current = node.record
        if current is None:
            current = TermRecord(text=text, category="")
            self._size += 1

        merged = replace(
            current,
            frequency=current.frequency + 1 if frequency is None else int(frequency),
            last_seen_at=self._clock() if last_seen_at is None else float(last_seen_at),
            category=category or current.category or DEFAULT_CATEGORY,
            direct_answer=direct_answer or current.direct_answer,
            related_terms=(
                current.related_terms if related_terms is None else tuple(related_terms)
            ),
            is_user_generated=(
                current.is_user_generated
                if is_user_generated is None
                else bool(is_user_generated)
            ),
        )
        node.record = merged
        return merged

    # lookup -----------------------------------------------------
    def _walk(self, text: str) -> Optional[TrieNode]:
        node_id = ROOT
        for ch in text.lower():
            nxt = self._nodes[node_id].children.get(ch)
            if nxt is None:
                return None
            node_id = nxt
        return self._nodes[node_id]

    def exists(self, term: str) -> bool:
        node = self._walk(term)
        return node is not None and node.is_terminal

    def get(self, term: str) -> Optional[TermRecord]:
        """Stored record for `term`, or None when it isn't known."""
        node = self._walk(term)
        return node.record if node is not None else None

    # search/traversal ---------------------------------------------------------
    def find_by_prefix(self, prefix: str) -> List[TermRecord]:
        """
        Return every known term starting with `prefix` (a term is its own
        prefix match). Unknown prefix gives an empty list.
        """
        start = self._walk(prefix)
        if start is None:
            return []

        out: List[TermRecord] = []
        # explicit DFS stack; children pushed reversed so siblings come out
        # in insertion order
        stack = [start]
        while stack:
            node = stack.pop()
            if node.record is not None:
                out.append(node.record)
            for child in reversed(list(node.children.values())):
                stack.append(self._nodes[child])
        logger.debug("prefix %r matched %d terms", prefix, len(out))
        return out

    # convenience/debugging -----------------------------------------------------
    def __len__(self) -> int:
        """Number of known (terminal) terms."""
        return self._size

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def __contains__(self, term: str) -> bool:
        return self.exists(term)
