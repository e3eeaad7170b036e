# adaptive_autocompleter/core/records.py
"""
Value types shared by the index, the ranker and the session.

All of them are frozen dataclasses: the index replaces a stored record on every
update instead of mutating it, so anything handed to a caller is a snapshot.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

DEFAULT_CATEGORY = "User Search"

IntentLabel = str


@dataclass(frozen=True)
class TermRecord:
    """
    One known term, stored at a terminal trie node.
    text: lowercased term (also its path from the root)
    frequency: usage counter
    last_seen_at: epoch seconds of the latest insert/update
    """

    text: str
    frequency: int = 0
    last_seen_at: float = 0.0
    category: str = DEFAULT_CATEGORY
    direct_answer: str = ""
    related_terms: Tuple[str, ...] = ()
    is_user_generated: bool = False

    def hours_since_seen(self, now: float) -> float:
        return (now - self.last_seen_at) / 3600.0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "frequency": self.frequency,
            "last_seen_at": self.last_seen_at,
            "category": self.category,
            "direct_answer": self.direct_answer,
            "related_terms": list(self.related_terms),
            "is_user_generated": self.is_user_generated,
        }


@dataclass(frozen=True)
class RankedSuggestion:
    """A ranked candidate: the record plus the scores it was sorted by."""

    record: TermRecord
    relevance: float
    combined: float

    # convenience passthroughs for display code
    @property
    def text(self) -> str:
        return self.record.text

    @property
    def frequency(self) -> int:
        return self.record.frequency

    @property
    def category(self) -> str:
        return self.record.category

    @property
    def direct_answer(self) -> str:
        return self.record.direct_answer

    @property
    def is_user_generated(self) -> bool:
        return self.record.is_user_generated


@dataclass(frozen=True)
class SearchResult:
    suggestions: Tuple[RankedSuggestion, ...] = ()
    intent: Optional[IntentLabel] = None
    direct_answer: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.suggestions


@dataclass(frozen=True)
class CommitResult:
    learned: bool
    term: str


@dataclass(frozen=True)
class Analytics:
    total_searches: int = 0
    average_latency_ms: float = 0.0
    new_terms_learned: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "total_searches": self.total_searches,
            "average_latency_ms": self.average_latency_ms,
            "new_terms_learned": self.new_terms_learned,
        }


__all__ = [
    "DEFAULT_CATEGORY",
    "IntentLabel",
    "TermRecord",
    "RankedSuggestion",
    "SearchResult",
    "CommitResult",
    "Analytics",
]
