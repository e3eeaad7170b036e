# session.py
"""
SearchSession - the owned object that ties the engine together.

Purpose:
 - own the TermIndex, IntentClassifier, RelevanceScorer and SuggestionRanker
 - run a query: prefix lookup -> intent -> ranking -> direct answer -> analytics
 - learn from the user: commit typed terms, re-insert picked suggestions,
   refresh terms replayed from history
 - keep session analytics and the recent-search list

Public API:
  search(query) -> SearchResult
  commit_term(raw_text) -> CommitResult
  select_suggestion(suggestion) -> None
  touch_recent(term) -> None
  get_analytics() -> Analytics
  load_seed(entries, max_age_seconds=0.0, rng=None) -> int
  recent_searches() -> List[str]
  on_learn(callback) -> None
  now() -> float

Everything is synchronous and single-threaded; callers that share a session
between threads must serialize access themselves.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Iterable, List, Optional

from adaptive_autocompleter.core.intent import IntentClassifier
from adaptive_autocompleter.core.ranker import DEFAULT_LIMIT, SuggestionRanker
from adaptive_autocompleter.core.records import (
    DEFAULT_CATEGORY,
    Analytics,
    CommitResult,
    IntentLabel,
    RankedSuggestion,
    SearchResult,
    TermRecord,
)
from adaptive_autocompleter.core.relevance import RelevanceScorer
from adaptive_autocompleter.core.seed import SeedEntry
from adaptive_autocompleter.core.trie import TermIndex
from adaptive_autocompleter.utils.metrics_tracker import SearchAnalytics

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 10

LearnListener = Callable[[TermRecord], None]


class SearchSession:
    def __init__(
        self,
        index: Optional[TermIndex] = None,
        classifier: Optional[IntentClassifier] = None,
        *,
        max_suggestions: int = DEFAULT_LIMIT,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
        clock: Callable[[], float] = time.time,
        timer: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._clock = clock
        self._timer = timer
        self.index = index if index is not None else TermIndex(clock=clock)
        self.classifier = classifier or IntentClassifier()
        self.ranker = SuggestionRanker(RelevanceScorer(self.classifier), limit=max_suggestions)
        self.recent_limit = int(recent_limit)

        self.last_intent: Optional[IntentLabel] = None
        self._analytics = SearchAnalytics()
        self._recent: List[str] = []
        self._listeners: List[LearnListener] = []

    # Seeding ---------------------------------------------------------
    def load_seed(
        self,
        entries: Iterable[SeedEntry],
        max_age_seconds: float = 0.0,
        rng: Optional[random.Random] = None,
    ) -> int:
        """
        Bulk-insert reference terms, provenance forced to non-user.
        Each timestamp is now minus a random age in [0, max_age_seconds).
        Returns the number of entries inserted.
        """
        rng = rng or random.Random()
        now = self._clock()
        count = 0
        for text, category, frequency, direct_answer in entries:
            text = text.strip()
            if not text:
                continue
            age = rng.random() * max_age_seconds if max_age_seconds > 0 else 0.0
            self.index.insert_or_update(
                text,
                frequency=frequency,
                category=category,
                direct_answer=direct_answer,
                last_seen_at=now - age,
                is_user_generated=False,
            )
            count += 1
        logger.info("seeded %d reference terms", count)
        return count

    # Searching ---------------------------------------------------------
    def search(self, query: str) -> SearchResult:
        if not query or not query.strip():
            return SearchResult()

        t0 = self._timer()
        now = self._clock()

        candidates = self.index.find_by_prefix(query)
        intent = self.classifier.classify(query)
        ranked = self.ranker.rank(candidates, query, intent, now)
        direct = self._direct_answer(ranked, query)

        latency_ms = (self._timer() - t0) * 1000.0
        self._analytics.record_search(latency_ms)
        self.last_intent = intent
        logger.debug(
            "search %r: %d suggestions, intent=%s, %.3fms", query, len(ranked), intent, latency_ms
        )
        return SearchResult(suggestions=tuple(ranked), intent=intent, direct_answer=direct)

    @staticmethod
    def _direct_answer(ranked: List[RankedSuggestion], query: str) -> Optional[str]:
        wanted = query.lower()
        for s in ranked:
            if s.text == wanted:
                return s.direct_answer or None
        return None

    # Learning ---------------------------------------------------------
    def commit_term(self, raw_text: str) -> CommitResult:
        """
        Learn a typed term, or refresh its timestamp when it is already known.
        A refresh leaves frequency untouched.
        """
        term = (raw_text or "").strip().lower()
        if not term:
            return CommitResult(learned=False, term="")

        now = self._clock()
        existing = self.index.get(term)
        if existing is None:
            record = self.index.insert_or_update(
                term,
                frequency=1,
                category=DEFAULT_CATEGORY,
                last_seen_at=now,
                is_user_generated=True,
            )
            self._analytics.record_new_term()
            self._remember(term)
            logger.info("learned new term %r", term)
            self._notify(record)
            return CommitResult(learned=True, term=term)

        self.index.insert_or_update(term, frequency=existing.frequency, last_seen_at=now)
        self._remember(term)
        logger.debug("refreshed known term %r", term)
        return CommitResult(learned=False, term=term)

    def select_suggestion(self, suggestion: RankedSuggestion) -> None:
        rec = suggestion.record
        self.index.insert_or_update(
            rec.text,
            frequency=rec.frequency + 1,
            category=rec.category,
            direct_answer=rec.direct_answer,
            related_terms=rec.related_terms,
            last_seen_at=self._clock(),
            is_user_generated=rec.is_user_generated,
        )
        self._remember(rec.text)

    def touch_recent(self, term: str) -> None:
        """
        Timestamp refresh for a term replayed from history. Unlike a commit
        refresh it leaves frequency to the index rule, so each replay counts
        as one more use (frequency + 1).
        """
        term = (term or "").strip()
        if not term:
            return
        self.index.insert_or_update(term, last_seen_at=self._clock())

    # Listeners/history ---------------------------------------------------------
    def on_learn(self, callback: LearnListener) -> None:
        self._listeners.append(callback)

    def _notify(self, record: TermRecord) -> None:
        for cb in list(self._listeners):
            cb(record)

    def _remember(self, term: str) -> None:
        if term in self._recent:
            self._recent.remove(term)
        self._recent.insert(0, term)
        del self._recent[self.recent_limit:]

    def recent_searches(self) -> List[str]:
        return list(self._recent)

    def now(self) -> float:
        """Current time from the session clock (same clock the ranker sees)."""
        return self._clock()

    # Analytics ---------------------------------------------------------
    def get_analytics(self) -> Analytics:
        return self._analytics.snapshot()
