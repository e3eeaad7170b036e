# adaptive_autocompleter/core/ranker.py
"""
SuggestionRanker - orders prefix matches into the capped suggestion list.

Design goals:
 - relevance from RelevanceScorer blended with popularity (frequency) and freshness
 - freshly learned user terms (< 24h) always sit above everything else
 - deterministic total order so unit tests and repeated searches agree

Sort key per candidate, computed once:
    (tier, -combined, text)
 - tier 0: user-generated and seen within 24h, tier 1: everything else
 - combined = relevance + frequency * 0.5 + freshness bonus (+30 < 1h, +15 < 24h)
 - text ascending breaks remaining ties

A pairwise "fresh user term wins" comparator is not transitive once three or
more candidates qualify, so the override is flattened into the tier instead.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from adaptive_autocompleter.core.records import IntentLabel, RankedSuggestion, TermRecord
from adaptive_autocompleter.core.relevance import RelevanceScorer

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 8
FREQUENCY_WEIGHT = 0.5
FRESH_HOUR_BONUS = 30
FRESH_DAY_BONUS = 15
FRESH_USER_WINDOW_HOURS = 24.0

SortKey = Tuple[int, float, str]


class SuggestionRanker:
    """
    Combine scorer output with frequency/recency/provenance into a ranking.

    Public API:
      - rank(candidates, query, intent, now) -> List[RankedSuggestion]
      - combined_score(record, relevance, now) -> float
      - is_fresh_user_term(record, now) -> bool
    """

    def __init__(self, scorer: Optional[RelevanceScorer] = None, limit: int = DEFAULT_LIMIT):
        self.scorer = scorer or RelevanceScorer()
        self.limit = int(limit)

    def rank(
        self,
        candidates: Iterable[TermRecord],
        query: str,
        intent: IntentLabel,
        now: float,
    ) -> List[RankedSuggestion]:
        keyed: List[Tuple[SortKey, RankedSuggestion]] = []
        for rec in candidates:
            relevance = self.scorer.score(rec, query, intent, now)
            combined = self.combined_score(rec, relevance, now)
            tier = 0 if self.is_fresh_user_term(rec, now) else 1
            keyed.append(((tier, -combined, rec.text), RankedSuggestion(rec, relevance, combined)))

        keyed.sort(key=lambda kv: kv[0])
        ranked = [s for _, s in keyed[: self.limit]]
        logger.debug(
            "ranked %d candidates for %r (intent=%s), kept %d",
            len(keyed), query, intent, len(ranked),
        )
        return ranked

    # Helpers ------------------------------
    @staticmethod
    def combined_score(record: TermRecord, relevance: float, now: float) -> float:
        hours = record.hours_since_seen(now)
        if hours < 1:
            bonus = FRESH_HOUR_BONUS
        elif hours < 24:
            bonus = FRESH_DAY_BONUS
        else:
            bonus = 0
        return float(relevance) + record.frequency * FREQUENCY_WEIGHT + bonus

    @staticmethod
    def is_fresh_user_term(record: TermRecord, now: float) -> bool:
        return record.is_user_generated and record.hours_since_seen(now) < FRESH_USER_WINDOW_HOURS
