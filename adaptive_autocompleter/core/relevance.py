# adaptive_autocompleter/core/relevance.py
"""
RelevanceScorer - additive relevance score for a (term, query, intent) triple.

Factors (all case-insensitive):
 - substring match             +50
 - prefix match                +40 (on top of the substring bonus)
 - term intent == query intent +30
 - seen < 1h / < 24h ago       +25 / +10
 - length similarity           max(0, 20 - |len(term) - len(query)|)

Scores are unbounded and not normalized; the ranker uses them as-is.
"""

from __future__ import annotations
from typing import Dict, Optional

from adaptive_autocompleter.core.intent import IntentClassifier
from adaptive_autocompleter.core.records import IntentLabel, TermRecord

SUBSTRING_BONUS = 50
PREFIX_BONUS = 40
INTENT_BONUS = 30
RECENT_HOUR_BONUS = 25
RECENT_DAY_BONUS = 10
LENGTH_WINDOW = 20


class RelevanceScorer:
    def __init__(self, classifier: Optional[IntentClassifier] = None) -> None:
        self.classifier = classifier or IntentClassifier()

    def score(self, term: TermRecord, query: str, intent: IntentLabel, now: float) -> int:
        return self.explain(term, query, intent, now)["final"]

    def explain(
        self, term: TermRecord, query: str, intent: IntentLabel, now: float
    ) -> Dict[str, int]:
        """
        Per-factor contributions for one term, plus "final".
        Good for inspecting why something ranked where it did.
        """
        text = term.text.lower()
        q = query.lower()

        parts = {
            "substring": SUBSTRING_BONUS if q in text else 0,
            "prefix": PREFIX_BONUS if text.startswith(q) else 0,
            "intent": INTENT_BONUS if self.classifier.classify(text) == intent else 0,
            "recency": self._recency(term.hours_since_seen(now)),
            "length": max(0, LENGTH_WINDOW - abs(len(text) - len(q))),
        }
        parts["final"] = sum(parts.values())
        return parts

    @staticmethod
    def _recency(hours: float) -> int:
        if hours < 1:
            return RECENT_HOUR_BONUS
        if hours < 24:
            return RECENT_DAY_BONUS
        return 0
