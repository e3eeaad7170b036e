# adaptive_autocompleter/core/intent.py
"""
IntentClassifier - keyword lookup that maps a query to a coarse intent label.

Deterministic heuristic: the first whitespace token found in the keyword table
decides the label, regardless of which label it is. No match -> "general".
"""

from __future__ import annotations
from typing import Dict, Optional

from adaptive_autocompleter.core.records import IntentLabel

GENERAL: IntentLabel = "general"

DEFAULT_KEYWORDS: Dict[str, IntentLabel] = {
    "how": "question",
    "what": "definition",
    "where": "location",
    "when": "time",
    "why": "explanation",
    "buy": "commerce",
    "price": "commerce",
    "learn": "educational",
}


class IntentClassifier:
    def __init__(self, keywords: Optional[Dict[str, IntentLabel]] = None) -> None:
        table = dict(DEFAULT_KEYWORDS)
        if keywords:
            table.update({k.lower(): v for k, v in keywords.items()})
        self._table = table

    def classify(self, text: str) -> IntentLabel:
        for token in text.lower().split():
            label = self._table.get(token)
            if label is not None:
                return label
        return GENERAL

    @property
    def labels(self):
        return sorted(set(self._table.values()) | {GENERAL})
