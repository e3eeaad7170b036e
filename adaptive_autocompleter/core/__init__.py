"""
adaptive_autocompleter.core

The engine behind the search box.
Contains:
 - the prefix index of known terms (TermIndex)
 - keyword intent detection (IntentClassifier)
 - relevance scoring and suggestion ranking (RelevanceScorer, SuggestionRanker)
 - the owned per-user session that learns new terms (SearchSession)
"""

from .records import TermRecord, RankedSuggestion, SearchResult, CommitResult, Analytics
from .trie import TermIndex
from .intent import IntentClassifier
from .relevance import RelevanceScorer
from .ranker import SuggestionRanker
from .session import SearchSession
from .seed import SAMPLE_TERMS

__all__ = [
    "TermRecord",
    "RankedSuggestion",
    "SearchResult",
    "CommitResult",
    "Analytics",
    "TermIndex",
    "IntentClassifier",
    "RelevanceScorer",
    "SuggestionRanker",
    "SearchSession",
    "SAMPLE_TERMS",
]
