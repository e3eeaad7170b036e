"""
adaptive_autocompleter

Self-learning search autocomplete: a prefix index of known terms, a keyword
intent classifier, heuristic relevance scoring and a session object that learns
new terms as the user commits them.
"""

from .core import SearchSession, TermIndex

__all__ = ["SearchSession", "TermIndex"]

__version__ = "0.1.0"
