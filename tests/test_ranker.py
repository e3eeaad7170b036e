# tests/test_ranker.py
# unit tests for SuggestionRanker ordering, override tier and cap

import pytest

from adaptive_autocompleter.core.ranker import SuggestionRanker
from adaptive_autocompleter.core.records import TermRecord

NOW = 1_700_000_000.0
HOUR = 3600.0


@pytest.fixture
def ranker():
    return SuggestionRanker()


def seeded(text, freq, hours_ago=48.0):
    return TermRecord(text, frequency=freq, last_seen_at=NOW - hours_ago * HOUR, category="AI")


def learned(text, freq=1, hours_ago=0.0):
    return TermRecord(
        text, frequency=freq, last_seen_at=NOW - hours_ago * HOUR, is_user_generated=True
    )


def test_cap_at_eight_sorted_by_combined(ranker):
    cands = [seeded(f"term {i:02d}", freq=i * 10) for i in range(20)]
    out = ranker.rank(cands, "term", "general", NOW)
    assert len(out) == 8
    combined = [s.combined for s in out]
    assert combined == sorted(combined, reverse=True)
    assert out[0].text == "term 19"


def test_custom_limit():
    cands = [seeded(f"t{i}", freq=i) for i in range(5)]
    assert len(SuggestionRanker(limit=3).rank(cands, "t", "general", NOW)) == 3


def test_fresh_user_term_beats_popular_seed(ranker):
    old = seeded("machine learning basics", freq=150, hours_ago=2)
    new = learned("machine", hours_ago=1 / 60)
    out = ranker.rank([old, new], "mac", "general", NOW)
    assert [s.text for s in out] == ["machine", "machine learning basics"]
    # the override is about position, not score
    assert out[0].combined < out[1].combined


def test_user_term_older_than_a_day_competes_on_score(ranker):
    old_user = learned("mac", freq=1, hours_ago=25)
    popular = seeded("macbook", freq=100, hours_ago=25)
    out = ranker.rank([old_user, popular], "mac", "general", NOW)
    assert out[0].text == "macbook"


def test_several_fresh_user_terms_sorted_among_themselves(ranker):
    cands = [
        learned("mac", freq=1),
        learned("macos", freq=9),
        learned("macbook pro", freq=4),
        seeded("macintosh", freq=500),
    ]
    out = ranker.rank(cands, "mac", "general", NOW)
    assert out[-1].text == "macintosh"
    head = out[:3]
    assert [s.combined for s in head] == sorted((s.combined for s in head), reverse=True)


def test_equal_scores_break_ties_by_text(ranker):
    out = ranker.rank([seeded("abd", 1), seeded("abc", 1)], "ab", "general", NOW)
    assert out[0].combined == out[1].combined
    assert [s.text for s in out] == ["abc", "abd"]


def test_combined_score_freshness_bonus():
    rec = TermRecord("x", frequency=10, last_seen_at=NOW - 0.5 * HOUR)
    assert SuggestionRanker.combined_score(rec, 100, NOW) == pytest.approx(100 + 5 + 30)
    rec = TermRecord("x", frequency=10, last_seen_at=NOW - 5 * HOUR)
    assert SuggestionRanker.combined_score(rec, 100, NOW) == pytest.approx(100 + 5 + 15)
    rec = TermRecord("x", frequency=10, last_seen_at=NOW - 30 * HOUR)
    assert SuggestionRanker.combined_score(rec, 100, NOW) == pytest.approx(105)


def test_suggestions_carry_relevance_and_record(ranker):
    rec = seeded("react hooks tutorial", freq=200)
    (s,) = ranker.rank([rec], "react", "general", NOW)
    assert s.record is rec
    assert s.relevance == ranker.scorer.score(rec, "react", "general", NOW)
    assert s.category == "AI"


def test_empty_candidates(ranker):
    assert ranker.rank([], "q", "general", NOW) == []
