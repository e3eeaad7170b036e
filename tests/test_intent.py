# tests/test_intent.py
import pytest

from adaptive_autocompleter.core.intent import GENERAL, IntentClassifier


@pytest.fixture
def clf():
    return IntentClassifier()


@pytest.mark.parametrize(
    "text,label",
    [
        ("how to cook rice", "question"),
        ("What is docker", "definition"),
        ("buy a laptop", "commerce"),
        ("laptop price", "commerce"),
        ("learn python", "educational"),
        ("where is paris", "location"),
        ("when does it open", "time"),
        ("why is the sky blue", "explanation"),
        ("python data science", GENERAL),
        ("", GENERAL),
    ],
)
def test_keyword_table(clf, text, label):
    assert clf.classify(text) == label


def test_earliest_token_wins(clf):
    assert clf.classify("learn how to buy") == "educational"
    assert clf.classify("buy then learn") == "commerce"


def test_tokens_must_match_exactly(clf):
    # "however" is not "how"
    assert clf.classify("however it works") == GENERAL


def test_splits_on_any_whitespace(clf):
    assert clf.classify("python\tHOW\nto") == "question"


def test_extra_keywords_merge_over_defaults():
    clf = IntentClassifier({"Compare": "comparison", "buy": "shopping"})
    assert clf.classify("compare phones") == "comparison"
    assert clf.classify("buy phones") == "shopping"
    assert clf.classify("how to") == "question"
    assert "comparison" in clf.labels
