# metrics_tracker.py - in-memory counters and running averages

from collections import defaultdict

from adaptive_autocompleter.core.records import Analytics


class Metrics:
    """Running sum/count per key. Lives for the process only."""

    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key):
        if self.n[key] == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def count(self, key):
        return self.n[key]

    def keys(self):
        return list(self.m)


class SearchAnalytics:
    """
    Session analytics: search count, running (not windowed) average latency
    and number of learned terms.
    """

    def __init__(self):
        self.searches = 0
        self.avg_ms = 0.0
        self.new_terms = 0

    def record_search(self, latency_ms):
        # new_avg = (old_avg * n + latency) / (n + 1)
        self.avg_ms = (self.avg_ms * self.searches + float(latency_ms)) / (self.searches + 1)
        self.searches += 1

    def record_new_term(self):
        self.new_terms += 1

    def snapshot(self):
        return Analytics(
            total_searches=self.searches,
            average_latency_ms=self.avg_ms,
            new_terms_learned=self.new_terms,
        )
