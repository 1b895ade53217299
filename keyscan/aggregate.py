# aggregate.py
# Merges per-file counts into a running per-keyword total.

import threading

from keyscan.keywords import zero_counts


class TotalCount:
    """Per-branch keyword totals. merge() is safe to call from several threads."""

    def __init__(self, keywords):
        self.keywords = tuple(keywords)
        self._counts = zero_counts(self.keywords)
        self._lock = threading.Lock()

    def merge(self, partial):
        with self._lock:
            for k in self.keywords:
                self._counts[k] += partial.get(k, 0)
        return self

    def merge_all(self, results):
        for r in results:
            self.merge(r.counts)
        return self

    def as_dict(self):
        with self._lock:
            return {k: self._counts[k] for k in self.keywords}

    def __getitem__(self, keyword):
        with self._lock:
            return self._counts[keyword]

    def __eq__(self, other):
        if isinstance(other, TotalCount):
            return self.as_dict() == other.as_dict()
        if isinstance(other, dict):
            return self.as_dict() == other
        return NotImplemented

    def __repr__(self):
        return f"TotalCount({self.as_dict()!r})"


def most_frequent(counts, keywords):
    """Keyword with the highest count, earliest in keyword order on ties.

    Returns None when nothing matched at all.
    """
    best = None
    best_count = 0
    for k in keywords:
        c = counts.get(k, 0)
        if c > best_count:
            best, best_count = k, c
    return best
