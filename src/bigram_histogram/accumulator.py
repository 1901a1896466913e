"""
Rolling bigram accumulator.

Consumes a stream of clean tokens and counts every pair of adjacent tokens.
The window holds at most two tokens; once a pair is counted it collapses to
the second token, so ``a b c`` yields ``a b`` and ``b c``.

Usage:
    acc = BigramAccumulator(track_order=True)
    acc.feed_all(["the", "quick", "brown"])
    acc["the quick"]        # 1
    acc.ordered_items()     # [("the quick", 1), ("quick brown", 1)]
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator


KEY_SEPARATOR = " "


def make_bigram_key(first: str, second: str) -> str:
    """Canonical key for the pair (first, second)."""

    return f"{first}{KEY_SEPARATOR}{second}"


def split_bigram_key(key: str) -> tuple[str, str]:
    first, second = key.split(KEY_SEPARATOR, 1)
    return first, second


class BigramAccumulator:
    """
    Sliding-window bigram counter.

    Attributes:
        counts: Counter mapping bigram key to the number of occurrences
        first_seen: Distinct keys in order of first occurrence, or None when
            order tracking is disabled
    """

    def __init__(self, track_order: bool = False):
        self.counts: Counter[str] = Counter()
        self.first_seen: list[str] | None = [] if track_order else None
        self._window: list[str] = []

    @property
    def track_order(self) -> bool:
        return self.first_seen is not None

    @property
    def pending(self) -> tuple[str, ...]:
        """Tokens still waiting in the window."""
        return tuple(self._window)

    def feed(self, token: str) -> None:
        """Push one token through the window, counting a pair when it fills."""
        if len(self._window) < 2:
            self._window.append(token)

        if len(self._window) == 2:
            first, second = self._window
            key = make_bigram_key(first, second)
            if key not in self.counts and self.first_seen is not None:
                self.first_seen.append(key)
            self.counts[key] += 1
            self._window = [second]

    def feed_all(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            self.feed(token)

    def reset_window(self) -> None:
        """Drop buffered tokens so the next token cannot pair with them."""
        self._window = []

    def __len__(self) -> int:
        return len(self.counts)

    def __contains__(self, key: object) -> bool:
        return key in self.counts

    def __getitem__(self, key: str) -> int:
        return self.counts[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)

    @property
    def total(self) -> int:
        """Number of bigrams counted, duplicates included."""
        return sum(self.counts.values())

    def items(self) -> list[tuple[str, int]]:
        return list(self.counts.items())

    def ordered_items(self) -> list[tuple[str, int]]:
        """(key, count) pairs in first-seen order."""
        if self.first_seen is None:
            raise ValueError("first-seen order was not tracked for this run")
        return [(key, self.counts[key]) for key in self.first_seen]

    def most_common(self, n: int | None = None) -> list[tuple[str, int]]:
        return self.counts.most_common(n)
