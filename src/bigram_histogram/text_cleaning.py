from __future__ import annotations

from dataclasses import dataclass, field

import regex  # type: ignore


_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only. Non-ASCII letters are left as they are."""

    return text.translate(_ASCII_LOWER)


def compile_disallowed_pattern() -> regex.Pattern:
    """Pattern matching maximal runs of characters outside `[a-z0-9 ]`."""

    return regex.compile(r"[^a-z0-9 ]+")


def cleanse_word(text: str, pattern: regex.Pattern) -> str | None:
    """Strip leading/trailing punctuation from a single candidate word.

    Returns the cleaned token, or None when the candidate is pure noise.
    Anything following the first disallowed run after the word is dropped,
    so ``fox's`` becomes ``fox``.
    """

    s = ascii_lower(text)
    if not s:
        return None

    m = pattern.search(s)
    if m is None:
        return s

    if m.start() != 0:
        # word first, junk after
        return s[: m.start()]

    if m.end() == len(s):
        return None

    # junk in front; the word may still be followed by more junk
    rest = s[m.end() :]
    tail = pattern.search(rest)
    if tail is None:
        return rest
    return rest[: tail.start()]


@dataclass(frozen=True)
class WordCleanser:
    """Holds the compiled pattern for one run so it is built only once."""

    pattern: regex.Pattern = field(default_factory=compile_disallowed_pattern)

    def cleanse(self, text: str) -> str | None:
        return cleanse_word(text, self.pattern)

    __call__ = cleanse
