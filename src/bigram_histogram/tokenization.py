from __future__ import annotations

import regex  # type: ignore

from .text_cleaning import WordCleanser


# Unicode White_Space only; str.split() would also break on \x1c-\x1f
_WHITESPACE_RE = regex.compile(r"\p{White_Space}+")


def tokenize_line(line: str, cleanser: WordCleanser) -> list[str]:
    """Whitespace split + cleanse; pieces that are pure noise are dropped."""

    tokens = []
    for piece in _WHITESPACE_RE.split(line):
        if not piece:
            continue
        token = cleanser.cleanse(piece)
        if token is not None:
            tokens.append(token)
    return tokens
