"""
Single-pass bigram histogram over one text file.

Pipeline:
1. Line reading → decoded lines with line numbers
2. Tokenizing → clean lowercase ASCII tokens per line
3. Accumulating → rolling window over the token stream, pair counts

Usage:
    acc = build_histogram("book.txt", HistogramConfig.ordered())
    for key, count in acc.ordered_items():
        ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .accumulator import BigramAccumulator
from .config import HistogramConfig
from .reader import read_lines
from .text_cleaning import WordCleanser
from .tokenization import tokenize_line

logger = logging.getLogger(__name__)


def accumulate_lines(
    lines: Iterable[str],
    config: Optional[HistogramConfig] = None,
    cleanser: Optional[WordCleanser] = None,
) -> BigramAccumulator:
    """
    Run already-decoded lines through the tokenizer and a fresh accumulator.

    Args:
        lines: Lines of text in file order
        config: Run settings (defaults if not provided)
        cleanser: Cleanser to reuse; a new one is built if not provided

    Returns:
        The accumulator holding the finished histogram
    """
    cfg = config or HistogramConfig()
    cleanser = cleanser or WordCleanser()
    acc = BigramAccumulator(track_order=cfg.track_order)

    n_tokens = 0
    for line in lines:
        if cfg.reset_per_line:
            acc.reset_window()
        tokens = tokenize_line(line, cleanser)
        n_tokens += len(tokens)
        acc.feed_all(tokens)

    logger.info("Counted %d bigrams (%d distinct) from %d tokens", acc.total, len(acc), n_tokens)
    return acc


def build_histogram(path: str | Path, config: Optional[HistogramConfig] = None) -> BigramAccumulator:
    """
    Build the bigram histogram of a text file.

    Raises:
        FileOpenError: the file cannot be opened
        LineDecodeError: a line is not valid in the configured encoding
        LineReadError: reading stopped part way through the file
    """
    cfg = config or HistogramConfig()
    logger.info("Building bigram histogram for %s", path)
    return accumulate_lines(
        (text for _, text in read_lines(path, encoding=cfg.encoding)),
        cfg,
    )
