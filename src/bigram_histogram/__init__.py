"""Bigram histogram of a text file.

Words are lowercased (ASCII only) and stripped of surrounding punctuation;
each pair of adjacent words is counted across the whole file.
"""

__version__ = "1.0.0"

from .accumulator import BigramAccumulator, make_bigram_key, split_bigram_key
from .config import HistogramConfig
from .errors import (
    BigramHistogramError,
    FileOpenError,
    HistogramIOError,
    InvalidArgumentsError,
    LineDecodeError,
    LineReadError,
)
from .histogram import accumulate_lines, build_histogram
from .output import format_histogram, format_ordered, render
from .text_cleaning import WordCleanser, ascii_lower, cleanse_word
from .tokenization import tokenize_line

__all__ = [
    "BigramAccumulator",
    "BigramHistogramError",
    "FileOpenError",
    "HistogramConfig",
    "HistogramIOError",
    "InvalidArgumentsError",
    "LineDecodeError",
    "LineReadError",
    "WordCleanser",
    "accumulate_lines",
    "ascii_lower",
    "build_histogram",
    "cleanse_word",
    "format_histogram",
    "format_ordered",
    "make_bigram_key",
    "render",
    "split_bigram_key",
    "tokenize_line",
]
