from __future__ import annotations

from collections import Counter
from pathlib import Path

import pandas as pd

from .accumulator import BigramAccumulator, make_bigram_key, split_bigram_key
from .config import HistogramConfig


CSV_COLUMNS = ["word1", "word2", "count"]


def format_histogram(acc: BigramAccumulator) -> list[str]:
    """Map-order dump followed by the number of distinct bigrams."""

    lines = [f'•\t"{key}" {count}' for key, count in acc.items()]
    lines.append(f"Total no. of bigrams generated: {len(acc)}")
    return lines


def format_ordered(acc: BigramAccumulator) -> list[str]:
    """One ``word1 word2:count`` line per bigram, in first-seen order."""

    return [f"{key}:{count}" for key, count in acc.ordered_items()]


def render(acc: BigramAccumulator, config: HistogramConfig | None = None) -> str:
    cfg = config or HistogramConfig()
    if cfg.output_format == "ordered":
        lines = format_ordered(acc)
    else:
        lines = format_histogram(acc)
    return "\n".join(lines)


def to_frame(acc: BigramAccumulator) -> pd.DataFrame:
    items = acc.ordered_items() if acc.track_order else acc.items()
    rows = [(*split_bigram_key(key), count) for key, count in items]
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def save_histogram_csv(acc: BigramAccumulator, path: str | Path) -> Path:
    path = Path(path)
    to_frame(acc).to_csv(path, index=False)
    return path


def load_histogram_csv(path: str | Path) -> Counter:
    df = pd.read_csv(path, dtype={"word1": str, "word2": str}, keep_default_na=False)
    if any(col not in df.columns for col in CSV_COLUMNS):
        raise ValueError("CSV must have columns: word1,word2,count")
    return Counter(
        {
            make_bigram_key(w1, w2): int(c)
            for w1, w2, c in zip(df["word1"], df["word2"], df["count"])
        }
    )
