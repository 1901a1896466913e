"""
Tests for console formatting and CSV export.
"""

import tempfile
import unittest
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bigram_histogram.accumulator import BigramAccumulator
from bigram_histogram.config import HistogramConfig
from bigram_histogram.output import (
    CSV_COLUMNS,
    format_histogram,
    format_ordered,
    load_histogram_csv,
    render,
    save_histogram_csv,
    to_frame,
)


SEQUENCE = ["the", "quick", "brown", "fox", "and", "the", "quick", "blue", "hare"]


def make_acc(track_order=True, tokens=SEQUENCE):
    acc = BigramAccumulator(track_order=track_order)
    acc.feed_all(tokens)
    return acc


class TestConsoleFormats(unittest.TestCase):
    """Tests for the two console output styles."""

    def test_histogram_format(self):
        lines = format_histogram(make_acc(track_order=False))
        self.assertEqual(len(lines), 8)
        self.assertIn('•\t"the quick" 2', lines)
        self.assertIn('•\t"blue hare" 1', lines)
        self.assertEqual(lines[-1], "Total no. of bigrams generated: 7")

    def test_histogram_format_empty(self):
        lines = format_histogram(BigramAccumulator())
        self.assertEqual(lines, ["Total no. of bigrams generated: 0"])

    def test_ordered_format(self):
        lines = format_ordered(make_acc())
        self.assertEqual(lines[0], "the quick:2")
        self.assertEqual(lines[-1], "blue hare:1")
        self.assertEqual(len(lines), 7)

    def test_render_picks_format(self):
        acc = make_acc()
        self.assertTrue(render(acc, HistogramConfig.ordered()).startswith("the quick:2\n"))
        self.assertTrue(render(acc).endswith("Total no. of bigrams generated: 7"))

    def test_render_ordered_empty(self):
        self.assertEqual(render(BigramAccumulator(track_order=True), HistogramConfig.ordered()), "")


class TestCsvExport(unittest.TestCase):
    """Tests for the pandas CSV round trip."""

    def test_to_frame_keeps_first_seen_order(self):
        df = to_frame(make_acc())
        self.assertEqual(list(df.columns), CSV_COLUMNS)
        self.assertEqual(len(df), 7)
        self.assertEqual(list(df.iloc[0]), ["the", "quick", 2])
        self.assertEqual(list(df.iloc[-1]), ["blue", "hare", 1])

    def test_save_and_load(self):
        acc = make_acc(tokens=["nan", "null", "007", "nan", "null"])
        with tempfile.TemporaryDirectory() as tmp:
            path = save_histogram_csv(acc, Path(tmp) / "out.csv")
            counts = load_histogram_csv(path)
        self.assertEqual(counts, acc.counts)
        self.assertEqual(counts["nan null"], 2)
        self.assertIn("null 007", counts)

    def test_load_rejects_other_columns(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "other.csv"
            path.write_text("text,label\nhello,1\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_histogram_csv(path)


if __name__ == '__main__':
    unittest.main()
