from __future__ import annotations

from bigram_histogram import HistogramConfig, WordCleanser, accumulate_lines, render, tokenize_line


def main() -> None:
    raw = [
        "The quick brown fox's tail... and THE 🥰quick!!! blue",
        '"hare" jumped over the quick brown fox.',
    ]
    cleanser = WordCleanser()

    for line in raw:
        print("RAW:", line)
        print("TOKENS:", tokenize_line(line, cleanser))

    config = HistogramConfig.ordered()
    acc = accumulate_lines(raw, config, cleanser=cleanser)
    print("BIGRAMS:")
    print(render(acc, config))


if __name__ == "__main__":
    main()
