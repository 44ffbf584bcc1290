"""
Build an N-letter frequency dictionary from a 'word,count' CSV.

Features:
- Reads a CSV such as the Kaggle English word frequency list (unigram_freq.csv,
  header 'word,count').
- Keeps lowercase a–z words of exactly N letters.
- Merges duplicate words (counts are summed), then sorts by count, most
  frequent first (ties keep input order).
- Writes 'word,count' lines, the format read by wordle_assist.datasets.

Usage:
    python -m script.build_freq_dictionary --in unigram_freq.csv --N 5 \
        --out ranked_5.txt
"""

import argparse
from pathlib import Path

from wordle_assist.datasets import read_lines, write_lines
from wordle_assist.datasets.io import parse_ranked_line
from wordle_assist.errors import DictionaryFormatError


def collect_counts(lines: list[str], N: int) -> dict[str, int]:
    counts: dict[str, int] = {}
    for ln in lines:
        try:
            w, n = parse_ranked_line(ln)
        except DictionaryFormatError:
            # header line or junk
            continue
        if len(w) == N and w.isalpha() and w.isascii():
            counts[w] = counts.get(w, 0) + n
    return counts


def main():
    ap = argparse.ArgumentParser(description="Build an N-letter 'word,count' dictionary.")
    ap.add_argument("--in", dest="inp", required=True, help="input 'word,count' CSV")
    ap.add_argument("--out", dest="out", required=True, help="output dictionary file")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--top", type=int, help="keep only the K most frequent words")
    args = ap.parse_args()

    inp = Path(args.inp)
    lines = read_lines(inp)
    counts = collect_counts(lines, args.N)

    ranked = sorted(counts.items(), key=lambda e: -e[1])
    if args.top:
        ranked = ranked[: args.top]

    out = write_lines((f"{w},{n}" for w, n in ranked), args.out)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {out} ({len(ranked)} words)")


if __name__ == "__main__":
    main()
