# apps/cli/simulate.py
"""
CLI entry point for automatic-play runs.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Plays every answer (or a seeded sample) against a fresh candidate store,
     picking guesses with the chosen strategy.
  3) Prints how many games were solved, the guess distribution and the mean
     number of candidates left at each turn; --csv also writes every turn.

Usage:
    python -m apps.cli.simulate --strategy top --sample 200
    python -m apps.cli.simulate --words ranked --dictionary ranked_5.txt --csv out/turns.csv
"""

from __future__ import annotations

import argparse
import random
import sys

from tqdm import tqdm

from wordle_assist.client.harness import STRATEGIES, WORDLE_MAX_TURNS, run_batch
from wordle_assist.client.io import format_summary, summarize, write_csv
from wordle_assist.datasets import (
    DEFAULT_DICTIONARY, DEFAULT_KIND, pretty_summary, read_dictionary, read_words, validate_dictionary,
)
from wordle_assist.words import get_words_ids


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-assist: automatic play against known answers")
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5 or 6)")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY), help="dictionary file")
    ap.add_argument("--words", choices=get_words_ids(), default=DEFAULT_KIND,
                    help="dictionary format: 'plain' (one word per line) or 'ranked' (word,count)")
    ap.add_argument("--answers", help="answers list (one per line); defaults to the dictionary")
    ap.add_argument("--strategy", choices=list(STRATEGIES), default="top",
                    help="how the next guess is picked among the candidates")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS, help="turn budget per game")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--csv", help="write one row per played turn to this file")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    return ap


def main(argv=None) -> int:
    """
    Parse CLI args, validate the dictionary, play the answers and print a summary.
    """
    args = build_parser().parse_args(argv)
    ranked = args.words == "ranked"

    rep = validate_dictionary(args.N, args.dictionary, ranked=ranked)
    print(pretty_summary(rep))
    if not rep["dictionary"]["exists"]:
        print(f"Dictionary not found: {args.dictionary}", file=sys.stderr)
        return 2

    # Every game starts its own store from the same entries.
    dictionary = read_dictionary(args.dictionary, args.words)
    if args.answers:
        answers = read_words(args.answers)
    else:
        answers = [e[0] if ranked else e for e in dictionary]
    answers = [w for w in answers if len(w) == args.N]

    if args.sample and args.sample < len(answers):
        random.Random(args.seed).shuffle(answers)
        answers = answers[: args.sample]

    with tqdm(total=len(answers), ncols=80, desc="Playing", unit="game",
              disable=args.no_progress, file=sys.stderr) as bar:
        results = run_batch(
            answers, dictionary=dictionary, N=args.N, strategy=args.strategy,
            max_turns=args.max_turns, seed=args.seed,
            on_case=lambda idx, r: bar.update(1),
        )

    print(format_summary(summarize(results)))
    if args.csv:
        print(f"Wrote: {write_csv(results, args.csv)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
