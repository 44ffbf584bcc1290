# apps/cli/play.py
"""
CLI entry point for the interactive Wordle assistant.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads it into a candidate store of the requested word width.
  3) Runs the interactive client: you type the word you tried and the
     feedback the game showed (b = absent, y = present, g = correct).
     With --auto the client picks the word for you.

Usage:
    python -m apps.cli.play --width 5 --display_limit 10
    python -m apps.cli.play --auto --words ranked --dictionary ranked_5.txt
"""

from __future__ import annotations

import argparse
import random
import sys

from wordle_assist.client import WordleClient
from wordle_assist.datasets import DEFAULT_DICTIONARY, DEFAULT_KIND, load_store, pretty_summary, validate_dictionary
from wordle_assist.words import get_words_ids


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="A Wordle client!")
    ap.add_argument("-w", "--width", type=int, default=5, help="Width of each word in the game")
    ap.add_argument("-a", "--auto", action="store_true",
                    help="To enable auto mode, set to false by default")
    ap.add_argument("-d", "--display_limit", type=int, default=10,
                    help="Number of suggestions for next word, useful only if auto-mode is off")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY), help="dictionary file")
    ap.add_argument("--words", choices=get_words_ids(), default=DEFAULT_KIND,
                    help="dictionary format: 'plain' (one word per line) or 'ranked' (word,count)")
    ap.add_argument("--seed", type=int, help="RNG seed for suggestion sampling")
    return ap


def main(argv=None) -> int:
    """
    Parse CLI args, load the dictionary and run one interactive session.
    Exit code 0 when the word was found, 1 otherwise.
    """
    args = build_parser().parse_args(argv)

    rep = validate_dictionary(args.width, args.dictionary, ranked=args.words == "ranked")
    print(pretty_summary(rep))
    if not rep["dictionary"]["exists"]:
        print(f"Dictionary not found: {args.dictionary}", file=sys.stderr)
        return 2

    store = load_store(args.dictionary, args.width, kind=args.words)
    client = WordleClient(
        args.width, args.display_limit, auto=args.auto, store=store,
        rng=random.Random(args.seed),
    )

    try:
        solved = client.run()
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0 if solved else 1


if __name__ == "__main__":
    sys.exit(main())
