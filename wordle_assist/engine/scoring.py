"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions:
  - 'g' : green  = correct letter in the correct position
  - 'y' : yellow = correct letter in the wrong position
  - 'b' : black  = letter not present (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows left to right, only while the letter still
     has remaining count.

The interactive client never calls this (feedback comes from the real game);
the auto-play harness uses it as the oracle for a known answer.
"""

from collections import Counter
from typing import Literal

from .validation import ABSENT, CORRECT, PRESENT

PatternChar = Literal["g", "y", "b"]


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback string for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      score("belle", "level") -> "bgyyy"
      score("lemon", "level") -> "ggbbb"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    pattern = [ABSENT] * len(guess)

    # Pass 1: greens, and leftover answer letters for pass 2.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = CORRECT
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the answer's true multiplicity.
    for i, g in enumerate(guess):
        if pattern[i] == CORRECT:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return "".join(pattern)
