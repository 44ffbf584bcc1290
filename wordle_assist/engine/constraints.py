"""
Consistency of a word with (guess, feedback) pairs.

Given:
  - a guessed word and its feedback string ('b'/'y'/'g' per letter)
  - a candidate word of the same length

A candidate is consistent when, for every distinct letter c of the guess:
  - c sits at every position marked 'g' for c
  - c is NOT at any position marked 'y' or 'b' for c
  - if some occurrence of c is marked 'b', the candidate holds exactly
    (#'g' + #'y') copies of c: zero when c was never confirmed, otherwise
    the confirmed count acts as a cap
  - otherwise the candidate holds at least (#'g' + #'y') copies of c

CandidateStore applies the same rule incrementally through the Words
primitives; this module evaluates it for one word at a time, which is what
re-deriving a candidate set from a full history needs.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple

from .validation import ABSENT, CORRECT, PRESENT

# History is a sequence of (guess, feedback) tuples.
History = Iterable[Tuple[str, str]]


@dataclass(frozen=True)
class LetterMarks:
    """All feedback for one distinct letter of a guess."""
    letter: str
    correct: Tuple[int, ...]
    present: Tuple[int, ...]
    absent: Tuple[int, ...]

    @property
    def confirmed(self) -> int:
        """Occurrences of the letter the target is known to contain."""
        return len(self.correct) + len(self.present)


def group_marks(guess: str, feedback: str) -> List[LetterMarks]:
    """
    Group positions by letter, in order of first occurrence.

    Each letter is visited once: its later positions go into `handled` so
    repeated letters are accounted for together, without touching the inputs.
    """
    handled: Set[int] = set()
    out: List[LetterMarks] = []

    for i, c in enumerate(guess):
        if i in handled:
            continue
        positions = [j for j in range(i, len(guess)) if guess[j] == c]
        handled.update(positions)
        out.append(LetterMarks(
            letter=c,
            correct=tuple(j for j in positions if feedback[j] == CORRECT),
            present=tuple(j for j in positions if feedback[j] == PRESENT),
            absent=tuple(j for j in positions if feedback[j] == ABSENT),
        ))

    return out


def is_consistent(word: str, guess: str, feedback: str) -> bool:
    """
    Return True if `word` could be the target given that `guess` received
    `feedback`. Words of a different length are never consistent.
    """
    word = word.strip().lower()
    guess = guess.strip().lower()
    feedback = feedback.strip().lower()
    if len(word) != len(guess) or len(feedback) != len(guess):
        return False

    counts = Counter(word)
    for m in group_marks(guess, feedback):
        c = m.letter
        if any(word[p] != c for p in m.correct):
            return False
        if any(word[p] == c for p in m.present + m.absent):
            return False
        if m.absent:
            # Absent mark: the confirmed count is exact (zero when unconfirmed)
            if counts[c] != m.confirmed:
                return False
        elif counts[c] < m.confirmed:
            return False

    return True


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only words (length == N) consistent with every (guess, feedback)
    in `history`.

    Args:
      words   : iterable of candidate words (usually the full dictionary)
      history : iterable of (guess, feedback) seen so far
      N       : expected word length

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        w = w.strip().lower()

        # Basic hygiene: skip anything that isn't a clean N-letter alpha token
        if len(w) != N or not w.isalpha():
            continue

        if all(is_consistent(w, g, f) for g, f in history):
            out.append(w)

    return out
