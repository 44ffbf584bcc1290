"""
Input validation for guesses and feedback strings.

Feedback alphabet (one symbol per letter of the guess):
  - 'b' : absent  (black/gray)
  - 'y' : present (yellow) = letter in the target, wrong position
  - 'g' : correct (green)  = letter in the target, this position

validate_update() enforces the preconditions of CandidateStore.update and
produces the exact diagnostic text callers (and users) see.
"""

from typing import Iterable, Optional, Set, Tuple

from wordle_assist.errors import InvalidArgument

ABSENT = "b"
PRESENT = "y"
CORRECT = "g"

# Order matters only for the error message.
FEEDBACK_CHARS = ABSENT + PRESENT + CORRECT


def validate_update(guess: str, feedback: str, word_size: int) -> Tuple[str, str]:
    """
    Normalize and check a (guess, feedback) pair.

    Returns the lower-cased, stripped pair. Raises InvalidArgument when
    either string does not have exactly `word_size` characters, or when the
    feedback uses a symbol outside FEEDBACK_CHARS.
    """
    g = guess.strip().lower()
    f = feedback.strip().lower()

    if len(g) != word_size or len(f) != word_size:
        raise InvalidArgument(
            f"Invalid number of characters in [{guess}], and/or [{feedback}], "
            f"they must contain exactly [{word_size}] characters"
        )

    if any(ch not in FEEDBACK_CHARS for ch in f):
        raise InvalidArgument(
            f"Invalid status characters in [{feedback}], "
            f"status characters must be from: [{FEEDBACK_CHARS}]"
        )

    return g, f


def validate_guess(word: str, N: int, allowed: Optional[Iterable[str]] = None) -> bool:
    """
    Return True if `word` is an acceptable guess: alphabetic, exact length N
    and, when `allowed` is given, one of the allowed words.

    Notes:
      - `allowed` can be a large list; a local set is built here for O(1)
        membership. Precompute a set at a higher level for tight loops.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if len(w) != N or not w.isalpha():
        return False

    if allowed is None:
        return True
    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set


def is_feedback(text: str, N: int) -> bool:
    """True if `text` looks like a feedback string of length N."""
    t = text.strip().lower()
    return len(t) == N and all(ch in FEEDBACK_CHARS for ch in t)


def is_solved(feedback: str) -> bool:
    """The puzzle is solved when every symbol is 'g'."""
    f = feedback.strip().lower()
    return bool(f) and all(ch == CORRECT for ch in f)
