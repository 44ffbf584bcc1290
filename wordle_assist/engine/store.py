"""
CandidateStore: the candidate set of one puzzle-solving session.

The store owns a Words list and narrows it with the feedback of each guess.
Candidates are only ever removed; the remaining count after an update is
never larger than before it.

Typical use:
    store = CandidateStore(3, ["abc", "bcd", "pqr", "abf", "abr"])
    store.update("abf", "ggb")   # -> 2  (abc, abr)
    store.update("abc", "ggb")   # -> 1  (abr)
"""

from __future__ import annotations

from typing import Iterable, List, Union

from wordle_assist.words import Words, create_words
from .constraints import group_marks
from .validation import validate_update


def _infer_kind(entries: list) -> str:
    """(word, count) pairs -> 'ranked'; plain strings -> 'plain'."""
    if entries and not isinstance(entries[0], str):
        return "ranked"
    return "plain"


class CandidateStore:
    def __init__(self, word_size: int, candidates: Union[Words, Iterable]):
        """
        Args:
          word_size  : length of every word in this session
          candidates : a Words instance, an iterable of words, or an
                       iterable of (word, count) pairs. Entries of any other
                       length are dropped.
        """
        self.word_size = int(word_size)
        if isinstance(candidates, Words):
            if candidates.word_size != self.word_size:
                raise ValueError(
                    f"Words list holds {candidates.word_size}-letter words; "
                    f"store expects {self.word_size}")
            # Private copy; the caller's list is never filtered.
            self._words = candidates.copy()
        else:
            entries = list(candidates)
            self._words = create_words(_infer_kind(entries), self.word_size, entries)

    @property
    def kind(self) -> str:
        return self._words.id

    def update(self, guess: str, feedback: str) -> int:
        """
        Remove every candidate inconsistent with `guess` having received
        `feedback`, and return the number of candidates left.

        Raises InvalidArgument (before filtering anything) on a length
        mismatch or a feedback symbol outside 'byg'.
        """
        guess, feedback = validate_update(guess, feedback, self.word_size)
        words = self._words

        for m in group_marks(guess, feedback):
            c = m.letter
            for pos in m.correct:
                words.exists(c, pos)
            for pos in m.present + m.absent:
                words.does_not_exist(c, pos)
            if m.present:
                words.exists(c)

            if m.absent:
                if m.confirmed == 0:
                    # Never confirmed anywhere in the guess: not in the target.
                    words.does_not_exist(c)
                else:
                    # Confirmed elsewhere: cap the count, don't eliminate.
                    words.remove_if_at_least_n(c, m.confirmed + 1)

            if m.present and m.confirmed > 1:
                words.remove_if_fewer_than_n(c, m.confirmed)

        return words.count_all()

    def size(self) -> int:
        return self._words.count_all()

    def __len__(self) -> int:
        return self.size()

    def candidate_words(self, limit: int) -> List[str]:
        """
        Up to `limit` candidates in natural order (most frequent first for a
        ranked list). O(limit) materialization.
        """
        return self._words.words_up_to(limit)

    def words(self) -> List[str]:
        """All remaining candidates; O(n)."""
        return self._words.all_words()
