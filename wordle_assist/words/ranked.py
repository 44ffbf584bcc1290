"""
Frequency-ranked word list.

Entries are (word, count) pairs, e.g. usage counts from the Kaggle English
word frequency corpus. The list is kept sorted by count, most frequent
first, so the first suggestions are the words a human is most likely to know.
The count never influences which words survive filtering.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Tuple
from .base import Words, register

# (word, count)
RankedEntry = Tuple[str, int]


@register
class RankedWords(Words):
    id = "ranked"
    name = "Frequency-ranked word list"

    def __init__(self, entries: Iterable[RankedEntry], word_size: int = 5):
        super().__init__(word_size)
        kept = [(w, int(n)) for w, n in entries if len(w) == self.word_size]
        # Stable: equal counts keep their input order.
        self._entries_list: List[RankedEntry] = sorted(kept, key=lambda e: -e[1])

    def data(self) -> List[RankedEntry]:
        """The remaining (word, count) pairs, most frequent first."""
        return list(self._entries_list)

    def _entries(self) -> List[RankedEntry]:
        return self._entries_list

    def _word(self, entry: RankedEntry) -> str:
        return entry[0]

    def _filter(self, remove: Callable[[str], bool]) -> None:
        self._entries_list = [e for e in self._entries_list if not remove(e[0])]
