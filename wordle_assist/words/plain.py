"""
Plain word list: candidates kept in the order they were supplied.
"""

from __future__ import annotations

from typing import Callable, Iterable, List
from .base import Words, register


@register
class PlainWords(Words):
    id = "plain"
    name = "Plain word list"

    def __init__(self, words: Iterable[str], word_size: int = 5):
        super().__init__(word_size)
        # Wrong-length words are dropped silently; duplicates are kept as given.
        self._words: List[str] = [w for w in words if len(w) == self.word_size]

    def _entries(self) -> List[str]:
        return self._words

    def _word(self, entry: str) -> str:
        return entry

    def _filter(self, remove: Callable[[str], bool]) -> None:
        self._words = [w for w in self._words if not remove(w)]
