from __future__ import annotations
from typing import Callable, Dict, List, Type

from wordle_assist.errors import IndexOutOfRange

# ---- Global registry of candidate-list implementations ----
REGISTRY: Dict[str, Type["Words"]] = {}


def register(cls: Type["Words"]) -> Type["Words"]:
    """
    Decorator: @register on a Words class adds it to REGISTRY by its `id`.
    """
    wid = getattr(cls, "id", None)
    if not wid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if wid in REGISTRY:
        raise ValueError(f"Duplicate words id: {wid}")
    REGISTRY[wid] = cls
    return cls


# ---- Base class that candidate lists inherit ----
class Words:
    """
    A shrinking list of candidate words, all `word_size` letters long.

    Subclasses decide how entries are stored and ordered; they only need to
    implement `_filter`, `_word` and `_entries`. Every primitive below
    removes entries and never adds any.
    """
    id = "base"
    name = "Base"

    def __init__(self, word_size: int):
        self.word_size = int(word_size)

    # -- storage hooks --

    def _entries(self) -> list:
        raise NotImplementedError("Override in subclass")

    def _word(self, entry) -> str:
        raise NotImplementedError("Override in subclass")

    def _filter(self, remove: Callable[[str], bool]) -> None:
        """Drop every entry whose word satisfies `remove` (order kept)."""
        raise NotImplementedError("Override in subclass")

    def _validate_index(self, pos: int) -> None:
        if not 0 <= pos < self.word_size:
            raise IndexOutOfRange(
                f"Index [{pos}] must be less than word size [{self.word_size}]")

    # -- filtering primitives --

    def exists(self, c: str, pos: int | None = None) -> None:
        """Keep only words containing `c` (at `pos`, when given)."""
        if pos is None:
            self._filter(lambda w: c not in w)
        else:
            self._validate_index(pos)
            self._filter(lambda w: w[pos] != c)

    def does_not_exist(self, c: str, pos: int | None = None) -> None:
        """Remove words containing `c` (at `pos`, when given)."""
        if pos is None:
            self._filter(lambda w: c in w)
        else:
            self._validate_index(pos)
            self._filter(lambda w: w[pos] == c)

    def remove_if_at_least_n(self, c: str, n: int) -> None:
        """Remove words holding `n` or more copies of `c`."""
        self._filter(lambda w: w.count(c) >= n)

    def remove_if_fewer_than_n(self, c: str, n: int) -> None:
        """Remove words holding fewer than `n` copies of `c`."""
        self._filter(lambda w: w.count(c) < n)

    # -- accessors --

    def count_all(self) -> int:
        return len(self._entries())

    def __len__(self) -> int:
        return self.count_all()

    def words_up_to(self, n: int) -> List[str]:
        """
        First `n` words in natural order; all of them if fewer remain.
        Words are materialized on the fly, so large `n` costs O(n).
        """
        return [self._word(e) for e in self._entries()[:max(0, n)]]

    def all_words(self) -> List[str]:
        return [self._word(e) for e in self._entries()]

    def copy(self) -> "Words":
        """An independent list holding the same remaining entries."""
        return type(self)(list(self._entries()), word_size=self.word_size)
