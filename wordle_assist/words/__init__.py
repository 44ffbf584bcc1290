from __future__ import annotations
from typing import Iterable, List
from .base import Words, REGISTRY, register

from . import plain  # noqa: F401
from . import ranked  # noqa: F401
from .plain import PlainWords
from .ranked import RankedWords


def create_words(kind: str, word_size: int, entries: Iterable) -> Words:
    """
    Factory: build a registered candidate list by id ("plain" or "ranked").
    """
    try:
        cls = REGISTRY[kind]
    except KeyError as e:
        raise ValueError(
            f"Unknown words id: {kind}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(entries, word_size=word_size)


def get_words_ids() -> List[str]:
    """
    Return all registered words ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["Words", "PlainWords", "RankedWords", "register", "create_words", "get_words_ids"]
