"""
Interactive terminal session.

The user plays Wordle elsewhere. Each round the client shows the remaining
candidates (or, in auto mode, picks the most frequent one itself), reads
the guessed word and the feedback the game gave for it, and narrows the
candidate store. The session ends when the feedback is all 'g' or when no
dictionary word is left.

Input/output go through `input_fn`/`output_fn` (default: input/print) so a
scripted session can drive the client in tests.
"""

from __future__ import annotations

import random
from typing import Callable, List, Optional, Tuple

from wordle_assist.errors import InvalidArgument
from wordle_assist.engine import CandidateStore, FEEDBACK_CHARS, is_solved
from wordle_assist.engine.validation import is_feedback, validate_guess
from wordle_assist.datasets import DEFAULT_DICTIONARY, load_store


class WordleClient:
    def __init__(
            self,
            word_size: int = 5,
            display_limit: int = 10,
            auto: bool = False,
            store: Optional[CandidateStore] = None,
            *,
            input_fn: Callable[[str], str] = input,
            output_fn: Callable[[str], None] = print,
            rng: Optional[random.Random] = None,
    ):
        self.word_size = int(word_size)
        self.display_limit = int(display_limit)
        self.auto = auto
        self.store = store if store is not None else load_store(DEFAULT_DICTIONARY, self.word_size)
        self.history: List[Tuple[str, str]] = []
        self._input = input_fn
        self._out = output_fn
        self.rng = rng or random.Random()

    def run(self) -> bool:
        """
        Play until solved (True) or out of candidates (False).
        """
        self._out(f"Welcome! word size is: [{self.word_size}], "
                  f"display limit is: [{self.display_limit}]")
        while True:
            if self.store.size() == 0:
                self._out("Unable to find any suitable words from dictionary")
                return False

            self.print_update()
            guess = self.get_word()
            status = self.get_status()

            if is_solved(status):
                self._out("Congratulations! you eventually found the word!")
                return True

            try:
                self.store.update(guess, status)
            except InvalidArgument as e:
                # Store untouched; ask again for this round.
                self._out(str(e))
                continue
            self.history.append((guess, status))

    # -- input --

    def get_valid_input(self, prompt: str, ok: Callable[[str], bool], expected: str) -> str:
        """Prompt until `ok` accepts the (stripped, lower-cased) answer."""
        while True:
            text = self._input(prompt).strip().lower()
            if ok(text):
                return text
            self._out(f"Invalid input [{text}], expected {expected}")

    def _read_guess(self, prompt: str) -> str:
        return self.get_valid_input(
            prompt, lambda t: validate_guess(t, self.word_size),
            f"a word of exactly [{self.word_size}] letters")

    def get_word(self) -> str:
        """
        The word tried in the game. Auto mode picks the top candidate;
        otherwise the user types it, with one extra chance if what they
        typed looks like a feedback string.
        """
        if self.auto:
            guess = self.store.candidate_words(1)[0]
            self._out(f"Try this word: {guess}")
            return guess

        word = self._read_guess("Enter the selected word: ")
        if is_feedback(word, self.word_size):
            ans = self.get_valid_input(
                "Did you just enter status instead of words (y/n)? ",
                lambda t: t in ("y", "n"), "y or n")
            if ans == "y":
                return self._read_guess(
                    "Okay! Try again (last chance though)! Enter the selected word: ")
        return word

    def get_status(self) -> str:
        return self.get_valid_input(
            "Enter the status of previous word: ", lambda t: is_feedback(t, self.word_size),
            f"exactly [{self.word_size}] of [{FEEDBACK_CHARS}]")

    # -- output --

    def print_update(self) -> None:
        n = self.store.size()
        if n > self.display_limit:
            self._out(f"There are {n} possible words, try one of these: ")
        else:
            self._out(f"Only following {n} possible words remaining: ")
        if self.auto:
            return
        for word in self.sample_words():
            self._out(word)

    def sample_words(self) -> List[str]:
        """
        Up to `display_limit` candidates drawn uniformly without replacement;
        every candidate when there are few enough.
        """
        words = self.store.words()
        if len(words) > self.display_limit:
            return self.rng.sample(words, self.display_limit)
        return words
