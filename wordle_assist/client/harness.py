"""
Automatic play against known answers.

- choose_guess: pick the next word from a CandidateStore ("top" = first in
  natural order, i.e. most frequent for ranked lists; "random" = uniform).
- run_case:  play one puzzle (one hidden answer) to the end.
- run_batch: run many puzzles in sequence (optionally a sample prefix).

Feedback comes from `score`, so these runs measure how fast filtering alone
converges. Functions are UI-agnostic; apps/cli/simulate.py adds progress
reporting and file output.
"""

from __future__ import annotations
import random
from typing import Callable, Dict, Iterable, List, Tuple

from wordle_assist.engine import CandidateStore, score, is_solved

# Wordle's turn budget.
WORDLE_MAX_TURNS = 6

STRATEGIES = ("top", "random")


def _assert_turns(max_turns: int) -> None:
    """Guardrail: a game needs at least one turn."""
    if max_turns < 1:
        raise ValueError(f"max_turns must be at least 1; got {max_turns}")


def choose_guess(store: CandidateStore, strategy: str = "top",
                 rng: random.Random | None = None) -> str:
    """
    Pick the next guess among the remaining candidates.
    Raises ValueError on an unknown strategy or an empty store.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy: {strategy}. Available: {list(STRATEGIES)}")
    if store.size() == 0:
        raise ValueError("No candidates left to choose from")
    if strategy == "top":
        return store.candidate_words(1)[0]
    rng = rng or random.Random()
    words = store.words()
    return words[rng.randrange(len(words))]


def run_case(
        answer: str,
        *,
        dictionary: Iterable,
        N: int,
        strategy: str = "top",
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until solved, out of turns, or out of candidates.

    Args:
        answer:      the hidden word for this case
        dictionary:  words, or (word, count) pairs, to start the store from
        N:           word length
        strategy:    "top" or "random"
        max_turns:   turn budget
        seed:        RNG seed for the "random" strategy

    Returns:
        dict with keys:
            success (bool), guesses (int), remaining (int),
            history (list[(guess, feedback)]),
            trail (list[int]: candidates left before each guess),
            answer (str), strategy (str)
    """
    _assert_turns(max_turns)
    answer = answer.strip().lower()

    store = CandidateStore(N, dictionary)
    rng = random.Random(seed)
    history: List[Tuple[str, str]] = []
    trail: List[int] = []
    success = False

    for _ in range(max_turns):
        # Answer missing from the dictionary: nothing left to try.
        if store.size() == 0:
            break

        trail.append(store.size())
        guess = choose_guess(store, strategy, rng)
        feedback = score(guess, answer)
        history.append((guess, feedback))

        if is_solved(feedback):
            success = True
            break

        store.update(guess, feedback)

    return {
        "success": success, "guesses": len(history), "remaining": store.size(),
        "history": history, "trail": trail, "answer": answer,
        "strategy": strategy,
    }


def run_batch(
        answers: List[str],
        *,
        dictionary: Iterable,
        N: int,
        strategy: str = "top",
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
        on_case: Callable[[int, Dict], None] | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    (after filtering to length N) are used to speed up quick experiments.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases. 'on_case(index, result)' is
    called after every finished case (1-based index), e.g. to drive a progress bar.
    """
    _assert_turns(max_turns)
    dictionary = list(dictionary)

    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        result = run_case(
            ans, dictionary=dictionary, N=N, strategy=strategy,
            max_turns=max_turns, seed=case_seed,
        )
        out.append(result)
        if on_case is not None:
            on_case(idx, result)
    return out
