from .scoring import score
from .constraints import filter_candidates, is_consistent
from .validation import validate_guess, validate_update, is_solved, FEEDBACK_CHARS
from .store import CandidateStore

__all__ = [
    "score", "filter_candidates", "is_consistent", "validate_guess",
    "validate_update", "is_solved", "FEEDBACK_CHARS", "CandidateStore",
]
