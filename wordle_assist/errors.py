"""
Exception types raised by the engine.

InvalidArgument is the only error a driver should expect in normal play
(bad guess/feedback typed by a user); it is raised before any filtering,
so the candidate store is left untouched and the caller can simply re-prompt.
"""


class WordleError(Exception):
    """Base class for everything raised by wordle_assist."""


class InvalidArgument(WordleError, ValueError):
    """Guess or feedback has the wrong length or unknown status characters."""


class IndexOutOfRange(WordleError, IndexError):
    """A letter position outside the word; indicates a programming defect."""


class DictionaryFormatError(WordleError, ValueError):
    """A dictionary line that cannot be parsed."""
