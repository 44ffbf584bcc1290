from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Tuple

from wordle_assist.errors import DictionaryFormatError
from wordle_assist.engine import CandidateStore
from wordle_assist.words import create_words, get_words_ids

# Official Wordle answer list, one word per line (see data/README.md).
DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_DICTIONARY = DATA_DIR / "wordle_answers_5.txt"
DEFAULT_KIND = "plain"


def read_lines(p: Path | str, ignore_empty: bool = True) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    lines = [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]
    if ignore_empty:
        lines = [ln for ln in lines if ln]
    return lines


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def read_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.
    """
    return [w.strip().lower() for w in read_lines(p) if w.strip()]


def parse_ranked_line(line: str) -> Tuple[str, int]:
    """
    Parse one 'word,count' line.

    Example: "about,1226734006" -> ("about", 1226734006)
    """
    word, sep, count = line.partition(",")
    if not sep:
        raise DictionaryFormatError(f"Couldn't find separator ',' in {line}")
    try:
        n = int(count.strip())
    except ValueError as e:
        raise DictionaryFormatError(f"Invalid count [{count}] in {line}") from e
    return word.strip().lower(), n


def read_ranked_words(p: Path | str) -> List[Tuple[str, int]]:
    """
    Read a 'word,count' file (one pair per line) into (word, count) tuples,
    in file order. Blank lines are skipped.
    """
    return [parse_ranked_line(ln) for ln in read_lines(p) if ln.strip()]


def read_dictionary(p: Path | str, kind: str = DEFAULT_KIND) -> list:
    """
    Read dictionary entries for a registered words kind: plain words for
    "plain", (word, count) pairs for "ranked".
    """
    if kind == "plain":
        return read_words(p)
    if kind == "ranked":
        return read_ranked_words(p)
    raise ValueError(f"Unknown words id: {kind}. Available: {get_words_ids()}")


def load_store(p: Path | str = DEFAULT_DICTIONARY, N: int = 5, kind: str = DEFAULT_KIND) -> CandidateStore:
    """
    Build a CandidateStore of N-letter words from a dictionary file.
    """
    return CandidateStore(N, create_words(kind, N, read_dictionary(p, kind)))
