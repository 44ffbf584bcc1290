"""
Dictionary validator for wordle-assist.

What this module does:
- Validate one dictionary file for word length N, either a plain word list
  (one word per line) or a ranked list ('word,count' per line).
- Enforce formatting rules (lowercase, a–z only, integer counts).
- Count words of other lengths (dropped by the store, not an error).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- For ranked lists, check the counts are in descending order.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordle_assist.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary(5, "wordle_assist/datasets/data/wordle_answers_5.txt", ranked=False)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from wordle_assist.errors import DictionaryFormatError
from .io import parse_ranked_line


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    ranked: bool         # 'word,count' format?
    count: int           # number of VALID N-letter words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid N-letter words
    other_length: int    # well-formed words of a different length
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for one dictionary."""
    N: int
    dictionary: FileReport
    sorted_by_rank: Optional[bool]   # None for plain lists
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int, ranked: bool) -> Tuple[List[str], List[int], int, int]:
    """
    Load entries from a dictionary file and validate them.

    Rules:
      - one entry per line ('word' or 'word,count')
      - word must be lowercase a–z
      - count must be an integer
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, counts, other_length, invalid_count)
    """
    valid: List[str] = []
    counts: List[int] = []
    other = 0
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            if not line:
                invalid += 1
                continue

            if ranked:
                try:
                    w, n = parse_ranked_line(line)
                except DictionaryFormatError:
                    invalid += 1
                    continue
                # parse_ranked_line lowercases; require the raw token to match
                if line.partition(",")[0].strip() != w:
                    invalid += 1
                    continue
            else:
                w, n = line, 0

            if w.lower() != w or not w.isalpha():
                invalid += 1
            elif len(w) != N:
                other += 1
            else:
                valid.append(w)
                counts.append(n)

    return valid, counts, other, invalid


def _as_dict(rep: ValidationReport) -> Dict:
    """Dataclass → plain dict (stable ordering)."""
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(N: int, path: str, ranked: bool = True) -> Dict:
    """
    Validate a dictionary file for word length N.

    Parameters
    ----------
    N : int
        Word length (e.g., 5).
    path : str
        Dictionary file.
    ranked : bool
        True for 'word,count' lines, False for one word per line.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema); `passed`
        requires an existing file, at least one N-letter word and no invalid
        lines. Duplicates and rank order only add `issues`.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        rep = ValidationReport(
            N=N,
            dictionary=FileReport(str(path), False, ranked, 0, "", 0, 0, 0),
            sorted_by_rank=None,
            passed=False,
            issues=issues,
        )
        return _as_dict(rep)

    words, counts, other, invalid = _load_and_check(p, N, ranked)

    report = FileReport(
        path=str(p),
        exists=True,
        ranked=ranked,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        other_length=other,
        invalid_lines=invalid,
    )

    sorted_by_rank: Optional[bool] = None
    if ranked:
        sorted_by_rank = all(a >= b for a, b in zip(counts, counts[1:]))
        if not sorted_by_rank:
            issues.append("counts are not in descending order (store will re-sort)")

    if report.count == 0:
        issues.append(f"dictionary contains 0 valid {N}-letter words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if report.count != report.unique_count:
        issues.append("dictionary contains duplicate words")

    passed = report.count > 0 and invalid == 0

    rep = ValidationReport(
        N=N,
        dictionary=report,
        sorted_by_rank=sorted_by_rank,
        passed=passed,
        issues=issues,
    )
    return _as_dict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=268 (uniq=268, other=0, invalid=0, sha=abc123...) | ranked=True | OK
    """
    N = report["N"]
    d = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (d.get("sha256") or "")[:12]
    return (
        f"N={N} | words={d['count']} (uniq={d['unique_count']}, other={d['other_length']}, "
        f"invalid={d['invalid_lines']}, sha={sha}) | ranked={d['ranked']} | {status}"
    )
