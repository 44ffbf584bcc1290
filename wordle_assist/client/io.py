"""
Reporting for auto-play runs.

- summarize: solved count, guess distribution and how fast the candidate
  set shrinks turn by turn.
- write_csv: one row per turn (answer, guess, feedback, candidates left
  before the guess), ready for a spreadsheet or pandas.
"""

from __future__ import annotations

import csv
from collections import Counter
from pathlib import Path
from typing import Dict, List

CSV_FIELDS = ["answer", "strategy", "turn", "guess", "feedback", "candidates", "solved"]


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate run_case results.

    Returns a dict with:
      cases, solved, failed (answers not found), mean_guesses (solved games only),
      guess_histogram ({guesses: games}, solved games only),
      mean_candidates (per turn index, averaged over the games that reached it)
    """
    solved = [r for r in results if r["success"]]
    hist = Counter(r["guesses"] for r in solved)

    per_turn: Dict[int, List[int]] = {}
    for r in results:
        for turn, n in enumerate(r.get("trail", []), start=1):
            per_turn.setdefault(turn, []).append(n)

    return {
        "cases": len(results),
        "solved": len(solved),
        "failed": [r["answer"] for r in results if not r["success"]],
        "mean_guesses": (sum(r["guesses"] for r in solved) / len(solved)) if solved else 0.0,
        "guess_histogram": dict(sorted(hist.items())),
        "mean_candidates": {t: sum(v) / len(v) for t, v in sorted(per_turn.items())},
    }


def format_summary(summary: Dict) -> str:
    """Multi-line, human-readable form of summarize()."""
    lines = [
        f"Solved: {summary['solved']}/{summary['cases']} "
        f"(mean guesses {summary['mean_guesses']:.2f})",
    ]
    if summary["guess_histogram"]:
        dist = ", ".join(f"{k}: {v}" for k, v in summary["guess_histogram"].items())
        lines.append(f"Guesses: {dist}")
    if summary["mean_candidates"]:
        trail = " -> ".join(f"{v:.1f}" for v in summary["mean_candidates"].values())
        lines.append(f"Candidates per turn: {trail}")
    if summary["failed"]:
        shown = summary["failed"][:10]
        more = len(summary["failed"]) - len(shown)
        lines.append("Not found: " + ", ".join(shown) + (f" (+{more} more)" if more else ""))
    return "\n".join(lines)


def write_csv(results: List[Dict], path: str) -> str:
    """
    Write one row per played turn; columns are CSV_FIELDS.
    'candidates' is the number of words still possible before that guess.
    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in results:
            trail = r.get("trail", [])
            for turn, (guess, feedback) in enumerate(r["history"], start=1):
                w.writerow({
                    "answer": r["answer"],
                    "strategy": r.get("strategy", ""),
                    "turn": turn,
                    "guess": guess,
                    "feedback": feedback,
                    "candidates": trail[turn - 1] if turn <= len(trail) else "",
                    "solved": r["success"] and turn == len(r["history"]),
                })
    return str(p)
