import csv
import pytest
from wordle_assist.client import run_case, run_batch, choose_guess, summarize, format_summary, write_csv
from wordle_assist.engine import CandidateStore


def test_run_case_smoke():
    dictionary = ["crane", "raise", "stare", "trace", "cared"]
    r = run_case("cared", dictionary=dictionary, N=5, strategy="top")
    assert r["success"] is True
    assert r["history"] == [("crane", "gyyby"), ("cared", "ggggg")]
    assert r["guesses"] == 2


def test_run_case_answer_not_in_dictionary():
    r = run_case("zzzzz", dictionary=["crane", "raise", "stare"], N=5)
    assert r["success"] is False
    assert r["remaining"] == 0


def test_run_case_random_strategy_is_seeded():
    dictionary = ["crane", "raise", "stare", "trace", "cared"]
    a = run_case("stare", dictionary=dictionary, N=5, strategy="random", seed=7)
    b = run_case("stare", dictionary=dictionary, N=5, strategy="random", seed=7)
    assert a["history"] == b["history"]
    # every wrong guess eliminates itself, so five words need at most five turns
    assert a["success"] is True


def test_run_batch_ranked():
    dictionary = [("crane", 50), ("raise", 40), ("stare", 30), ("trace", 20), ("cared", 10)]
    answers = ["crane", "raise", "stare", "trace", "cared", "abc"]
    results = run_batch(answers, dictionary=dictionary, N=5, sample=4)
    assert [r["answer"] for r in results] == ["crane", "raise", "stare", "trace"]
    assert all(r["success"] for r in results)
    assert results[0]["guesses"] == 1


def test_choose_guess_errors():
    with pytest.raises(ValueError):
        choose_guess(CandidateStore(3, ["abc"]), strategy="entropy")
    with pytest.raises(ValueError):
        choose_guess(CandidateStore(3, []))
    with pytest.raises(ValueError):
        run_case("crane", dictionary=["crane"], N=5, max_turns=0)


def test_run_case_records_candidates_per_turn():
    r = run_case("cared", dictionary=["crane", "raise", "cared"], N=5)
    # crane/gyyby rules out raise (no c) but keeps cared
    assert r["trail"] == [3, 1]
    assert len(r["trail"]) == r["guesses"]


def test_run_batch_reports_each_case():
    seen = []
    dictionary = ["crane", "raise", "stare"]
    results = run_batch(["stare", "crane"], dictionary=dictionary, N=5,
                        on_case=lambda idx, r: seen.append((idx, r["answer"])))
    assert seen == [(1, "stare"), (2, "crane")]
    assert len(results) == 2


def test_summarize():
    results = [
        {"answer": "crane", "success": True, "guesses": 1, "history": [("crane", "ggggg")], "trail": [4]},
        {"answer": "stare", "success": True, "guesses": 3, "history": [], "trail": [4, 2, 1]},
        {"answer": "zzzzz", "success": False, "guesses": 0, "history": [], "trail": []},
    ]
    s = summarize(results)
    assert s["cases"] == 3 and s["solved"] == 2
    assert s["failed"] == ["zzzzz"]
    assert s["mean_guesses"] == 2.0
    assert s["guess_histogram"] == {1: 1, 3: 1}
    assert s["mean_candidates"] == {1: 4.0, 2: 2.0, 3: 1.0}

    text = format_summary(s)
    assert text.startswith("Solved: 2/3 (mean guesses 2.00)")
    assert "Candidates per turn: 4.0 -> 2.0 -> 1.0" in text
    assert "Not found: zzzzz" in text


def test_summarize_nothing_solved():
    s = summarize([])
    assert s["solved"] == 0 and s["mean_guesses"] == 0.0
    assert format_summary(s) == "Solved: 0/0 (mean guesses 0.00)"


def test_write_csv(tmp_path):
    r = run_case("cared", dictionary=["crane", "cared"], N=5)
    path = write_csv([r], str(tmp_path / "out" / "turns.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [(row["turn"], row["guess"], row["feedback"], row["candidates"]) for row in rows] == [
        ("1", "crane", "gyyby", "2"),
        ("2", "cared", "ggggg", "1"),
    ]
    assert [row["solved"] for row in rows] == ["False", "True"]
    assert {row["answer"] for row in rows} == {"cared"}


def test_simulate_cli(tmp_path, capsys):
    from apps.cli import simulate

    d = tmp_path / "dict.txt"
    d.write_text("crane\nraise\nstare\ntrace\ncared\n", encoding="utf-8")
    out = tmp_path / "turns.csv"
    rc = simulate.main(["--dictionary", str(d), "--csv", str(out), "--no-progress"])
    assert rc == 0

    printed = capsys.readouterr().out
    assert "Solved: 5/5" in printed
    assert "Candidates per turn: 5.0" in printed
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert sum(row["solved"] == "True" for row in rows) == 5


def test_simulate_cli_ranked_sample(tmp_path, capsys):
    from apps.cli import simulate

    d = tmp_path / "ranked.txt"
    d.write_text("crane,50\nraise,40\nstare,30\ntrace,20\ncared,10\n", encoding="utf-8")
    rc = simulate.main(["--dictionary", str(d), "--words", "ranked", "--sample", "2", "--no-progress"])
    assert rc == 0
    assert "Solved: 2/2" in capsys.readouterr().out


def test_simulate_cli_missing_dictionary(tmp_path):
    from apps.cli import simulate

    assert simulate.main(["--dictionary", str(tmp_path / "nope.txt"), "--no-progress"]) == 2
