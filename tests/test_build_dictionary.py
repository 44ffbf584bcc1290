import sys
from script import build_freq_dictionary as build
from wordle_assist.datasets import read_ranked_words, validate_dictionary


def test_collect_counts_filters_and_merges():
    lines = ["word,count", "about,100", "crane,7", "other,40", "cafés,9", "Crane,3", "abc,999", "junk"]
    assert build.collect_counts(lines, 5) == {"about": 100, "crane": 10, "other": 40}


def test_main_writes_sorted_dictionary(tmp_path, monkeypatch):
    src = tmp_path / "unigram_freq.csv"
    src.write_text("word,count\nthe,999\ncrane,7\nabout,100\nother,40\n", encoding="utf-8")
    out = tmp_path / "5_words_freq.txt"
    monkeypatch.setattr(sys, "argv", ["build", "--in", str(src), "--out", str(out), "--top", "2"])
    build.main()

    assert read_ranked_words(out) == [("about", 100), ("other", 40)]
    assert validate_dictionary(5, str(out))["sorted_by_rank"] is True
