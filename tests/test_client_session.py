import random
from wordle_assist.client import WordleClient
from wordle_assist.engine import CandidateStore

SMALL = ["abc", "bcd", "pqr", "abf", "abr"]


def _client(answers, words=SMALL, **kw):
    """Client fed by a scripted list of answers; returns (client, output lines)."""
    feed = iter(answers)
    out = []
    client = WordleClient(
        3, kw.pop("display_limit", 10), store=CandidateStore(3, words),
        input_fn=lambda prompt: next(feed), output_fn=out.append,
        rng=random.Random(0), **kw,
    )
    return client, out


def test_session_solves():
    client, out = _client(["abf", "ggb", "abc", "ggb", "abr", "ggg"])
    assert client.run() is True
    assert client.history == [("abf", "ggb"), ("abc", "ggb")]
    assert client.store.words() == ["abr"]
    assert out[-1] == "Congratulations! you eventually found the word!"
    assert "Only following 1 possible words remaining: " in out


def test_session_runs_out_of_words():
    client, out = _client(["pqr", "ggb"])
    assert client.run() is False
    assert out[-1] == "Unable to find any suitable words from dictionary"


def test_reprompts_on_bad_input():
    # wrong length, then non-letters, then a valid word; bad status first too
    client, out = _client(["abcd", "a1c", "abf", "ggx", "ggb", "abr", "ggg"])
    assert client.run() is True
    assert sum(1 for line in out if line.startswith("Invalid input")) == 3
    assert client.history == [("abf", "ggb")]


def test_status_typed_as_word_gets_another_chance():
    client, _ = _client(["bgy", "y", "abf", "ggb", "ggg", "ggg"])
    assert client.get_word() == "abf"
    assert client.get_status() == "ggb"

    # answering 'n' keeps what was typed
    client, _ = _client(["byb", "n"])
    assert client.get_word() == "byb"


def test_print_update_samples_when_many():
    client, out = _client([], display_limit=2)
    client.print_update()
    assert out[0] == "There are 5 possible words, try one of these: "
    shown = out[1:]
    assert len(shown) == 2 and len(set(shown)) == 2
    assert set(shown) <= set(SMALL)


def test_auto_mode_picks_top_candidate():
    ranked = [("abc", 10), ("abr", 30), ("abf", 20), ("pqr", 5)]
    # only feedback is typed; the client picks abr, then abf, then abc
    client, out = _client(["ggb", "ggb", "ggg"], words=ranked, auto=True)
    assert client.run() is True
    assert [line for line in out if line.startswith("Try this word")] == [
        "Try this word: abr", "Try this word: abf", "Try this word: abc",
    ]


def test_guess_must_be_letters_of_the_right_width():
    client, out = _client(["a-c", " ABF ", "ggb", "abr", "ggg"])
    assert client.run() is True
    assert "Invalid input [a-c], expected a word of exactly [3] letters" in out
    assert client.history == [("abf", "ggb")]
