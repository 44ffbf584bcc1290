import pytest
from wordle_assist.words import PlainWords, RankedWords, create_words, get_words_ids, register, Words
from wordle_assist.errors import IndexOutOfRange

WORDS = ["about", "other", "which", "their", "there", "apple", "eerie"]


def _all(kind):
    if kind == "plain":
        return create_words("plain", 5, WORDS)
    return create_words("ranked", 5, [(w, 100 - i) for i, w in enumerate(WORDS)])


def _is_descending(pairs):
    counts = [n for _, n in pairs]
    return all(a >= b for a, b in zip(counts, counts[1:]))


@pytest.fixture(params=["plain", "ranked"])
def words(request):
    return _all(request.param)


def test_registry():
    assert get_words_ids() == ["plain", "ranked"]
    with pytest.raises(ValueError):
        create_words("frequent", 5, WORDS)
    with pytest.raises(ValueError):
        @register
        class Again(Words):
            id = "plain"


def test_exists(words):
    words.exists("a")
    assert words.all_words() == ["about", "apple"]


def test_exists_with_pos(words):
    words.exists("h", 1)
    assert words.all_words() == ["which", "their", "there"]


def test_does_not_exist(words):
    words.does_not_exist("e")
    assert words.all_words() == ["about", "which"]


def test_does_not_exist_with_pos(words):
    words.does_not_exist("t", 0)
    assert "their" not in words.all_words() and "there" not in words.all_words()
    assert words.count_all() == 5


def test_count_filters(words):
    words.remove_if_at_least_n("e", 2)
    assert words.all_words() == ["about", "other", "which", "their", "apple"]
    words.remove_if_fewer_than_n("h", 1)
    assert words.all_words() == ["other", "which", "their"]
    assert len(words) == 3


def test_index_out_of_range(words):
    with pytest.raises(IndexOutOfRange) as exc:
        words.exists("a", 5)
    assert str(exc.value) == "Index [5] must be less than word size [5]"
    with pytest.raises(IndexError):
        words.does_not_exist("a", -1)
    assert words.count_all() == len(WORDS)


def test_words_up_to(words):
    assert words.words_up_to(2) == ["about", "other"]
    assert words.words_up_to(100) == WORDS
    assert words.words_up_to(0) == []


def test_ranked_sorts_by_count_and_keeps_order_after_filtering():
    ranked = RankedWords([("crane", 3), ("about", 10), ("apple", 3), ("toolong", 50), ("other", 7)])
    assert ranked.data() == [("about", 10), ("other", 7), ("crane", 3), ("apple", 3)]
    ranked.exists("a")
    assert _is_descending(ranked.data())
    assert ranked.words_up_to(1) == ["about"]


def test_plain_drops_other_lengths():
    plain = PlainWords(["abc", "abcd", "xyz"], word_size=3)
    assert plain.all_words() == ["abc", "xyz"]
