import pytest

from clarity.scoring import SortOrder, assemble, score, total_score


@pytest.mark.parametrize("word,points", [
    ("a", 0),
    ("at", 0),
    ("cat", 1),
    ("cats", 1),
    ("crate", 2),
    ("crates", 3),
    ("catbird", 5),
    ("notebook", 11),
    ("notebooks", 11),
])
def test_score(word, points):
    assert score(word) == points


def test_assemble_alpha_dedupes():
    assert assemble(["cat", "as", "cat", "at"]) == ["as", "at", "cat"]


def test_assemble_score_order():
    words = ["at", "cat", "crate", "bat", "notebook", "as", "catbird"]
    assert assemble(words, SortOrder.SCORE) == ["notebook", "catbird", "crate", "bat", "cat", "as", "at"]


def test_assemble_score_order_law():
    words = ["zzz", "aaaa", "bbbbbbb", "cc", "ddddd", "eeeeeeeee", "ffff", "a"]
    result = assemble(words, "score")
    for a, b in zip(result, result[1:]):
        assert score(a) > score(b) or (score(a) == score(b) and a < b)


def test_assemble_max_results():
    assert assemble(["c", "b", "a"], max_results=2) == ["a", "b"]
    assert assemble(["c", "b", "a"], max_results=0) == ["a", "b", "c"]


def test_assemble_rejects_unknown_order():
    with pytest.raises(ValueError):
        assemble(["a"], "length")


def test_total_score_counts_each_word_once():
    assert total_score(["cat", "cat", "crate", "at"]) == 3
