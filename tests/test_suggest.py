import pytest

from fli.suggest import levenshtein, max_distance_for, suggest_similar


@pytest.mark.parametrize(
    "s1, s2, distance",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("statu", "status", 1),
        ("commit", "commit", 0),
        ("gumbo", "gambol", 2),
    ],
)
def test_levenshtein(s1, s2, distance):
    assert levenshtein(s1, s2) == distance
    assert levenshtein(s2, s1) == distance


@pytest.mark.parametrize(
    "token, expected", [("", 1), ("a", 1), ("ab", 1), ("abcd", 2), ("abcdefgh", 2)]
)
def test_max_distance_for(token, expected):
    assert max_distance_for(token) == expected


def test_suggestions_ranked_by_distance():
    assert suggest_similar("statu", ["status", "commit", "checkout"]) == ["status"]
    assert suggest_similar("chekout", ["commit", "checkout", "checkouts"]) == [
        "checkout",
        "checkouts",
    ]


def test_ties_keep_registration_order():
    assert suggest_similar("bat", ["cat", "hat", "bar"]) == ["cat", "hat", "bar"]
    assert suggest_similar("bat", ["bar", "hat", "cat"]) == ["bar", "hat", "cat"]


def test_no_suggestions_beyond_threshold():
    assert suggest_similar("xyz", ["status", "commit"]) == []
    assert suggest_similar("push", ["pull"], max_distance=1) == []
    assert suggest_similar("push", ["pull"], max_distance=2) == ["pull"]
