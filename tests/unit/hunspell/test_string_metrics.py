import pytest

from typospell.hunspell.algo.string_metrics import levenshtein


@pytest.mark.parametrize('s1,s2,distance', [
    ('cat', 'cat', 0),
    ('', '', 0),
    ('cat', 'cats', 1),
    ('cat', 'ct', 1),
    ('cat', 'cut', 1),
    ('helo', 'hello', 1),
    ('kitten', 'sitting', 3),
    ('', 'abc', 3),
    ('abc', '', 3),
])
def test_levenshtein(s1, s2, distance):
    assert levenshtein(s1, s2) == distance
    assert levenshtein(s2, s1) == distance


def test_levenshtein_limit():
    assert levenshtein('kitten', 'sitting', limit=2) == 3
    assert levenshtein('a', 'abcdef', limit=2) == 3
    assert levenshtein('helo', 'hello', limit=2) == 1
