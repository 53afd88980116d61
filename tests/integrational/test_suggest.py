import pytest

from base import read_list, read_suggestions, read_dictionary

DICTIONARY = read_dictionary('base')


@pytest.mark.parametrize('word,expected', read_suggestions('base.sug'))
def test_suggest(word, expected):
    assert DICTIONARY.suggest(word)[:len(expected)] == expected


@pytest.mark.parametrize('word', read_list('base.good'))
def test_no_suggestions_for_correct_words(word):
    assert DICTIONARY.suggest(word) == []


@pytest.mark.parametrize('word', read_list('base.wrong'))
def test_suggestions_are_correct_and_distinct(word):
    suggestions = DICTIONARY.suggest(word, 10)

    assert len(suggestions) <= 10
    assert len(set(suggestions)) == len(suggestions)
    assert all(DICTIONARY.lookup(suggestion) for suggestion in suggestions)
