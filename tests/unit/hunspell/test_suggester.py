import pytest

from typospell.hunspell import Dictionary
from typospell.hunspell.algo.suggest import Suggestion

AFF = """
NOSUGGEST !!
KEEPCASE KC
ONLYINCOMPOUND OC

SFX AB Y 1
SFX AB 0 s/CD .

SFX CD Y 1
SFX CD 0 ' .

PFX UN Y 1
PFX UN 0 un .

REP 2
REP shun tion
REP ^alot$ a_lot
"""

DIC = """
cat/AB
happy/UN
hello
help
damn/!!
Paris/KC
shine/OC
nation
a lot
"""


@pytest.fixture(scope='module')
def dictionary():
    return Dictionary.load(AFF, DIC)


def test_basic(dictionary):
    assert dictionary.suggest('helo') == ['hello', 'help']
    assert dictionary.suggest('cts') == ['cats', "cats'"]


def test_internal(dictionary):
    assert list(dictionary.suggester.suggestions('helo')) == [
        Suggestion('hello', 1, 'stem'),
        Suggestion('help', 1, 'stem'),
    ]


def test_correct_word(dictionary):
    assert dictionary.suggest('hello') == []
    assert dictionary.suggest('cats') == []


def test_limit(dictionary):
    assert dictionary.suggest('cts', 1) == ['cats']
    assert dictionary.suggest('cts', 0) == []
    assert dictionary.suggest('cts', -1) == []


def test_roots_are_not_suggested(dictionary):
    # "cat/AB" is only the root of "cats"
    assert dictionary.suggest('ca') == ['cats']
    assert all(suggestion.text != 'cat' for suggestion in dictionary.suggester.suggestions('ca'))


def test_prefixed(dictionary):
    assert dictionary.suggest('unhapy') == ['unhappy']


def test_capitalized(dictionary):
    assert dictionary.suggest('Helo')[:2] == ['Hello', 'Help']
    assert dictionary.suggest('Pariss') == ['Paris']
    assert dictionary.suggest('pariss') == ['Paris']


def test_excluded_words(dictionary):
    assert 'damn' not in dictionary.suggest('dam')
    assert 'shine' not in dictionary.suggest('shne')


def test_replacement_table(dictionary):
    # "nation" is 3 edits away from "nashun", it is found by REP only
    assert dictionary.suggest('nashun') == ['nation']
    assert dictionary.suggest('alot')[0] == 'a lot'


def test_frequency():
    dictionary = Dictionary.load(AFF, DIC, 'help\t100\nhello\t10')

    assert dictionary.suggest('helo') == ['help', 'hello']
    assert dictionary.suggest('Helo')[:2] == ['Help', 'Hello']


def test_deterministic():
    cached = Dictionary.load(AFF, DIC)
    uncached = Dictionary.load(AFF, DIC, cache_size=0)

    for word in ['helo', 'cts', 'unhapy', 'Helo', 'nashun']:
        assert cached.suggest(word) == cached.suggest(word) == uncached.suggest(word)


def test_cache():
    dictionary = Dictionary.load(AFF, DIC, cache_size=2)

    dictionary.suggest('helo')
    dictionary.suggest('helo', 1)
    info = dictionary.suggester.ranked.cache_info()
    assert (info.hits, info.misses) == (1, 1)

    # correct words don't reach the cache
    dictionary.suggest('hello')
    assert dictionary.suggester.ranked.cache_info().misses == 1
