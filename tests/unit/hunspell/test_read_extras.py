from typospell.hunspell.data.prefixes import PrefixRule
from typospell.hunspell.readers import read_prefixes, read_wordlist


def test_wordlist():
    wordlist = read_wordlist("the\t23135851162\nof\t13151942776\nbroken\ncat\tmany\nwhat\t0.5")

    assert wordlist.frequencies == {'the': 23135851162, 'of': 13151942776, 'what': 0.5}
    assert len(wordlist) == 3
    assert wordlist.weight('of') == 13151942776
    assert wordlist.weight('missing') == 0


def test_prefixes():
    rules = read_prefixes("""
        # prefix  replacement  condition
        меді      и
        медъ      0            [юёея]
        не
        про       [
        """)

    assert rules == [
        PrefixRule('меді', 'и'),
        PrefixRule('медъ', '', '[юёея]'),
        PrefixRule('не'),
    ]


def test_prefix_rule():
    rule = PrefixRule('медъ', '', '[юёея]')

    assert rule.strip('медъясно') == 'ясно'
    assert rule.strip('ясно') is None
    assert rule.allows('ясно')
    assert not rule.allows('буква')

    assert PrefixRule('меді', 'и').strip('медіволга') == 'иволга'
    assert PrefixRule('не').allows('')
