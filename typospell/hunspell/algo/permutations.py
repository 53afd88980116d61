"""
Note: the only "permutation" the suggest uses besides plain edit distance is the replacement
table of the dictionary, so this module is small.
"""

from typing import Iterator, List

from typospell.hunspell.data import aff


def replchars(word: str, reptable: List[aff.RepPattern]) -> Iterator[str]:
    """
    Uses :attr:`aff.REP <typospell.hunspell.data.aff.Aff.REP>` table (typical misspellings) to replace
    in the word provided, one occurrence at a time. If the pattern's replacement contains "_", it
    means replacing to " " (so "alot" might become "a lot", and it is up to the caller to check
    whether that is a known word).
    """

    if len(word) < 2 or not reptable:
        return

    for pattern in reptable:
        for match in pattern.regexp.finditer(word):
            yield word[:match.start()] + pattern.replacement.replace('_', ' ') + word[match.end():]
