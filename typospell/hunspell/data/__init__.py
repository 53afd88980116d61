from . import aff, dic, prefixes, wordlist

__all__ = [
    "aff",
    "dic",
    "prefixes",
    "wordlist"
]
