"""
The main "suggest correction for this misspelling" module.

On a bird-eye view level, suggest does:

* selects dictionary entries which are close (by edit distance) to the misspelled word, or to its
  beginning of the same length: "hapyness" is close to "happy" even if they are far as a whole;
* produces all the forms of those entries (see :mod:`derive <typospell.hunspell.algo.derive>`),
  and keeps those within :data:`MAX_DISTANCE` from the misspelling;
* also tries the dictionary's replacement table (typical misspellings, ``REP`` directive);
* orders everything by distance, and then by word frequency (if the frequency list is known).

Results for each misspelling are memoized, so repeated suggest for the same word (like the
same typo underlined in several places of the document) is instant.

To follow algorithm details, start reading from :meth:`Suggest.__call__`

.. autoclass:: Suggest

.. autoclass:: Suggestion
    :members:

.. autodata:: MAX_DISTANCE
.. autodata:: DEFAULT_LIMIT
.. autodata:: CACHE_SIZE
"""

import functools
from typing import Dict, Iterator, List, Optional, Tuple

import dataclasses
from dataclasses import dataclass

from typospell.hunspell import data
from typospell.hunspell.algo import capitalization as cap, permutations as pmt
from typospell.hunspell.algo.capitalization import Type as CapType
from typospell.hunspell.algo.derive import SENTINEL_FLAGS, derive, rule_codes
from typospell.hunspell.algo.lookup import Lookup
from typospell.hunspell.algo.string_metrics import levenshtein

#: Maximum edit distance between the misspelling and the suggestion
MAX_DISTANCE = 2
#: Default maximum number of suggestions
DEFAULT_LIMIT = 5
#: Default number of misspellings to remember suggestions for
CACHE_SIZE = 1024


@dataclass
class Suggestion:
    """
    Suggestions is what Suggest produces internally to store enough information about some suggestion
    to order it against the others.
    """

    #: Suggestion itself
    text: str
    #: Edit distance to the misspelled word
    distance: int
    #: How it was found (``stem``, ``affix``, ``replchars``), for debugging
    kind: str

    def __repr__(self):
        return f"Suggestion[{self.kind}]({self.text}, {self.distance})"

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)


class Suggest:
    """
    ``Suggest`` object is created on :class:`Dictionary <typospell.hunspell.dictionary.Dictionary>` reading.
    Typically, you would not use it directly, but you might want for experiments::

        >>> dictionary = Dictionary.from_files('tests/integrational/fixtures/base')
        >>> suggest = dictionary.suggester

        >>> suggest('helo')
        ['hello', 'help']

        >>> [*suggest.suggestions('helo')]
        [Suggestion[stem](hello, 1), Suggestion[stem](help, 1)]

    Args:
        aff: Affix data
        dic: Dictionary words
        lookup: Word correctness check (suggestions for correct words are not produced, and ``REP``
                replacements are checked with it)
        wordlist: Word frequencies, to order the suggestions with the same distance
        cache_size: How many misspellings to remember suggestions for, ``0`` disables the memoization

    .. automethod:: __call__
    .. automethod:: suggestions
    .. automethod:: edit_suggestions
    .. automethod:: rep_suggestions
    """

    def __init__(self, aff: data.aff.Aff, dic: data.dic.Dic, lookup: Lookup,
                 wordlist: Optional[data.wordlist.Wordlist] = None, *, cache_size: int = CACHE_SIZE):
        self.aff = aff
        self.dic = dic
        self.lookup = lookup
        self.wordlist = wordlist or data.wordlist.Wordlist()

        flags = aff.flags
        excluded = {flag for flag in (flags.NOSUGGEST, flags.ONLYINCOMPOUND) if flag}
        self.words_for_suggest = [word for word in dic.words if not excluded.intersection(word.flags)]

        if cache_size > 0:
            self.ranked = functools.lru_cache(maxsize=cache_size)(self.ranked_internal)
        else:
            self.ranked = self.ranked_internal

    def __call__(self, word: str, limit: int = DEFAULT_LIMIT) -> List[str]:
        """
        Outer "public" interface: returns up to ``limit`` suggestions for the word, best first.
        Returns nothing for correct words.

        Args:
            word: Misspelled word
            limit: Maximum number of suggestions
        """

        word = word.strip()
        if limit <= 0 or not word or self.lookup(word):
            return []

        return [suggestion.text for suggestion in self.ranked(word)[:limit]]

    def ranked_internal(self, word: str) -> Tuple[Suggestion, ...]:
        """
        All suggestions for the word, ordered: by distance, then by frequency (more frequent first),
        then alphabetically. It is a tuple, so the memoized value can't be changed by the caller.
        """
        return tuple(sorted(
            self.suggestions(word),
            key=lambda suggestion: (suggestion.distance, -self.weight(suggestion.text), suggestion.text)
        ))

    def suggestions(self, word: str) -> Iterator[Suggestion]:
        """
        Produces all suggestions for the word, unordered, each text only once (with the smallest
        distance it was found with).

        If the word is capitalized, suggestions for its lowercase variant are produced too (with
        the first letter coerced back to upper: "Helo" => "Hello").
        """

        found: Dict[str, Suggestion] = {}

        def handle_found(suggestion):
            if suggestion.text == word:
                return
            known = found.get(suggestion.text)
            if known is None or suggestion.distance < known.distance:
                found[suggestion.text] = suggestion

        for suggestion in self.edit_suggestions(word):
            handle_found(suggestion)
        for suggestion in self.rep_suggestions(word):
            handle_found(suggestion)

        captype = cap.guess(word)
        if captype in (CapType.INIT, CapType.HUHINIT):
            lower = cap.lowerfirst(word)
            for suggestion in self.edit_suggestions(lower, allow_keepcase=False):
                handle_found(suggestion.replace(text=cap.coerce(suggestion.text, CapType.INIT)))
            for suggestion in self.rep_suggestions(lower):
                handle_found(suggestion.replace(text=cap.coerce(suggestion.text, CapType.INIT)))

        yield from found.values()

    def edit_suggestions(self, word: str, *, allow_keepcase: bool = True) -> Iterator[Suggestion]:
        """
        Suggestions by edit distance: dictionary stems (and variants) close to the word, or to
        its beginning, or to the word with a known prefix removed, and then all their forms close
        to the word. Stems with affix rule codes are only roots, so only their forms are suggested.

        Args:
            word: Misspelled word
            allow_keepcase: Whether the entries marked with ``KEEPCASE`` can be suggested
        """

        flags = self.aff.flags
        rules = self.aff.rules
        bases = [word, *self.lookup.deprefixed(word)]

        for entry in self.words_for_suggest:
            if not allow_keepcase and flags.KEEPCASE and flags.KEEPCASE in entry.flags:
                continue

            is_word = not rule_codes(entry.flags, rules) and not (
                flags.NEEDAFFIX and flags.NEEDAFFIX in entry.flags
            )

            for surface in entry.surfaces():
                if not any(self.similar(surface, base) for base in bases):
                    continue

                if is_word:
                    distance = levenshtein(surface, word, limit=MAX_DISTANCE)
                    if distance <= MAX_DISTANCE:
                        yield Suggestion(surface, distance, 'stem')

                for flag in entry.flags:
                    if flag in SENTINEL_FLAGS:
                        continue
                    for form in derive(surface, flag, rules):
                        distance = levenshtein(form, word, limit=MAX_DISTANCE)
                        if distance <= MAX_DISTANCE:
                            yield Suggestion(form, distance, 'affix')

    def rep_suggestions(self, word: str) -> Iterator[Suggestion]:
        """
        Suggestions by the replacement table: "shun" => "tion" (if there is ``REP shun tion``), if the
        result is a correct word. The distance of such suggestion is its real edit distance, so
        the replacement table can produce suggestions further than :data:`MAX_DISTANCE`.
        """
        for candidate in pmt.replchars(word, self.aff.REP):
            if candidate != word and self.lookup(candidate):
                yield Suggestion(candidate, levenshtein(candidate, word), 'replchars')

    @staticmethod
    def similar(surface: str, word: str) -> bool:
        """
        Whether the dictionary's surface form is close to the word, or to its beginning of the
        same length.
        """
        return (
            levenshtein(surface, word, limit=MAX_DISTANCE) <= MAX_DISTANCE or
            levenshtein(surface, word[:len(surface)], limit=MAX_DISTANCE) <= MAX_DISTANCE
        )

    def weight(self, text: str) -> float:
        return max(self.wordlist.weight(text), self.wordlist.weight(cap.lowerfirst(text)))
