"""
The module represents data from the dictionary (``*.dic``) file.

This text file has the following format:

.. code-block:: text

    3           # optional first line: number of entries
    hello
    cat/ABCD
    go/went gone/EFGH

See :class:`Word` for explanation about line shapes.

The format of codes is defined by :class:`Aff <typospell.hunspell.data.aff.Aff>`.

:class:`Dic` contains all the entries (converted to ``Word``) in the linear list, and also provides
the indexes used by lookup and suggest.

.. autoclass:: Dic

.. autoclass:: Word
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import List, Tuple, Iterator

from typospell.hunspell.algo.trie import Trie


@dataclass
class Word:
    """
    One entry of a .dic file. There are three shapes of entries:

    .. code-block:: text

        hello                       # just a stem, no rules apply to it
        cat/ABCD                    # stem with codes (AB and CD in "long" code format)
        go/went gone/EFGH           # stem, alternative surface forms, codes

    Alternative surface forms ("variants") share the codes of the stem: the affix rules are applied to
    each of them.
    """

    #: Word stem
    stem: str
    #: Codes of the rules applicable to the word, in order of the source
    flags: Tuple[str, ...] = ()
    #: Alternative surface forms of the stem
    variants: Tuple[str, ...] = ()

    def surfaces(self) -> Tuple[str, ...]:
        """
        Stem and all its variants (without repetitions).
        """
        return tuple(dict.fromkeys((self.stem, *self.variants)))

    def __repr__(self):
        return f"Word({self.stem}{' ' + ' '.join(self.variants) if self.variants else ''} /{','.join(self.flags)})"


@dataclass
class Dic:
    """
    Represents list of words from ``*.dic`` file. Each word is stored as an instance of :class:`Word`.

    Besides flat list of all words, on initialization also creates word indexes, see :attr:`index`
    and :attr:`trie`.

    **Data contents:**

    .. autoattribute:: words

    .. py:attribute:: index
        :type: Dict[str, List[Word]]

        All .dic file entries for some surface form (stem or variant).

    .. py:attribute:: trie
        :type: typospell.hunspell.algo.trie.Trie

        All surface forms, to fetch quickly those being prefixes of some word.

    **Querying** (used by lookup and suggest):

    .. automethod:: homonyms
    .. automethod:: has_flag
    .. automethod:: candidates

    **Dictionary creation**

    .. automethod:: append
    """

    #: List of all words from ``*.dic`` file
    words: List[Word]

    def __post_init__(self):
        self.index = defaultdict(list)
        self.trie = Trie()
        words, self.words = self.words, []
        for word in words:
            self.append(word)

    def homonyms(self, stem: str) -> List[Word]:
        """
        Returns all :class:`Word` instances with the same stem (or variant).
        """
        return self.index.get(stem, [])

    def has_flag(self, stem: str, flag: str, *, for_all: bool = False) -> bool:
        """
        If any/all of the homonyms have specified flag.

        Args:
            stem: Stem present in dictionary
            flag: Flag to test
            for_all: If ``True``, checks if **all** homonyms have this flag, if ``False``, checks if
                     at least one.
        """
        homonyms = self.homonyms(stem)
        if not homonyms:
            return False
        if for_all:
            return all(flag in homonym.flags for homonym in homonyms)
        return any(flag in homonym.flags for homonym in homonyms)

    def candidates(self, word: str) -> Iterator[Tuple[str, Word]]:
        """
        All pairs ``(surface, entry)`` where surface (stem or variant of the entry) is a prefix of the
        ``word``: those are the only entries from which the ``word`` can be produced by suffixes.
        """
        yield from self.trie.lookup(word)

    def append(self, word: Word):
        """
        Used by :meth:`read_dic <typospell.hunspell.readers.dic.read_dic>` to put the word into the
        dictionary.
        """
        self.words.append(word)
        for surface in word.surfaces():
            self.index[surface].append(word)
            self.trie.put(surface, (surface, word))

    def __repr__(self):
        return f'Dictionary(... {len(self.words)} words ...)'
