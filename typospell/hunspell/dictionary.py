from __future__ import annotations

import logging

from typing import List, Optional, Sequence, Union

from typospell.hunspell import data, readers
from typospell.hunspell.errors import NotLoaded
from typospell.hunspell.readers.file_reader import BaseReader, FileReader
from typospell.hunspell.algo import derive, lookup, suggest

logger = logging.getLogger(__name__)

Source = Union[BaseReader, str, bytes]


class Dictionary:
    """
    The main and only interface to ``typospell.hunspell`` as a library.

    Usage::

        from typospell.hunspell import Dictionary

        # from the text of .aff and .dic (as the host application passes it)
        dictionary = Dictionary.load(aff_text, dic_text)
        # ...with word frequencies (to order suggestions) and prefix normalization rules
        dictionary = Dictionary.load(aff_text, dic_text, wordlist_text, prefixes=prefixes_text)
        # or, from folder where en_US.aff and en_US.dic are present
        dictionary = Dictionary.from_files('/path/to/dictionary/en_US')

        print(dictionary.lookup('spels'))
        # False
        print(dictionary.suggest('spels'))
        # ['spells', 'spiels']

    Internal algorithm implementations :attr:`lookuper` and :attr:`suggester` are exposed in order
    to allow experimenting with the implementation::

        # Produce all ways this word might be analysed by current dictionary
        for form in dictionary.lookuper.good_forms('cats'):
            print(form)

        # AffixForm(cats = cat + AB)

        # Internal suggest method, showing information about suggestion method
        for suggestion in dictionary.suggester.suggestions('helo'):
            print(suggestion)

        # Suggestion[stem](hello, 1)

    The dictionary without data (``Dictionary()``) can be created, but every query on it raises
    :class:`NotLoaded <typospell.hunspell.errors.NotLoaded>`.

    **Dictionary creation**

    .. automethod:: load
    .. automethod:: from_files

    **Dictionary usage**

    .. autoattribute:: loaded
    .. automethod:: lookup
    .. automethod:: check
    .. automethod:: suggest
    .. automethod:: has_flag
    .. automethod:: forms

    **Data objects**

    .. autoattribute:: aff
    .. autoattribute:: dic
    .. autoattribute:: wordlist
    .. autoattribute:: prefixes

    **Algorithms**

    .. autoattribute:: lookuper
    .. autoattribute:: suggester
    """

    #: Contents of ``*.aff``
    aff: Optional[data.aff.Aff]
    #: Contents of ``*.dic``
    dic: Optional[data.dic.Dic]
    #: Word frequencies
    wordlist: data.wordlist.Wordlist
    #: Prefix normalization rules
    prefixes: List[data.prefixes.PrefixRule]

    #: Instance of ``Lookup``, can be used for experimenting, see :mod:`algo.lookup <typospell.hunspell.algo.lookup>`.
    lookuper: Optional[lookup.Lookup]
    #: Instance of ``Suggest``, can be used for experimenting, see :mod:`algo.suggest <typospell.hunspell.algo.suggest>`.
    suggester: Optional[suggest.Suggest]

    @classmethod
    def load(cls, aff: Source, dic: Source, wordlist: Optional[Source] = None, *,
             prefixes: Union[Source, Sequence[data.prefixes.PrefixRule], None] = None,
             cache_size: int = suggest.CACHE_SIZE) -> Dictionary:
        """
        Read dictionary from the texts (or readers) of its parts.

        Args:
            aff: Affix rules
            dic: Dictionary words
            wordlist: Word frequencies, ``word<TAB>frequency`` per line
            prefixes: Prefix normalization rules: either list of
                      :class:`PrefixRule <typospell.hunspell.data.prefixes.PrefixRule>`, or text to read them from
            cache_size: How many misspellings to remember suggestions for, ``0`` disables memoization
        """

        aff_data, context = readers.read_aff(aff)
        dic_data = readers.read_dic(dic, context=context)
        aff_data = aff_data.compile_compounds(dic_data)

        wordlist_data = readers.read_wordlist(wordlist) if wordlist is not None else None

        if prefixes is None:
            prefix_rules = []
        elif isinstance(prefixes, (BaseReader, str, bytes)):
            prefix_rules = readers.read_prefixes(prefixes)
        else:
            prefix_rules = list(prefixes)

        logger.debug(
            'Loaded dictionary: %d rules, %d compound rules, %d words, %d frequencies, %d prefix rules',
            len(aff_data.rules), len(aff_data.COMPOUNDRULE), len(dic_data.words),
            len(wordlist_data) if wordlist_data else 0, len(prefix_rules)
        )

        return cls(aff_data, dic_data, wordlist=wordlist_data, prefixes=prefix_rules, cache_size=cache_size)

    @classmethod
    def from_files(cls, path: str, *, wordlist: Optional[str] = None, prefixes: Optional[str] = None,
                   cache_size: int = suggest.CACHE_SIZE) -> Dictionary:
        """
        Read dictionary from pair of files ``/some/path/some_name.aff`` and ``/some/path/some_name.dic``.

        Args:
            path: Should be just ``/some/path/some_name``.
            wordlist: Path to word frequencies file
            prefixes: Path to prefix normalization rules file
        """

        sources: List[Optional[FileReader]] = []
        try:
            for file_path in (path + '.aff', path + '.dic', wordlist, prefixes):
                sources.append(FileReader(file_path) if file_path else None)
            aff, dic, wordlist_source, prefixes_source = sources
            return cls.load(aff, dic, wordlist_source, prefixes=prefixes_source, cache_size=cache_size)
        finally:
            for source in sources:
                if source:
                    source.close()

    def __init__(self, aff: Optional[data.aff.Aff] = None, dic: Optional[data.dic.Dic] = None, *,
                 wordlist: Optional[data.wordlist.Wordlist] = None,
                 prefixes: Sequence[data.prefixes.PrefixRule] = (),
                 cache_size: int = suggest.CACHE_SIZE):
        self.aff = aff
        self.dic = dic
        self.wordlist = wordlist or data.wordlist.Wordlist()
        self.prefixes = list(prefixes)

        if self.loaded:
            self.lookuper = lookup.Lookup(self.aff, self.dic, self.prefixes)
            self.suggester = suggest.Suggest(self.aff, self.dic, self.lookuper, self.wordlist,
                                             cache_size=cache_size)
        else:
            self.lookuper = None
            self.suggester = None

    @property
    def loaded(self) -> bool:
        """
        Whether both affix and dictionary data are present.
        """
        return self.aff is not None and self.dic is not None

    def lookup(self, word: str) -> bool:
        """
        Checks if the word is correct.

        ::

            >>> dictionary.lookup('cats')
            True
            >>> dictionary.lookup('catz')
            False

        Args:
            word: Word to check
        """

        self._ensure_loaded()
        return self.lookuper(word)

    def check(self, word: str) -> bool:
        """
        Same as :meth:`lookup`.
        """
        return self.lookup(word)

    def suggest(self, word: str, limit: int = suggest.DEFAULT_LIMIT) -> List[str]:
        """
        Suggests corrections for the misspelled word (in order of similarity and frequency, best
        suggestions first). Correct words have no suggestions.

        ::

            >>> dictionary.suggest('helo')
            ['hello', 'help']

        Args:
            word: Misspelled word
            limit: Maximum number of suggestions
        """

        self._ensure_loaded()
        return self.suggester(word, limit)

    def has_flag(self, word: str, flag_name: str) -> bool:
        """
        Whether the dictionary entry ``word`` (stem or variant, exactly as in dictionary) is marked with
        the code of the directive ``flag_name``::

            # .aff
            NOSUGGEST !
            # .dic
            damn/!

            >>> dictionary.has_flag('damn', 'NOSUGGEST')
            True

        Returns ``False`` if the directive isn't present in the .aff file.
        """

        self._ensure_loaded()
        code = self.aff.flags.get(flag_name)
        if not code:
            return False
        return self.dic.has_flag(word, code)

    def forms(self, stem: str) -> List[str]:
        """
        All forms of the dictionary entries for the ``stem`` (all that their rules produce, and the
        stem and its variants themselves if the entry has no rule codes), without repetitions::

            >>> dictionary.forms('cat')
            ['cats', "cats'"]
            >>> dictionary.forms('hello')
            ['hello']
        """

        self._ensure_loaded()
        result = []
        for word in self.dic.homonyms(stem):
            is_root = bool(derive.rule_codes(word.flags, self.aff.rules))
            for surface in word.surfaces():
                if not is_root:
                    result.append(surface)
                for flag in word.flags:
                    if flag not in derive.SENTINEL_FLAGS:
                        result.extend(derive.derive(surface, flag, self.aff.rules))

        return list(dict.fromkeys(result))

    def _ensure_loaded(self):
        if not self.loaded:
            raise NotLoaded()
