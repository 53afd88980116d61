"""
The module represents data from the affix (``*.aff``) file.

This text file has the following format:

.. code-block:: text

    # comment
    DIRECTIVE_NAME value

    # directives with table of values
    SFX AB Y 2
    SFX AB 0 s .
    SFX AB y ies [^aeiou]y

Only a handful of directives have special meaning: ``PFX``/``SFX`` (affix rules), ``COMPOUNDRULE``,
``REP`` and a few single-value flags (see :class:`Flags`). Any other ``NAME value`` line is kept as
a generic scalar flag.

All of it is read into :class:`Aff` by :meth:`read_aff <typospell.hunspell.readers.aff.read_aff>`.

``Aff``
-------

.. autoclass:: Aff

.. autoclass:: Flags

``Prefix`` and ``Suffix``
-------------------------

.. autoclass:: Affix
    :members:
.. autoclass:: Prefix
.. autoclass:: Suffix
.. autoclass:: AffixRule
.. autodata:: Kind

Helper pattern-alike classes
----------------------------

.. autoclass:: RepPattern
.. autoclass:: CompoundRule
"""

import re
import dataclasses
from enum import Enum

from dataclasses import dataclass, field
from typing import List, Dict, Tuple, Optional, Iterator, Any

from typospell.hunspell.algo.trie import Trie


#: Type of the affix rule: prefix or suffix
Kind = Enum('Kind', 'PFX SFX')


@dataclass
class RepPattern:
    """
    Contents of the :attr:`Aff.REP` directive, pair of ``(frequent typo, its replacement)``. Typo pattern
    compiled to regexp, so ``^`` and ``$`` can be used:

    .. code-block:: text

        REP f ph
        REP tion$ shun
        REP ^alot$ a_lot

    (``_`` in replacement stands for space.)
    """
    pattern: str
    replacement: str

    def __post_init__(self):
        self.regexp = re.compile(self.pattern)


@dataclass
class Affix:
    """
    Common base for :class:`Prefix` and :class:`Suffix`: one entry of an affix rule table.

    .. code-block:: text

        SFX AB Y 2
        SFX AB 0 s/CD .
        SFX AB y ies [^aeiou]y

    Meaning of the second line:

    * Suffix of rule ``AB``
    * ...when applies, doesn't change the stem (0 = nothing to remove)
    * ...adds "s" to the stem
    * ...and the resulting form can be further processed by rules ``CD`` (continuation classes)
    * ...condition of application is "any stem" (``.``)

    The third line removes "y" and adds "ies" for stems ending with consonant + "y" (kitty => kitties).
    """

    #: Code of the rule this entry belongs to
    flag: str
    #: Whether the rule is compatible with the opposite affix. Stored, but not enforced.
    crossproduct: bool
    #: What is removed from the stem when the affix is applied
    strip: str
    #: What is added when the affix is applied
    add: str
    #: Condition the stem should satisfy for the affix to apply, ``.`` means "any"
    condition: str
    #: Continuation classes: codes of rules that can be applied to the result
    flags: Tuple[str, ...] = ()

    def applies(self, word: str) -> bool:
        return self.cond_regexp is None or bool(self.cond_regexp.search(word))

    def apply(self, word: str) -> Optional[str]:
        """
        Produces form of the ``word`` with this affix, or ``None`` if the condition doesn't match.
        """
        raise NotImplementedError

    def unapply(self, word: str) -> Optional[str]:
        """
        Reverse of :meth:`apply`: if the ``word`` could have been produced by this affix, returns
        the word it was produced from. Used by lookup to guess candidate stems, the guess is verified
        by applying affixes forward.
        """
        raise NotImplementedError


@dataclass
class Prefix(Affix):
    """
    :class:`Affix` at the beginning of the word. ``strip`` is removed literally from the word start.
    """

    def __post_init__(self):
        # "-" does NOT have a special regex-meaning, while might happen as a regular word char
        condition = self.condition.replace('-', '\\-')
        self.cond_regexp = re.compile('^' + condition) if condition not in ('', '.') else None
        self.remove = self.strip

    def apply(self, word):
        if not self.applies(word):
            return None
        if self.remove and word.startswith(self.remove):
            word = word[len(self.remove):]
        return self.add + word

    def unapply(self, word):
        if not self.add or not word.startswith(self.add):
            return None
        base = self.strip + word[len(self.add):]
        return base if self.applies(base) else None

    def __repr__(self):
        return (
            f"Prefix({self.add}: {self.flag}{'×' if self.crossproduct else ''}" +
            (f"/{','.join(self.flags)}" if self.flags else '') +
            f", on ^{self.strip}[{self.condition}])"
        )


@dataclass
class Suffix(Affix):
    """
    :class:`Affix` at the end of the word. ``strip`` is compiled into the pattern anchored to the
    word end.
    """

    def __post_init__(self):
        condition = self.condition.replace('-', '\\-')
        self.cond_regexp = re.compile(condition + '$') if condition not in ('', '.') else None
        self.remove = re.compile(re.escape(self.strip) + '$') if self.strip else None

    def apply(self, word):
        if not self.applies(word):
            return None
        if self.remove:
            word = self.remove.sub('', word, count=1)
        return word + self.add

    def unapply(self, word):
        if not word.endswith(self.add) or not (self.add or self.strip):
            return None
        base = word[:len(word) - len(self.add)] + self.strip
        return base if self.applies(base) else None

    def __repr__(self):
        return (
            f"Suffix({self.add}: {self.flag}{'×' if self.crossproduct else ''}" +
            (f"/{','.join(self.flags)}" if self.flags else '') +
            f", on [{self.condition}]{self.strip}$)"
        )


@dataclass
class AffixRule:
    """
    The whole table of one ``PFX``/``SFX`` rule: all entries sharing one code.
    """
    flag: str
    kind: Kind
    crossproduct: bool
    entries: Tuple[Affix, ...] = ()


@dataclass
class CompoundRule:
    """
    Regexp-alike rule for compound words, content of :attr:`Aff.COMPOUNDRULE` directive:

    .. code-block:: text

        COMPOUNDRULE 1
        COMPOUNDRULE A*B?C

    ...reading: compound word might consist of any number of words with code ``A``, then 0 or 1 words
    with code ``B``, then one word with code ``C``. Two-character codes are written in parentheses:
    ``(AB)(CD)*``.

    The rule is turned into a real regexp by :meth:`compile` when the dictionary is known: each code
    is replaced with alternation of all dictionary words having it.
    """

    text: str

    def __post_init__(self):
        # Each token is either "(xx)" code, or a single char (code or * ? quantifiers)
        self.tokens = [group or char for group, char in re.findall(r'\(([^()]+)\)|(.)', self.text)]
        self.codes = [token for token in self.tokens if token not in ('*', '?')]
        # Fails early (with re.error) on rules like "*A"
        self.compile({})

    def compile(self, members: Dict[str, List[str]]) -> 're.Pattern[str]':
        """
        Args:
            members: For each known code, list of words having it. Codes absent from the mapping are
                     treated as literal characters.
        """
        expression = ''
        for token in self.tokens:
            if token in members:
                expression += '(' + '|'.join(map(re.escape, members[token])) + ')'
            elif token in ('*', '?'):
                expression += token
            else:
                expression += re.escape(token)
        return re.compile(expression, re.IGNORECASE)


@dataclass
class Flags:
    """
    Single-value directives of the .aff file. Those that change lookup/suggest behavior have their
    own attributes (their names are exactly the directive names, to grep them easily), all the rest
    are stored in :attr:`other`.

    Note that values (except :attr:`COMPOUNDMIN`) are rule codes, and the *word* has the flag if its
    codes include that value::

        # .aff
        NOSUGGEST !
        # .dic
        damn/!
    """

    #: Words with this code are only allowed inside compounds.
    ONLYINCOMPOUND: Optional[str] = None
    #: Words with this code are never suggested.
    NOSUGGEST: Optional[str] = None
    #: Minimum length of a compound part.
    COMPOUNDMIN: Optional[int] = None
    #: Words with this code are not accepted in other capitalization.
    KEEPCASE: Optional[str] = None
    #: Words with this code are valid only with some affix.
    NEEDAFFIX: Optional[str] = None
    #: Format of codes: ``long`` (default, two chars per code), ``short``, ``UTF-8``, ``num``.
    FLAG: Optional[str] = None
    #: All other directives, ``name => value``
    other: Dict[str, str] = field(default_factory=dict)

    KNOWN = ('ONLYINCOMPOUND', 'NOSUGGEST', 'COMPOUNDMIN', 'KEEPCASE', 'NEEDAFFIX', 'FLAG')

    @classmethod
    def from_values(cls, values: Dict[str, str]) -> 'Flags':
        known: Dict[str, Any] = {name: value for name, value in values.items() if name in cls.KNOWN}
        if 'COMPOUNDMIN' in known:
            known['COMPOUNDMIN'] = int(known['COMPOUNDMIN']) if known['COMPOUNDMIN'].isdigit() else None
        other = {name: value for name, value in values.items() if name not in cls.KNOWN}
        return cls(**known, other=other)

    def get(self, name: str) -> Optional[Any]:
        if name in self.KNOWN:
            return getattr(self, name)
        return self.other.get(name)

    def __contains__(self, name):
        return self.get(name) is not None


@dataclass
class Aff:
    """
    The class contains everything compiled from .aff file. It is created once by
    :meth:`read_aff <typospell.hunspell.readers.aff.read_aff>`, and then once more (as a copy) by
    :meth:`compile_compounds` when dictionary words are known; after that it is never changed.

    .. autoattribute:: rules
    .. autoattribute:: COMPOUNDRULE
    .. autoattribute:: REP
    .. autoattribute:: flags
    .. autoattribute:: compound_codes

    **Derived attributes**

    .. py:attribute:: compound_regexps
        :type: List[re.Pattern]

        :attr:`COMPOUNDRULE` compiled against :attr:`compound_codes`.

    .. py:attribute:: suffixes_index
        :type: typospell.hunspell.algo.trie.Trie

        Trie of all suffixes (by reversed ``add``), to find all suffixes the word might end with.

    .. py:attribute:: prefixes_index
        :type: typospell.hunspell.algo.trie.Trie

        Trie of all prefixes (by ``add``).
    """

    #: Affix rules by their code. Later definition of the same code overwrites the earlier one.
    rules: Dict[str, AffixRule] = field(default_factory=dict)
    #: Compound rules, in order of definition
    COMPOUNDRULE: List[CompoundRule] = field(default_factory=list)
    #: Replacement table: typical misspellings and their fixes
    REP: List[RepPattern] = field(default_factory=list)
    #: Single-value directives
    flags: Flags = field(default_factory=Flags)
    #: For each code used in compound rules, the words having it
    compound_codes: Dict[str, List[str]] = field(default_factory=dict)

    def __post_init__(self):
        self.compound_regexps = [rule.compile(self.compound_codes) for rule in self.COMPOUNDRULE]

        self.suffixes_index = Trie()
        self.prefixes_index = Trie()
        for rule in self.rules.values():
            for entry in rule.entries:
                if isinstance(entry, Suffix):
                    self.suffixes_index.put(entry.add[::-1], entry)
                else:
                    self.prefixes_index.put(entry.add, entry)

    def affixes_for(self, word: str) -> Iterator[Affix]:
        """
        All affixes the word might have been produced with (by comparing only ``add`` parts).
        """
        yield from self.suffixes_index.lookup(word[::-1])
        yield from self.prefixes_index.lookup(word)

    def compile_compounds(self, dic) -> 'Aff':
        """
        Produces a copy of the ``Aff`` with compound rules compiled against the dictionary's words.

        Codes taking part: all codes referenced by compound rules, and :attr:`Flags.ONLYINCOMPOUND`.
        Codes no dictionary word has are dropped.

        Args:
            dic: :class:`Dic <typospell.hunspell.data.dic.Dic>`
        """
        codes = {code for rule in self.COMPOUNDRULE for code in rule.codes}
        if self.flags.ONLYINCOMPOUND:
            codes.add(self.flags.ONLYINCOMPOUND)

        minlength = self.flags.COMPOUNDMIN or 0
        members: Dict[str, List[str]] = {}
        for code in sorted(codes):
            words = [
                surface
                for word in dic.words if code in word.flags
                for surface in word.surfaces() if len(surface) >= minlength
            ]
            if words:
                members[code] = words

        return dataclasses.replace(self, compound_codes=members)
