"""
The main "is this word correct?" algorithm implementation.

On a bird-eye view level:

* word correctness check is implemented as an attempt to find the dictionary entry the word might
  have been produced from (maybe it is the stem itself? maybe the stem with some suffix? maybe
  with a prefix, and then a suffix?), and then to really produce the word from that entry with
  :mod:`derive <typospell.hunspell.algo.derive>`;
* if that fails, the word might be matched by one of the compound rules;
* if the word is capitalized, the same is repeated for its lowercase variant;
* and finally, the prefix normalization rules (if the dictionary has them) are applied, and the
  rest of the word checked once more.

To follow algorithm details, start reading from :meth:`Lookup.__call__`

.. autoclass:: Lookup

.. autoclass:: AffixForm
    :members:

.. autoclass:: CompoundForm

.. autodata:: WordForm
"""

from typing import Iterator, List, Optional, Sequence, Set, Union

from dataclasses import dataclass

from typospell.hunspell import data
from typospell.hunspell.algo import capitalization as cap
from typospell.hunspell.algo.capitalization import Type as CapType
from typospell.hunspell.algo.derive import SENTINEL_FLAGS, chain_depth, derives, rule_codes


@dataclass
class AffixForm:
    """
    AffixForm is a confirmed analysis of the word: it is produced from the dictionary entry
    ``in_dictionary`` (by its surface form ``stem``) with the rule ``flag``, or is the entry's
    surface form itself (then ``flag`` is ``None``).
    """

    text: str
    stem: str
    in_dictionary: data.dic.Word
    flag: Optional[str] = None

    def is_base(self):
        return self.flag is None

    def __repr__(self):
        if self.is_base():
            return f'AffixForm({self.text})'
        return f'AffixForm({self.text} = {self.stem} + {self.flag})'


@dataclass
class CompoundForm:
    """
    CompoundForm is the word matched by one of the compiled compound rules.
    """
    text: str
    rule: data.aff.CompoundRule

    def __repr__(self):
        return f'CompoundForm({self.text} = {self.rule.text})'


#: Every word form is either affix form, or compound one.
WordForm = Union[AffixForm, CompoundForm]


class Lookup:
    """
    ``Lookup`` object is created on :class:`Dictionary <typospell.hunspell.dictionary.Dictionary>` reading.
    Typically, you would not use it directly, but you might want for experiments::

        >>> dictionary = Dictionary.from_files('tests/integrational/fixtures/base')
        >>> lookup = dictionary.lookuper

        >>> lookup('cats')
        True

        >>> [*lookup.good_forms('cats')]
        [AffixForm(cats = cat + AB)]

    Args:
        aff: Affix data, with compound rules already compiled
        dic: Dictionary words
        prefixes: Prefix normalization rules, see :mod:`data.prefixes <typospell.hunspell.data.prefixes>`

    .. autoattribute:: depth

    .. automethod:: __call__
    .. automethod:: good_forms
    .. automethod:: affix_forms
    .. automethod:: compound_forms
    .. automethod:: hypotheses
    .. automethod:: deprefixed
    .. automethod:: normalize
    """

    def __init__(self, aff: data.aff.Aff, dic: data.dic.Dic, prefixes: Sequence[data.prefixes.PrefixRule] = ()):
        self.aff = aff
        self.dic = dic
        self.prefixes = list(prefixes)
        #: How many affixes might be "undone" from the word when guessing its stem
        self.depth = chain_depth(aff.rules)

    def __call__(self, word: str) -> bool:
        """
        The outermost word correctness check.

        Args:
            word: Word to check (surrounding spaces are ignored)
        """

        word = word.strip()
        if not word:
            return False

        if any(self.good_forms(word)):
            return True

        normalized = self.normalize(word)
        if normalized is None:
            return False

        return any(self.affix_forms(normalized))

    def good_forms(self, word: str) -> Iterator[WordForm]:
        """
        The main producer of correct word forms (e.g. ways the proposed string might correspond to our
        dictionary/affixes). If there is at least one, the word is correctly spelled.

        Besides the word itself, checks its lowercase variants when it is capitalized: "Cats" at the
        sentence start is correct if "cats" is, unless the dictionary entry is marked with
        :attr:`KEEPCASE <typospell.hunspell.data.aff.Flags.KEEPCASE>`.
        """

        yield from self.affix_forms(word)
        yield from self.compound_forms(word)

        for variant in self.lowercase_variants(word):
            yield from self.affix_forms(variant, allow_keepcase=False)
            yield from self.compound_forms(variant)

    def lowercase_variants(self, word: str) -> List[str]:
        """
        Lowercase forms the capitalized word might have in the dictionary: "Cat" => "cat",
        "CAT" => "Cat", "cat".
        """
        captype = cap.guess(word)
        if captype == CapType.ALL:
            variants = [word[:1] + word[1:].lower(), word.lower()]
        elif captype in (CapType.INIT, CapType.HUHINIT):
            variants = [cap.lowerfirst(word)]
        else:
            return []

        return [variant for variant in dict.fromkeys(variants) if variant != word]

    def affix_forms(self, word: str, *, allow_keepcase: bool = True) -> Iterator[AffixForm]:
        """
        Produces all correct analyses of the word as a dictionary entry, or entry + rules applied.

        Candidates are dictionary entries whose stem (or variant) starts the word, or starts one of
        the :meth:`hypotheses` about what the word was before affixes were added. Each candidate
        is then confirmed by producing the word from it. The entry matching the word exactly is a
        correct word only if it has no affix rule codes: "добр/ИЙ" is the root of "добрий", not a
        word by itself.

        Args:
            word: Word to check
            allow_keepcase: Whether the entries marked with ``KEEPCASE`` can be used (they can't when
                            checking lowercased variant of the word)
        """

        flags = self.aff.flags
        seen: Set[tuple] = set()

        for hypothesis in self.hypotheses(word):
            for surface, entry in self.dic.candidates(hypothesis):
                if (surface, id(entry)) in seen:
                    continue
                seen.add((surface, id(entry)))

                if flags.ONLYINCOMPOUND and flags.ONLYINCOMPOUND in entry.flags:
                    continue
                if not allow_keepcase and flags.KEEPCASE and flags.KEEPCASE in entry.flags:
                    continue

                if surface == word and not rule_codes(entry.flags, self.aff.rules):
                    if not (flags.NEEDAFFIX and flags.NEEDAFFIX in entry.flags):
                        yield AffixForm(word, surface, entry)
                    continue

                for flag in entry.flags:
                    if flag in SENTINEL_FLAGS:
                        continue
                    if derives(surface, flag, self.aff.rules, word):
                        yield AffixForm(word, surface, entry, flag)

    def compound_forms(self, word: str) -> Iterator[CompoundForm]:
        """
        Produces the forms of the word matched entirely by one of the compound rules (rules are
        compiled into regexps by :meth:`Aff.compile_compounds <typospell.hunspell.data.aff.Aff.compile_compounds>`).
        """
        if not word:
            return

        for rule, regexp in zip(self.aff.COMPOUNDRULE, self.aff.compound_regexps):
            if regexp.fullmatch(word):
                yield CompoundForm(word, rule)

    def hypotheses(self, word: str) -> Iterator[str]:
        """
        The word itself, and the words it might have been produced from by affixes (up to :attr:`depth`
        affixes deep, the longest chain of continuation classes), without repetitions. For example,
        with ``SFX`` rule ``y ies [^aeiou]y``, the word "kitties" produces "kitties" and "kitty".

        It is just a guess: the affix might be the wrong one for the stem, it is verified later.
        """

        seen = {word}
        layer = [word]
        yield word

        for _ in range(self.depth):
            next_layer = []
            for text in layer:
                for affix in self.aff.affixes_for(text):
                    base = affix.unapply(text)
                    if base and base not in seen:
                        seen.add(base)
                        next_layer.append(base)
                        yield base
            layer = next_layer
            if not layer:
                break

    def deprefixed(self, word: str) -> Iterator[str]:
        """
        Words the ``word`` might be produced from by one of the known prefixes. Used by
        suggest to compare the misspelling with the stems ("unhapy" => "hapy" ~ "happy").
        """
        seen = set()
        for prefix in self.aff.prefixes_index.lookup(word):
            base = prefix.unapply(word)
            if base and base not in seen:
                seen.add(base)
                yield base

    def normalize(self, word: str) -> Optional[str]:
        """
        Applies prefix normalization rules in order, each to the result of the previous ones.
        Returns ``None`` if no rule applied, or if the rest of the word after some rule doesn't
        satisfy its condition (such word is incorrect, whatever the dictionary says).
        """

        applied = False
        for rule in self.prefixes:
            rest = rule.strip(word)
            if rest is None:
                continue
            if not rule.allows(rest):
                return None
            word = rest
            applied = True

        return word if applied else None
