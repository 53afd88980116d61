"""
Prefix normalization rules: the escape hatch for languages whose dictionaries don't model some
productive prefixes with affix rules. When the word is not found, lookup strips the known prefixes
and checks the rest (see :meth:`Lookup.normalize <typospell.hunspell.algo.lookup.Lookup.normalize>`).

Rules are data, supplied alongside the dictionary, either as list of :class:`PrefixRule` or as text
(read by :meth:`read_prefixes <typospell.hunspell.readers.prefixes.read_prefixes>`):

.. code-block:: text

    # prefix  replacement  condition
    меді      и
    медъ      0            [юёея]
    мед       0            [^еёюяи]
    не

Rules are applied in order, each to the result of the previous ones. ``медъ...`` becomes ``...`` and
the rest should start with one of ``юёея``, otherwise the word is incorrect right away.

.. autoclass:: PrefixRule
    :members:
"""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass
class PrefixRule:
    #: Literal prefix to look for
    prefix: str
    #: What the prefix is replaced with (usually nothing)
    replacement: str = ''
    #: Regexp the rest of the word (after replacement) should start with
    condition: Optional[str] = None

    def __post_init__(self):
        self.cond_regexp = re.compile(self.condition) if self.condition else None

    def strip(self, word: str) -> Optional[str]:
        """
        Returns the word with the prefix replaced, or ``None`` if the word doesn't start with it.
        """
        if not word.startswith(self.prefix):
            return None
        return self.replacement + word[len(self.prefix):]

    def allows(self, rest: str) -> bool:
        """
        Whether the rest of the word (as returned by :meth:`strip`) satisfies the condition.
        """
        return self.cond_regexp is None or self.cond_regexp.match(rest) is not None
