"""
Optional word frequency table, used by :mod:`suggest <typospell.hunspell.algo.suggest>` to order
suggestions at the same edit distance: more frequent words go first.

Read by :meth:`read_wordlist <typospell.hunspell.readers.wordlist.read_wordlist>` from text like:

.. code-block:: text

    the	23135851162
    of	13151942776

.. autoclass:: Wordlist
    :members:
"""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class Wordlist:
    #: ``word => frequency``
    frequencies: Dict[str, float] = field(default_factory=dict)

    def weight(self, word: str) -> float:
        """Frequency of the word, 0 if unknown."""
        return self.frequencies.get(word, 0)

    def __len__(self):
        return len(self.frequencies)
