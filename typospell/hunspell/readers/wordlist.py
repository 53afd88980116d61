import logging
from typing import Union

from typospell.hunspell.data.wordlist import Wordlist

from typospell.hunspell.readers.file_reader import BaseReader, as_reader

logger = logging.getLogger(__name__)


def read_wordlist(source: Union[BaseReader, str]) -> Wordlist:
    """
    Reads ``word<TAB>frequency`` lines into :class:`Wordlist <typospell.hunspell.data.wordlist.Wordlist>`.
    Lines without a numeric frequency are skipped.
    """
    source = as_reader(source)
    frequencies = {}

    for num, line in source:
        word, _, frequency = line.partition('\t')
        try:
            frequencies[word.strip()] = float(frequency)
        except ValueError:
            logger.debug('Line %d: no frequency, skipped: %r', num, line)

    return Wordlist(frequencies)
