import re
import logging
from typing import List, Union

from typospell.hunspell.data.prefixes import PrefixRule

from typospell.hunspell.readers.file_reader import BaseReader, as_reader
from typospell.hunspell.readers.aff import strip_comment

logger = logging.getLogger(__name__)

SPACES_REGEXP = re.compile(r'\s+')


def read_prefixes(source: Union[BaseReader, str]) -> List[PrefixRule]:
    """
    Reads prefix normalization rules, one per line: ``<prefix> [<replacement>|0] [<condition>]``.
    See :mod:`data.prefixes <typospell.hunspell.data.prefixes>` for the meaning.
    """
    source = as_reader(source)
    result = []

    for num, line in source:
        line = strip_comment(line)
        if not line:
            continue

        prefix, *rest = SPACES_REGEXP.split(line)
        replacement = rest[0] if rest and rest[0] != '0' else ''
        condition = rest[1] if len(rest) > 1 else None

        try:
            result.append(PrefixRule(prefix, replacement, condition))
        except re.error as e:
            logger.warning('Line %d: bad prefix condition %r skipped (%s)', num, condition, e)

    return result
