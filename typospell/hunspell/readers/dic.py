import re
import logging
from typing import Union

from typospell.hunspell.data import dic

from typospell.hunspell.readers.file_reader import BaseReader, as_reader
from typospell.hunspell.readers.aff import Context

logger = logging.getLogger(__name__)

COUNT_REGEXP = re.compile(r'^\d+(\s+|$)')   # should start with digits, but can have whatever further
SPACES_REGEXP = re.compile(r'\s+')
SLASH_REGEXP = re.compile(r'(?<!\\)/')


def read_dic(source: Union[BaseReader, str], *, context: Context) -> dic.Dic:
    """
    Reads source (text or file) and creates :class:`Dic <typospell.hunspell.data.dic.Dic>` from it.

    Each line is one of:

    .. code-block:: text

        stem
        stem/codes
        stem/variant1 variant2/codes

    Lines with more parts than that are skipped with a warning.

    Args:
        source: "Reader" (thin wrapper around text or opened file), or just the text
        context: Context created while reading .aff file and defining format of codes.
    """
    source = as_reader(source)
    result = dic.Dic(words=[])

    for num, line in source:
        if num == 1 and COUNT_REGEXP.match(line):
            continue

        if line.startswith('#'):
            continue

        # Anything after tab is morphological data, which we don't handle
        line = line.split('\t', 1)[0].strip()
        if not line:
            continue

        # Stem starting with "/" is not an empty stem with codes, but just word starting with "/";
        # and "/" inside the stem can be screened as "\/"
        if line.startswith('/'):
            parts = [line]
        else:
            parts = SLASH_REGEXP.split(line)

        parts = [part.replace(r'\/', '/') for part in parts]

        if len(parts) == 1:
            word = dic.Word(stem=parts[0])
        elif len(parts) == 2:
            stem, codes = parts
            word = dic.Word(stem=stem, flags=context.parse_flags(codes))
        elif len(parts) == 3:
            stem, variants, codes = parts
            word = dic.Word(
                stem=stem,
                flags=context.parse_flags(codes),
                variants=tuple(SPACES_REGEXP.split(variants.strip())) if variants.strip() else ()
            )
        else:
            logger.warning('Line %d: malformed dictionary entry skipped: %r', num, line)
            continue

        if not word.stem:
            logger.warning('Line %d: empty stem skipped: %r', num, line)
            continue

        result.append(word)

    return result
