"""

.. autofunction:: read_aff

.. autoclass:: Context
    :members:

Internal methods
^^^^^^^^^^^^^^^^

.. autofunction:: strip_comment
.. autofunction:: read_affix_rule
.. autofunction:: make_affix
.. autofunction:: read_compound_rules

"""

import re
import logging
import itertools
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, List, Iterator, Union

from typospell.hunspell.data import aff

from typospell.hunspell.readers.file_reader import BaseReader, as_reader

logger = logging.getLogger(__name__)

# Outdated directive names
SYNONYMS = {'PSEUDOROOT': 'NEEDAFFIX'}

AFFIX_MARKERS = ('PFX', 'SFX')

SPACES_REGEXP = re.compile(r'\s+')
DIRECTIVE_REGEXP = re.compile(r'^[A-Z][A-Z0-9_]*$')
TRAILING_COMMENT_REGEXP = re.compile(r'\s+#.*$')
# In compound rules "#" glued to other chars is NOT a comment, some dictionaries use it as a code
# (COMPOUNDRULE #*0{)
COMPOUNDRULE_COMMENT_REGEXP = re.compile(r'\s+#(\s.*)?$')

FLAG_LONG_REGEXP = re.compile(r'.{1,2}')
FLAG_NUM_REGEXP = re.compile(r'\d+(?=,|$)')
FLAG_FORMATS = ('long', 'short', 'UTF-8', 'num')

Lines = Iterator[Tuple[int, str]]


@dataclass
class Context:
    """
    Class containing reading-time context necessary for reading both .aff and .dic file: for now,
    only the format of rule codes.

    It is created in :meth:`read_aff` and then reused in :meth:`read_dic <typospell.hunspell.readers.dic.read_dic>`.
    """

    #: Code format of dictionary (see :attr:`Flags.FLAG <typospell.hunspell.data.aff.Flags.FLAG>`)
    flag_format: str = 'long'

    def parse_flags(self, string: Optional[str]) -> Tuple[str, ...]:
        """
        Parse set of codes, considering :attr:`flag_format`. In default (``long``) format,
        ``ABCD`` is two codes ``AB`` and ``CD``; odd trailing char is a code by itself.
        """

        if not string:
            return ()

        if self.flag_format == 'long':
            return tuple(FLAG_LONG_REGEXP.findall(string))
        if self.flag_format in ('short', 'UTF-8'):
            return tuple(string)
        if self.flag_format == 'num':
            return tuple(FLAG_NUM_REGEXP.findall(string))

        raise ValueError(f"Unknown flag format {self.flag_format}")


def strip_comment(line: str) -> str:
    """
    Removes comment from the line: either the whole line starting with ``#``, or the trailing
    ``#comment`` separated by whitespace.
    """
    if line.startswith('#'):
        return ''
    if line.startswith('COMPOUNDRULE'):
        return COMPOUNDRULE_COMMENT_REGEXP.sub('', line)
    return TRAILING_COMMENT_REGEXP.sub('', line)


def read_aff(source: Union[BaseReader, str]) -> Tuple[aff.Aff, Context]:
    """
    Reads .aff file and creates an :class:`Aff <typospell.hunspell.data.aff.Aff>`.

    Reading is best-effort: lines that don't look as expected are skipped (with a warning in log),
    never failing the whole file.

    Note that compound rules are not compiled at this point (they need the dictionary), see
    :meth:`Aff.compile_compounds <typospell.hunspell.data.aff.Aff.compile_compounds>`.

    Args:
         source: "Reader" (thin wrapper around text or opened file), or just the text

    Returns:
        Aff itself and a :class:`Context` which then will be reused in
        :meth:`read_dic <typospell.hunspell.readers.dic.read_dic>`
    """

    source = as_reader(source)
    context = Context()

    rules: Dict[str, aff.AffixRule] = {}
    compound_rules: List[aff.CompoundRule] = []
    rep: List[aff.RepPattern] = []
    values: Dict[str, str] = {}

    lines = ((num, line) for num, line in ((num, strip_comment(ln)) for num, ln in source) if line)

    for num, line in lines:
        name, *arguments = SPACES_REGEXP.split(line)

        if name in AFFIX_MARKERS:
            rule = read_affix_rule(lines, num, [name, *arguments], context=context)
            if rule:
                # Codes are unique: later definition wins
                rules[rule.flag] = rule
        elif name == 'COMPOUNDRULE':
            compound_rules.extend(read_compound_rules(lines, num, arguments))
        elif name == 'REP':
            # "REP <count>" header is just ignored, each "REP from to" line is read on its own
            if len(arguments) == 2:
                try:
                    rep.append(aff.RepPattern(*arguments))
                except re.error as e:
                    logger.warning('Line %d: bad REP pattern %r skipped (%s)', num, arguments[0], e)
        elif DIRECTIVE_REGEXP.match(name):
            name = SYNONYMS.get(name, name)
            values[name] = arguments[0] if arguments else ''
            if name == 'FLAG' and arguments:
                if arguments[0] in FLAG_FORMATS:
                    context.flag_format = arguments[0]
                else:
                    logger.warning('Line %d: unknown FLAG format %r, using long', num, arguments[0])
        else:
            logger.debug('Line %d: not a directive, skipped: %r', num, line)

    flags = aff.Flags.from_values(values)
    if 'COMPOUNDMIN' in values and flags.COMPOUNDMIN is None:
        logger.warning('COMPOUNDMIN value %r is not a number, ignored', values['COMPOUNDMIN'])

    return (aff.Aff(rules=rules, COMPOUNDRULE=compound_rules, REP=rep, flags=flags), context)


def _marker_offset(parts: List[str]) -> int:
    # Some dictionaries have lines like "SFX 1 SFX AB Y 2": the real data starts from second marker
    return 2 if len(parts) > 2 and parts[2] in AFFIX_MARKERS else 0


def read_affix_rule(lines: Lines, num: int, header: List[str], *, context: Context) -> Optional[aff.AffixRule]:
    """
    Reads ``PFX``/``SFX`` table: header is already read, entries are fetched from ``lines``.

    .. code-block:: text

        SFX AB Y 2                  # header: kind, code, cross-product, count of entries
        SFX AB 0 s .                # kind, code, strip, add[/continuation codes], condition
        SFX AB y ies [^aeiou]y

    Args:
        lines: Lines of the file, the method reads ``count`` of them
        num: Number of the header line (for logging)
        header: Header line, split into parts
    """

    offset = _marker_offset(header)
    try:
        kind, flag, crossproduct, count = header[offset:offset + 4]
        count_value = int(count)
    except ValueError:
        logger.warning('Line %d: malformed affix header skipped: %r', num, ' '.join(header))
        return None

    entries = []
    for entry_num, entry_line in itertools.islice(lines, count_value):
        entry = make_affix(entry_num, SPACES_REGEXP.split(entry_line), kind=kind, crossproduct=crossproduct,
                           context=context)
        if entry:
            entries.append(entry)

    return aff.AffixRule(
        flag=flag,
        kind=aff.Kind[kind],
        crossproduct=(crossproduct == 'Y'),
        entries=tuple(entries)
    )


def make_affix(num: int, parts: List[str], *, kind: str, crossproduct: str,
               context: Context) -> Optional[aff.Affix]:
    """
    Produces Prefix/Suffix from raw data, or ``None`` (with a warning) if the line is malformed.
    """

    offset = _marker_offset(parts)
    fields = parts[offset:]

    if len(fields) < 4 or fields[0] not in AFFIX_MARKERS:
        logger.warning('Line %d: malformed affix entry skipped: %r', num, ' '.join(parts))
        return None

    _, flag, strip, add, *rest = fields
    condition = rest[0] if rest else '.'
    add, _, flags = add.partition('/')

    kind_class = aff.Suffix if kind == 'SFX' else aff.Prefix

    try:
        return kind_class(
            flag=flag,
            crossproduct=(crossproduct == 'Y'),
            strip=('' if strip == '0' else strip),
            add=('' if add == '0' else add),
            condition=condition,
            flags=context.parse_flags(flags)
        )
    except re.error as e:
        logger.warning('Line %d: bad affix condition %r skipped (%s)', num, condition, e)
        return None


def read_compound_rules(lines: Lines, num: int, arguments: List[str]) -> List[aff.CompoundRule]:
    """
    Reads ``COMPOUNDRULE`` table: ``COMPOUNDRULE <count>`` and then ``count`` lines with
    ``COMPOUNDRULE <rule>``.
    """
    if not arguments or not arguments[0].isdigit():
        logger.warning('Line %d: malformed COMPOUNDRULE header skipped', num)
        return []

    result = []
    for rule_num, rule_line in itertools.islice(lines, int(arguments[0])):
        parts = SPACES_REGEXP.split(rule_line)
        if len(parts) < 2:
            logger.warning('Line %d: malformed COMPOUNDRULE skipped: %r', rule_num, rule_line)
            continue
        try:
            result.append(aff.CompoundRule(parts[1]))
        except re.error as e:
            logger.warning('Line %d: bad COMPOUNDRULE %r skipped (%s)', rule_num, parts[1], e)

    return result
