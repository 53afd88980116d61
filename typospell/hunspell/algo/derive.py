"""
Applying affix rules to the stem: this is the "generation" side of the dictionary, used both by
:mod:`lookup <typospell.hunspell.algo.lookup>` (to verify that the word really is produced from
the candidate stem) and :mod:`suggest <typospell.hunspell.algo.suggest>` (to produce all forms of the
stems similar to misspelling).

Each affix entry may declare continuation classes (codes of other rules that can be applied
to its result):

.. code-block:: text

    SFX AB Y 1
    SFX AB 0 s/CD .         # cat => cats, and then rule CD is applied to cats
    SFX CD Y 1
    SFX CD 0 ' .            # cats => cats'

Nothing in the format prevents continuation classes from forming a cycle (``AB`` continued by
``CD`` continued by ``AB``), so the chain of codes used to produce each form is tracked, and the
code already in the chain is not applied again.

.. autodata:: SENTINEL_FLAGS
.. autofunction:: derive
.. autofunction:: apply
.. autofunction:: derives
.. autofunction:: rule_codes
.. autofunction:: chain_depth
"""

import logging
from typing import Dict, Iterable, Iterator, List

from typospell.hunspell.data.aff import AffixRule

logger = logging.getLogger(__name__)

#: Codes that mark something in the dictionary data, but are not rules, and never looked up as such
SENTINEL_FLAGS = frozenset(['V2'])


def derive(stem: str, flag: str, rules: Dict[str, AffixRule]) -> Iterator[str]:
    """
    Lazily produces all forms of the ``stem`` with the rule ``flag`` and its continuation classes.
    Unknown codes and sentinel codes produce nothing.

    Args:
        stem: Word to apply the rule to
        flag: Code of the rule
        rules: All rules of the dictionary, to look up continuation classes
    """

    if flag in SENTINEL_FLAGS or flag not in rules:
        return

    # Stack of (word, rule code, codes already used to produce the word)
    stack = [(stem, flag, frozenset([flag]))]

    while stack:
        word, code, chain = stack.pop()
        pending = []

        for entry in rules[code].entries:
            form = entry.apply(word)
            if form is None:
                continue

            yield form

            for continuation in entry.flags:
                if continuation in SENTINEL_FLAGS:
                    continue
                if continuation in chain:
                    logger.debug('Cycle %s => %s in continuation classes of %r, skipped',
                                 '/'.join(sorted(chain)), continuation, form)
                    continue
                if continuation not in rules:
                    logger.debug('Unknown continuation class %r of rule %r', continuation, code)
                    continue
                pending.append((form, continuation, chain | {continuation}))

        # reversed, so the continuations are processed in order of their definition
        stack.extend(reversed(pending))


def apply(stem: str, flag: str, rules: Dict[str, AffixRule]) -> List[str]:
    """
    All forms of the ``stem`` with the rule ``flag``, as a list. Forms can repeat, if produced
    by several paths.
    """
    return list(derive(stem, flag, rules))


def derives(stem: str, flag: str, rules: Dict[str, AffixRule], target: str) -> bool:
    """
    Whether ``target`` is one of the forms of ``stem`` with the rule ``flag``. Stops as soon as
    the target is produced.
    """
    return any(form == target for form in derive(stem, flag, rules))


def rule_codes(flags: Iterable[str], rules: Dict[str, AffixRule]) -> List[str]:
    """
    Those of the entry's ``flags`` that are codes of affix rules (not the sentinels, and not the
    codes of directives like ``KEEPCASE``). An entry having them is a root to be completed by
    those rules, not a word on its own.
    """
    return [flag for flag in flags if flag in rules and flag not in SENTINEL_FLAGS]


def chain_depth(rules: Dict[str, AffixRule]) -> int:
    """
    Length of the longest chain of rules :func:`derive` can apply to one stem: the rule itself,
    then its continuation classes, and so on, without repeating a code. That's how many affixes
    lookup might need to undo to get from the word to its stem.
    """

    def depth(code, chain):
        continuations = {
            continuation
            for entry in rules[code].entries
            for continuation in entry.flags
            if continuation in rules and continuation not in SENTINEL_FLAGS and continuation not in chain
        }
        return 1 + max((depth(continuation, chain | {continuation}) for continuation in continuations), default=0)

    return max((depth(code, frozenset([code])) for code in rules if code not in SENTINEL_FLAGS), default=0)
