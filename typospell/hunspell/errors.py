"""
Errors raised by :class:`Dictionary <typospell.hunspell.dictionary.Dictionary>` and the readers.

Note that the readers are deliberately lenient: lines they can't make sense of are skipped (and
logged), because real-world dictionaries are full of vendor quirks. Only two conditions are
reported to the caller:

.. autoclass:: NotLoaded
.. autoclass:: ParseError
"""

from typing import Optional


class NotLoaded(RuntimeError):
    """
    Raised when :meth:`lookup <typospell.hunspell.dictionary.Dictionary.lookup>`,
    :meth:`suggest <typospell.hunspell.dictionary.Dictionary.suggest>` or
    :meth:`has_flag <typospell.hunspell.dictionary.Dictionary.has_flag>` are called on a dictionary
    which has no affix or no word data compiled yet.
    """

    def __init__(self, message: str = 'Dictionary not loaded.'):
        super().__init__(message)


class ParseError(ValueError):
    """
    Raised when the source can't be read as text at all (for example, it is not valid in the
    declared encoding). Malformed *lines* never raise, they are skipped.
    """

    def __init__(self, message: str, *, line_no: Optional[int] = None, line: Optional[str] = None):
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f'{message} (line {line_no})'
        super().__init__(message)
