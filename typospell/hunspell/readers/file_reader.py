"""
.. autoclass:: BaseReader
    :members:

.. autoclass:: FileReader
.. autoclass:: TextReader

.. autofunction:: as_reader
"""

import io
from typing import Union

from typospell.hunspell.errors import ParseError


class BaseReader:
    """
    Common base for :class:`FileReader` and :class:`TextReader`. In fact, it is a very thin wrapper
    around ``IO``-alike object, to read it line by line and:

    * strip lines transparently
    * ignore BOM (byte-order mark) at the beginning
    * skip empty lines
    * yield line with its number (1-based)

    Readers are iterators, so the code reading table-alike directives can just pull the next
    ``count`` lines from the same reader with ``itertools.islice``.
    """
    def __init__(self, obj):
        self.line_no = 0
        self.io = obj
        self.iter = filter(lambda l: l[1] != '', self.readlines())

    def __iter__(self):
        return self

    def __next__(self):
        return self.iter.__next__()

    def readlines(self):
        while True:
            try:
                ln = self.io.readline()
            except UnicodeDecodeError as e:
                raise ParseError(f"Can't decode source: {e.reason}", line_no=self.line_no + 1) from e
            if ln == '':
                return
            self.line_no += 1
            if self.line_no == 1 and ln.startswith('\ufeff'):
                ln = ln[1:]
            yield (self.line_no, ln.strip())


class FileReader(BaseReader):
    """
    Reader implementation for simple filesystem file.
    """

    def __init__(self, path, encoding='UTF-8'):
        self.path = path
        super().__init__(open(path, 'r', encoding=encoding))

    def close(self):
        self.io.close()


class TextReader(BaseReader):
    """
    Reader implementation for text already in memory (that's how the host application passes
    affix and dictionary data). ``bytes`` are accepted too, and decoded as UTF-8.
    """

    def __init__(self, text: Union[str, bytes]):
        if isinstance(text, bytes):
            try:
                text = text.decode('UTF-8')
            except UnicodeDecodeError as e:
                raise ParseError(f"Can't decode source as UTF-8: {e.reason}") from e
        super().__init__(io.StringIO(text))


def as_reader(source: Union[BaseReader, str, bytes]) -> BaseReader:
    """
    Allows all ``read_*`` functions to receive either a ready reader or just the text.
    """
    if isinstance(source, BaseReader):
        return source
    return TextReader(source)
