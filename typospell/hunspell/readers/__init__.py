from .file_reader import FileReader, TextReader
from .aff import read_aff
from .dic import read_dic
from .wordlist import read_wordlist
from .prefixes import read_prefixes

__all__ = [
    "FileReader",
    "TextReader",
    "read_aff",
    "read_dic",
    "read_wordlist",
    "read_prefixes"
]
