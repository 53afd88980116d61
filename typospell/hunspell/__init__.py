from .dictionary import Dictionary
from .errors import NotLoaded, ParseError

__all__ = [
    "Dictionary",
    "NotLoaded",
    "ParseError"
]
