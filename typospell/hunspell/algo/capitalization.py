"""
.. autoclass:: Type

.. autofunction:: guess
.. autofunction:: lowerfirst
.. autofunction:: coerce
"""

from enum import Enum


Type = Enum('Type', 'NO INIT ALL HUHINIT HUH')
"""
Type of capitalization, detected by :meth:`guess`:

* ``NO``: all lowercase ("foo")
* ``INIT``: titlecase, only initial letter is capitalized ("Foo")
* ``ALL``: all uppercase ("FOO")
* ``HUH``: mixed capitalization ("fooBar")
* ``HUHINIT``: mixed capitalization, first letter is capitalized ("FooBar")
"""


def guess(word: str) -> Type:
    """
    Guess word's capitalization.
    """

    if word.islower():
        return Type.NO
    if word.isupper():
        return Type.ALL
    if word[:1].isupper():
        return Type.INIT if word[1:].islower() or not word[1:] else Type.HUHINIT
    return Type.HUH


def lowerfirst(word: str) -> str:
    """
    Just change the case of the first letter to lower: that's how the capitalized word (at the
    sentence start, for example) would be stored in the dictionary.
    """
    return word[:1].lower() + word[1:]


def coerce(word: str, captype: Type) -> str:
    """
    Convert the suggestion (as it is in the dictionary) to the capitalization of the misspelled word:
    if misspelled was "Kiten", suggestion is "kitten", and what we return to user is "Kitten".
    """
    if captype in (Type.INIT, Type.HUHINIT):
        return word[:1].upper() + word[1:]
    if captype == Type.ALL:
        return word.upper()
    return word
