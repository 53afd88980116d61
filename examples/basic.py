import pathlib
path = pathlib.Path(__file__).parent.parent / 'tests' / 'integrational' / 'fixtures' / 'base'

from typospell.hunspell import Dictionary

dictionary = Dictionary.from_files(str(path))

print(dictionary.lookup('cats'))
print(dictionary.lookup('catz'))
print(dictionary.suggest('helo'))
