# This is "unmunching" script for affix-compressed dictionaries, based on typospell.
#
# "Unmunching" (Hunspell's term) is a process of turning affix-compressed dictionary into plain list
# of all language's words. E.g. for the test dictionary, we have "cat/AB" (stem + codes of the rules
# which can be applied to it), and we can run this script:
#
#   python unmunch.py -d tests/integrational/fixtures/base -w cat
#
# Which will produce this list:
#
#   cats
#   cats'
#
# Running without -w will unmunch the entire dictionary.
#
# Words which are valid only as a part of compound are not produced (as well as compounds
# themselves: their list is potentially infinite).
#

import sys
import logging
from optparse import OptionParser

from typospell.hunspell.dictionary import Dictionary

parser = OptionParser()
parser.add_option("-d", "--dictionary", dest="dictionary", metavar='DICTIONARY',
                  help="dictionary path to unmunch (<path>.aff and <path>.dic should be present)")
parser.add_option("-w", "--word", dest="word", default=None, metavar='WORD',
                  help="singular word to unmunch (if absent, unmunch the whole dictionary)")
parser.add_option("-i", "--immediate", dest="immediate", default=False, action='store_true',
                  help="output unmunch for each word immediately (not sorted and might contain duplicates)")
parser.add_option("-v", "--verbose", dest="verbose", default=False, action='store_true',
                  help="log what the dictionary reader skipped")

(options, args) = parser.parse_args()

if not options.dictionary:
    parser.error("dictionary path is required")

logging.basicConfig(level=logging.DEBUG if options.verbose else logging.WARNING)

dictionary = Dictionary.from_files(options.dictionary)


def unmunch(stem):
    # forms() includes stems which are not words by themselves (NEEDAFFIX), lookup drops them
    return [form for form in dictionary.forms(stem) if dictionary.lookup(form)]


result = set()

if options.word:
    stems = [options.word]
    print(f"Unmunching only words with stem {options.word}", file=sys.stderr)
else:
    stems = list(dict.fromkeys(word.stem for word in dictionary.dic.words))
    print("Unmunching the whole dictionary", file=sys.stderr)

print('', file=sys.stderr)

for stem in stems:
    if dictionary.has_flag(stem, 'ONLYINCOMPOUND'):
        continue
    if options.immediate:
        for form in sorted(unmunch(stem)):
            print(form)
    else:
        result.update(unmunch(stem))

print('', file=sys.stderr)

if not options.immediate:
    for form in sorted(result):
        print(form)
