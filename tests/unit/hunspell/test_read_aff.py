import pytest

from typospell.hunspell.data import aff
from typospell.hunspell.readers.aff import read_aff, strip_comment, Context


def test_suffix():
    data, _ = read_aff("""
        SFX AB Y 1
        SFX AB 0 s .

        SFX KY N 2
        SFX KY y ies [^aeiou]y
        SFX KY 0 s/AB [aeiou]y
        """)

    assert data.rules['AB'] == aff.AffixRule(
        flag='AB', kind=aff.Kind.SFX, crossproduct=True,
        entries=(aff.Suffix(flag='AB', crossproduct=True, strip='', add='s', condition='.'),)
    )

    kitty, decoy = data.rules['KY'].entries
    assert kitty == aff.Suffix(flag='KY', crossproduct=False, strip='y', add='ies', condition='[^aeiou]y')
    assert decoy.flags == ('AB',)

    assert kitty.apply('kitty') == 'kitties'
    assert kitty.apply('decoy') is None
    assert decoy.apply('decoy') == 'decoys'


def test_prefix():
    data, _ = read_aff("""
        PFX UN Y 2
        PFX UN 0 un .
        PFX UN e dis e
        """)

    un, dis = data.rules['UN'].entries
    assert isinstance(un, aff.Prefix)
    assert data.rules['UN'].kind == aff.Kind.PFX

    assert un.apply('happy') == 'unhappy'
    assert dis.apply('easy') == 'disasy'
    assert dis.apply('happy') is None

    assert un.unapply('unhappy') == 'happy'
    assert dis.unapply('disasy') == 'easy'


def test_shifted_layout():
    data, _ = read_aff("""
        SFX AB Y 1
        1 2 SFX AB 0 s/CD .
        """)

    assert data.rules['AB'].entries == (
        aff.Suffix(flag='AB', crossproduct=True, strip='', add='s', condition='.', flags=('CD',)),
    )


def test_empty_add_and_default_condition():
    data, _ = read_aff("""
        SFX AB Y 1
        SFX AB y 0
        """)

    entry = data.rules['AB'].entries[0]
    assert (entry.strip, entry.add, entry.condition) == ('y', '', '.')
    assert entry.apply('happy') == 'happ'


@pytest.mark.parametrize('flag_format,codes,expected', [
    ('long', 'ABCDE', ('AB', 'CD', 'E')),
    ('short', 'ABC', ('A', 'B', 'C')),
    ('UTF-8', 'АБ', ('А', 'Б')),
    ('num', '101,202', ('101', '202')),
])
def test_flag_formats(flag_format, codes, expected):
    assert Context(flag_format=flag_format).parse_flags(codes) == expected

    data, context = read_aff(f"""
        FLAG {flag_format}
        SFX 1 Y 1
        SFX 1 0 s/{codes} .
        """)

    assert context.flag_format == flag_format
    assert data.flags.FLAG == flag_format
    assert data.rules['1'].entries[0].flags == expected


def test_unknown_flag_format():
    data, context = read_aff("""
        FLAG weird
        SFX AB Y 1
        SFX AB 0 s/CDE .
        """)

    assert context.flag_format == 'long'
    assert data.rules['AB'].entries[0].flags == ('CD', 'E')


def test_comments():
    assert strip_comment('# whole line') == ''
    assert strip_comment('TRY abc # trailing') == 'TRY abc'
    assert strip_comment('TRY abc #') == 'TRY abc'
    assert strip_comment('TRY abc #trailing') == 'TRY abc'
    assert strip_comment('COMPOUNDRULE #*0{') == 'COMPOUNDRULE #*0{'
    assert strip_comment('COMPOUNDRULE A*B # rule') == 'COMPOUNDRULE A*B'

    data, _ = read_aff("""
        # comment
        WORDCHARS 0123456789 # trailing comment
        COMPOUNDRULE 1
        COMPOUNDRULE #*0{
        """)

    assert data.flags.other == {'WORDCHARS': '0123456789'}
    assert data.COMPOUNDRULE == [aff.CompoundRule('#*0{')]


def test_comment_after_affix_entry():
    data, _ = read_aff("""
        SFX AB Y 1 #plural
        SFX AB 0 s #plural
        """)

    entry, = data.rules['AB'].entries
    assert entry.condition == '.'
    assert entry.apply('cat') == 'cats'


def test_flags():
    data, _ = read_aff("""
        NOSUGGEST !!
        KEEPCASE KC
        PSEUDOROOT NA
        ONLYINCOMPOUND OC
        COMPOUNDMIN 3
        TRY esianrtolcdugmphbyfvkwz
        KEY qwertyuiop|asdfghjkl
        TRY abc
        """)

    assert data.flags.NOSUGGEST == '!!'
    assert data.flags.KEEPCASE == 'KC'
    assert data.flags.NEEDAFFIX == 'NA'
    assert data.flags.ONLYINCOMPOUND == 'OC'
    assert data.flags.COMPOUNDMIN == 3

    # scalar, last one wins
    assert data.flags.get('TRY') == 'abc'
    assert data.flags.get('KEY') == 'qwertyuiop|asdfghjkl'
    assert data.flags.get('NOSUGGEST') == '!!'
    assert data.flags.get('MISSING') is None

    assert 'KEY' in data.flags
    assert 'MISSING' not in data.flags


def test_non_numeric_compoundmin():
    data, _ = read_aff('COMPOUNDMIN many')
    assert data.flags.COMPOUNDMIN is None


def test_compound_rules():
    data, _ = read_aff("""
        COMPOUNDRULE 2
        COMPOUNDRULE AB
        COMPOUNDRULE (XA)*(XB)?
        """)

    first, second = data.COMPOUNDRULE
    assert first.codes == ['A', 'B']
    assert second.codes == ['XA', 'XB']

    regexp = second.compile({'XA': ['sun'], 'XB': ['flower', 'shine']})
    assert regexp.fullmatch('sunsunflower')
    assert regexp.fullmatch('SunShine')
    assert regexp.fullmatch('sun')
    assert not regexp.fullmatch('flowersun')


def test_rep():
    data, _ = read_aff("""
        REP 3
        REP f ph
        REP ^alot$ a_lot
        REP broken
        """)

    assert data.REP == [aff.RepPattern('f', 'ph'), aff.RepPattern('^alot$', 'a_lot')]


def test_malformed_lines_are_skipped():
    data, _ = read_aff("""
        SFX AB Y 3
        SFX AB 0
        SFX AB 0 s [abc
        SFX AB 0 es .

        SFX CD Y many
        PFX EF Y 1
        PFX EF 0 re .

        COMPOUNDRULE 1
        COMPOUNDRULE *A
        """)

    assert data.rules['AB'].entries == (
        aff.Suffix(flag='AB', crossproduct=True, strip='', add='es', condition='.'),
    )
    assert 'CD' not in data.rules
    assert data.rules['EF'].entries[0].add == 're'
    assert data.COMPOUNDRULE == []


def test_redefinition():
    data, _ = read_aff("""
        SFX AB Y 1
        SFX AB 0 s .
        SFX AB Y 1
        SFX AB 0 es .
        """)

    assert [entry.add for entry in data.rules['AB'].entries] == ['es']


def test_idempotent():
    text = """
        SFX AB Y 2
        SFX AB 0 s/CD .
        SFX AB y ies [^aeiou]y
        PFX UN Y 1
        PFX UN 0 un .
        COMPOUNDRULE 1
        COMPOUNDRULE AB*
        REP 1
        REP f ph
        NOSUGGEST !!
        """

    first, _ = read_aff(text)
    second, _ = read_aff(text)

    assert first == second
    assert first.rules == second.rules
    assert first.COMPOUNDRULE == second.COMPOUNDRULE
    assert first.flags == second.flags
