from typospell.hunspell.algo.derive import apply, chain_depth, derive, derives, rule_codes
from typospell.hunspell.readers.aff import read_aff


def rules(text):
    data, _ = read_aff(text)
    return data.rules


def test_apply():
    table = rules("""
        SFX AB Y 1
        SFX AB 0 s .
        SFX KY Y 2
        SFX KY y ies [^aeiou]y
        SFX KY 0 s [aeiou]y
        PFX UN Y 1
        PFX UN 0 un .
        """)

    assert apply('cat', 'AB', table) == ['cats']
    assert apply('kitty', 'KY', table) == ['kitties']
    assert apply('decoy', 'KY', table) == ['decoys']
    assert apply('happy', 'UN', table) == ['unhappy']
    assert apply('cat', 'KY', table) == []


def test_continuation_classes():
    table = rules("""
        SFX AB Y 1
        SFX AB 0 s/CDEF .
        SFX CD Y 1
        SFX CD 0 x .
        SFX EF Y 1
        SFX EF 0 y .
        """)

    assert apply('cat', 'AB', table) == ['cats', 'catsx', 'catsy']
    assert derives('cat', 'AB', table, 'catsy')
    assert not derives('cat', 'AB', table, 'catsxy')


def test_cycle():
    table = rules("""
        SFX AA Y 1
        SFX AA 0 a/BB .
        SFX BB Y 1
        SFX BB 0 b/AA .
        """)

    assert apply('x', 'AA', table) == ['xa', 'xab']
    assert apply('x', 'BB', table) == ['xb', 'xba']


def test_sentinel_and_unknown_codes():
    table = rules("""
        SFX AB Y 1
        SFX AB 0 s/V2ZZ .
        SFX V2 Y 1
        SFX V2 0 zz .
        """)

    assert apply('cat', 'AB', table) == ['cats']
    assert apply('cat', 'V2', table) == []
    assert apply('cat', 'ZZ', table) == []


def test_lazy():
    table = rules("""
        SFX AB Y 2
        SFX AB 0 s .
        SFX AB 0 es .
        """)

    forms = derive('cat', 'AB', table)
    assert next(forms) == 'cats'
    assert next(forms) == 'cates'


def test_rule_codes():
    table = rules("""
        SFX AB Y 1
        SFX AB 0 s .
        SFX V2 Y 1
        SFX V2 0 zz .
        """)

    assert rule_codes(('AB', 'KC'), table) == ['AB']
    assert rule_codes(('V2', 'KC'), table) == []
    assert rule_codes((), table) == []


def test_chain_depth():
    table = rules("""
        SFX KY Y 1
        SFX KY y ies/AB y
        SFX AB Y 1
        SFX AB 0 ka/CD .
        SFX CD Y 1
        SFX CD 0 ta .
        """)

    assert apply('kitty', 'KY', table) == ['kitties', 'kittieska', 'kittieskata']
    assert chain_depth(table) == 3
    assert chain_depth({}) == 0


def test_chain_depth_with_cycle():
    table = rules("""
        SFX AA Y 1
        SFX AA 0 a/BB .
        SFX BB Y 1
        SFX BB 0 b/AA .
        """)

    assert chain_depth(table) == 2
