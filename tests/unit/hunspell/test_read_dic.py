from typospell.hunspell.data import dic as d
from typospell.hunspell.readers.aff import Context
from typospell.hunspell.readers.dic import read_dic


def test_read():
    dic = read_dic("""3
        cat
        dog/SM
        go/went gone/XY
        """, context=Context())

    assert dic.words == [
        d.Word(stem='cat'),
        d.Word(stem='dog', flags=('SM',)),
        d.Word(stem='go', flags=('XY',), variants=('went', 'gone')),
    ]


def test_first_line_is_word():
    dic = read_dic("cat\ndog", context=Context())
    assert [word.stem for word in dic.words] == ['cat', 'dog']


def test_flag_format():
    dic = read_dic("dog/SM", context=Context(flag_format='short'))
    assert dic.words == [d.Word(stem='dog', flags=('S', 'M'))]


def test_peculiar_lines():
    dic = read_dic("""2
        # comment
        1\\/2/AB
        /usr
        cat/AB\tpo:noun
        a/b/c/d
        /
        """, context=Context())

    assert dic.words == [
        d.Word(stem='1/2', flags=('AB',)),
        d.Word(stem='/usr'),
        d.Word(stem='cat', flags=('AB',)),
        d.Word(stem='/'),
    ]


def test_indexes():
    dic = read_dic("""
        cat/AB
        cat/CD
        go/went gone/
        """, context=Context())

    assert len(dic.homonyms('cat')) == 2
    assert dic.homonyms('went') == dic.homonyms('go')
    assert dic.homonyms('dog') == []

    assert dic.has_flag('cat', 'AB')
    assert not dic.has_flag('cat', 'AB', for_all=True)
    assert not dic.has_flag('dog', 'AB')

    assert [surface for surface, _ in dic.candidates('cats')] == ['cat', 'cat']
    assert [surface for surface, _ in dic.candidates('gone')] == ['go', 'gone']
    assert list(dic.candidates('dogs')) == []
