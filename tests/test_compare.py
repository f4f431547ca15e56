# third-party
import pytest

# local
from xstrings import compare, concat, contains, ends_with, starts_with


# ---------------------------------------------------------------------------- #
PAIRS = [('ABC', 'abc'), ('abc', 'abd'), ('', 'a'), ('Hello', 'help'),
         ('same', 'SAME'), ('z', 'A'), (b'Bytes', b'bytes')]


# compare
# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'args, expected',
    [(('ABC', 'abc', True),                         0),
     (('ABC', 'abc'),                               -1),
     (('ABC', 'abc', False),                        -1),
     (('abc', 'abd'),                               -1),
     (('abd', 'abc'),                               1),
     (('abc', 'abc'),                               0),
     (('', ''),                                     0),
     (('a', ''),                                    1),
     (('ab', 'abc'),                                -1),
     ((b'ABC', b'abc', True),                       0),
     ((b'\xff', b'\x01'),                           1),
     ((b'abc', 'abc'),                              0),
     (('abc', bytearray(b'abc')),                   0),
     # substrings
     (('Hello, world', 7, 'WORLD', 0, 5, True),     0),
     (('Hello, world', 7, 'WORLD', 0, 5),           1),
     (('Hello, world', 7, 'WORLD', 0, 5, False),    1),
     (('abcdef', 1, 'xbcx', 1, 2),                  0),
     (('abc', 10, 'xyz', 10, 2),                    0),
     (('abc', 0, 'abd', 0, 2),                      0),
     (('abc', 0, 'abd', 0, 3),                      -1)]
)
def test_compare(args, expected):
    assert compare(*args) == expected


def test_compare_keyword():
    assert compare('A', 'a', ignore_case=True) == 0
    assert compare('xAx', 1, 'a', 0, 1, ignore_case=True) == 0


@pytest.mark.parametrize('a, b', PAIRS)
@pytest.mark.parametrize('ignore_case', [True, False])
def test_compare_symmetric(a, b, ignore_case):
    assert compare(a, b, ignore_case) == -compare(b, a, ignore_case)


@pytest.mark.parametrize(
    'args, error',
    [(('a', ), TypeError),
     (('a', 'b', 'c'), TypeError),
     (('a', 0, 'b'), TypeError),
     (('a', -1, 'b', 0, 1), ValueError),
     (('a', 0, 'b', 0, -1), ValueError),
     ((1, 'b'), TypeError)]
)
def test_compare_raises(args, error):
    with pytest.raises(error):
        compare(*args)


# contains / starts_with / ends_with
# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'args, expected',
    [(('Hello', 'ell'),             True),
     (('Hello', 'ELL'),             False),
     (('Hello', 'ELL', True),       True),
     (('Hello', ''),                True),
     (('', 'a'),                    False),
     ((b'Hello', b'll'),            True),
     ((b'Hello', 'LL', True),       True)]
)
def test_contains(args, expected):
    assert contains(*args) is expected


@pytest.mark.parametrize(
    'args, expected',
    [(('Hello', 'he', True),        True),
     (('Hello', 'he', False),       False),
     (('Hello', 'he'),              False),
     (('Hello', 'He'),              True),
     (('He', 'Hello'),              False),
     (('Hello', ''),                True),
     ((b'Hello', b'HE', True),      True),
     ((memoryview(b'abc'), b'ab'),  True)]
)
def test_starts_with(args, expected):
    assert starts_with(*args) is expected


@pytest.mark.parametrize(
    'args, expected',
    [(('Hello', 'lo'),              True),
     (('Hello', 'LO'),              False),
     (('Hello', 'LO', True),        True),
     (('abc', 'c'),                 True),
     (('abcabc', 'abc'),            True),
     (('ab', 'b'),                  True),
     (('lo', 'Hello'),              False),
     (('Hello', ''),                True),
     (('', ''),                     True),
     (('Hello', 'x'),               False),
     (('Hello', 'Hel'),             False),
     ((b'Hello', b'LO', True),      True)]
)
def test_ends_with(args, expected):
    assert ends_with(*args) is expected


# concat
# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'args, expected',
    [(('x = ', 1.5, ', n = ', 3),       'x = 1.5, n = 3'),
     ((b'ab', bytearray(b'cd')),        b'abcd'),
     ((),                               ''),
     ((b'a', 'b'),                      'ab'),
     ((b'a', 1),                        'a1'),
     ((None, True),                     'NoneTrue'),
     ((b'caf\xc3\xa9', '!'),            'café!')]
)
def test_concat(args, expected):
    result = concat(*args)
    assert result == expected
    assert type(result) is type(expected)
