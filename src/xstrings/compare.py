"""
Comparison, containment and affix checks with optional case insensitivity.

All functions accept character sequences of either width. The second operand
is converted to the width of the first if they differ.
"""

# std
import numbers

# relative
from .config import CONFIG
from .casing import to_lower
from .traits import is_sequence, traits_of


# ---------------------------------------------------------------------------- #

def _operands(a, b, ignore_case=False):
    # resolve both operands to the width of the first, lower case if requested
    traits = traits_of(a)
    a, b = traits.view(a), traits.coerce(b, CONFIG.encoding)
    if ignore_case:
        return to_lower(a), to_lower(b)
    return a, b


def _check_index(name, value):
    if isinstance(value, numbers.Integral) and value >= 0:
        return int(value)

    raise ValueError(f'Parameter `{name}` should be a non-negative integer, '
                     f'not {value!r}.')


def _substring(text, index, length):
    return text[index:index + length]


# ---------------------------------------------------------------------------- #

def compare(a, *args, ignore_case=False):
    """
    Compare two character sequences, or substrings of them, by the
    lexicographic ordering of their code units.

    Call signatures::

        compare(a, b, ignore_case=False)
        compare(a, index_a, b, index_b, length, ignore_case=False)

    The second form restricts the operands to `a[index_a:index_a + length]` and
    `b[index_b:index_b + length]` before comparing. Indices beyond the end of a
    sequence give an empty substring.

    Parameters
    ----------
    a, b : str or bytes-like
        The sequences to compare.
    index_a, index_b, length : int
        Non-negative substring bounds.
    ignore_case : bool
        Whether the comparison ignores the case of characters in the range of
        the case table. May also be passed as the last positional argument.

    Examples
    --------
    >>> compare('ABC', 'abc', True)
    0
    >>> compare('Hello, world', 7, 'WORLD', 0, 5, True)
    0

    Returns
    -------
    int
        -1 if `a` orders before `b`, 0 if they are equal and 1 if `a` orders
        after `b`.
    """
    if len(args) in (2, 5) and not is_sequence(args[-1]):
        *args, ignore_case = args

    if len(args) == 1:
        b, = args
    elif len(args) == 4:
        index_a, b, index_b, length = args
        length = _check_index('length', length)
        a = _substring(traits_of(a).view(a), _check_index('index_a', index_a),
                       length)
        b = _substring(traits_of(b).view(b), _check_index('index_b', index_b),
                       length)
    else:
        raise TypeError(
            'compare expects either (a, b[, ignore_case]) or (a, index_a, b, '
            f'index_b, length[, ignore_case]), received {len(args) + 1} '
            'positional arguments.'
        )

    a, b = _operands(a, b, ignore_case)
    return (a > b) - (a < b)


def contains(text, value, ignore_case=False):
    """
    Check whether `value` occurs as a substring of `text`.

    Examples
    --------
    >>> contains('Hello', 'ELL', True)
    True
    """
    text, value = _operands(text, value, ignore_case)
    return value in text


def starts_with(text, value, ignore_case=False):
    """
    Check whether `text` starts with `value`.

    Examples
    --------
    >>> starts_with('Hello', 'he', True)
    True
    >>> starts_with('Hello', 'he')
    False
    """
    text, value = _operands(text, value, ignore_case)
    return text.startswith(value)


def ends_with(text, value, ignore_case=False):
    """
    Check whether `text` ends with `value`. An empty `value` is a suffix of
    every sequence, and a `value` longer than `text` never is.

    Examples
    --------
    >>> ends_with('Hello', 'LO', True)
    True
    """
    text, value = _operands(text, value, ignore_case)
    return text.endswith(value)


# ---------------------------------------------------------------------------- #

def concat(*args):
    """
    Concatenate the string representations of all arguments.

    Character sequences are used as they are; any other object is converted
    with `str`. The result is narrow (`bytes`) only if all arguments are
    narrow, otherwise narrow arguments are decoded with the configured
    encoding.

    Examples
    --------
    >>> concat('x = ', 1.5, ', n = ', 3)
    'x = 1.5, n = 3'
    >>> concat(b'ab', bytearray(b'cd'))
    b'abcd'
    """
    if args and all(is_sequence(arg) and not isinstance(arg, str)
                    for arg in args):
        return b''.join(args)

    return ''.join(arg if isinstance(arg, str) else
                   bytes(arg).decode(CONFIG.encoding) if is_sequence(arg) else
                   str(arg)
                   for arg in args)
