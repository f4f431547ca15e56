"""
Split character sequences into tokens on a set of separator characters.
"""

# std
import math
import numbers
from enum import IntEnum

# third-party
import more_itertools as mit
from loguru import logger

# relative
from .config import CONFIG
from .traits import traits_of


# ---------------------------------------------------------------------------- #
UNBOUNDED = math.inf


# ---------------------------------------------------------------------------- #

class SplitOptions(IntEnum):
    """
    Policy for zero-length tokens.
    """

    NONE = KEEP_EMPTY_ENTRIES = 0
    REMOVE_EMPTY_ENTRIES = 1

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            name = value.upper().replace('-', '_').replace(' ', '_')
            return cls.__members__.get(name)


def _resolve_count(count):
    if count in (-1, math.inf, None):
        return UNBOUNDED

    if not isinstance(count, numbers.Integral):
        raise TypeError(f'Invalid object of type {type(count).__name__!r} for '
                        f'token count: {count!r}.')

    if count < 0:
        raise ValueError(f'Token count should be non-negative, not {count}.')

    return int(count)


def _resolve_separators(separators, traits):
    if codes := traits.code_set(separators or ()):
        return codes

    logger.debug('Using default separators: {}.', CONFIG.split.separators)
    return traits.code_set(CONFIG.split.separators)


# ---------------------------------------------------------------------------- #

def split(text, separators=(), count=None, options=SplitOptions.NONE):
    """
    Split `text` into tokens delimited by any of the characters in
    `separators`.

    Parameters
    ----------
    text : str or bytes-like
        The sequence to split.
    separators : str, bytes-like or collection, optional
        The separator characters, given as a string, or a collection of single
        characters or integer code values. If empty (the default), the
        configured whitespace set (tab, LF, VT, FF, CR and space) is used.
    count : int, optional
        The maximum number of tokens to return. `None` (the default), -1 or
        `math.inf` mean no limit. If the limit is reached before the end of
        the input, the last token holds the unsplit remainder of the input,
        starting with the separator that triggered the limit.
    options : SplitOptions or str, optional
        Whether to keep (`SplitOptions.NONE`, the default) or remove
        (`SplitOptions.REMOVE_EMPTY_ENTRIES`) zero-length tokens.

    Examples
    --------
    >>> split('-_aa-_', '-_')
    ['', '', 'aa', '', '']
    >>> split('  hello   world  ', options='remove_empty_entries')
    ['hello', 'world']
    >>> split('a,b,c', ',', 2)
    ['a', 'b,c']

    Returns
    -------
    list of str or list of bytes
        Tokens in input order, each of the same width as `text`.
    """
    traits = traits_of(text)
    text = traits.view(text)

    if (count := _resolve_count(count)) == 0:
        return []

    if count == 1:
        return [text]

    keep = SplitOptions(options) is not SplitOptions.REMOVE_EMPTY_ENTRIES
    separators = _resolve_separators(separators, traits)

    tokens = []
    start = 0
    for i in mit.locate(traits.codes(text), separators.__contains__):
        token, begin, start = text[start:i], start, i + 1
        if not (token or keep):
            continue

        if len(tokens) == count - 1:
            # limit reached: last token is the rest of the input, unsplit
            logger.debug('Token limit {} reached at position {}.', count, i)
            tokens.append(text[begin:])
            return tokens

        tokens.append(token)

    # end of input closes the pending token
    if (token := text[start:]) or keep:
        tokens.append(token)

    return tokens
