"""
Per-character case conversion.

Case mapping is driven by a single-byte case table covering the codes 0-255.
The table is derived from an 8-bit view of an encoding (by default that of the
current locale): a byte is mapped only if it decodes to a single character
whose lower/upper case form encodes back to a single byte. Narrow sequences
have every byte mapped through the table; wide sequences have the characters
in the range 0-255 mapped and all others returned unchanged. This is not full
Unicode case mapping.
"""

# std
import codecs
import locale
import functools as ftl

# third-party
from loguru import logger

# relative
from .config import CONFIG
from .traits import traits_of


# ---------------------------------------------------------------------------- #
TABLE_SIZE = 256


# ---------------------------------------------------------------------------- #

def resolve_encoding(encoding=None):
    """
    Resolve the name of the encoding for the case table. `None` uses the value
    from the config, and "locale" the preferred encoding of the current locale.
    """
    encoding = encoding or CONFIG.case.encoding
    if encoding == 'locale':
        encoding = locale.getpreferredencoding(False)

    # normalize name, raises LookupError for unknown encodings
    return codecs.lookup(encoding).name


def _map_code(code, func, encoding):
    # map a single byte through `func` in `encoding`, if the round trip yields
    # a single byte, otherwise the code maps to itself
    try:
        new = func(bytes((code, )).decode(encoding)).encode(encoding)
    except UnicodeError:
        return code

    return new[0] if len(new) == 1 else code


class CaseTable:
    """
    Single-byte case mapping table.

    Parameters
    ----------
    encoding : str, optional
        Name of the encoding defining the table. By default, the encoding set
        in the config (the locale encoding, unless changed).

    Examples
    --------
    >>> CaseTable('ascii').lower_case('HÉLLO')
    'hÉllo'
    >>> CaseTable('latin-1').lower_case('HÉLLO')
    'héllo'
    """

    __slots__ = ('encoding', 'lower', 'upper', '_wide')

    def __init__(self, encoding=None):
        self.encoding = resolve_encoding(encoding)
        self.lower = bytes(_map_code(c, str.lower, self.encoding)
                           for c in range(TABLE_SIZE))
        self.upper = bytes(_map_code(c, str.upper, self.encoding)
                           for c in range(TABLE_SIZE))
        # translation maps for `str`, holding only the codes that change
        self._wide = {
            name: {code: new for code, new in enumerate(getattr(self, name))
                   if code != new}
            for name in ('lower', 'upper')
        }

        logger.debug('Built case table for encoding {!r}: {} lower and {} '
                     'upper case mappings.', self.encoding,
                     *map(len, self._wide.values()))

    def __repr__(self):
        return f'{type(self).__name__}({self.encoding!r})'

    def translate(self, text, case):
        traits = traits_of(text)
        text = traits.view(text)
        if traits.type is bytes:
            return text.translate(getattr(self, case))
        return text.translate(self._wide[case])

    def lower_case(self, text):
        return self.translate(text, 'lower')

    def upper_case(self, text):
        return self.translate(text, 'upper')


@ftl.lru_cache()
def get_case_table(encoding=None):
    """
    Get the (shared, immutable) case table for `encoding`.
    """
    return CaseTable(encoding)


# ---------------------------------------------------------------------------- #

def to_lower(text, table=None):
    """
    Convert the characters in `text` to lower case.

    Parameters
    ----------
    text : str or bytes-like
        The character sequence.
    table : CaseTable, optional
        The case table to use, by default the table for the configured encoding.

    Examples
    --------
    >>> to_lower('HeLLo')
    'hello'
    >>> to_lower(b'ABC')
    b'abc'

    Returns
    -------
    str or bytes
        New sequence of the same width as the input.
    """
    return (table or get_case_table()).lower_case(text)


def to_upper(text, table=None):
    """
    Convert the characters in `text` to upper case. See `to_lower`.
    """
    return (table or get_case_table()).upper_case(text)
