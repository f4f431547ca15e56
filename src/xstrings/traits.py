"""
Character-width traits.

A trait object describes one representation of a character sequence so that
every algorithm in this package can be written once and run over both widths:

* `NARROW`: bytes-like objects (`bytes`, `bytearray`, `memoryview`), one code
  unit per byte.
* `WIDE`: `str`, one code point per character.
"""

# std
import numbers
from collections import abc


# ---------------------------------------------------------------------------- #
# Encoding that maps each byte to the code point of the same value. Used to
# move narrow data through the wide algorithms without altering it.
RAW = 'latin-1'

NARROW_TYPES = (bytes, bytearray, memoryview)


# ---------------------------------------------------------------------------- #

def is_sequence(obj):
    """Check whether `obj` is a character sequence of any supported width."""
    return isinstance(obj, (str, *NARROW_TYPES))


def traits_of(obj):
    """
    Get the character traits for the sequence `obj`.

    Parameters
    ----------
    obj : str or bytes-like
        The character sequence.

    Returns
    -------
    CharTraits
        `WIDE` for `str`, `NARROW` for bytes-like objects.

    Raises
    ------
    TypeError
        If `obj` is not a character sequence.
    """
    if isinstance(obj, str):
        return WIDE

    if isinstance(obj, NARROW_TYPES):
        return NARROW

    raise TypeError(
        f'Expected a character sequence (str or bytes-like), not an object of '
        f'type {type(obj).__name__!r}.'
    )


# ---------------------------------------------------------------------------- #

class CharTraits:
    """
    Base class describing a character representation.
    """

    __slots__ = ()

    name = ''
    width = 0
    type = None
    max_code = 0

    def __repr__(self):
        return f'{type(self).__name__}({self.name!r})'

    @property
    def empty(self):
        return self.type()

    def codes(self, seq):
        """Iterate over the integer code values of the sequence."""
        raise NotImplementedError

    def view(self, obj):
        """Return an immutable sequence of this width with the content of `obj`."""
        raise NotImplementedError

    def coerce(self, obj, encoding='utf-8'):
        """
        Convert a character sequence of any width to this width, transcoding
        with `encoding` when the widths differ.
        """
        raise NotImplementedError

    def decode(self, seq):
        """Map a sequence of this width onto `str` code-for-code."""
        raise NotImplementedError

    def encode(self, text):
        """Inverse of `decode`."""
        raise NotImplementedError

    def code_of(self, char):
        """
        Resolve a single character given as an integer code value, a
        one-character string or a one-byte bytes object.
        """
        if isinstance(char, numbers.Integral):
            return int(char)

        if is_sequence(char) and len(char) == 1:
            return next(iter(traits_of(char).codes(char)))

        raise TypeError(f'Expected a single character or integer code, '
                        f'received {char!r}.')

    def code_set(self, chars):
        """Resolve a collection of characters to a set of integer codes."""
        if isinstance(chars, abc.Iterable):
            return frozenset(map(self.code_of, chars))

        raise TypeError(f'Invalid object of type {type(chars).__name__!r} for '
                        f'character set: {chars!r}.')


class NarrowTraits(CharTraits):

    __slots__ = ()

    name = 'narrow'
    width = 8
    type = bytes
    max_code = 0xFF

    def codes(self, seq):
        return iter(seq)

    def view(self, obj):
        return obj if type(obj) is bytes else bytes(obj)

    def coerce(self, obj, encoding='utf-8'):
        if traits_of(obj) is WIDE:
            return obj.encode(encoding)
        return self.view(obj)

    def decode(self, seq):
        return self.view(seq).decode(RAW)

    def encode(self, text):
        return text.encode(RAW)


class WideTraits(CharTraits):

    __slots__ = ()

    name = 'wide'
    width = 32
    type = str
    max_code = 0x10FFFF

    def codes(self, seq):
        return map(ord, seq)

    def view(self, obj):
        return obj if type(obj) is str else str(obj)

    def coerce(self, obj, encoding='utf-8'):
        if traits_of(obj) is NARROW:
            return bytes(obj).decode(encoding)
        return self.view(obj)

    def decode(self, seq):
        return self.view(seq)

    def encode(self, text):
        return text


# ---------------------------------------------------------------------------- #
NARROW = NarrowTraits()
WIDE = WideTraits()
