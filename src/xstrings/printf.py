"""
printf-style formatting for character sequences of either width.

Templates use the C format-specification grammar::

    %[flags][width][.precision][length]conversion

    flags       any of "-", "+", " ", "#", "0"
    width       digits, or "*" to take the width from the argument list
    precision   digits, or "*" to take the precision from the argument list
    length      hh, h, l, ll, q, j, z, t, L
    conversion  d i u o x X f F e E g G a A c s p n %

Each argument is wrapped in a typed `FormatArg` and every directive checks that
the argument it consumes is of a compatible kind, raising `FormatError` on a
mismatch or when the arguments run out. Directives are then rendered by the
`%` operator of python strings, after the directive and argument have been
adapted to the C semantics where the two differ (integer types of fixed width,
alternate forms, hexadecimal floats, pointers).
"""

# std
import re
import math
import numbers
import operator
from enum import IntEnum
from decimal import Decimal
from dataclasses import dataclass
from typing import Union

# relative
from .emit import Emit
from .config import CONFIG
from .logging import LoggingMixin
from .traits import NARROW, is_sequence, traits_of


# ---------------------------------------------------------------------------- #
RGX_DIRECTIVE = re.compile(r'''
    %
    (?P<flags>[-+\ #0]*)                # flags
    (?P<width>\*|\d+)?                  # minimum field width
    (?:\.(?P<precision>\*|\d*))?        # precision
    (?P<length>hh|h|ll|l|q|j|z|t|L)?    # length modifier
    (?P<conversion>.?)                  # conversion specifier
''', re.VERBOSE | re.DOTALL)

INTEGER_CONVERSIONS = 'diuoxX'
FLOAT_CONVERSIONS = 'fFeEgGaA'
CONVERSIONS = f'{INTEGER_CONVERSIONS}{FLOAT_CONVERSIONS}cspn%'

POINTER_BITS = 64
NULL_POINTER = '(nil)'

# significand of an IEEE 754 double: implicit leading bit + 52 fraction bits
FRACTION_BITS = 52
FRACTION_HEXITS = FRACTION_BITS // 4


# ---------------------------------------------------------------------------- #

class FormatError(ValueError):
    """
    Raised for a directive that cannot be applied to the supplied arguments.
    """


class Kind(IntEnum):
    """Semantic kind of a format argument."""

    INTEGER = 1
    FLOAT = 2
    CHAR = 3
    STRING = 4
    POINTER = 5


def classify(obj):
    """
    Get the `Kind` of a python object when passed as a format argument.

    Character sequences of length one are `CHAR`, longer (or empty) ones
    `STRING`. Objects supporting `__index__` (including `bool`) are `INTEGER`,
    real numbers are `FLOAT`, and anything else (including `None`) is a
    `POINTER`.
    """
    if is_sequence(obj):
        return Kind.CHAR if len(obj) == 1 else Kind.STRING

    if isinstance(obj, numbers.Integral) or hasattr(type(obj), '__index__'):
        return Kind.INTEGER

    if isinstance(obj, (numbers.Real, Decimal)):
        return Kind.FLOAT

    return Kind.POINTER


class FormatArg:
    """
    A format argument: the value together with its semantic kind.

    Arguments are usually wrapped automatically. Wrap explicitly to pass a
    value with a kind other than the one inferred by `classify`, eg. to format
    an integer address with "%p" or a single byte with "%c".

    Examples
    --------
    >>> FormatArg.wrap(5)
    FormatArg(Kind.INTEGER, 5)
    >>> format('%p', FormatArg.pointer(0xdeadbeef))
    '0xdeadbeef'
    """

    __slots__ = ('kind', 'value')

    @classmethod
    def wrap(cls, obj):
        return obj if isinstance(obj, cls) else cls(classify(obj), obj)

    @classmethod
    def pointer(cls, obj):
        return cls(Kind.POINTER, obj)

    @classmethod
    def char(cls, obj):
        return cls(Kind.CHAR, obj)

    def __init__(self, kind, value):
        self.kind = Kind(kind)
        self.value = value

    def __repr__(self):
        return f'{type(self).__name__}(Kind.{self.kind.name}, {self.value!r})'

    def __eq__(self, other):
        if isinstance(other, FormatArg):
            return (self.kind, self.value) == (other.kind, other.value)
        return NotImplemented

    __hash__ = None


# ---------------------------------------------------------------------------- #

def _number(field, empty=None):
    # width / precision field value
    if field is None or field == '*':
        return field
    return int(field) if field else empty


@dataclass(frozen=True)
class Directive:
    """A parsed format directive."""

    text: str
    start: int
    flags: str = ''
    width: Union[int, str, None] = None
    precision: Union[int, str, None] = None
    length: str = ''
    conversion: str = ''

    @classmethod
    def from_match(cls, match):
        flags, width, precision, length, conversion = match.group(
            'flags', 'width', 'precision', 'length', 'conversion')

        if not conversion or conversion not in CONVERSIONS:
            what = (f'Invalid conversion specifier {conversion!r}' if conversion
                    else 'Incomplete format directive')
            raise FormatError(f'{what} at position {match.start()}: '
                              f'{match[0]!r}.')

        return cls(match[0], match.start(), flags, _number(width),
                   _number(precision, 0), length or '', conversion)


def parse(template):
    """
    Split a (wide) template into literal text and `Directive`s.

    Examples
    --------
    >>> list(parse('%-5d%%!'))
    [Directive(text='%-5d', start=0, flags='-', width=5, precision=None,
               length='', conversion='d'),
     Directive(text='%%', start=4, flags='', width=None, precision=None,
               length='', conversion='%'),
     '!']
    """
    position = 0
    for match in RGX_DIRECTIVE.finditer(template):
        if match.start() > position:
            yield template[position:match.start()]

        yield Directive.from_match(match)
        position = match.end()

    if position < len(template):
        yield template[position:]


# ---------------------------------------------------------------------------- #

def _describe(kinds):
    names = [kind.name.lower() for kind in kinds]
    return ' or '.join(filter(None, (', '.join(names[:-1]), names[-1])))


class Arguments:
    """
    The argument list of a formatting call, consumed in order by directives.
    """

    __slots__ = ('items', 'index')

    def __init__(self, args):
        self.items = [*map(FormatArg.wrap, args)]
        self.index = 0

    def __len__(self):
        return len(self.items)

    @property
    def surplus(self):
        return self.items[self.index:]

    def take(self, directive, *kinds):
        """
        Consume the next argument for `directive`, checking its kind is one of
        `kinds` (any kind if none given).
        """
        if self.index >= len(self.items):
            raise FormatError(
                f'Not enough arguments for directive {directive.text!r} at '
                f'position {directive.start}: {len(self.items)} provided.'
            )

        arg = self.items[self.index]
        self.index += 1

        if kinds and arg.kind not in kinds:
            raise FormatError(
                f'Directive {directive.text!r} at position {directive.start} '
                f'expects {_describe(kinds)} argument {self.index}, received '
                f'{arg.value!r} ({arg.kind.name.lower()}).'
            )

        return arg


# ---------------------------------------------------------------------------- #

def _drop(flags, chars):
    return ''.join(flag for flag in flags if flag not in chars)


def _sign(negative, flags):
    return '-' if negative else '+' if '+' in flags else ' ' if ' ' in flags else ''


def _spec(flags, width, precision, conversion):
    # a single directive for the python `%` operator
    return ''.join(('%', flags, str(width or ''),
                    '' if precision is None else f'.{precision}',
                    conversion))


def _pad(body, width, flags, sign='', prefix=''):
    fill = max(width - len(sign) - len(prefix) - len(body), 0)
    if '-' in flags:
        return f'{sign}{prefix}{body}{" " * fill}'
    if '0' in flags:
        return f'{sign}{prefix}{"0" * fill}{body}'
    return f'{" " * fill}{sign}{prefix}{body}'


def _index(directive, value):
    # integer value of an argument, which may carry an explicit kind
    try:
        return operator.index(value)
    except TypeError as err:
        raise FormatError(
            f'Directive {directive.text!r} at position {directive.start} '
            f'expects an integer value, received {value!r}.'
        ) from err


def reduce_integer(value, bits, signed=True):
    """
    Convert `value` to a C integer type of the given bit width, wrapping modulo
    2 ** bits as a two's complement machine would.

    >>> reduce_integer(-1, 8, signed=False)
    255
    >>> reduce_integer(200, 8)
    -56
    """
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def hex_float(value, precision=None, alternate=False):
    """
    Hexadecimal digits of a finite, non-negative float in the form of the C
    "%a" conversion, without the "0x" prefix.

    >>> hex_float(3.0)
    '1.8p+1'
    >>> hex_float(1.5, 0)
    '2p+0'
    """
    if value == 0:
        lead = fraction = exponent = digits = 0
    else:
        mantissa, exponent = math.frexp(value)
        significand = int(mantissa * (1 << (FRACTION_BITS + 1)))
        exponent -= 1
        digits = FRACTION_HEXITS

        if precision is not None and precision < digits:
            # round half to even on the last kept hexit
            shift = 4 * (digits - precision)
            significand, rest = divmod(significand, 1 << shift)
            half = 1 << (shift - 1)
            if rest > half or (rest == half and significand & 1):
                significand += 1
            digits = precision

        lead, fraction = divmod(significand, 1 << (4 * digits))

    hexits = f'{fraction:0{digits}x}' if digits else ''
    if precision is None:
        hexits = hexits.rstrip('0')
    else:
        hexits = hexits.ljust(precision, '0')

    point = '.' if (hexits or alternate) else ''
    return f'{lead:x}{point}{hexits}p{exponent:+d}'


# ---------------------------------------------------------------------------- #

class Formatter(LoggingMixin):
    """
    Build strings from printf-style templates.

    Parameters
    ----------
    encoding : str, optional
        Encoding for converting string arguments whose width differs from that
        of the template. By default, the `encoding` value in the config.
    surplus : str, optional
        Action for arguments left over after all directives were rendered:
        "ignore", "info", "debug", "warn" or "error". By default, the
        `format.surplus` value in the config.
    lengths : dict, optional
        Bit widths of the C integer types selected by the length modifiers,
        updating the `format.lengths` values in the config.
    """

    def __init__(self, encoding=None, surplus=None, lengths=None):
        self.encoding = encoding or CONFIG.encoding
        self.surplus = Emit(surplus or CONFIG.format.surplus, FormatError)
        self.lengths = {**CONFIG.format.lengths, **(lengths or {})}

    def __call__(self, template, *args):
        return self.format(template, *args)

    def format(self, template, *args):
        """
        Format the arguments according to `template`.

        Parameters
        ----------
        template : str or bytes-like
            The format template.
        *args
            The arguments consumed by the directives in the template.

        Returns
        -------
        str or bytes
            The formatted result, of the same width as `template`.

        Raises
        ------
        FormatError
            If the template contains an invalid directive, if there are not
            enough arguments, or if an argument is of an incompatible kind.
        """
        traits = traits_of(template)
        arguments = Arguments(args)

        self.logger.opt(lazy=True).debug(
            'Formatting {} template with {} argument(s).',
            lambda: traits.name, lambda: len(arguments)
        )

        result = ''.join(self._render(item, arguments, traits)
                         for item in parse(traits.decode(template)))

        if surplus := arguments.surplus:
            self.surplus('{} surplus argument(s) not consumed by template '
                         '{!r}: {}', len(surplus), template,
                         [arg.value for arg in surplus])

        return traits.encode(result)

    # ------------------------------------------------------------------------ #
    def _render(self, item, args, traits):
        if isinstance(item, str):
            return item

        if (conversion := item.conversion) == '%':
            return '%'

        flags, width, precision = self._resolve_field(item, args)

        if conversion in INTEGER_CONVERSIONS:
            arg = args.take(item, Kind.INTEGER)
            return self._integer(item, flags, width, precision, arg.value)

        if conversion in FLOAT_CONVERSIONS:
            arg = args.take(item, Kind.FLOAT, Kind.INTEGER)
            return self._float(item, flags, width, precision, arg.value)

        if conversion == 'c':
            arg = args.take(item, Kind.CHAR, Kind.INTEGER)
            return _pad(self._char(item, arg, traits), width, _drop(flags, '0'))

        if conversion == 's':
            text = self._text(item, args.take(item, Kind.STRING, Kind.CHAR).value,
                              traits)
            if precision is not None:
                text = text[:precision]
            return _pad(text, width, _drop(flags, '0'))

        if conversion == 'p':
            return self._pointer(flags, width, precision, args.take(item))

        # "n": consumes its argument, writes nothing
        args.take(item)
        return ''

    def _resolve_field(self, directive, args):
        flags = directive.flags
        width = directive.width
        if width == '*':
            width = args.take(directive, Kind.INTEGER).value
            width = _index(directive, width)
            if width < 0:
                # negative width is a "-" flag followed by a positive width
                flags += '-'
                width = -width

        precision = directive.precision
        if precision == '*':
            precision = args.take(directive, Kind.INTEGER).value
            precision = _index(directive, precision)
            if precision < 0:
                precision = None

        return flags, width or 0, precision

    def _integer(self, directive, flags, width, precision, value):
        conversion = directive.conversion
        signed = conversion in 'di'
        value = reduce_integer(_index(directive, value),
                               self.lengths[directive.length], signed)

        if not signed:
            flags = _drop(flags, '+ ')
            conversion = 'd' if conversion == 'u' else conversion

        if precision is not None:
            flags = _drop(flags, '0')

        if conversion == 'o' and '#' in flags:
            # alternate form: precision raised so the first digit is a zero
            flags = _drop(flags, '#')
            precision = max(precision or 0, len(f'{value:o}') + bool(value))
        elif conversion in 'xX' and value == 0:
            # no "0x" prefix for zero
            flags = _drop(flags, '#')

        if precision == 0 and value == 0:
            return _pad('', width, flags, _sign(False, flags))

        return _spec(flags, width, precision, 'd' if signed else conversion) % value

    def _float(self, directive, flags, width, precision, value):
        try:
            value = float(value)
        except OverflowError as err:
            raise FormatError(
                f'Value for directive {directive.text!r} at position '
                f'{directive.start} out of range for a double: {value!r}.'
            ) from err

        if not math.isfinite(value):
            # no zero padding for inf / nan
            flags = _drop(flags, '0')

        if directive.conversion not in 'aA':
            return _spec(flags, width, precision, directive.conversion) % value

        sign = _sign(math.copysign(1, value) < 0, flags)
        if math.isfinite(value):
            text = _pad(hex_float(abs(value), precision, '#' in flags),
                        width, flags, sign, '0x')
        else:
            text = _pad(str(abs(value)), width, flags, sign)

        return text.upper() if directive.conversion == 'A' else text

    def _char(self, directive, arg, traits):
        if classify(arg.value) is not Kind.INTEGER:
            # a single character, in the width of the template
            char = self._text(directive, arg.value, traits)
            if len(char) == 1:
                return char

            raise FormatError(
                f'Argument {arg.value!r} for directive {directive.text!r} at '
                f'position {directive.start} is not a single {traits.name} '
                f'character in encoding {self.encoding!r}.'
            )

        code = _index(directive, arg.value)
        if traits is NARROW:
            # converted to unsigned char
            return chr(code & traits.max_code)

        if 0 <= code <= traits.max_code:
            return chr(code)

        raise FormatError(f'Character code {code} for directive '
                          f'{directive.text!r} at position {directive.start} is '
                          f'out of range.')

    def _text(self, directive, value, traits):
        # string argument as the template's width, mapped onto `str`
        if not is_sequence(value):
            raise FormatError(
                f'Directive {directive.text!r} at position {directive.start} '
                f'expects a character sequence, received {value!r}.'
            )

        try:
            return traits.decode(traits.coerce(value, self.encoding))
        except UnicodeError as err:
            raise FormatError(
                f'Could not convert argument {value!r} for directive '
                f'{directive.text!r} at position {directive.start} using '
                f'encoding {self.encoding!r}.'
            ) from err

    def _pointer(self, flags, width, precision, arg):
        flags = _drop(flags, '#')
        if (value := arg.value) is None:
            address = 0
        elif classify(value) is Kind.INTEGER:
            address = operator.index(value)
        else:
            address = id(value)

        if not (address := reduce_integer(address, POINTER_BITS, False)):
            return _pad(NULL_POINTER, width, _drop(flags, '0'))

        digits = f'{address:x}'
        if precision is not None:
            digits = digits.rjust(precision, '0')
            flags = _drop(flags, '0')

        return _pad(digits, width, flags, _sign(False, flags), '0x')


# ---------------------------------------------------------------------------- #

def format(template, *args):
    """
    Build a string from a printf-style template and arguments.

    Parameters
    ----------
    template : str or bytes-like
        The format template. See the module documentation for the grammar of
        the directives.
    *args
        The arguments, consumed in order by the directives.

    Examples
    --------
    >>> format('%d-%s', 5, 'x')
    '5-x'
    >>> format(b'%-6s|%#06x', 'abc', 255)
    b'abc   |0x00ff'

    Returns
    -------
    str or bytes
        The formatted result, of the same width as `template`.
    """
    return Formatter()(template, *args)
